from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

from .users import User


class SessionBase(BaseModel):
    session_token: str
    user_id: str
    expires: datetime


class SessionCreate(SessionBase):
    id: Optional[str] = None


class SessionUpdate(BaseModel):
    """Replacement fields for a session; identity fields may change too."""
    id: Optional[str] = None
    session_token: Optional[str] = None
    user_id: Optional[str] = None
    expires: Optional[datetime] = None


class Session(SessionBase):
    id: str

    model_config = ConfigDict(from_attributes=True)


class SessionAndUser(BaseModel):
    session: Session
    user: User
