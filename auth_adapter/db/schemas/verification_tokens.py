from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict


class VerificationTokenBase(BaseModel):
    identifier: str
    token: str
    expires: datetime


class VerificationTokenCreate(VerificationTokenBase):
    id: Optional[str] = None


class VerificationToken(VerificationTokenBase):
    id: str

    model_config = ConfigDict(from_attributes=True)
