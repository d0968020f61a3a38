from datetime import datetime
from pydantic import BaseModel, ConfigDict


class UserBase(BaseModel):
    name: str | None = None
    email: str | None = None
    email_verified_at: datetime | None = None
    image: str | None = None


class UserCreate(UserBase):
    id: str | None = None


class UserUpdate(UserBase):
    """Partial user payload; the id is supplied out of band and never patched."""

    model_config = ConfigDict(extra="forbid")


class User(UserBase):
    id: str
    model_config = ConfigDict(from_attributes=True)
