from typing import Optional
from pydantic import BaseModel, ConfigDict


class AccountBase(BaseModel):
    user_id: str
    type: str
    provider: str
    provider_account_id: str
    refresh_token: Optional[str] = None
    access_token: Optional[str] = None
    expires_at: Optional[int] = None
    token_type: Optional[str] = None
    scope: Optional[str] = None
    id_token: Optional[str] = None
    session_state: Optional[str] = None


class AccountCreate(AccountBase):
    id: Optional[str] = None


class Account(AccountBase):
    id: str

    model_config = ConfigDict(from_attributes=True)
