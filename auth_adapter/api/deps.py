"""
Shared request dependencies for the API routers.
"""
from typing import Optional

from fastapi import Query

from auth_adapter.db.resolver import UserCriteria


def get_user_criteria(
    id: Optional[str] = Query(default=None),
    email: Optional[str] = Query(default=None),
    provider: Optional[str] = Query(default=None),
    provider_account_id: Optional[str] = Query(default=None),
) -> UserCriteria:
    return UserCriteria(
        id=id,
        email=email,
        provider=provider,
        provider_account_id=provider_account_id,
    )
