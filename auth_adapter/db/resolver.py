"""
User lookup resolution.

A read request carries any mix of ``id``, ``email``, ``provider`` and
``provider_account_id``. Exactly one lookup strategy is chosen, in this
order, and every other criterion is ignored:

1. ``id``                                  -> single user by id
2. ``email``                               -> single user by email
3. ``provider`` + ``provider_account_id``  -> users owning that account
4. ``provider_account_id``                 -> users owning accounts with that id, any provider
5. ``provider``                            -> users owning accounts at that provider
6. nothing                                 -> every user

Blank strings count as absent. Storage failures surface as
`StorageError`; they are never reported as a miss.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from sqlalchemy.orm import Session

from auth_adapter.db import models
from auth_adapter.db.repositories import users as user_repo


class LookupStrategy(str, Enum):
    BY_ID = "id"
    BY_EMAIL = "email"
    BY_ACCOUNT = "account"
    BY_PROVIDER_ACCOUNT_ID = "provider_account_id"
    BY_PROVIDER = "provider"
    ALL = "all"


class Cardinality(str, Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class UserCriteria:
    id: Optional[str] = None
    email: Optional[str] = None
    provider: Optional[str] = None
    provider_account_id: Optional[str] = None


@dataclass(frozen=True)
class ResolvedUsers:
    cardinality: Cardinality
    users: Tuple[models.User, ...]
    strategy: LookupStrategy

    @property
    def user(self) -> models.User:
        """The resolved user of a single-record resolution."""
        if self.cardinality is not Cardinality.SINGLE:
            raise ValueError("Multiple-user resolution has no single user")
        return self.users[0]


def _present(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def select_strategy(criteria: UserCriteria) -> LookupStrategy:
    has_provider = _present(criteria.provider)
    has_account_id = _present(criteria.provider_account_id)
    if _present(criteria.id):
        return LookupStrategy.BY_ID
    if _present(criteria.email):
        return LookupStrategy.BY_EMAIL
    if has_provider and has_account_id:
        return LookupStrategy.BY_ACCOUNT
    if has_account_id:
        return LookupStrategy.BY_PROVIDER_ACCOUNT_ID
    if has_provider:
        return LookupStrategy.BY_PROVIDER
    return LookupStrategy.ALL


def resolve_users(db: Session, criteria: UserCriteria) -> Optional[ResolvedUsers]:
    """Resolve ``criteria`` to users, or None when the chosen lookup matches nothing.

    Listing every user never returns None, an empty store resolves to an
    empty multiple-user result.
    """
    strategy = select_strategy(criteria)

    if strategy in (LookupStrategy.BY_ID, LookupStrategy.BY_EMAIL):
        if strategy is LookupStrategy.BY_ID:
            user = user_repo.get_user(db, criteria.id)
        else:
            user = user_repo.get_user_by_email(db, criteria.email)
        if user is None:
            return None
        return ResolvedUsers(Cardinality.SINGLE, (user,), strategy)

    if strategy is LookupStrategy.ALL:
        return ResolvedUsers(Cardinality.MULTIPLE, tuple(user_repo.list_users(db)), strategy)

    if strategy is LookupStrategy.BY_ACCOUNT:
        found = user_repo.get_users_by_account(
            db,
            provider=criteria.provider,
            provider_account_id=criteria.provider_account_id,
        )
    elif strategy is LookupStrategy.BY_PROVIDER_ACCOUNT_ID:
        found = user_repo.get_users_by_account(db, provider_account_id=criteria.provider_account_id)
    else:
        found = user_repo.get_users_by_account(db, provider=criteria.provider)
    if not found:
        return None
    return ResolvedUsers(Cardinality.MULTIPLE, tuple(found), strategy)
