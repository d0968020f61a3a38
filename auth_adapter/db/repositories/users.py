"""
User repository functions.

Identity lookups by id and email, plus the account join used to find the
users behind linked provider accounts.
"""
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from auth_adapter.db import models, schemas
from auth_adapter.db.patching import USER_MUTABLE_FIELDS
from .base import EntityRepository

repository = EntityRepository(
    models.User,
    name="user",
    key=("id",),
    mutable_fields=USER_MUTABLE_FIELDS,
)


def create_user(db: Session, user: schemas.UserCreate) -> models.User:
    return repository.create(db, user)


def get_user(db: Session, user_id: str) -> Optional[models.User]:
    return repository.get_by_key(db, user_id)


def get_user_by_email(db: Session, email: str) -> Optional[models.User]:
    return repository.first(db, models.User.email == email)


def list_users(db: Session) -> List[models.User]:
    with repository.guard(db, "read"):
        return db.query(models.User).order_by(models.User.id).all()


def get_users_by_account(
    db: Session,
    *,
    provider: Optional[str] = None,
    provider_account_id: Optional[str] = None,
) -> List[models.User]:
    """Return the users owning accounts that match every supplied account field."""
    account_filter = []
    if provider is not None:
        account_filter.append(models.Account.provider == provider)
    if provider_account_id is not None:
        account_filter.append(models.Account.provider_account_id == provider_account_id)
    owners = select(models.Account.user_id).where(*account_filter)
    with repository.guard(db, "read"):
        return (
            db.query(models.User)
            .filter(models.User.id.in_(owners))
            .order_by(models.User.id)
            .all()
        )


def update_user(db: Session, db_user: models.User, patch: schemas.UserUpdate) -> models.User:
    return repository.update(db, db_user, patch)


def delete_user(db: Session, db_user: models.User) -> None:
    repository.delete(db, db_user)
