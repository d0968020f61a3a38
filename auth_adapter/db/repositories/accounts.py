"""
Account repository functions.

Accounts are addressed by their (provider, provider_account_id) pair.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from auth_adapter.db import models, schemas
from .base import EntityRepository

repository = EntityRepository(
    models.Account,
    name="account",
    key=("provider", "provider_account_id"),
)


def create_account(db: Session, account: schemas.AccountCreate) -> models.Account:
    return repository.create(db, account)


def get_account(db: Session, provider: str, provider_account_id: str) -> Optional[models.Account]:
    return repository.get_by_key(db, provider, provider_account_id)


def delete_account(db: Session, db_account: models.Account) -> None:
    repository.delete(db, db_account)
