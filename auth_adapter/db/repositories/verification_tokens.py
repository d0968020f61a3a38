"""
Verification token repository functions.

Tokens are deleted by identifier; the token value optionally narrows the
match when several tokens were issued to the same identifier.
"""
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from auth_adapter.db import models, schemas
from .base import EntityRepository

repository = EntityRepository(
    models.VerificationToken,
    name="verification token",
    key=("identifier",),
)


def create_verification_token(db: Session, token: schemas.VerificationTokenCreate) -> models.VerificationToken:
    return repository.create(db, token)


def get_verification_token(
    db: Session,
    identifier: str,
    token: Optional[str] = None,
) -> Optional[models.VerificationToken]:
    criteria = repository.key_criteria((identifier,))
    if token is not None:
        criteria.append(models.VerificationToken.token == token)
    return repository.first(db, *criteria)


def delete_verification_token(db: Session, db_token: models.VerificationToken) -> None:
    repository.delete(db, db_token)
