"""
Session repository functions.
"""
from __future__ import annotations

from typing import Optional, Tuple

from sqlalchemy.orm import Session

from auth_adapter.db import models, schemas
from auth_adapter.db.patching import SESSION_MUTABLE_FIELDS
from .base import EntityRepository

repository = EntityRepository(
    models.Session,
    name="session",
    key=("session_token",),
    mutable_fields=SESSION_MUTABLE_FIELDS,
)


def create_session(db: Session, session: schemas.SessionCreate) -> models.Session:
    return repository.create(db, session)


def get_session(db: Session, session_token: str) -> Optional[models.Session]:
    return repository.get_by_key(db, session_token)


def get_session_and_user(db: Session, session_token: str) -> Optional[Tuple[models.Session, models.User]]:
    with repository.guard(db, "read"):
        row = (
            db.query(models.Session, models.User)
            .join(models.User, models.User.id == models.Session.user_id)
            .filter(models.Session.session_token == session_token)
            .first()
        )
    if row is None:
        return None
    return row[0], row[1]


def update_session(db: Session, db_session: models.Session, patch: schemas.SessionUpdate) -> models.Session:
    return repository.update(db, db_session, patch)


def delete_session(db: Session, db_session: models.Session) -> None:
    repository.delete(db, db_session)
