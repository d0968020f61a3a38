"""
Adapter operations for users, accounts, sessions and verification tokens.

Every function takes the request's database session and returns an
`OperationResult`. Keyed writes check their key before touching storage,
and `StorageError` is turned into an outcome here and nowhere else.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

from auth_adapter.db import schemas
from auth_adapter.db.patching import ImmutableFieldError, PatchLike
from auth_adapter.db.repositories import accounts as account_repo
from auth_adapter.db.repositories import sessions as session_repo
from auth_adapter.db.repositories import users as user_repo
from auth_adapter.db.repositories import verification_tokens as token_repo
from auth_adapter.db.repositories.base import EntityRepository, StorageError
from auth_adapter.db.resolver import Cardinality, UserCriteria, resolve_users
from auth_adapter.services.outcomes import OperationResult, Outcome

logger = logging.getLogger(__name__)

Lookup = Callable[[], Optional[Any]]


def _storage_failure(exc: StorageError, *, creating: bool = False) -> OperationResult:
    logger.error("%s %s failed", exc.operation, exc.entity, exc_info=exc)
    if creating and exc.is_conflict:
        return OperationResult(Outcome.CONFLICT, detail=f"{exc.entity} conflicts with an existing record")
    return OperationResult(Outcome.INTERNAL_ERROR, detail="Internal storage error")


def _missing_key(repo: EntityRepository, values: Sequence[Optional[str]]) -> Optional[OperationResult]:
    missing = [
        column
        for column, value in zip(repo.key, values)
        if value is None or not str(value).strip()
    ]
    if not missing:
        return None
    detail = f"Missing required query parameter(s): {', '.join(missing)}"
    logger.info("%s request rejected: %s", repo.name, detail)
    return OperationResult(Outcome.UNPROCESSABLE, detail=detail)


def _not_found(repo: EntityRepository) -> OperationResult:
    logger.debug("%s not found", repo.name)
    return OperationResult(Outcome.NOT_FOUND, detail=f"{repo.name.capitalize()} not found")


def _create(db: Session, repo: EntityRepository, payload: BaseModel, schema: Type[BaseModel]) -> OperationResult:
    try:
        row = repo.create(db, payload)
    except StorageError as exc:
        return _storage_failure(exc, creating=True)
    return OperationResult(Outcome.CREATED, schema.model_validate(row))


def _update(
    db: Session,
    repo: EntityRepository,
    key: Sequence[Optional[str]],
    patch: PatchLike,
    schema: Type[BaseModel],
) -> OperationResult:
    rejected = _missing_key(repo, key)
    if rejected:
        return rejected
    try:
        row = repo.get_by_key(db, *key)
        if row is None:
            return _not_found(repo)
        row = repo.update(db, row, patch)
    except ImmutableFieldError as exc:
        db.rollback()
        return OperationResult(Outcome.UNPROCESSABLE, detail=str(exc))
    except StorageError as exc:
        return _storage_failure(exc)
    return OperationResult(Outcome.OK, schema.model_validate(row))


def _delete(
    db: Session,
    repo: EntityRepository,
    key: Sequence[Optional[str]],
    schema: Type[BaseModel],
    lookup: Optional[Lookup] = None,
) -> OperationResult:
    rejected = _missing_key(repo, key)
    if rejected:
        return rejected
    try:
        row = lookup() if lookup is not None else repo.get_by_key(db, *key)
        if row is None:
            return _not_found(repo)
        # Snapshot before the row is gone from the session
        deleted = schema.model_validate(row)
        repo.delete(db, row)
    except StorageError as exc:
        return _storage_failure(exc)
    return OperationResult(Outcome.OK, deleted)


# Users

def create_user(db: Session, user: schemas.UserCreate) -> OperationResult:
    return _create(db, user_repo.repository, user, schemas.User)


def read_users(db: Session, criteria: UserCriteria) -> OperationResult:
    try:
        resolved = resolve_users(db, criteria)
    except StorageError as exc:
        return _storage_failure(exc)
    if resolved is None:
        return OperationResult(Outcome.NO_CONTENT)
    if resolved.cardinality is Cardinality.SINGLE:
        return OperationResult(Outcome.OK, schemas.User.model_validate(resolved.user))
    return OperationResult(Outcome.OK, [schemas.User.model_validate(u) for u in resolved.users])


def update_user(db: Session, user_id: Optional[str], patch: PatchLike) -> OperationResult:
    return _update(db, user_repo.repository, (user_id,), patch, schemas.User)


def delete_user(db: Session, user_id: Optional[str]) -> OperationResult:
    return _delete(db, user_repo.repository, (user_id,), schemas.User)


# Accounts

def create_account(db: Session, account: schemas.AccountCreate) -> OperationResult:
    return _create(db, account_repo.repository, account, schemas.Account)


def delete_account(db: Session, provider: Optional[str], provider_account_id: Optional[str]) -> OperationResult:
    return _delete(db, account_repo.repository, (provider, provider_account_id), schemas.Account)


# Sessions

def create_session(db: Session, session: schemas.SessionCreate) -> OperationResult:
    return _create(db, session_repo.repository, session, schemas.Session)


def get_session_and_user(db: Session, session_token: Optional[str]) -> OperationResult:
    rejected = _missing_key(session_repo.repository, (session_token,))
    if rejected:
        return rejected
    try:
        found = session_repo.get_session_and_user(db, session_token)
    except StorageError as exc:
        return _storage_failure(exc)
    if found is None:
        return OperationResult(Outcome.NO_CONTENT)
    session, user = found
    return OperationResult(
        Outcome.OK,
        schemas.SessionAndUser(
            session=schemas.Session.model_validate(session),
            user=schemas.User.model_validate(user),
        ),
    )


def update_session(db: Session, session_token: Optional[str], patch: schemas.SessionUpdate) -> OperationResult:
    return _update(db, session_repo.repository, (session_token,), patch, schemas.Session)


def delete_session(db: Session, session_token: Optional[str]) -> OperationResult:
    return _delete(db, session_repo.repository, (session_token,), schemas.Session)


# Verification tokens

def create_verification_token(db: Session, token: schemas.VerificationTokenCreate) -> OperationResult:
    return _create(db, token_repo.repository, token, schemas.VerificationToken)


def delete_verification_token(
    db: Session,
    identifier: Optional[str],
    token: Optional[str] = None,
) -> OperationResult:
    return _delete(
        db,
        token_repo.repository,
        (identifier,),
        schemas.VerificationToken,
        lookup=lambda: token_repo.get_verification_token(db, identifier, token or None),
    )
