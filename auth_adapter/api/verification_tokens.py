"""
Verification token API endpoints.

Deleting a token returns it, so the caller can check expiry of the token
it just consumed.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from auth_adapter.api.responses import respond
from auth_adapter.db import schemas
from auth_adapter.db.database import get_db
from auth_adapter.services import adapter

router = APIRouter(prefix="/verification-tokens", tags=["verification-tokens"])


@router.post("", response_model=schemas.VerificationToken, status_code=status.HTTP_201_CREATED)
def create_verification_token_endpoint(
    token: schemas.VerificationTokenCreate,
    db: Session = Depends(get_db),
):
    return respond(adapter.create_verification_token(db, token))


@router.delete("", response_model=schemas.VerificationToken)
def delete_verification_token_endpoint(
    identifier: Optional[str] = None,
    token: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return respond(adapter.delete_verification_token(db, identifier, token))
