"""
Accounts API endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from auth_adapter.api.responses import respond
from auth_adapter.db import schemas
from auth_adapter.db.database import get_db
from auth_adapter.services import adapter

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.post("", response_model=schemas.Account, status_code=status.HTTP_201_CREATED)
def create_account_endpoint(account: schemas.AccountCreate, db: Session = Depends(get_db)):
    return respond(adapter.create_account(db, account))


@router.delete("", response_model=schemas.Account)
def delete_account_endpoint(
    provider: Optional[str] = None,
    provider_account_id: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return respond(adapter.delete_account(db, provider, provider_account_id))
