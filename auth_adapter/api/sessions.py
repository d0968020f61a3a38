"""
Sessions API endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from auth_adapter.api.responses import respond
from auth_adapter.db import schemas
from auth_adapter.db.database import get_db
from auth_adapter.services import adapter

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.post("", response_model=schemas.Session, status_code=status.HTTP_201_CREATED)
def create_session_endpoint(session: schemas.SessionCreate, db: Session = Depends(get_db)):
    return respond(adapter.create_session(db, session))


@router.get(
    "",
    response_model=schemas.SessionAndUser,
    responses={204: {"description": "No session with this token"}},
)
def get_session_and_user_endpoint(session_token: Optional[str] = None, db: Session = Depends(get_db)):
    return respond(adapter.get_session_and_user(db, session_token))


@router.put("", response_model=schemas.Session)
def update_session_endpoint(
    patch: schemas.SessionUpdate,
    session_token: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return respond(adapter.update_session(db, session_token, patch))


@router.delete("", response_model=schemas.Session)
def delete_session_endpoint(session_token: Optional[str] = None, db: Session = Depends(get_db)):
    return respond(adapter.delete_session(db, session_token))
