"""
Users API endpoints.

One GET serves lookup by id, by email, by linked account and the full
listing; the precedence between criteria lives in the resolver.

Updates take the user id as a query parameter and a JSON body of optional
fields. Form-encoded bodies and bodies naming ``id`` are rejected with 422.
"""
from typing import List, Optional, Union
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from auth_adapter.api.deps import get_user_criteria
from auth_adapter.api.responses import respond
from auth_adapter.db import schemas
from auth_adapter.db.database import get_db
from auth_adapter.db.resolver import UserCriteria
from auth_adapter.services import adapter

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(user: schemas.UserCreate, db: Session = Depends(get_db)):
    return respond(adapter.create_user(db, user))


@router.get(
    "",
    response_model=Union[schemas.User, List[schemas.User]],
    responses={204: {"description": "No user matches the criteria"}},
)
def get_users_endpoint(
    criteria: UserCriteria = Depends(get_user_criteria),
    db: Session = Depends(get_db),
):
    return respond(adapter.read_users(db, criteria))


@router.put("", response_model=schemas.User)
def update_user_endpoint(
    patch: schemas.UserUpdate,
    id: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return respond(adapter.update_user(db, id, patch))


@router.delete("", response_model=schemas.User)
def delete_user_endpoint(id: Optional[str] = None, db: Session = Depends(get_db)):
    return respond(adapter.delete_user(db, id))
