"""
Domain-split Pydantic schemas.

Create payloads carry full records, update payloads make every field
optional, and response models read straight from ORM rows.
"""

from .users import UserBase, UserCreate, UserUpdate, User
from .accounts import AccountBase, AccountCreate, Account
from .sessions import SessionBase, SessionCreate, SessionUpdate, Session, SessionAndUser
from .verification_tokens import (
    VerificationTokenBase,
    VerificationTokenCreate,
    VerificationToken,
)

__all__ = [
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "User",
    "AccountBase",
    "AccountCreate",
    "Account",
    "SessionBase",
    "SessionCreate",
    "SessionUpdate",
    "Session",
    "SessionAndUser",
    "VerificationTokenBase",
    "VerificationTokenCreate",
    "VerificationToken",
]
