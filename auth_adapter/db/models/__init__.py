"""
Domain-split SQLAlchemy models.

Exposes `Base`, `new_id` and the four identity record classes.
"""

from .base import Base, new_id  # re-export

from .users import User
from .accounts import Account
from .sessions import Session
from .verification_tokens import VerificationToken

__all__ = [
    "Base",
    "new_id",
    "User",
    "Account",
    "Session",
    "VerificationToken",
]
