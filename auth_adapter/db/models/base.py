"""
Shared SQLAlchemy base and helpers.
"""
import uuid
from sqlalchemy.orm import declarative_base


def new_id() -> str:
    """Return a fresh string identifier for rows created without one."""
    return str(uuid.uuid4())


Base = declarative_base()
