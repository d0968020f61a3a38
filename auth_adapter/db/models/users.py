from sqlalchemy import Column, String, DateTime
from .base import Base, new_id


class User(Base):
    __tablename__ = 'users'
    id = Column(String(255), primary_key=True, default=new_id)
    name = Column(String, nullable=True)
    # Looked up as if unique; the index enforces it at the storage level
    email = Column(String, nullable=True, unique=True, index=True)
    email_verified_at = Column(DateTime(timezone=True), nullable=True)
    image = Column(String, nullable=True)
