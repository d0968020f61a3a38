from sqlalchemy import Column, String, DateTime, ForeignKey, Index
from .base import Base, new_id


class Session(Base):
    __tablename__ = 'sessions'

    id = Column(String(255), primary_key=True, default=new_id)
    session_token = Column(String(255), nullable=False, unique=True)
    user_id = Column(String(255), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    expires = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index('idx_sessions_user_id', 'user_id'),
    )
