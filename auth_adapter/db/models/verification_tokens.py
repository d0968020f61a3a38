from sqlalchemy import Column, String, DateTime, Index
from .base import Base, new_id


class VerificationToken(Base):
    __tablename__ = 'verification_tokens'

    # Storage id only; callers address tokens by identifier
    id = Column(String(255), primary_key=True, default=new_id)
    identifier = Column(String(255), nullable=False)
    token = Column(String(255), nullable=False, unique=True)
    expires = Column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index('idx_verification_tokens_identifier', 'identifier'),
    )
