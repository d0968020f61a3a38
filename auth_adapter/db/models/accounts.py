from sqlalchemy import Column, String, Integer, Text, ForeignKey, UniqueConstraint, Index
from .base import Base, new_id


class Account(Base):
    __tablename__ = 'accounts'

    id = Column(String(255), primary_key=True, default=new_id)
    user_id = Column(String(255), ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    type = Column(String(50), nullable=False)
    provider = Column(String(255), nullable=False)
    provider_account_id = Column(String(255), nullable=False)

    # OAuth credential material, stored as issued by the provider
    refresh_token = Column(Text, nullable=True)
    access_token = Column(Text, nullable=True)
    expires_at = Column(Integer, nullable=True)
    token_type = Column(String(50), nullable=True)
    scope = Column(Text, nullable=True)
    id_token = Column(Text, nullable=True)
    session_state = Column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint('provider', 'provider_account_id', name='uq_accounts_provider_account'),
        Index('idx_accounts_user_id', 'user_id'),
        Index('idx_accounts_provider_account_id', 'provider_account_id'),
    )
