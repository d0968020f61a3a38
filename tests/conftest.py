import os
from datetime import datetime, timedelta, timezone

# Force the in-memory SQLite engine before the database module is imported
os.environ.setdefault("PYTEST_RUNNING", "1")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from auth_adapter.api.main import app
from auth_adapter.db import models
from auth_adapter.db.database import SessionLocal, engine


@pytest.fixture(scope="session", autouse=True)
def create_schema_once():
    """Create all tables once per test session (SQLite in-memory lives per process)."""
    models.Base.metadata.create_all(bind=engine)
    yield
    models.Base.metadata.drop_all(bind=engine)


@pytest.fixture(autouse=True)
def clean_data():
    """Empty all tables between tests without dropping metadata."""
    with engine.begin() as connection:
        for table in reversed(models.Base.metadata.sorted_tables):
            connection.execute(table.delete())
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def expires_soon():
    return datetime.now(timezone.utc) + timedelta(days=30)


@pytest.fixture
def user_factory(db_session: Session):
    def _create(user_id: str, email: str | None = None, name: str | None = None):
        user = models.User(id=user_id, email=email, name=name)
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user
    return _create


@pytest.fixture
def account_factory(db_session: Session):
    def _create(user, provider: str, provider_account_id: str, type: str = "oauth"):
        account = models.Account(
            user_id=user.id,
            type=type,
            provider=provider,
            provider_account_id=provider_account_id,
        )
        db_session.add(account)
        db_session.commit()
        db_session.refresh(account)
        return account
    return _create


@pytest.fixture
def session_factory(db_session: Session, expires_soon):
    def _create(user, session_token: str):
        session = models.Session(user_id=user.id, session_token=session_token, expires=expires_soon)
        db_session.add(session)
        db_session.commit()
        db_session.refresh(session)
        return session
    return _create
