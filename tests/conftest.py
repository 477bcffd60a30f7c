import os
from datetime import datetime

# Keep the module level engine off disk; tests bind their own engine.
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
import pytz
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from classroom_registry.app import app
from classroom_registry.core.database import get_db
from classroom_registry.models import Base
from classroom_registry.utils.relationship_store import RelationshipStore

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=pytz.utc)


def _memory_engine():
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def now():
    """A fixed evaluation instant in UTC."""
    return FIXED_NOW


@pytest.fixture
def engine():
    engine = _memory_engine()
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def store(db_session):
    return RelationshipStore(db_session)


@pytest.fixture
def broken_store():
    """A store whose database has no tables, so every query fails."""
    engine = _memory_engine()
    session = sessionmaker(bind=engine)()
    yield RelationshipStore(session)
    session.close()
    engine.dispose()


@pytest.fixture
def client(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
