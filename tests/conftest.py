"""Shared fixtures: in-memory SQLite engine, sessions, API client, factories."""

import itertools
import os
from decimal import Decimal

# Keep tests off the real database and the development seeding
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from database import build_engine, get_session
from main import app
from models import Apartment, Base
from utils.slug import generate_slug


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(
        bind=engine, autocommit=False, autoflush=False, expire_on_commit=False,
    )


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    """FastAPI test client with get_session overridden to use the test engine."""
    def override_get_session():
        session = session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_apartment(db):
    """Insert an apartment row directly; keyword arguments override the defaults."""
    numbers = itertools.count(1)

    def _make(**overrides):
        n = next(numbers)
        data = {
            "unit_name": f"Unit {n}",
            "unit_number": f"T-{n:03d}",
            "project": "Marina Heights",
            "price": Decimal("1000.00"),
            "bedrooms": 1,
            "bathrooms": 1,
            "area": Decimal("50.00"),
            "location": "Downtown",
        }
        data.update(overrides)
        apartment = Apartment(
            slug=generate_slug(data["unit_name"], data["unit_number"]),
            **data,
        )
        db.add(apartment)
        db.commit()
        db.refresh(apartment)
        return apartment

    return _make


@pytest.fixture
def make_deleted(make_apartment, db):
    def _make(**overrides):
        apartment = make_apartment(**overrides)
        apartment.mark_deleted()
        db.commit()
        return apartment

    return _make
