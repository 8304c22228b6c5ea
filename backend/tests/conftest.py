"""Test fixtures for the UrbanSprout API and services."""
from __future__ import annotations

from typing import Dict, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import urbansprout.models  # noqa: F401
from urbansprout.config import DEFAULT_CATALOG_PATH, settings
from urbansprout.database import Base, get_db
from urbansprout.dependencies import get_catalog, get_session_store, get_text_generator
from urbansprout.main import app
from urbansprout.routers.chatbot import limiter
from urbansprout.seed.seed_data import seed_database
from urbansprout.services.catalog import load_catalog
from urbansprout.services.outcome import Outcome
from urbansprout.services.session_store import SessionStore


class FakeTextGenerator:
    """Records prompts and answers with a fixed reply."""

    def __init__(self, reply: str = "Start with lettuce and basil; both are forgiving.", fallback: bool = False):
        self.reply = reply
        self.fallback = fallback
        self.calls: List[tuple] = []

    def generate(self, message: str, history: List[Dict[str, str]]) -> Outcome[str]:
        self.calls.append((message, [dict(turn) for turn in history]))
        if self.fallback:
            return Outcome.fallback(self.reply, "service down")
        return Outcome.ok(self.reply)


class FakeClock:
    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def seeded_db(db_session):
    seed_database(db_session)
    return db_session


@pytest.fixture(scope="session")
def catalog():
    return load_catalog(DEFAULT_CATALOG_PATH)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sessions(clock):
    return SessionStore(max_turns=20, ttl_seconds=3600, clock=clock)


@pytest.fixture
def text_generator():
    return FakeTextGenerator()


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture
def client(db_session, catalog, sessions, text_generator):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_catalog] = lambda: catalog
    app.dependency_overrides[get_session_store] = lambda: sessions
    app.dependency_overrides[get_text_generator] = lambda: text_generator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {settings.admin_token}"}
