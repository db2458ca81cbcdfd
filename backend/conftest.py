import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from swiftjobs.api.dependencies.database import get_db
from swiftjobs.api.dependencies.llm import get_analyzer
from swiftjobs.db.base import Base
import swiftjobs.db.models  # noqa: F401
from swiftjobs.services.analysis import ProfileAnalyzer


class FakeLLMClient:
    """
    Stand-in for LLMClient.

    Replies come from ``responder(prompt)`` when given, otherwise from the
    ``replies`` queue; every prompt is recorded.
    """

    provider = "fake"
    model = "fake-model"

    def __init__(self, replies=None, responder=None):
        self.replies = list(replies or [])
        self.responder = responder
        self.prompts = []

    async def complete(self, prompt, system_prompt=None):
        self.prompts.append(prompt)
        if self.responder is not None:
            return self.responder(prompt)
        if self.replies:
            return self.replies.pop(0)
        return ""


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def analyzer(fake_llm):
    return ProfileAnalyzer(fake_llm, default_score=70)


@pytest.fixture
def client(db, analyzer):
    from swiftjobs.main import app

    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_analyzer] = lambda: analyzer
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
