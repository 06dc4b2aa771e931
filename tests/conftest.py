"""Pytest fixtures for service and API tests."""

from collections.abc import AsyncGenerator, Generator

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from wordbank.api.deps import get_db
from wordbank.db import models  # noqa: F401  # Imported for side effects
from wordbank.db.base import Base
from wordbank.db.models import Pronunciation, StageWord, Word
from wordbank.core.enums import PronunciationType, StageWordStatus
from wordbank.main import create_app


@pytest.fixture(scope="session")
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session(db_engine) -> Generator[Session, None, None]:
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
        db.close()


@pytest.fixture()
def client(db_session: Session) -> Generator[TestClient, None, None]:
    app = create_app()

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture()
async def async_client(db_session: Session) -> AsyncGenerator[httpx.AsyncClient, None]:
    app = create_app()

    async def override_get_db() -> AsyncGenerator[Session, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture()
def aberration(db_session: Session) -> Word:
    word = Word(
        id="8f7d1b9e3a2c5f6e",
        word_name="aberration",
        definition="A departure from what is normal or expected",
        phonetic_spelling="ab-uh-ray-shun",
        sentence="The dip in sales was an aberration.",
        level=3,
    )
    db_session.add(word)
    db_session.commit()
    return word


@pytest.fixture()
def word_with_children(db_session: Session, aberration: Word) -> Word:
    db_session.add_all(
        [
            Pronunciation(id="1", word=aberration, type=PronunciationType.SAMPLE, audio_duration=1),
            Pronunciation(id="2", word=aberration, type=PronunciationType.RECORDED, audio_duration=2),
            StageWord(id="s1", word=aberration, status=StageWordStatus.PENDING),
        ]
    )
    db_session.commit()
    db_session.expire_all()
    return aberration
