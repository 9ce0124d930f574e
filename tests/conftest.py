from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any, Callable, Iterable, Optional

import pytest
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

from matchengine.config import Settings, get_settings
from matchengine.db import close_mongo_connection, connect_to_mongo
from matchengine.models.profile import Preferences, Profile
from matchengine.repositories import InMemoryMatchRepository, MatchRepository, MongoMatchRepository


@pytest.fixture(autouse=True)
def _env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MATCHENGINE_STORE", "memory")
    monkeypatch.setenv("MONGO_URI", "mongodb://localhost:27017/test")
    monkeypatch.setenv("MONGO_DB_NAME", "matchengine-test")
    monkeypatch.delenv("PERSIST_DISLIKES", raising=False)
    monkeypatch.delenv("CANDIDATE_LIMIT", raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest_asyncio.fixture
async def mongo_client(monkeypatch: pytest.MonkeyPatch) -> AsyncIterator[AsyncMongoMockClient]:
    client = AsyncMongoMockClient()

    def _client_factory(*_args, **_kwargs) -> AsyncMongoMockClient:
        return client

    monkeypatch.setattr("matchengine.db.AsyncIOMotorClient", _client_factory)
    yield client
    client.close()


@pytest_asyncio.fixture
async def mongo_repo(mongo_client: AsyncMongoMockClient) -> AsyncIterator[MongoMatchRepository]:
    database = await connect_to_mongo(Settings(store_backend="mongo"))
    yield MongoMatchRepository(database)
    await close_mongo_connection()


@pytest.fixture
def memory_repo() -> InMemoryMatchRepository:
    return InMemoryMatchRepository()


@pytest_asyncio.fixture(params=["memory", "mongo"])
async def repo(
    request: pytest.FixtureRequest, mongo_client: AsyncMongoMockClient
) -> AsyncIterator[MatchRepository]:
    """Run a test against both store backends."""
    if request.param == "memory":
        yield InMemoryMatchRepository()
        return
    database = await connect_to_mongo(Settings(store_backend="mongo"))
    yield MongoMatchRepository(database)
    await close_mongo_connection()


@pytest.fixture
def make_profile() -> Callable[..., Profile]:
    def _make(
        user_id: str,
        *,
        age: int = 30,
        gender: str = "female",
        age_min: int = 18,
        age_max: int = 99,
        genders: Optional[Iterable[str]] = None,
        **extra: Any,
    ) -> Profile:
        fields: dict[str, Any] = {
            "name": user_id.title(),
            "location": "Lisbon",
            "bio": "",
            "interests": [],
            "photos": [f"https://cdn.test/{user_id}.jpg"],
        }
        fields.update(extra)
        return Profile(
            user_id=user_id,
            age=age,
            gender=gender,
            preferences=Preferences(
                age_min=age_min,
                age_max=age_max,
                gender_preferences=list(genders or []),
            ),
            **fields,
        )

    return _make
