import logging
import os
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..config import Settings, get_settings
from .mongo import (
    ensure_dislikes_indexes,
    ensure_likes_indexes,
    ensure_matches_indexes,
    ensure_profiles_indexes,
)

LOGGER = logging.getLogger("matchengine.db")

_client: Optional[AsyncIOMotorClient] = None
_db: Optional[AsyncIOMotorDatabase] = None


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the unique indexes the repositories rely on (idempotent)."""

    for label, ensure in (
        ("profiles", ensure_profiles_indexes),
        ("likes", ensure_likes_indexes),
        ("matches", ensure_matches_indexes),
        ("dislikes", ensure_dislikes_indexes),
    ):
        try:
            await ensure(db)
        except Exception as exc:  # pragma: no cover - best-effort logging
            LOGGER.error("Failed to ensure %s indexes: %s", label, exc)


async def connect_to_mongo(settings: Optional[Settings] = None) -> AsyncIOMotorDatabase:
    """Initialise the shared MongoDB client and return the engine database."""

    global _client, _db

    settings = settings or get_settings()
    if not settings.mongo_uri and not settings.mongo_alt_uri:
        raise RuntimeError("Missing MONGO_URI env var for the mongo store backend")

    sel_timeout_ms = int(os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "3000"))
    conn_timeout_ms = int(os.getenv("MONGO_CONNECT_TIMEOUT_MS", "3000"))
    sock_timeout_ms = int(os.getenv("MONGO_SOCKET_TIMEOUT_MS", "5000"))

    async def _try_connect(uri: str) -> tuple[AsyncIOMotorClient, AsyncIOMotorDatabase]:
        client = AsyncIOMotorClient(
            uri,
            maxPoolSize=20,
            serverSelectionTimeoutMS=sel_timeout_ms,
            connectTimeoutMS=conn_timeout_ms,
            socketTimeoutMS=sock_timeout_ms,
            **({"directConnection": True} if settings.mongo_direct else {}),
        )
        db = client[settings.mongo_db]
        await client.admin.command("ping")
        await ensure_indexes(db)
        return client, db

    primary_error: Optional[Exception] = None

    if settings.mongo_uri:
        try:
            _client, _db = await _try_connect(settings.mongo_uri)
            LOGGER.info("MongoDB connected: db=%s", settings.mongo_db)
            return _db
        except Exception as exc:  # pragma: no cover - needs a real server
            primary_error = exc
            LOGGER.error("Mongo primary URI failed: %s", exc)

    if settings.mongo_alt_uri:
        try:
            _client, _db = await _try_connect(settings.mongo_alt_uri)
            LOGGER.info("MongoDB connected via ALT URI: db=%s", settings.mongo_db)
            return _db
        except Exception as exc:  # pragma: no cover - same as above
            LOGGER.error("Mongo ALT URI failed: %s", exc)
            primary_error = primary_error or exc

    raise primary_error or RuntimeError("Mongo connection failed")


async def close_mongo_connection() -> None:
    """Close the MongoDB client if it is initialised."""

    global _client, _db
    if _client:
        try:
            _client.close()
        finally:
            LOGGER.info("MongoDB connection closed")
        _client = None
        _db = None


__all__ = [
    "close_mongo_connection",
    "connect_to_mongo",
    "ensure_indexes",
]
