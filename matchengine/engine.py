"""Entry point for callers: wires settings, a repository and the services."""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import Settings, get_settings
from .db import close_mongo_connection, connect_to_mongo
from .models.likes import LikeResult, Match, MatchedProfile
from .models.profile import Profile
from .repositories import InMemoryMatchRepository, MatchRepository, MongoMatchRepository
from .services import (
    ProfileService,
    check_match,
    get_matches_for_user,
    get_potential_matches,
    register_dislike,
    register_like,
    register_like_result,
)

LOGGER = logging.getLogger("matchengine")


class MatchEngine:
    def __init__(
        self,
        repo: MatchRepository,
        settings: Optional[Settings] = None,
        *,
        owns_connection: bool = False,
    ) -> None:
        self._repo = repo
        self._settings = settings or get_settings()
        self._owns_mongo = owns_connection
        self.profiles = ProfileService(repo)

    @property
    def repository(self) -> MatchRepository:
        return self._repo

    @property
    def settings(self) -> Settings:
        return self._settings

    async def get_potential_matches(
        self, user_id: str, limit: Optional[int] = None
    ) -> List[Profile]:
        return await get_potential_matches(
            self._repo,
            user_id,
            self._settings.default_candidate_limit if limit is None else limit,
            exclude_disliked=self._settings.persist_dislikes,
        )

    async def register_like(self, liker_id: str, liked_id: str) -> Optional[Match]:
        return await register_like(self._repo, liker_id, liked_id)

    async def like(self, liker_id: str, liked_id: str) -> LikeResult:
        return await register_like_result(self._repo, liker_id, liked_id)

    async def register_dislike(self, disliker_id: str, disliked_id: str) -> bool:
        return await register_dislike(
            self._repo,
            disliker_id,
            disliked_id,
            persist=self._settings.persist_dislikes,
        )

    async def is_matched(self, user_a: str, user_b: str) -> bool:
        return await check_match(self._repo, user_a, user_b)

    async def list_matches(self, user_id: str) -> List[MatchedProfile]:
        return await get_matches_for_user(self._repo, user_id)

    async def close(self) -> None:
        if self._owns_mongo:
            await close_mongo_connection()
            self._owns_mongo = False


async def open_engine(settings: Optional[Settings] = None) -> MatchEngine:
    """Build an engine on the store selected by ``settings.store_backend``."""

    settings = settings or get_settings()
    logging.getLogger("matchengine").setLevel(settings.log_level)

    if settings.store_backend == "mongo":
        database = await connect_to_mongo(settings)
        engine = MatchEngine(MongoMatchRepository(database), settings, owns_connection=True)
    else:
        engine = MatchEngine(InMemoryMatchRepository(), settings)

    LOGGER.info(
        "Match engine ready: store=%s candidate_limit=%s persist_dislikes=%s",
        settings.store_backend,
        settings.default_candidate_limit,
        settings.persist_dislikes,
    )
    return engine


__all__ = ["MatchEngine", "open_engine"]
