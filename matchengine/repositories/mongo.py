"""Repository over the engine's MongoDB collections."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError

from ..db.mongo import (
    get_dislikes_collection,
    get_likes_collection,
    get_matches_collection,
    get_profiles_collection,
)
from ..models.identifiers import pair_key
from ..models.likes import Dislike, Like, Match
from ..models.profile import Profile
from .exceptions import DuplicateKeyRepositoryError, NotFoundRepositoryError

LOGGER = logging.getLogger("matchengine.repositories")


def _match_from_doc(doc: Dict[str, Any]) -> Match:
    data = dict(doc)
    data["id"] = str(data.pop("_id"))
    data.pop("pairKey", None)
    return Match.model_validate(data)


class MongoMatchRepository:
    """MongoDB access layer for profiles, likes, matches and dislikes."""

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        self._database = database
        self._profiles = get_profiles_collection(database)
        self._likes = get_likes_collection(database)
        self._matches = get_matches_collection(database)
        self._dislikes = get_dislikes_collection(database)

    @property
    def database(self) -> AsyncIOMotorDatabase:
        return self._database

    async def list_profiles(self) -> List[Profile]:
        cursor = self._profiles.find({}).sort("_id", ASCENDING)
        return [Profile.model_validate(doc) async for doc in cursor]

    async def get_profile_by_user_id(self, user_id: str) -> Optional[Profile]:
        doc = await self._profiles.find_one({"userId": user_id})
        return Profile.model_validate(doc) if doc else None

    async def insert_profile(self, profile: Profile) -> Profile:
        doc = {"_id": ObjectId(), **profile.model_dump(by_alias=True)}
        try:
            await self._profiles.insert_one(doc)
        except DuplicateKeyError as exc:
            LOGGER.debug("Duplicate profile insertion for user_id=%s", profile.user_id)
            raise DuplicateKeyRepositoryError("profile already exists") from exc
        return profile

    async def replace_profile(self, profile: Profile) -> Profile:
        result = await self._profiles.update_one(
            {"userId": profile.user_id},
            {"$set": profile.model_dump(by_alias=True)},
        )
        if not result.matched_count:
            raise NotFoundRepositoryError("profile not found")
        return profile

    async def list_likes(
        self,
        *,
        liker_id: Optional[str] = None,
        liked_id: Optional[str] = None,
    ) -> List[Like]:
        query: Dict[str, Any] = {}
        if liker_id is not None:
            query["likerId"] = liker_id
        if liked_id is not None:
            query["likedId"] = liked_id
        cursor = self._likes.find(query).sort("_id", ASCENDING)
        return [Like.model_validate(doc) async for doc in cursor]

    async def append_like(self, like: Like) -> bool:
        try:
            result = await self._likes.update_one(
                {"likerId": like.liker_id, "likedId": like.liked_id},
                {"$setOnInsert": {"createdAt": like.created_at}},
                upsert=True,
            )
        except DuplicateKeyError:
            # Lost an upsert race; the unique index already holds the like
            return False
        return result.upserted_id is not None

    async def list_matches(self, *, user_id: Optional[str] = None) -> List[Match]:
        query: Dict[str, Any] = {}
        if user_id is not None:
            query = {"$or": [{"user1Id": user_id}, {"user2Id": user_id}]}
        cursor = self._matches.find(query).sort("_id", ASCENDING)
        return [_match_from_doc(doc) async for doc in cursor]

    async def get_match_for_pair(self, user_a: str, user_b: str) -> Optional[Match]:
        doc = await self._matches.find_one({"pairKey": pair_key(user_a, user_b)})
        return _match_from_doc(doc) if doc else None

    async def append_match(self, match: Match) -> Tuple[Match, bool]:
        doc = match.model_dump(by_alias=True)
        doc["_id"] = doc.pop("id")
        doc["pairKey"] = match.pair_key
        try:
            await self._matches.insert_one(doc)
            return match, True
        except DuplicateKeyError:
            LOGGER.debug("Match for pair %s already stored", match.pair_key)

        existing = await self.get_match_for_pair(match.user1_id, match.user2_id)
        if existing is None:  # pragma: no cover - index guarantees a stored match
            raise NotFoundRepositoryError("match upsert failed")
        return existing, False

    async def list_dislikes(self, *, disliker_id: Optional[str] = None) -> List[Dislike]:
        query: Dict[str, Any] = {}
        if disliker_id is not None:
            query["dislikerId"] = disliker_id
        cursor = self._dislikes.find(query).sort("_id", ASCENDING)
        return [Dislike.model_validate(doc) async for doc in cursor]

    async def append_dislike(self, dislike: Dislike) -> bool:
        try:
            result = await self._dislikes.update_one(
                {"dislikerId": dislike.disliker_id, "dislikedId": dislike.disliked_id},
                {"$setOnInsert": {"createdAt": dislike.created_at}},
                upsert=True,
            )
        except DuplicateKeyError:
            return False
        return result.upserted_id is not None


__all__ = ["MongoMatchRepository"]
