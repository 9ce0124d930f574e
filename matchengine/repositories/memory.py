"""In-process store backing the engine when no database is configured."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..models.identifiers import pair_key
from ..models.likes import Dislike, Like, Match
from ..models.profile import Profile
from .exceptions import DuplicateKeyRepositoryError, NotFoundRepositoryError

LOGGER = logging.getLogger("matchengine.repositories")


class InMemoryMatchRepository:
    """Ordered in-memory collections.

    The constructor accepts raw records so callers can seed a store exactly as
    it was exported, duplicates included. Writes made through the repository
    never add a second like or match for the same pair.
    """

    def __init__(
        self,
        *,
        profiles: Optional[Iterable[Profile]] = None,
        likes: Optional[Iterable[Like]] = None,
        matches: Optional[Iterable[Match]] = None,
        dislikes: Optional[Iterable[Dislike]] = None,
    ) -> None:
        self._profiles: Dict[str, Profile] = {}
        for profile in profiles or ():
            self._profiles[profile.user_id] = profile
        self._likes: List[Like] = list(likes or ())
        self._matches: List[Match] = list(matches or ())
        self._dislikes: List[Dislike] = list(dislikes or ())

    async def list_profiles(self) -> List[Profile]:
        return list(self._profiles.values())

    async def get_profile_by_user_id(self, user_id: str) -> Optional[Profile]:
        return self._profiles.get(user_id)

    async def insert_profile(self, profile: Profile) -> Profile:
        if profile.user_id in self._profiles:
            LOGGER.debug("Duplicate profile insertion for user_id=%s", profile.user_id)
            raise DuplicateKeyRepositoryError("profile already exists")
        self._profiles[profile.user_id] = profile
        return profile

    async def replace_profile(self, profile: Profile) -> Profile:
        if profile.user_id not in self._profiles:
            raise NotFoundRepositoryError("profile not found")
        self._profiles[profile.user_id] = profile
        return profile

    async def list_likes(
        self,
        *,
        liker_id: Optional[str] = None,
        liked_id: Optional[str] = None,
    ) -> List[Like]:
        return [
            like
            for like in self._likes
            if (liker_id is None or like.liker_id == liker_id)
            and (liked_id is None or like.liked_id == liked_id)
        ]

    async def append_like(self, like: Like) -> bool:
        if await self.list_likes(liker_id=like.liker_id, liked_id=like.liked_id):
            return False
        self._likes.append(like)
        return True

    async def list_matches(self, *, user_id: Optional[str] = None) -> List[Match]:
        if user_id is None:
            return list(self._matches)
        return [match for match in self._matches if match.involves(user_id)]

    async def get_match_for_pair(self, user_a: str, user_b: str) -> Optional[Match]:
        key = pair_key(user_a, user_b)
        for match in self._matches:
            if match.pair_key == key:
                return match
        return None

    async def append_match(self, match: Match) -> Tuple[Match, bool]:
        existing = await self.get_match_for_pair(match.user1_id, match.user2_id)
        if existing is not None:
            return existing, False
        self._matches.append(match)
        return match, True

    async def list_dislikes(self, *, disliker_id: Optional[str] = None) -> List[Dislike]:
        return [
            dislike
            for dislike in self._dislikes
            if disliker_id is None or dislike.disliker_id == disliker_id
        ]

    async def append_dislike(self, dislike: Dislike) -> bool:
        for existing in self._dislikes:
            if (
                existing.disliker_id == dislike.disliker_id
                and existing.disliked_id == dislike.disliked_id
            ):
                return False
        self._dislikes.append(dislike)
        return True


__all__ = ["InMemoryMatchRepository"]
