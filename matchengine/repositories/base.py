"""Storage contract shared by the in-memory and MongoDB backends."""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple, runtime_checkable

from ..models.likes import Dislike, Like, Match
from ..models.profile import Profile


@runtime_checkable
class MatchRepository(Protocol):
    """Profiles, likes, matches and dislikes, each an append-and-scan collection.

    Full scans return records in insertion order. Likes and dislikes may
    contain duplicates in stores that were written by other tools; callers
    treat them as sets.
    """

    async def list_profiles(self) -> List[Profile]: ...

    async def get_profile_by_user_id(self, user_id: str) -> Optional[Profile]: ...

    async def insert_profile(self, profile: Profile) -> Profile:
        """Store a new profile; ``DuplicateKeyRepositoryError`` if the user has one."""
        ...

    async def replace_profile(self, profile: Profile) -> Profile:
        """Overwrite a stored profile; ``NotFoundRepositoryError`` if missing."""
        ...

    async def list_likes(
        self,
        *,
        liker_id: Optional[str] = None,
        liked_id: Optional[str] = None,
    ) -> List[Like]: ...

    async def append_like(self, like: Like) -> bool:
        """Store ``like`` unless the directed pair exists. True when written."""
        ...

    async def list_matches(self, *, user_id: Optional[str] = None) -> List[Match]: ...

    async def get_match_for_pair(self, user_a: str, user_b: str) -> Optional[Match]: ...

    async def append_match(self, match: Match) -> Tuple[Match, bool]:
        """Store ``match`` unless the unordered pair already has one.

        Returns the stored match and whether it was created by this call.
        """
        ...

    async def list_dislikes(self, *, disliker_id: Optional[str] = None) -> List[Dislike]: ...

    async def append_dislike(self, dislike: Dislike) -> bool: ...


__all__ = ["MatchRepository"]
