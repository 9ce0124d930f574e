from __future__ import annotations

import logging
import time
from typing import Optional

from ..errors import ProfileAlreadyExists, ProfileNotFound
from ..models.profile import Profile, ProfileUpsert
from ..repositories.base import MatchRepository
from ..repositories.exceptions import DuplicateKeyRepositoryError, NotFoundRepositoryError

LOGGER = logging.getLogger("matchengine.profiles")


class ProfileService:
    """Business logic for profile creation and owner updates."""

    def __init__(self, repo: MatchRepository) -> None:
        self._repo = repo

    @staticmethod
    def _now_ms() -> int:
        return int(time.time() * 1000)

    async def get_profile(self, user_id: str) -> Optional[Profile]:
        if not user_id or not user_id.strip():
            return None
        return await self._repo.get_profile_by_user_id(user_id.strip())

    async def create_profile(self, user_id: str, payload: ProfileUpsert) -> Profile:
        now_ms = self._now_ms()
        profile = Profile(
            user_id=user_id,
            **payload.model_dump(),
            created_at=now_ms,
            updated_at=now_ms,
        )
        try:
            stored = await self._repo.insert_profile(profile)
        except DuplicateKeyRepositoryError as exc:
            raise ProfileAlreadyExists(profile.user_id) from exc
        LOGGER.info("Created profile for user_id=%s", stored.user_id)
        return stored

    async def update_profile(self, user_id: str, payload: ProfileUpsert) -> Profile:
        """Replace the attributes of ``user_id``'s own profile."""

        current = await self.get_profile(user_id)
        if current is None:
            raise ProfileNotFound(user_id)

        profile = Profile(
            user_id=current.user_id,
            **payload.model_dump(),
            created_at=current.created_at,
            updated_at=self._now_ms(),
        )
        try:
            return await self._repo.replace_profile(profile)
        except NotFoundRepositoryError as exc:  # pragma: no cover - deleted mid-update
            raise ProfileNotFound(current.user_id) from exc


__all__ = ["ProfileService"]
