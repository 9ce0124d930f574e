import asyncio
import logging
import time
from typing import List, Optional
from weakref import WeakValueDictionary

from ..errors import InvalidSelfInteraction
from ..models.identifiers import clean_user_id, pair_key
from ..models.likes import Dislike, Like, LikeResult, Match, MatchedProfile
from ..repositories.base import MatchRepository

LOGGER = logging.getLogger("matchengine.likes")

# One lock per unordered pair so the reverse-like check and the match write
# cannot interleave with the other user's like.
_PAIR_LOCKS: "WeakValueDictionary[str, asyncio.Lock]" = WeakValueDictionary()


def _now_ms() -> int:
    return int(time.time() * 1000)


def _pair_lock(user_a: str, user_b: str) -> asyncio.Lock:
    key = pair_key(user_a, user_b)
    lock = _PAIR_LOCKS.get(key)
    if lock is None:
        lock = asyncio.Lock()
        _PAIR_LOCKS[key] = lock
    return lock


async def is_reverse_like_exists(
    repo: MatchRepository, liker_id: str, liked_id: str
) -> bool:
    """True when ``liker_id`` has already liked ``liked_id``."""
    likes = await repo.list_likes(liker_id=liker_id, liked_id=liked_id)
    return bool(likes)


async def check_match(repo: MatchRepository, user_a: str, user_b: str) -> bool:
    user_a = clean_user_id(user_a)
    user_b = clean_user_id(user_b)
    if user_a == user_b:
        return False
    return await repo.get_match_for_pair(user_a, user_b) is not None


async def register_like(
    repo: MatchRepository, liker_id: str, liked_id: str
) -> Optional[Match]:
    """Record that ``liker_id`` likes ``liked_id``.

    Returns the new Match when this like completes a mutual pair, otherwise
    None. Liking oneself raises ``InvalidSelfInteraction``; a like from or to
    a user without a profile, or between users already matched, changes
    nothing and returns None.
    """

    liker_id = clean_user_id(liker_id)
    liked_id = clean_user_id(liked_id)
    if liker_id == liked_id:
        raise InvalidSelfInteraction(liker_id, "like")

    if await repo.get_profile_by_user_id(liker_id) is None:
        LOGGER.warning("Ignoring like from user_id=%s without a profile", liker_id)
        return None
    if await repo.get_profile_by_user_id(liked_id) is None:
        LOGGER.warning("Ignoring like toward user_id=%s without a profile", liked_id)
        return None

    async with _pair_lock(liker_id, liked_id):
        if await check_match(repo, liker_id, liked_id):
            LOGGER.debug("Users %s and %s are already matched", liker_id, liked_id)
            return None

        # Write the like before looking for the reverse one: of two concurrent
        # reciprocal likes, the later check always sees the other like.
        is_new_like = await repo.append_like(
            Like(liker_id=liker_id, liked_id=liked_id, created_at=_now_ms())
        )
        if not is_new_like:
            LOGGER.debug("Like %s -> %s already recorded", liker_id, liked_id)

        if not await is_reverse_like_exists(repo, liked_id, liker_id):
            return None

        match, created = await repo.append_match(
            Match(user1_id=liker_id, user2_id=liked_id, created_at=_now_ms())
        )
        if created:
            LOGGER.info("Match %s formed between %s and %s", match.id, liker_id, liked_id)
        return match


async def register_like_result(
    repo: MatchRepository, liker_id: str, liked_id: str
) -> LikeResult:
    match = await register_like(repo, liker_id, liked_id)
    return LikeResult(is_match=match is not None, match=match)


async def register_dislike(
    repo: MatchRepository,
    disliker_id: str,
    disliked_id: str,
    *,
    persist: bool = False,
) -> bool:
    """Handle a dislike. Returns True when a new Dislike record was written.

    Without ``persist`` nothing is stored and the disliked profile stays
    eligible for later browsing.
    """

    disliker_id = clean_user_id(disliker_id)
    disliked_id = clean_user_id(disliked_id)
    if disliker_id == disliked_id:
        raise InvalidSelfInteraction(disliker_id, "dislike")

    if not persist:
        LOGGER.debug("Dislike %s -> %s not persisted", disliker_id, disliked_id)
        return False
    if await repo.get_profile_by_user_id(disliker_id) is None:
        LOGGER.warning("Ignoring dislike from user_id=%s without a profile", disliker_id)
        return False

    return await repo.append_dislike(
        Dislike(disliker_id=disliker_id, disliked_id=disliked_id, created_at=_now_ms())
    )


async def get_matches_for_user(
    repo: MatchRepository, user_id: str
) -> List[MatchedProfile]:
    """List ``user_id``'s matches with the other user's name and first photo."""

    user_id = clean_user_id(user_id)
    results: List[MatchedProfile] = []
    for match in await repo.list_matches(user_id=user_id):
        other_id = match.other(user_id)
        profile = await repo.get_profile_by_user_id(other_id)
        if profile is None:
            LOGGER.warning("Match %s points at user_id=%s without a profile", match.id, other_id)
            continue
        results.append(
            MatchedProfile(
                match_id=match.id,
                user_id=other_id,
                name=profile.name,
                photo=profile.primary_photo,
                matched_at=match.created_at,
            )
        )
    return results


__all__ = [
    "check_match",
    "get_matches_for_user",
    "is_reverse_like_exists",
    "register_dislike",
    "register_like",
    "register_like_result",
]
