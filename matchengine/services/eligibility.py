"""Candidate selection for the browse screen.

A candidate is eligible for a requester when, checked in this order:

1. the candidate's age lies within the requester's ``[age_min, age_max]``;
2. the candidate's gender is one the requester accepts (no preference
   accepts everyone);
3. the requester has not liked the candidate yet and the two are not
   already matched.

Candidates keep store order and the first ``limit`` survivors are returned.
There is no scoring: ``Preferences.distance`` is carried on the record but
not consulted here.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Set

from ..config import get_settings
from ..models.identifiers import clean_user_id
from ..models.profile import Profile
from ..repositories.base import MatchRepository

LOGGER = logging.getLogger("matchengine.eligibility")

CandidatePredicate = Callable[[Profile], bool]


def _validate_limit(limit: int) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise ValueError("limit must be a positive integer")
    return limit


def build_predicates(
    requester: Profile,
    liked_ids: Set[str],
    matched_ids: Set[str],
    disliked_ids: Optional[Set[str]] = None,
) -> List[CandidatePredicate]:
    preferences = requester.preferences
    predicates: List[CandidatePredicate] = [
        lambda candidate: candidate.user_id != requester.user_id,
        lambda candidate: preferences.accepts_age(candidate.age),
        lambda candidate: preferences.accepts_gender(candidate.gender),
        lambda candidate: candidate.user_id not in liked_ids,
        lambda candidate: candidate.user_id not in matched_ids,
    ]
    if disliked_ids:
        predicates.append(lambda candidate: candidate.user_id not in disliked_ids)
    return predicates


def filter_candidates(
    candidates: Iterable[Profile],
    predicates: List[CandidatePredicate],
    limit: int,
) -> List[Profile]:
    selected: List[Profile] = []
    for candidate in candidates:
        if all(predicate(candidate) for predicate in predicates):
            selected.append(candidate)
            if len(selected) >= limit:
                break
    return selected


async def get_potential_matches(
    repo: MatchRepository,
    requesting_user_id: str,
    limit: Optional[int] = None,
    *,
    exclude_disliked: bool = False,
) -> List[Profile]:
    """Return up to ``limit`` profiles ``requesting_user_id`` may browse.

    ``limit`` defaults to ``Settings.default_candidate_limit``. A requester
    without a profile gets an empty list. Nothing is written.
    """

    limit = _validate_limit(get_settings().default_candidate_limit if limit is None else limit)

    requesting_user_id = clean_user_id(requesting_user_id)
    requester = await repo.get_profile_by_user_id(requesting_user_id)
    if requester is None:
        LOGGER.debug("No profile for user_id=%s; no candidates", requesting_user_id)
        return []

    liked_ids = {like.liked_id for like in await repo.list_likes(liker_id=requester.user_id)}
    matched_ids = {
        match.other(requester.user_id)
        for match in await repo.list_matches(user_id=requester.user_id)
    }
    disliked_ids: Set[str] = set()
    if exclude_disliked:
        disliked_ids = {
            dislike.disliked_id
            for dislike in await repo.list_dislikes(disliker_id=requester.user_id)
        }

    predicates = build_predicates(requester, liked_ids, matched_ids, disliked_ids)
    candidates = filter_candidates(await repo.list_profiles(), predicates, limit)
    LOGGER.debug(
        "Selected %s candidate(s) for user_id=%s (limit=%s)",
        len(candidates),
        requester.user_id,
        limit,
    )
    return candidates


__all__ = [
    "build_predicates",
    "filter_candidates",
    "get_potential_matches",
]
