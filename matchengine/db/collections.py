"""MongoDB collection names used by the match engine."""

from __future__ import annotations

PROFILES_COLLECTION = "profiles"
LIKES_COLLECTION = "likes"
MATCHES_COLLECTION = "matches"
DISLIKES_COLLECTION = "dislikes"

__all__ = [
    "PROFILES_COLLECTION",
    "LIKES_COLLECTION",
    "MATCHES_COLLECTION",
    "DISLIKES_COLLECTION",
]
