"""Candidate filtering and mutual-like match formation for a dating app."""

from .config import Settings, get_settings
from .engine import MatchEngine, open_engine
from .errors import (
    InvalidSelfInteraction,
    MatchEngineError,
    ProfileAlreadyExists,
    ProfileNotFound,
)

__all__ = [
    "InvalidSelfInteraction",
    "MatchEngine",
    "MatchEngineError",
    "ProfileAlreadyExists",
    "ProfileNotFound",
    "Settings",
    "get_settings",
    "open_engine",
]
