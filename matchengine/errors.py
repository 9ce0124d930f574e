"""Domain errors raised by the match engine services."""

from __future__ import annotations


class MatchEngineError(Exception):
    """Base class for every error the engine raises on purpose."""


class ProfileNotFound(MatchEngineError):
    """Raised when an operation needs a profile the user does not have."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"profile not found for user '{user_id}'")
        self.user_id = user_id


class ProfileAlreadyExists(MatchEngineError):
    """Raised when a user tries to create a second profile."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"profile already exists for user '{user_id}'")
        self.user_id = user_id


class InvalidSelfInteraction(MatchEngineError, ValueError):
    """Raised when a user likes or dislikes their own profile."""

    def __init__(self, user_id: str, action: str = "like") -> None:
        super().__init__(f"users cannot {action} themselves")
        self.user_id = user_id
        self.action = action


__all__ = [
    "InvalidSelfInteraction",
    "MatchEngineError",
    "ProfileAlreadyExists",
    "ProfileNotFound",
]
