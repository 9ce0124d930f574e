"""Errors raised by the profile, like and match stores."""

from __future__ import annotations


class RepositoryError(RuntimeError):
    """Base exception for store failures."""


class DuplicateKeyRepositoryError(RepositoryError):
    """Raised when a user already has a profile, or a pair already has its record."""


class NotFoundRepositoryError(RepositoryError):
    """Raised when the profile or match being rewritten is not stored."""


__all__ = [
    "DuplicateKeyRepositoryError",
    "NotFoundRepositoryError",
    "RepositoryError",
]
