"""Common identifier types shared across models."""

from __future__ import annotations

from typing import Annotated, Any

from bson import ObjectId
from pydantic.functional_validators import BeforeValidator


def _validate_user_id(value: Any) -> str:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("user id must not be empty")
        return text
    raise TypeError("user id must be a string")


UserId = Annotated[str, BeforeValidator(_validate_user_id)]


def clean_user_id(value: Any) -> str:
    if isinstance(value, str):
        trimmed = value.strip()
        if trimmed:
            return trimmed
    raise ValueError("user id required")


def new_record_id() -> str:
    return str(ObjectId())


def pair_key(user_a: str, user_b: str) -> str:
    """Key identifying the unordered pair {user_a, user_b}.

    The first id is length-prefixed so ids containing the separator cannot
    make two different pairs share a key.
    """
    first, second = sorted((user_a, user_b))
    return f"{len(first)}:{first}|{second}"


__all__ = ["UserId", "clean_user_id", "new_record_id", "pair_key"]
