from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .identifiers import UserId, new_record_id, pair_key


class Like(BaseModel):
    """One-directional interest from ``liker_id`` toward ``liked_id``."""

    model_config = ConfigDict(populate_by_name=True)

    liker_id: UserId = Field(alias="likerId")
    liked_id: UserId = Field(alias="likedId")
    created_at: Optional[int] = Field(default=None, alias="createdAt")


class Dislike(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    disliker_id: UserId = Field(alias="dislikerId")
    disliked_id: UserId = Field(alias="dislikedId")
    created_at: Optional[int] = Field(default=None, alias="createdAt")


class Match(BaseModel):
    """Undirected pairing of two users who liked each other."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_record_id)
    user1_id: UserId = Field(alias="user1Id")
    user2_id: UserId = Field(alias="user2Id")
    created_at: Optional[int] = Field(default=None, alias="createdAt")

    @model_validator(mode="after")
    def _check_distinct(self) -> "Match":
        if self.user1_id == self.user2_id:
            raise ValueError("a match needs two different users")
        return self

    @property
    def pair_key(self) -> str:
        return pair_key(self.user1_id, self.user2_id)

    def involves(self, user_id: str) -> bool:
        return user_id in (self.user1_id, self.user2_id)

    def other(self, user_id: str) -> str:
        if user_id == self.user1_id:
            return self.user2_id
        if user_id == self.user2_id:
            return self.user1_id
        raise ValueError(f"user '{user_id}' is not part of match {self.id}")


class LikeResult(BaseModel):
    is_match: bool
    match: Optional[Match] = None


class MatchedProfile(BaseModel):
    """Entry of a user's match list: the counterpart and when it matched."""

    model_config = ConfigDict(populate_by_name=True)

    match_id: str = Field(alias="match_id")
    user_id: str = Field(alias="user_id")
    name: Optional[str] = None
    photo: Optional[str] = None
    matched_at: Optional[int] = Field(default=None, alias="matched_at")


__all__ = [
    "Dislike",
    "Like",
    "LikeResult",
    "Match",
    "MatchedProfile",
]
