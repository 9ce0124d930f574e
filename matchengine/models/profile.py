from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .identifiers import UserId

Gender = Literal["male", "female", "non-binary", "other"]

MAX_PHOTOS = 12


def _clean_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        trimmed = value.strip()
        if trimmed:
            return trimmed
    return None


def _split_tags(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    tags: List[str] = []
    if isinstance(value, (list, tuple)):
        for entry in value:
            cleaned = _clean_str(entry)
            if cleaned:
                tags.append(cleaned)
        return tags
    raise TypeError("expected a list or a comma separated string")


def _clean_photo_list(value: Any, limit: int = MAX_PHOTOS) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    photos: List[str] = []
    if isinstance(value, (list, tuple)):
        for entry in value:
            cleaned = _clean_str(entry)
            if not cleaned or cleaned in photos:
                continue
            photos.append(cleaned)
            if len(photos) >= limit:
                break
        return photos
    raise TypeError("photos must be a list of strings")


class Preferences(BaseModel):
    """What a user is looking for. ``distance`` is stored but never filtered on."""

    model_config = ConfigDict(populate_by_name=True)

    age_min: int = Field(alias="ageMin", ge=0)
    age_max: int = Field(alias="ageMax", ge=0)
    distance: Optional[int] = Field(default=None, ge=0)
    gender_preferences: List[Gender] = Field(default_factory=list, alias="genderPreferences")

    @field_validator("gender_preferences", mode="before")
    @classmethod
    def _dedupe_genders(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (list, tuple, set, frozenset)):
            seen: List[Any] = []
            for entry in value:
                if isinstance(entry, str):
                    entry = entry.strip().lower()
                if entry not in seen:
                    seen.append(entry)
            return seen
        return value

    @model_validator(mode="after")
    def _check_age_range(self) -> "Preferences":
        if self.age_min > self.age_max:
            raise ValueError("ageMin must not be greater than ageMax")
        return self

    def accepts_age(self, age: int) -> bool:
        return self.age_min <= age <= self.age_max

    def accepts_gender(self, gender: str) -> bool:
        return not self.gender_preferences or gender in self.gender_preferences


class ProfileUpsert(BaseModel):
    """Payload accepted when creating or updating a profile."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1, max_length=80)
    age: int = Field(ge=0)
    gender: Gender
    location: str = ""
    bio: str = Field(default="", max_length=600)
    interests: List[str] = Field(default_factory=list)
    photos: List[str] = Field(default_factory=list)
    preferences: Preferences

    @field_validator("name", "location", "bio", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("gender", mode="before")
    @classmethod
    def _normalize_gender(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("interests", mode="before")
    @classmethod
    def _parse_interests(cls, value: Any) -> List[str]:
        return _split_tags(value)

    @field_validator("photos", mode="before")
    @classmethod
    def _parse_photos(cls, value: Any) -> List[str]:
        return _clean_photo_list(value)


class Profile(ProfileUpsert):
    """A user's public dating attributes plus their private preferences."""

    user_id: UserId = Field(alias="userId")
    created_at: Optional[int] = Field(default=None, alias="createdAt")
    updated_at: Optional[int] = Field(default=None, alias="updatedAt")

    @property
    def primary_photo(self) -> Optional[str]:
        return self.photos[0] if self.photos else None


__all__ = [
    "Gender",
    "MAX_PHOTOS",
    "Preferences",
    "Profile",
    "ProfileUpsert",
]
