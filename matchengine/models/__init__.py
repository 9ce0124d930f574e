from .identifiers import UserId, clean_user_id, new_record_id, pair_key
from .likes import Dislike, Like, LikeResult, Match, MatchedProfile
from .profile import Gender, Preferences, Profile, ProfileUpsert

__all__ = [
    "Dislike",
    "Gender",
    "Like",
    "LikeResult",
    "Match",
    "MatchedProfile",
    "Preferences",
    "Profile",
    "ProfileUpsert",
    "UserId",
    "clean_user_id",
    "new_record_id",
    "pair_key",
]
