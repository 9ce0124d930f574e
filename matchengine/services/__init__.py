from .eligibility import get_potential_matches
from .likes_service import (
    check_match,
    get_matches_for_user,
    is_reverse_like_exists,
    register_dislike,
    register_like,
    register_like_result,
)
from .profile_service import ProfileService

__all__ = [
    "ProfileService",
    "check_match",
    "get_matches_for_user",
    "get_potential_matches",
    "is_reverse_like_exists",
    "register_dislike",
    "register_like",
    "register_like_result",
]
