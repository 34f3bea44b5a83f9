"""Profile use cases."""

from .get_profile import (
    GetProfileRequest,
    GetProfileResponse,
    GetProfileUseCase,
    ProfileItem,
)
from .list_profiles import (
    ListProfilesRequest,
    ListProfilesResponse,
    ListProfilesUseCase,
    TopProfilesRequest,
    TopProfilesUseCase,
    profile_items,
)
from .update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)

__all__ = [
    "GetProfileRequest",
    "GetProfileResponse",
    "GetProfileUseCase",
    "ListProfilesRequest",
    "ListProfilesResponse",
    "ListProfilesUseCase",
    "ProfileItem",
    "TopProfilesRequest",
    "TopProfilesUseCase",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
    "profile_items",
]
