"""Profile domain service."""

from datetime import datetime
from typing import Sequence

import logfire

from qna.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    UnauthenticatedError,
)
from qna.domain.model.profile import Profile
from qna.domain.repository import AnswerRepository, ProfileRepository
from qna.domain.value import UserId, Username

from .base import Service


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(
        self,
        profile_repository: ProfileRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            answer_repository: Answer repository (best-answer counts)
        """
        self.profile_repository = profile_repository
        self.answer_repository = answer_repository

    async def get_profile_by_id(self, user_id: UserId) -> Profile | None:
        """Get a profile by user ID.

        Args:
            user_id: User ID

        Returns:
            Profile if found, None otherwise
        """
        with logfire.span("profile_service.get_profile_by_id", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=str(user_id))
            return profile

    async def get_profile_by_username(self, username: Username) -> Profile | None:
        """Get a profile by username."""
        with logfire.span(
            "profile_service.get_profile_by_username", username=username.root
        ):
            return await self.profile_repository.find_by_username(username)

    async def list_profiles(self, limit: int = 100, offset: int = 0) -> list[Profile]:
        """List profiles, highest reputation first."""
        with logfire.span("profile_service.list_profiles", limit=limit, offset=offset):
            return await self.profile_repository.find_all(limit=limit, offset=offset)

    async def top_profiles(self, limit: int = 5) -> list[Profile]:
        """Highest-reputation profiles for the leaderboard."""
        return await self.profile_repository.find_all(limit=limit)

    async def best_answer_counts(
        self, user_ids: Sequence[UserId]
    ) -> dict[UserId, int]:
        """Count each user's accepted answers.

        Derived from the answer records rather than stored on the profile.
        """
        return await self.answer_repository.count_best_by_authors(list(user_ids))

    async def best_answer_count(self, user_id: UserId) -> int:
        """Count one user's accepted answers."""
        counts = await self.best_answer_counts([user_id])
        return counts[user_id]

    async def current_user(self, caller_id: UserId | None) -> Profile | None:
        """Resolve the caller's identity to their profile.

        Returns:
            The caller's profile, or None when anonymous or unknown
        """
        if caller_id is None:
            return None
        return await self.get_profile_by_id(caller_id)

    async def update_profile(
        self,
        user_id: UserId,
        username: Username | None = None,
        full_name: str | None = None,
        bio: str | None = None,
        avatar_url: str | None = None,
    ) -> Profile:
        """Update the caller's own profile.

        Fields left as None are unchanged.

        Raises:
            NotFoundError: If the profile does not exist
            BusinessRuleViolationError: If the username is already taken
        """
        with logfire.span("profile_service.update_profile", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                raise NotFoundError("Profile", str(user_id))

            updates: dict = {"updated_at": datetime.now()}

            if username is not None and username != profile.username:
                taken = await self.profile_repository.find_by_username(username)
                if taken and taken.id != user_id:
                    raise BusinessRuleViolationError(
                        f"Username {username.root} is already taken"
                    )
                updates["username"] = username
            if full_name is not None:
                updates["full_name"] = full_name.strip() or None
            if bio is not None:
                updates["bio"] = bio.strip() or None
            if avatar_url is not None:
                updates["avatar_url"] = avatar_url or None

            # Revalidate through the model so field limits still apply
            updated = Profile.model_validate({**profile.model_dump(), **updates})
            saved = await self.profile_repository.save(updated)
            logfire.info("Profile updated", user_id=str(user_id), fields=list(updates))
            return saved

    async def require_profile(self, caller_id: UserId | None, action: str) -> Profile:
        """Ensure the caller is signed in and still has a profile.

        A valid token whose profile was deleted is treated like no token,
        so writes that reference the caller never reach the store.

        Raises:
            UnauthenticatedError: If there is no caller or no such profile
        """
        if caller_id is None:
            raise UnauthenticatedError(action)

        profile = await self.profile_repository.find_by_id(caller_id)
        if not profile:
            logfire.warn(
                "Session refers to a missing profile",
                caller_id=str(caller_id),
                action=action,
            )
            raise UnauthenticatedError(action)
        return profile

    async def require_admin(self, caller_id: UserId | None, action: str) -> Profile:
        """Ensure the caller is an administrator.

        Args:
            caller_id: Authenticated caller, None if anonymous
            action: Description of the attempted action (for errors)

        Returns:
            The caller's profile

        Raises:
            UnauthenticatedError: If there is no caller
            NotAuthorizedError: If the caller is not an admin
        """
        if caller_id is None:
            raise UnauthenticatedError(action)

        profile = await self.profile_repository.find_by_id(caller_id)
        if not profile or not profile.is_admin:
            logfire.warn("Admin action denied", caller_id=str(caller_id), action=action)
            raise NotAuthorizedError(action, "admin area", "-", str(caller_id))
        return profile

    async def grant_admin(self, user_id: UserId) -> Profile:
        """Make a user an administrator.

        Raises:
            NotFoundError: If the profile does not exist
        """
        with logfire.span("profile_service.grant_admin", user_id=str(user_id)):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                raise NotFoundError("Profile", str(user_id))
            if profile.is_admin:
                return profile

            saved = await self.profile_repository.save(
                profile.model_copy(update={"is_admin": True, "updated_at": datetime.now()})
            )
            logfire.info("Admin granted", user_id=str(user_id))
            return saved

    async def delete_profile(self, user_id: UserId) -> bool:
        """Delete a user's profile.

        Returns:
            True if deleted, False if it did not exist
        """
        with logfire.span("profile_service.delete_profile", user_id=str(user_id)):
            deleted = await self.profile_repository.delete(user_id)
            if deleted:
                logfire.info("Profile deleted", user_id=str(user_id))
            else:
                logfire.warn("No profile to delete", user_id=str(user_id))
            return deleted
