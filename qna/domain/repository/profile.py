"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model.profile import Profile
from qna.domain.value import UserId, Username


class ProfileRepository(ABC):
    """Repository for Profile aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by user ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[Profile]:
        """Find a profile by username (case-sensitive)."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Profile]:
        """Find profiles ordered by reputation, highest first."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Delete a profile.

        Returns:
            True if a profile was deleted, False if none existed
        """
        pass
