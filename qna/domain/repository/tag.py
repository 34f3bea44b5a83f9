"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from qna.domain.model.tag import Tag
from qna.domain.value import TagId, TagName


class TagRepository(ABC):
    """Repository interface for Tag entity."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag.

        Args:
            tag: Tag to save

        Returns:
            Saved tag
        """
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query.

        Args:
            names: List of tag names

        Returns:
            Found tags (may be fewer than requested if some don't exist)
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        order_by: str = "name",
        limit: int = 100,
    ) -> list[Tag]:
        """Find tags.

        Args:
            search: Case-insensitive substring of the tag name
            order_by: 'name' (alphabetical) or 'popular' (question_count DESC)
            limit: Maximum number of tags to return

        Returns:
            List of tags
        """
        pass

    @abstractmethod
    async def adjust_question_count(self, names: list[TagName], delta: int) -> None:
        """Atomically add ``delta`` to the usage counter of each named tag."""
        pass
