"""Tag domain service."""

from typing import Optional

import logfire

from qna.domain.error import ValidationError
from qna.domain.model.tag import Tag
from qna.domain.repository import TagRepository
from qna.domain.value import TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def validate_tags_exist(self, tag_names: list[TagName]) -> list[Tag]:
        """Validate that all requested tags exist.

        Args:
            tag_names: List of tag names to validate

        Returns:
            List of found tags

        Raises:
            ValidationError: If any tags are not found
        """
        with logfire.span(
            "tag_service.validate_tags_exist", tags=[t.root for t in tag_names]
        ):
            tags = await self.tag_repository.find_by_names(tag_names)

            found_names = {tag.name.root for tag in tags}
            requested_names = {name.root for name in tag_names}
            missing = requested_names - found_names

            if missing:
                raise ValidationError(f"Tags not found: {', '.join(sorted(missing))}")

            logfire.info("All tags validated", count=len(tags))
            return tags

    async def get_all_tags(
        self,
        search: Optional[str] = None,
        order_by: str = "name",
        limit: int = 100,
    ) -> list[Tag]:
        """Get available tags.

        Args:
            search: Case-insensitive substring of the tag name
            order_by: 'name' or 'popular'
            limit: Maximum number of tags to return

        Returns:
            List of tags
        """
        with logfire.span("tag_service.get_all_tags", order_by=order_by, limit=limit):
            search = search.strip().lower() if search else None
            tags = await self.tag_repository.find_all(
                search=search or None, order_by=order_by, limit=limit
            )
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def record_usage(
        self, added: list[TagName], removed: list[TagName] | None = None
    ) -> None:
        """Update tag usage counters after questions gain or lose tags."""
        removed = removed or []
        with logfire.span(
            "tag_service.record_usage",
            added=[t.root for t in added],
            removed=[t.root for t in removed],
        ):
            if added:
                await self.tag_repository.adjust_question_count(added, 1)
            if removed:
                await self.tag_repository.adjust_question_count(removed, -1)
