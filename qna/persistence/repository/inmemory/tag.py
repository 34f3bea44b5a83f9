"""In-memory tag repository for testing."""

from typing import Optional

from qna.domain.model.tag import Tag
from qna.domain.repository.tag import TagRepository
from qna.domain.value import TagId, TagName


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self) -> None:
        self._tags: dict[TagId, Tag] = {}

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        self._tags[tag.id] = tag
        return tag

    async def find_by_id(self, tag_id: TagId) -> Optional[Tag]:
        """Find tag by ID."""
        return self._tags.get(tag_id)

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        for tag in self._tags.values():
            if tag.name == name:
                return tag
        return None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        wanted = {name.root for name in names}
        return [tag for tag in self._tags.values() if tag.name.root in wanted]

    async def find_all(
        self,
        search: Optional[str] = None,
        order_by: str = "name",
        limit: int = 100,
    ) -> list[Tag]:
        """Find tags, alphabetical or most used first."""
        tags = list(self._tags.values())
        if search:
            tags = [t for t in tags if search.lower() in t.name.root]

        tags.sort(key=lambda t: t.name.root)
        if order_by == "popular":
            tags.sort(key=lambda t: t.question_count, reverse=True)
        return tags[:limit]

    async def adjust_question_count(self, names: list[TagName], delta: int) -> None:
        """Add ``delta`` to the usage counter of each named tag."""
        wanted = {name.root for name in names}
        for tag in list(self._tags.values()):
            if tag.name.root in wanted and tag.question_count + delta >= 0:
                self._tags[tag.id] = tag.model_copy(
                    update={"question_count": tag.question_count + delta}
                )
