"""In-memory implementation of Tag repository for testing."""

from typing import Optional

from tullamore.domain.model.tag import Tag
from tullamore.domain.repository.tag import TagRepository
from tullamore.domain.value import TagName

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        """Initialize repository over a store (a fresh one if not given)."""
        self._store = store or InMemoryStore()

    async def exists(self, name: TagName) -> bool:
        """Check whether a tag exists."""
        return name.root in self._store.tags

    async def save(self, tag: Tag) -> Tag:
        """Save or update a tag."""
        self._store.tags[tag.name.root] = tag
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        return self._store.tags.get(name.root)

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names."""
        return [
            self._store.tags[name.root]
            for name in names
            if name.root in self._store.tags
        ]

    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Tag]:
        """Find all tags ordered by name."""
        tags = sorted(self._store.tags.values(), key=lambda t: t.name.root)
        return tags[offset : offset + limit]

    async def delete(self, name: TagName) -> None:
        """Delete a tag and detach it from questions."""
        self._store.tags.pop(name.root, None)
        for question_id, question in list(self._store.questions.items()):
            if name in question.tags:
                self._store.questions[question_id] = question.with_changes(
                    tags=question.tags - {name}
                )
