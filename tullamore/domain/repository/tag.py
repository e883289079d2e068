"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from tullamore.domain.model.tag import Tag
from tullamore.domain.value import TagName


class TagRepository(ABC):
    """Storage for tags, keyed by name."""

    @abstractmethod
    async def exists(self, name: TagName) -> bool:
        pass

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Insert the tag, or overwrite the stored tag with the same name."""
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Load several tags at once.

        Names with no stored tag are skipped, so the result may be shorter
        than ``names``.
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Tag]:
        """Page through tags ordered by name."""
        pass

    @abstractmethod
    async def delete(self, name: TagName) -> None:
        """Delete the tag and detach it from every question carrying it."""
        pass
