"""Tag domain service."""

from datetime import datetime

import logfire

from tullamore.domain.error import TagAlreadyExistsError, TagNotFoundError
from tullamore.domain.model.tag import Tag
from tullamore.domain.repository.tag import TagRepository
from tullamore.domain.value import TagName

from .base import Service


def _tag_name(tag_or_name: Tag | TagName) -> TagName:
    return tag_or_name.name if isinstance(tag_or_name, Tag) else tag_or_name


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def add_tag(self, tag: Tag) -> Tag:
        """Add a new tag.

        Args:
            tag: Tag to add

        Returns:
            Saved tag

        Raises:
            TagAlreadyExistsError: If a tag with this name exists
        """
        with logfire.span("tag_service.add_tag", tag_name=tag.id):
            if await self.tag_repository.exists(tag.name):
                logfire.warn("Tag already exists", tag_name=tag.id)
                raise TagAlreadyExistsError(tag.id)

            saved = await self.tag_repository.save(tag)
            logfire.info("Tag added", tag_name=saved.id)
            return saved

    async def delete_tag(self, tag_or_name: Tag | TagName) -> None:
        """Delete a tag.

        Args:
            tag_or_name: Tag or tag name

        Raises:
            TagNotFoundError: If the tag does not exist
        """
        name = _tag_name(tag_or_name)
        with logfire.span("tag_service.delete_tag", tag_name=name.root):
            if not await self.tag_repository.exists(name):
                logfire.warn("Tag not found for deletion", tag_name=name.root)
                raise TagNotFoundError(name.root)

            await self.tag_repository.delete(name)
            logfire.info("Tag deleted", tag_name=name.root)

    async def update_tag(self, name: TagName, tag: Tag) -> Tag:
        """Update a tag's description.

        The stored tag keeps its name and creation time; only the
        description is taken from the input.

        Args:
            name: Name of the tag to update
            tag: Tag carrying the new description

        Returns:
            Updated tag

        Raises:
            TagNotFoundError: If the tag does not exist
        """
        with logfire.span("tag_service.update_tag", tag_name=name.root):
            existing = await self.tag_repository.find_by_name(name)
            if existing is None:
                logfire.warn("Tag not found for update", tag_name=name.root)
                raise TagNotFoundError(name.root)

            updated = existing.with_changes(
                description=tag.description, updated_at=datetime.now()
            )
            saved = await self.tag_repository.save(updated)
            logfire.info("Tag updated", tag_name=name.root)
            return saved

    async def get_tag(self, name: TagName) -> Tag:
        """Get a tag by name.

        Args:
            name: Tag name

        Returns:
            The tag

        Raises:
            TagNotFoundError: If the tag does not exist
        """
        with logfire.span("tag_service.get_tag", tag_name=name.root):
            tag = await self.tag_repository.find_by_name(name)
            if tag is None:
                logfire.warn("Tag not found", tag_name=name.root)
                raise TagNotFoundError(name.root)
            return tag

    async def get_all_tags(self, limit: int = 100, offset: int = 0) -> list[Tag]:
        """Get all tags ordered by name.

        Args:
            limit: Maximum number of tags to return
            offset: Number of tags to skip

        Returns:
            List of tags
        """
        with logfire.span("tag_service.get_all_tags", limit=limit, offset=offset):
            tags = await self.tag_repository.find_all(limit=limit, offset=offset)
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def does_tag_exist(self, tag_or_name: Tag | TagName) -> bool:
        """Check whether a tag exists.

        Args:
            tag_or_name: Tag or tag name

        Returns:
            True if the tag exists
        """
        return await self.tag_repository.exists(_tag_name(tag_or_name))

    async def validate_tags_exist(self, tag_names: frozenset[TagName]) -> list[Tag]:
        """Validate that all requested tags exist.

        Args:
            tag_names: Tag names to validate

        Returns:
            List of found tags

        Raises:
            TagNotFoundError: If any tag is missing (first missing name, sorted)
        """
        with logfire.span(
            "tag_service.validate_tags_exist", tags=sorted(t.root for t in tag_names)
        ):
            tags = await self.tag_repository.find_by_names(list(tag_names))

            found_names = {tag.name.root for tag in tags}
            requested_names = {name.root for name in tag_names}
            missing = requested_names - found_names

            if missing:
                logfire.warn("Tags not found", missing=sorted(missing))
                raise TagNotFoundError(sorted(missing)[0])

            return tags
