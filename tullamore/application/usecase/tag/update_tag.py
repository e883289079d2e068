"""Update tag use case."""

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.domain.model.tag import Tag
from tullamore.domain.service import TagService
from tullamore.domain.value import TagName

from .get_tag import TagResponse


class UpdateTagRequest(BaseModel):
    """Update tag request."""

    name: str
    description: str | None = None


class UpdateTagUseCase(BaseUseCase):
    """Use case for replacing a tag's description."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize update tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: UpdateTagRequest) -> TagResponse:
        """Execute update tag flow.

        Raises:
            TagNotFoundError: If no tag has this name
        """
        with logfire.span("update_tag.execute", tag_name=request.name):
            name = TagName(request.name)
            updated = await self.tag_service.update_tag(
                name, Tag(name=name, description=request.description)
            )
            return TagResponse.from_tag(updated)
