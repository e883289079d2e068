"""Get tag use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.domain.model.tag import Tag
from tullamore.domain.service import TagService
from tullamore.domain.value import TagName


class TagResponse(BaseModel):
    """Tag response."""

    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagResponse":
        return cls(
            name=tag.name.root,
            description=tag.description,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )


class GetTagRequest(BaseModel):
    """Get tag request."""

    name: str


class GetTagUseCase(BaseUseCase):
    """Use case for retrieving a tag by name."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize get tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: GetTagRequest) -> TagResponse:
        """Execute get tag flow.

        Raises:
            TagNotFoundError: If no tag has this name
        """
        with logfire.span("get_tag.execute", tag_name=request.name):
            tag = await self.tag_service.get_tag(TagName(request.name))
            return TagResponse.from_tag(tag)
