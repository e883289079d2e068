"""Create tag use case."""

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase, resource_location
from tullamore.domain.model.tag import Tag
from tullamore.domain.service import TagService
from tullamore.domain.value import TagName

from .get_tag import TagResponse


class CreateTagRequest(BaseModel):
    """Create tag request."""

    name: str
    description: str | None = None
    base_url: str  # Base URL of the HTTP request, used for the Location header


class CreateTagResponse(TagResponse):
    """Create tag response."""

    location: str


class CreateTagUseCase(BaseUseCase):
    """Use case for adding a new tag."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize create tag use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: CreateTagRequest) -> CreateTagResponse:
        """Execute create tag flow.

        Args:
            request: Create tag request

        Returns:
            Created tag with its resource location

        Raises:
            TagAlreadyExistsError: If a tag with this name exists
            ValueError: If the tag name or description is invalid
        """
        with logfire.span("create_tag.execute", tag_name=request.name):
            tag = Tag(name=TagName(request.name), description=request.description)
            saved = await self.tag_service.add_tag(tag)

            return CreateTagResponse(
                **TagResponse.from_tag(saved).model_dump(),
                location=resource_location(request.base_url, "tag", saved.id),
            )
