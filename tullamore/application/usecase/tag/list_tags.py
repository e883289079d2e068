"""List tags use case."""

import logfire
from pydantic import BaseModel, Field

from tullamore.application.usecase.base import BaseUseCase
from tullamore.domain.service import TagService

from .get_tag import TagResponse


class ListTagsRequest(BaseModel):
    limit: int = Field(default=100, ge=1)
    offset: int = Field(default=0, ge=0)


class ListTagsResponse(BaseModel):
    tags: list[TagResponse]


class ListTagsUseCase(BaseUseCase):
    """Page through tags in name order."""

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        with logfire.span("list_tags.execute", **request.model_dump()):
            tags = await self.tag_service.get_all_tags(
                limit=request.limit, offset=request.offset
            )
            return ListTagsResponse(tags=[TagResponse.from_tag(tag) for tag in tags])
