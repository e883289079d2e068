"""Delete tag use case."""

import logfire
from pydantic import BaseModel

from tullamore.application.usecase.base import BaseUseCase
from tullamore.domain.service import TagService
from tullamore.domain.value import TagName


class DeleteTagRequest(BaseModel):
    """Delete tag request."""

    name: str


class DeleteTagUseCase(BaseUseCase):
    """Use case for deleting a tag.

    Questions carrying the tag keep existing and simply lose it.
    """

    def __init__(self, tag_service: TagService) -> None:
        self.tag_service = tag_service

    async def execute(self, request: DeleteTagRequest) -> None:
        """Execute delete tag flow.

        Raises:
            TagNotFoundError: If no tag has this name
        """
        with logfire.span("delete_tag.execute", tag_name=request.name):
            await self.tag_service.delete_tag(TagName(request.name))
