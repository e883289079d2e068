"""Tag routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from pydantic import BaseModel, Field

from tullamore.application.usecase.tag import (
    CreateTagRequest,
    CreateTagResponse,
    CreateTagUseCase,
    DeleteTagRequest,
    DeleteTagUseCase,
    GetTagRequest,
    GetTagUseCase,
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
    TagResponse,
    UpdateTagRequest,
    UpdateTagUseCase,
)
from tullamore.config import PaginationSettings
from tullamore.interface.error import check_page, to_http_exception

router = APIRouter(prefix="/tag", tags=["tags"], route_class=DishkaRoute)


class CreateTagAPIRequest(BaseModel):
    """API request for creating a tag."""

    name: str = Field(min_length=1, max_length=64)
    description: str | None = Field(default=None, max_length=500)


class UpdateTagAPIRequest(BaseModel):
    """API request for updating a tag."""

    description: str | None = Field(default=None, max_length=500)


@router.post(
    "", response_model=CreateTagResponse, status_code=status.HTTP_201_CREATED
)
async def create_tag(
    request: CreateTagAPIRequest,
    http_request: Request,
    response: Response,
    use_case: FromDishka[CreateTagUseCase],
) -> CreateTagResponse:
    """Create a new tag.

    Responds with 201 and a Location header pointing at the new tag,
    or 409 if a tag with this name already exists.

    Example:
        POST /tag {"name": "Java"}
        -> 201, Location: http://localhost/tag/Java
    """
    try:
        result = await use_case.execute(
            CreateTagRequest(
                name=request.name,
                description=request.description,
                base_url=str(http_request.base_url),
            )
        )
    except Exception as e:
        raise to_http_exception(e, "create tag") from e

    response.headers["Location"] = result.location
    return result


@router.get("", response_model=ListTagsResponse)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    pagination: FromDishka[PaginationSettings],
    limit: int = 100,
    offset: int = 0,
) -> ListTagsResponse:
    """List tags ordered by name.

    Args:
        use_case: List tags use case (injected)
        pagination: Paging limits (injected)
        limit: Maximum number of tags to return
        offset: Number of tags to skip
    """
    check_page(limit, offset, pagination.max_limit)
    try:
        return await use_case.execute(ListTagsRequest(limit=limit, offset=offset))
    except Exception as e:
        raise to_http_exception(e, "list tags") from e


@router.get("/{name}", response_model=TagResponse)
async def get_tag(name: str, use_case: FromDishka[GetTagUseCase]) -> TagResponse:
    """Get a tag by name."""
    try:
        return await use_case.execute(GetTagRequest(name=name))
    except Exception as e:
        raise to_http_exception(e, "get tag") from e


@router.put("/{name}", response_model=TagResponse)
async def update_tag(
    name: str,
    request: UpdateTagAPIRequest,
    use_case: FromDishka[UpdateTagUseCase],
) -> TagResponse:
    """Replace a tag's description."""
    try:
        return await use_case.execute(
            UpdateTagRequest(name=name, description=request.description)
        )
    except Exception as e:
        raise to_http_exception(e, "update tag") from e


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_tag(name: str, use_case: FromDishka[DeleteTagUseCase]) -> None:
    """Delete a tag. Questions carrying it lose the tag."""
    try:
        await use_case.execute(DeleteTagRequest(name=name))
    except Exception as e:
        raise to_http_exception(e, "delete tag") from e
