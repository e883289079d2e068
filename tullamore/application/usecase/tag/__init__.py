"""Tag use cases."""

from .create_tag import CreateTagRequest, CreateTagResponse, CreateTagUseCase
from .delete_tag import DeleteTagRequest, DeleteTagUseCase
from .get_tag import GetTagRequest, GetTagUseCase, TagResponse
from .list_tags import ListTagsRequest, ListTagsResponse, ListTagsUseCase
from .update_tag import UpdateTagRequest, UpdateTagUseCase

__all__ = [
    "CreateTagRequest",
    "CreateTagResponse",
    "CreateTagUseCase",
    "DeleteTagRequest",
    "DeleteTagUseCase",
    "GetTagRequest",
    "GetTagUseCase",
    "ListTagsRequest",
    "ListTagsResponse",
    "ListTagsUseCase",
    "TagResponse",
    "UpdateTagRequest",
    "UpdateTagUseCase",
]
