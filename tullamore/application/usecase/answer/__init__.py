"""Answer use cases."""

from .choose_answer import ChooseAnswerRequest, ChooseAnswerUseCase
from .create_answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)
from .delete_answer import DeleteAnswerRequest, DeleteAnswerUseCase
from .get_answer import AnswerResponse, GetAnswerRequest, GetAnswerUseCase
from .list_answers import ListAnswersRequest, ListAnswersResponse, ListAnswersUseCase
from .patch_answer import PatchAnswerRequest, PatchAnswerUseCase

__all__ = [
    "AnswerResponse",
    "ChooseAnswerRequest",
    "ChooseAnswerUseCase",
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
    "DeleteAnswerRequest",
    "DeleteAnswerUseCase",
    "GetAnswerRequest",
    "GetAnswerUseCase",
    "ListAnswersRequest",
    "ListAnswersResponse",
    "ListAnswersUseCase",
    "PatchAnswerRequest",
    "PatchAnswerUseCase",
]
