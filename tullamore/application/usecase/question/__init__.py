"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)
from .delete_question import DeleteQuestionRequest, DeleteQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionUseCase, QuestionResponse
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .patch_question import PatchQuestionRequest, PatchQuestionUseCase
from .update_question import UpdateQuestionRequest, UpdateQuestionUseCase

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "PatchQuestionRequest",
    "PatchQuestionUseCase",
    "QuestionResponse",
    "UpdateQuestionRequest",
    "UpdateQuestionUseCase",
]
