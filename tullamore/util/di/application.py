"""Application layer DI providers."""

from dishka import Scope, provide

from tullamore.application.usecase.answer import (
    ChooseAnswerUseCase,
    CreateAnswerUseCase,
    DeleteAnswerUseCase,
    GetAnswerUseCase,
    ListAnswersUseCase,
    PatchAnswerUseCase,
)
from tullamore.application.usecase.question import (
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    PatchQuestionUseCase,
    UpdateQuestionUseCase,
)
from tullamore.application.usecase.tag import (
    CreateTagUseCase,
    DeleteTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
    UpdateTagUseCase,
)
from tullamore.application.usecase.user import CreateUserUseCase, GetUserUseCase
from tullamore.domain.service import (
    AnswerService,
    QuestionService,
    TagService,
    UserService,
)
from tullamore.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Tag use cases
    @provide
    def get_create_tag_use_case(self, tag_service: TagService) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(tag_service=tag_service)

    @provide
    def get_get_tag_use_case(self, tag_service: TagService) -> GetTagUseCase:
        """Provide get tag use case."""
        return GetTagUseCase(tag_service=tag_service)

    @provide
    def get_list_tags_use_case(self, tag_service: TagService) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(tag_service=tag_service)

    @provide
    def get_update_tag_use_case(self, tag_service: TagService) -> UpdateTagUseCase:
        """Provide update tag use case."""
        return UpdateTagUseCase(tag_service=tag_service)

    @provide
    def get_delete_tag_use_case(self, tag_service: TagService) -> DeleteTagUseCase:
        """Provide delete tag use case."""
        return DeleteTagUseCase(tag_service=tag_service)

    # Question use cases
    @provide
    def get_create_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide
    def get_get_question_use_case(
        self, question_service: QuestionService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(question_service=question_service)

    @provide
    def get_list_questions_use_case(
        self, question_service: QuestionService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(question_service=question_service)

    @provide
    def get_update_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide
    def get_patch_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> PatchQuestionUseCase:
        """Provide patch question use case."""
        return PatchQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

    # Answer use cases
    @provide
    def get_create_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> CreateAnswerUseCase:
        """Provide create answer use case."""
        return CreateAnswerUseCase(
            answer_service=answer_service, user_service=user_service
        )

    @provide
    def get_get_answer_use_case(self, answer_service: AnswerService) -> GetAnswerUseCase:
        """Provide get answer use case."""
        return GetAnswerUseCase(answer_service=answer_service)

    @provide
    def get_list_answers_use_case(
        self, answer_service: AnswerService
    ) -> ListAnswersUseCase:
        """Provide list answers use case."""
        return ListAnswersUseCase(answer_service=answer_service)

    @provide
    def get_patch_answer_use_case(
        self, answer_service: AnswerService, user_service: UserService
    ) -> PatchAnswerUseCase:
        """Provide patch answer use case."""
        return PatchAnswerUseCase(
            answer_service=answer_service, user_service=user_service
        )

    @provide
    def get_choose_answer_use_case(
        self, answer_service: AnswerService
    ) -> ChooseAnswerUseCase:
        """Provide choose answer use case."""
        return ChooseAnswerUseCase(answer_service=answer_service)

    @provide
    def get_delete_answer_use_case(
        self, answer_service: AnswerService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(answer_service=answer_service)

    # User use cases
    @provide
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)
