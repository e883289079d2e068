"""Unit tests for question and answer use cases."""

from uuid import uuid4

import pytest

from tullamore.application.usecase.answer import (
    ChooseAnswerRequest,
    ChooseAnswerUseCase,
    CreateAnswerRequest,
    CreateAnswerUseCase,
    ListAnswersRequest,
    ListAnswersUseCase,
)
from tullamore.application.usecase.base import resource_location
from tullamore.application.usecase.dto import VoteItem
from tullamore.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsUseCase,
    PatchQuestionRequest,
    PatchQuestionUseCase,
)
from tullamore.application.usecase.tag import CreateTagRequest, CreateTagUseCase
from tullamore.application.usecase.user import CreateUserRequest, CreateUserUseCase
from tullamore.domain.error import TagNotFoundError, UserNotFoundError
from tullamore.domain.value import VoteType
from tests.harness import create_env_fixture

BASE_URL = "http://localhost/"

# Unit test fixture
unit_env = create_env_fixture()


async def _ask(unit_env, title: str = "How do I sort a dict?", **fields):
    use_case = await unit_env.get(CreateQuestionUseCase)
    return await use_case.execute(
        CreateQuestionRequest(title=title, base_url=BASE_URL, **fields)
    )


async def _register(unit_env, username: str) -> str:
    use_case = await unit_env.get(CreateUserUseCase)
    response = await use_case.execute(
        CreateUserRequest(username=username, base_url=BASE_URL)
    )
    return response.user_id


class TestResourceLocation:
    """Tests for building Location URLs."""

    def test_trailing_slash_is_not_doubled(self):
        assert resource_location("http://localhost/", "tag", "Java") == (
            "http://localhost/tag/Java"
        )

    def test_segments_are_percent_encoded(self):
        assert resource_location("http://localhost", "tag", "C++") == (
            "http://localhost/tag/C%2B%2B"
        )


class TestCreateQuestionUseCase:
    """Tests for CreateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_create_question_returns_location(self, unit_env):
        response = await _ask(unit_env)

        assert response.location == f"http://localhost/question/{response.question_id}"
        assert response.upvotes == 0
        assert response.votes == []

    @pytest.mark.asyncio
    async def test_create_question_with_unknown_tag_fails(self, unit_env):
        with pytest.raises(TagNotFoundError):
            await _ask(unit_env, tags=["Missing"])

    @pytest.mark.asyncio
    async def test_create_question_with_unknown_author_fails(self, unit_env):
        with pytest.raises(UserNotFoundError):
            await _ask(unit_env, created_by=str(uuid4()))

    @pytest.mark.asyncio
    async def test_tags_are_returned_sorted(self, unit_env):
        create_tag = await unit_env.get(CreateTagUseCase)
        for name in ["Python", "C++"]:
            await create_tag.execute(CreateTagRequest(name=name, base_url=BASE_URL))

        response = await _ask(unit_env, tags=["Python", "C++"])

        assert response.tags == ["C++", "Python"]


class TestListQuestionsUseCase:
    """Tests for ListQuestionsUseCase."""

    @pytest.mark.asyncio
    async def test_more_than_one_filter_is_rejected(self, unit_env):
        use_case = await unit_env.get(ListQuestionsUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(ListQuestionsRequest(title="sort", tag="Python"))

    @pytest.mark.asyncio
    async def test_filter_by_asking_user(self, unit_env):
        create_user = await unit_env.get(CreateUserUseCase)
        user = await create_user.execute(
            CreateUserRequest(username="ada", base_url=BASE_URL)
        )
        mine = await _ask(unit_env, created_by=user.user_id)
        await _ask(unit_env, title="Someone else's question")

        use_case = await unit_env.get(ListQuestionsUseCase)
        response = await use_case.execute(ListQuestionsRequest(asked_by=user.user_id))

        assert [q.question_id for q in response.questions] == [mine.question_id]


class TestPatchQuestionUseCase:
    """Tests for PatchQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_patch_votes_recomputes_tally(self, unit_env):
        question = await _ask(unit_env)
        use_case = await unit_env.get(PatchQuestionUseCase)
        voters = [await _register(unit_env, f"voter{i}") for i in range(4)]
        votes = [
            VoteItem(user_id=voter, vote_type=VoteType.UPVOTE) for voter in voters[:3]
        ] + [VoteItem(user_id=voters[3], vote_type=VoteType.DOWNVOTE)]

        response = await use_case.execute(
            PatchQuestionRequest(question_id=question.question_id, votes=votes)
        )

        assert (response.upvotes, response.downvotes) == (3, 1)
        assert response.title == question.title
        assert response.last_updated_at == question.last_updated_at

    @pytest.mark.asyncio
    async def test_duplicate_voter_is_rejected(self, unit_env):
        question = await _ask(unit_env)
        use_case = await unit_env.get(PatchQuestionUseCase)
        voter = await _register(unit_env, "flipflop")
        votes = [
            VoteItem(user_id=voter, vote_type=VoteType.UPVOTE),
            VoteItem(user_id=voter, vote_type=VoteType.DOWNVOTE),
        ]

        with pytest.raises(ValueError):
            await use_case.execute(
                PatchQuestionRequest(question_id=question.question_id, votes=votes)
            )

    @pytest.mark.asyncio
    async def test_unknown_voter_is_rejected(self, unit_env):
        question = await _ask(unit_env)
        use_case = await unit_env.get(PatchQuestionUseCase)
        votes = [VoteItem(user_id=str(uuid4()), vote_type=VoteType.UPVOTE)]

        with pytest.raises(UserNotFoundError):
            await use_case.execute(
                PatchQuestionRequest(question_id=question.question_id, votes=votes)
            )

    @pytest.mark.asyncio
    async def test_unknown_editor_is_rejected(self, unit_env):
        question = await _ask(unit_env)
        use_case = await unit_env.get(PatchQuestionUseCase)

        with pytest.raises(UserNotFoundError):
            await use_case.execute(
                PatchQuestionRequest(
                    question_id=question.question_id, modified_by=str(uuid4())
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_voter_leaves_question_unchanged(self, unit_env):
        question = await _ask(unit_env)
        use_case = await unit_env.get(PatchQuestionUseCase)
        get_question = await unit_env.get(GetQuestionUseCase)
        votes = [VoteItem(user_id=str(uuid4()), vote_type=VoteType.UPVOTE)]

        with pytest.raises(UserNotFoundError):
            await use_case.execute(
                PatchQuestionRequest(
                    question_id=question.question_id, title="New", votes=votes
                )
            )

        stored = await get_question.execute(
            GetQuestionRequest(question_id=question.question_id)
        )
        assert (stored.title, stored.upvotes) == (question.title, 0)


class TestAnswerUseCases:
    """Tests for answer use cases."""

    @pytest.mark.asyncio
    async def test_choosing_an_answer_clears_the_previous_choice(self, unit_env):
        question = await _ask(unit_env)
        create_answer = await unit_env.get(CreateAnswerUseCase)
        first = await create_answer.execute(
            CreateAnswerRequest(
                question_id=question.question_id, body="First", base_url=BASE_URL
            )
        )
        second = await create_answer.execute(
            CreateAnswerRequest(
                question_id=question.question_id, body="Second", base_url=BASE_URL
            )
        )
        choose = await unit_env.get(ChooseAnswerUseCase)

        await choose.execute(ChooseAnswerRequest(answer_id=first.answer_id))
        await choose.execute(ChooseAnswerRequest(answer_id=second.answer_id))

        list_answers = await unit_env.get(ListAnswersUseCase)
        response = await list_answers.execute(
            ListAnswersRequest(question_id=question.question_id)
        )
        chosen = {a.answer_id: a.chosen_answer for a in response.answers}
        assert chosen == {first.answer_id: False, second.answer_id: True}
        assert first.location == f"http://localhost/answer/{first.answer_id}"
