"""Integration tests for the PostgreSQL repositories.

These run against a migrated database configured through DATABASE__URL
(``python scripts/run_migrations.py`` first) and are skipped otherwise.
Names carry a random suffix so repeated runs do not collide.
"""

import os
from uuid import uuid4

import pytest

from tullamore.application.usecase.dto import VoteItem
from tullamore.application.usecase.question import (
    PatchQuestionRequest,
    PatchQuestionUseCase,
)
from tullamore.domain.error import UserNotFoundError
from tullamore.domain.model import QuestionPatch, User, Vote
from tullamore.domain.repository import AnswerRepository
from tullamore.domain.service import (
    AnswerService,
    QuestionService,
    TagService,
    UserService,
)
from tullamore.domain.value import TagName, UserId, Username, VoteType
from tests.factories import make_answer, make_question, make_tag
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ,
    reason="needs a migrated PostgreSQL in DATABASE__URL",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _suffix() -> str:
    return uuid4().hex[:8]


async def _add_user(env) -> User:
    user_service = await env.get(UserService)
    return await user_service.add_user(
        User(id=UserId(uuid4()), username=Username(f"user-{_suffix()}"))
    )


class TestPostgresTagRepository:
    """Tests for tag storage."""

    @pytest.mark.asyncio
    async def test_update_then_delete_detaches_from_questions(self, integration_env):
        tag_service = await integration_env.get(TagService)
        question_service = await integration_env.get(QuestionService)
        name = f"tag-{_suffix()}"
        await tag_service.add_tag(make_tag(name, "first"))
        await tag_service.update_tag(TagName(name), make_tag(name, "second"))
        question = await question_service.add_question(make_question(tags=[name]))

        assert (await tag_service.get_tag(TagName(name))).description == "second"

        await tag_service.delete_tag(TagName(name))

        stored = await question_service.get_question(question.id)
        assert stored.tags == frozenset()


class TestPostgresQuestionRepository:
    """Tests for question, vote and answer storage."""

    @pytest.mark.asyncio
    async def test_votes_round_trip_and_are_replaced(self, integration_env):
        question_service = await integration_env.get(QuestionService)
        voters = [await _add_user(integration_env) for _ in range(3)]
        votes = frozenset(
            [
                Vote(user_id=voters[0].id, vote_type=VoteType.UPVOTE),
                Vote(user_id=voters[1].id, vote_type=VoteType.UPVOTE),
                Vote(user_id=voters[2].id, vote_type=VoteType.DOWNVOTE),
            ]
        )
        question = await question_service.add_question(
            make_question(title=f"Votes {_suffix()}", votes=votes)
        )

        stored = await question_service.get_question(question.id)
        assert stored.votes == votes
        assert (stored.upvotes, stored.downvotes) == (2, 1)

        fewer = frozenset([Vote(user_id=voters[0].id, vote_type=VoteType.DOWNVOTE)])
        await question_service.patch_question(
            question.id, QuestionPatch(votes=fewer)
        )

        stored = await question_service.get_question(question.id)
        assert (stored.upvotes, stored.downvotes) == (0, 1)

    @pytest.mark.asyncio
    async def test_delete_question_removes_answers(self, integration_env):
        question_service = await integration_env.get(QuestionService)
        answer_service = await integration_env.get(AnswerService)
        question = await question_service.add_question(make_question())
        answer = await answer_service.add_answer(make_answer(question.id))

        await question_service.delete_question(question)

        answer_repository = await integration_env.get(AnswerRepository)
        assert await answer_repository.find_by_id(answer.id) is None
        assert await answer_repository.find_by_question(question.id) == []

    @pytest.mark.asyncio
    async def test_find_by_title_is_case_insensitive(self, integration_env):
        question_service = await integration_env.get(QuestionService)
        marker = _suffix()
        question = await question_service.add_question(
            make_question(title=f"Parsing JSON {marker.upper()}")
        )

        found = await question_service.find_questions_by_title(marker.lower())

        assert [q.id for q in found] == [question.id]


class TestUserReferences:
    """Votes and edits must name stored users."""

    @pytest.mark.asyncio
    async def test_patch_with_unknown_voter_is_rejected_before_storage(
        self, integration_env
    ):
        question_service = await integration_env.get(QuestionService)
        use_case = await integration_env.get(PatchQuestionUseCase)
        question = await question_service.add_question(make_question())

        with pytest.raises(UserNotFoundError):
            await use_case.execute(
                PatchQuestionRequest(
                    question_id=str(question.id),
                    votes=[VoteItem(user_id=str(uuid4()), vote_type=VoteType.UPVOTE)],
                )
            )

        assert (await question_service.get_question(question.id)).upvotes == 0

