"""Unit tests for AnswerService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from tullamore.domain.error import (
    AnswerAlreadyExistsError,
    AnswerNotFoundError,
    QuestionNotFoundError,
)
from tullamore.domain.service import AnswerService, QuestionService
from tullamore.domain.value import AnswerId, QuestionId
from tests.factories import make_answer, make_question, make_votes
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _add_question(unit_env):
    question_service = await unit_env.get(QuestionService)
    return await question_service.add_question(make_question())


class TestAddAnswer:
    """Tests for add_answer method."""

    @pytest.mark.asyncio
    async def test_add_answer(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _add_question(unit_env)
        answer = make_answer(question.id)

        result = await answer_service.add_answer(answer)

        assert result == answer
        assert result.chosen_answer is False
        assert await answer_service.get_answer(answer.id) == answer

    @pytest.mark.asyncio
    async def test_add_answer_to_missing_question_raises(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(QuestionNotFoundError):
            await answer_service.add_answer(make_answer(QuestionId(uuid4())))

    @pytest.mark.asyncio
    async def test_add_existing_answer_raises(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _add_question(unit_env)
        answer = await answer_service.add_answer(make_answer(question.id))

        with pytest.raises(AnswerAlreadyExistsError):
            await answer_service.add_answer(answer)


class TestGetAnswers:
    """Tests for get_answer and get_answers_for_question methods."""

    @pytest.mark.asyncio
    async def test_get_missing_answer_raises(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(AnswerNotFoundError):
            await answer_service.get_answer(AnswerId(uuid4()))

    @pytest.mark.asyncio
    async def test_answers_are_oldest_first(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _add_question(unit_env)
        base = datetime(2024, 1, 1)
        later = await answer_service.add_answer(
            make_answer(question.id, created_at=base + timedelta(hours=1))
        )
        earlier = await answer_service.add_answer(
            make_answer(question.id, created_at=base)
        )

        answers = await answer_service.get_answers_for_question(question.id)

        assert answers == [earlier, later]

    @pytest.mark.asyncio
    async def test_answers_for_missing_question_raises(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(QuestionNotFoundError):
            await answer_service.get_answers_for_question(QuestionId(uuid4()))


class TestChooseAnswer:
    """Tests for choose_answer method."""

    @pytest.mark.asyncio
    async def test_choose_answer(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _add_question(unit_env)
        answer = await answer_service.add_answer(make_answer(question.id))

        chosen = await answer_service.choose_answer(answer.id)

        assert chosen.chosen_answer is True
        assert (await answer_service.get_answer(answer.id)).chosen_answer is True

    @pytest.mark.asyncio
    async def test_choosing_clears_previous_choice(self, unit_env):
        """A question has at most one chosen answer."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question = await _add_question(unit_env)
        first = await answer_service.add_answer(make_answer(question.id))
        second = await answer_service.add_answer(make_answer(question.id))
        await answer_service.choose_answer(first.id)

        # Act
        await answer_service.choose_answer(second.id)

        # Assert
        answers = await answer_service.get_answers_for_question(question.id)
        chosen = [a.id for a in answers if a.chosen_answer]
        assert chosen == [second.id]

    @pytest.mark.asyncio
    async def test_choose_missing_answer_raises(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(AnswerNotFoundError):
            await answer_service.choose_answer(AnswerId(uuid4()))


class TestPatchAnswer:
    """Tests for patch_answer method."""

    @pytest.mark.asyncio
    async def test_patch_votes(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _add_question(unit_env)
        answer = await answer_service.add_answer(make_answer(question.id))

        patched = await answer_service.patch_answer(
            answer.id, votes=make_votes(upvotes=2, downvotes=2)
        )

        assert (patched.upvotes, patched.downvotes) == (2, 2)
        assert patched.body == answer.body

    @pytest.mark.asyncio
    async def test_patch_body(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _add_question(unit_env)
        answer = await answer_service.add_answer(make_answer(question.id))

        patched = await answer_service.patch_answer(answer.id, body="Edited")

        assert patched.body == "Edited"
        assert patched.created_at == answer.created_at


class TestDeleteAnswer:
    """Tests for delete_answer method."""

    @pytest.mark.asyncio
    async def test_delete_answer(self, unit_env):
        answer_service = await unit_env.get(AnswerService)
        question = await _add_question(unit_env)
        answer = await answer_service.add_answer(make_answer(question.id))

        await answer_service.delete_answer(answer.id)

        assert await answer_service.get_answers_for_question(question.id) == []

    @pytest.mark.asyncio
    async def test_delete_missing_answer_raises(self, unit_env):
        answer_service = await unit_env.get(AnswerService)

        with pytest.raises(AnswerNotFoundError):
            await answer_service.delete_answer(AnswerId(uuid4()))
