"""Unit tests for in-memory repositories sharing a store."""

from uuid import uuid4

import pytest

from tullamore.domain.value import TagName, UserId
from tullamore.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryQuestionRepository,
    InMemoryStore,
    InMemoryTagRepository,
)
from tests.factories import make_answer, make_question, make_tag


class TestSharedStore:
    """Repositories over one store see each other's data."""

    @pytest.mark.asyncio
    async def test_repositories_share_store(self):
        store = InMemoryStore()
        first = InMemoryQuestionRepository(store)
        second = InMemoryQuestionRepository(store)
        question = await first.save(make_question())

        assert await second.find_by_id(question.id) == question

    @pytest.mark.asyncio
    async def test_separate_stores_are_isolated(self):
        question = await InMemoryQuestionRepository().save(make_question())

        assert await InMemoryQuestionRepository().find_by_id(question.id) is None

    @pytest.mark.asyncio
    async def test_delete_by_question_counts_deleted_answers(self):
        store = InMemoryStore()
        answers = InMemoryAnswerRepository(store)
        question = make_question()
        await answers.save(make_answer(question.id))
        await answers.save(make_answer(question.id))

        assert await answers.delete_by_question(question.id) == 2
        assert await answers.delete_by_question(question.id) == 0

    @pytest.mark.asyncio
    async def test_answered_by_user_uses_answers_in_store(self):
        store = InMemoryStore()
        questions = InMemoryQuestionRepository(store)
        answers = InMemoryAnswerRepository(store)
        user_id = UserId(uuid4())
        question = await questions.save(make_question())
        await answers.save(make_answer(question.id, created_by=user_id))

        assert await questions.find_answered_by_user(user_id) == [question]

    @pytest.mark.asyncio
    async def test_tag_delete_detaches_from_questions(self):
        store = InMemoryStore()
        tags = InMemoryTagRepository(store)
        questions = InMemoryQuestionRepository(store)
        await tags.save(make_tag("Java"))
        question = await questions.save(make_question(tags=["Java"]))

        await tags.delete(TagName("Java"))

        assert await questions.find_by_tag(TagName("Java")) == []
        assert (await questions.find_by_id(question.id)).tags == frozenset()
