"""PostgreSQL implementation of Question repository."""

from collections import defaultdict
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import Select, delete, exists, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tullamore.domain.model import Question
from tullamore.domain.repository import QuestionRepository
from tullamore.domain.value import EntryType, QuestionId, TagName, UserId
from tullamore.persistence.mappers import question_to_dict, row_to_question
from tullamore.persistence.repository.vote import (
    delete_votes,
    load_votes,
    replace_votes,
)
from tullamore.persistence.tables import (
    answers_table,
    question_tags_table,
    questions_table,
)


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _load(self, stmt: Select) -> List[Question]:
        """Run a question query and attach tags and votes.

        Tags and votes are fetched with one batch query each (avoids N+1).
        """
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]
        if not rows:
            return []

        ids: Sequence[UUID] = [row["id"] for row in rows]

        tag_result = await self.session.execute(
            select(question_tags_table).where(question_tags_table.c.question_id.in_(ids))
        )
        tags: dict[UUID, list[str]] = defaultdict(list)
        for tag_row in tag_result.fetchall():
            tags[tag_row.question_id].append(tag_row.tag_name)

        votes = await load_votes(self.session, EntryType.QUESTION, ids)

        return [
            row_to_question(row, tags.get(row["id"], []), votes.get(row["id"], []))
            for row in rows
        ]

    @staticmethod
    def _newest_first(stmt: Select, limit: int, offset: int) -> Select:
        return (
            stmt.order_by(questions_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )

    async def exists(self, question_id: QuestionId) -> bool:
        """Check whether a question exists."""
        stmt = select(exists().where(questions_table.c.id == question_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        questions = await self._load(
            select(questions_table).where(questions_table.c.id == question_id)
        )
        return questions[0] if questions else None

    async def find_all(self, limit: int = 30, offset: int = 0) -> List[Question]:
        """Find all questions with pagination."""
        return await self._load(
            self._newest_first(select(questions_table), limit, offset)
        )

    async def find_by_title(
        self, title: str, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions whose title contains the given text."""
        stmt = select(questions_table).where(
            questions_table.c.title.icontains(title, autoescape=True)
        )
        return await self._load(self._newest_first(stmt, limit, offset))

    async def find_by_author(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions asked by a user."""
        stmt = select(questions_table).where(questions_table.c.created_by == user_id)
        return await self._load(self._newest_first(stmt, limit, offset))

    async def find_answered_by_user(
        self, user_id: UserId, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions that a user has answered."""
        answered = select(answers_table.c.question_id).where(
            answers_table.c.created_by == user_id
        )
        stmt = select(questions_table).where(questions_table.c.id.in_(answered))
        return await self._load(self._newest_first(stmt, limit, offset))

    async def find_by_tag(
        self, tag: TagName, limit: int = 30, offset: int = 0
    ) -> List[Question]:
        """Find questions carrying a tag."""
        stmt = select(questions_table).join(
            question_tags_table,
            question_tags_table.c.question_id == questions_table.c.id,
        ).where(question_tags_table.c.tag_name == tag.root)
        return await self._load(self._newest_first(stmt, limit, offset))

    async def save(self, question: Question) -> Question:
        """Save a question (create or update), replacing its tags and votes."""
        question_dict = question_to_dict(question)

        if await self.exists(question.id):
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question.id)
                .values(**question_dict)
            )
        else:
            stmt = insert(questions_table).values(**question_dict)
        await self.session.execute(stmt)

        await self.session.execute(
            delete(question_tags_table).where(
                question_tags_table.c.question_id == question.id
            )
        )
        if question.tags:
            await self.session.execute(
                insert(question_tags_table),
                [
                    {"question_id": question.id, "tag_name": tag.root}
                    for tag in question.tags
                ],
            )

        await replace_votes(self.session, EntryType.QUESTION, question.id, question.votes)

        await self.session.flush()
        return question

    async def delete(self, question_id: QuestionId) -> None:
        """Delete a question with its tag associations and votes."""
        await delete_votes(self.session, EntryType.QUESTION, [question_id])
        await self.session.execute(
            delete(question_tags_table).where(
                question_tags_table.c.question_id == question_id
            )
        )
        await self.session.execute(
            delete(questions_table).where(questions_table.c.id == question_id)
        )
        await self.session.flush()
