"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

from sqlalchemy import Select, delete, exists, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tullamore.domain.model import Answer
from tullamore.domain.repository import AnswerRepository
from tullamore.domain.value import AnswerId, EntryType, QuestionId
from tullamore.persistence.mappers import answer_to_dict, row_to_answer
from tullamore.persistence.repository.vote import (
    delete_votes,
    load_votes,
    replace_votes,
)
from tullamore.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _load(self, stmt: Select) -> List[Answer]:
        """Run an answer query and attach votes."""
        result = await self.session.execute(stmt)
        rows = [row._asdict() for row in result.fetchall()]
        votes = await load_votes(
            self.session, EntryType.ANSWER, [row["id"] for row in rows]
        )
        return [row_to_answer(row, votes.get(row["id"], [])) for row in rows]

    async def exists(self, answer_id: AnswerId) -> bool:
        """Check whether an answer exists."""
        stmt = select(exists().where(answers_table.c.id == answer_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        answers = await self._load(
            select(answers_table).where(answers_table.c.id == answer_id)
        )
        return answers[0] if answers else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, oldest first."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(answers_table.c.created_at)
        )
        return await self._load(stmt)

    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update), replacing its votes."""
        answer_dict = answer_to_dict(answer)

        if await self.exists(answer.id):
            stmt = (
                update(answers_table)
                .where(answers_table.c.id == answer.id)
                .values(**answer_dict)
            )
        else:
            stmt = insert(answers_table).values(**answer_dict)
        await self.session.execute(stmt)

        await replace_votes(self.session, EntryType.ANSWER, answer.id, answer.votes)

        await self.session.flush()
        return answer

    async def delete(self, answer_id: AnswerId) -> None:
        """Delete an answer and its votes."""
        await delete_votes(self.session, EntryType.ANSWER, [answer_id])
        await self.session.execute(
            delete(answers_table).where(answers_table.c.id == answer_id)
        )
        await self.session.flush()

    async def delete_by_question(self, question_id: QuestionId) -> int:
        """Delete every answer to a question, with their votes."""
        result = await self.session.execute(
            select(answers_table.c.id).where(answers_table.c.question_id == question_id)
        )
        answer_ids = list(result.scalars().all())
        if not answer_ids:
            return 0

        await delete_votes(self.session, EntryType.ANSWER, answer_ids)
        await self.session.execute(
            delete(answers_table).where(answers_table.c.id.in_(answer_ids))
        )
        await self.session.flush()
        return len(answer_ids)
