"""Persistence providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncSession

from tullamore.config import Settings
from tullamore.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from tullamore.persistence.database import Database
from tullamore.persistence.repository import (
    PostgresAnswerRepository,
    PostgresQuestionRepository,
    PostgresTagRepository,
    PostgresUserRepository,
)
from tullamore.util.di.base import ProviderBase
from tullamore.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories for users, tags, questions and answers."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories sharing one session per request."""

    @provide(scope=Scope.APP)
    async def get_database(self, settings: Settings) -> AsyncIterator[Database]:
        database = Database(settings.database, echo=settings.debug)
        instrument_sqlalchemy(database.engine)
        yield database
        await database.dispose()

    @provide(scope=Scope.REQUEST)
    async def get_session(self, database: Database) -> AsyncIterator[AsyncSession]:
        """Request-scoped session, committed when the request succeeds."""
        async with database.session() as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, session: AsyncSession) -> QuestionRepository:
        return PostgresQuestionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, session: AsyncSession) -> AnswerRepository:
        return PostgresAnswerRepository(session)
