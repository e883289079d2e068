"""PostgreSQL user repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tullamore.domain.model import User
from tullamore.domain.repository import UserRepository
from tullamore.domain.value import UserId, Username
from tullamore.persistence.mappers import row_to_user, user_to_dict
from tullamore.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _find_one(self, condition) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(condition))
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        return await self._find_one(users_table.c.username == username.root)

    async def save(self, user: User) -> User:
        stmt = insert(users_table).values(**user_to_dict(user))
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={"username": stmt.excluded.username},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
