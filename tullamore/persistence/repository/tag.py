"""PostgreSQL tag repository."""

from typing import Optional

from sqlalchemy import delete, exists, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from tullamore.domain.model.tag import Tag
from tullamore.domain.repository.tag import TagRepository
from tullamore.domain.value import TagName
from tullamore.persistence.mappers import row_to_tag, tag_to_dict
from tullamore.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _select(self, stmt) -> list[Tag]:
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def exists(self, name: TagName) -> bool:
        stmt = select(exists().where(tags_table.c.name == name.root))
        return bool(await self.session.scalar(stmt))

    async def save(self, tag: Tag) -> Tag:
        values = tag_to_dict(tag)
        stmt = insert(tags_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[tags_table.c.name],
            set_={
                "description": stmt.excluded.description,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        tags = await self._select(
            select(tags_table).where(tags_table.c.name == name.root)
        )
        return tags[0] if tags else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        if not names:
            return []
        return await self._select(
            select(tags_table).where(
                tags_table.c.name.in_([name.root for name in names])
            )
        )

    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Tag]:
        return await self._select(
            select(tags_table).order_by(tags_table.c.name).limit(limit).offset(offset)
        )

    async def delete(self, name: TagName) -> None:
        """Delete a tag; question_tags rows go with it via ON DELETE CASCADE."""
        await self.session.execute(
            delete(tags_table).where(tags_table.c.name == name.root)
        )
        await self.session.flush()
