"""Vote row helpers shared by the question and answer repositories.

Votes are not an aggregate of their own: they are stored and loaded as part
of the question or answer they belong to.
"""

from collections import defaultdict
from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from tullamore.domain.model import Vote
from tullamore.domain.value import EntryType
from tullamore.persistence.mappers import row_to_vote, votes_to_rows
from tullamore.persistence.tables import votes_table


async def load_votes(
    session: AsyncSession, entry_type: EntryType, entry_ids: Sequence[UUID]
) -> dict[UUID, list[Vote]]:
    """Load votes for many entries in a single query.

    Args:
        session: Database session
        entry_type: Type of the entries
        entry_ids: IDs of the entries

    Returns:
        Mapping of entry ID to its votes (entries without votes are absent)
    """
    if not entry_ids:
        return {}

    stmt = select(votes_table).where(
        and_(
            votes_table.c.entry_type == entry_type.value,
            votes_table.c.entry_id.in_(entry_ids),
        )
    )
    result = await session.execute(stmt)

    votes: dict[UUID, list[Vote]] = defaultdict(list)
    for row in result.fetchall():
        data = row._asdict()
        votes[data["entry_id"]].append(row_to_vote(data))
    return votes


async def replace_votes(
    session: AsyncSession, entry_type: EntryType, entry_id: UUID, votes: Iterable[Vote]
) -> None:
    """Replace the stored vote set of an entry."""
    await delete_votes(session, entry_type, [entry_id])

    rows = votes_to_rows(entry_type, entry_id, votes)
    if rows:
        await session.execute(insert(votes_table), rows)


async def delete_votes(
    session: AsyncSession, entry_type: EntryType, entry_ids: Sequence[UUID]
) -> None:
    """Delete all votes on the given entries."""
    if not entry_ids:
        return

    stmt = delete(votes_table).where(
        and_(
            votes_table.c.entry_type == entry_type.value,
            votes_table.c.entry_id.in_(entry_ids),
        )
    )
    await session.execute(stmt)
