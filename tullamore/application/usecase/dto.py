"""Response and request items shared by question and answer use cases."""

from collections.abc import Iterable
from uuid import UUID

from pydantic import BaseModel

from tullamore.domain.model.vote import Vote
from tullamore.domain.value import UserId, VoteType


class VoteItem(BaseModel):
    """A single user's vote on a question or answer."""

    user_id: str
    vote_type: VoteType


def votes_to_items(votes: Iterable[Vote]) -> list[VoteItem]:
    """Convert domain votes to items, ordered by user for stable output."""
    return [
        VoteItem(user_id=str(vote.user_id), vote_type=vote.vote_type)
        for vote in sorted(votes, key=lambda v: str(v.user_id))
    ]


def items_to_votes(items: Iterable[VoteItem]) -> frozenset[Vote]:
    """Convert vote items to a domain vote set."""
    return frozenset(
        Vote(user_id=UserId(UUID(item.user_id)), vote_type=item.vote_type)
        for item in items
    )


def referenced_users(votes: Iterable[Vote], *user_ids: UserId | None) -> list[UserId]:
    """Collect the users an edit refers to: every voter plus any editor."""
    return [vote.user_id for vote in votes] + [u for u in user_ids if u is not None]
