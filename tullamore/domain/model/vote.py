"""Vote entity and vote tally.

Votes are individual up/down opinions cast by users on a question or answer.
Upvote and downvote counts are never stored: they are derived from the vote set.
"""

from collections.abc import Iterable

from tullamore.domain.model.common import DomainModel
from tullamore.domain.value import UserId, VoteType
from tullamore.domain.value.common import ValueObject


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per entry (enforced by Entry and a database unique constraint)
    - Votes are hashable so an entry holds them as a set
    """

    user_id: UserId
    vote_type: VoteType


class VoteTally(ValueObject):
    """Upvote and downvote counts derived from a set of votes."""

    upvotes: int = 0
    downvotes: int = 0

    @classmethod
    def from_votes(cls, votes: Iterable[Vote]) -> "VoteTally":
        """Count votes by type.

        Args:
            votes: Votes to count

        Returns:
            Tally of upvotes and downvotes
        """
        upvotes = 0
        downvotes = 0
        for vote in votes:
            if vote.vote_type == VoteType.UPVOTE:
                upvotes += 1
            elif vote.vote_type == VoteType.DOWNVOTE:
                downvotes += 1
        return cls(upvotes=upvotes, downvotes=downvotes)

    @property
    def score(self) -> int:
        """Net score (upvotes minus downvotes)."""
        return self.upvotes - self.downvotes
