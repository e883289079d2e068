"""Entry base model shared by questions and answers."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, computed_field, field_serializer, model_validator

from tullamore.domain.model.common import DomainModel
from tullamore.domain.model.vote import Vote, VoteTally
from tullamore.domain.value import UserId


class Entry(DomainModel):
    """Common attributes of a question or an answer.

    Upvote and downvote counts are computed from ``votes`` and exposed as
    computed fields, so they serialize but can never drift from the vote set.
    """

    created_by: Optional[UserId] = None
    body: Optional[str] = Field(default=None, max_length=30000)
    votes: frozenset[Vote] = frozenset()
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_one_vote_per_user(self) -> "Entry":
        """Validate that no user has voted twice on this entry."""
        voters = [vote.user_id for vote in self.votes]
        if len(voters) != len(set(voters)):
            raise ValueError("A user can only vote once on an entry")
        return self

    @field_serializer("votes")
    def serialize_votes(self, votes: frozenset[Vote]) -> list[dict[str, Any]]:
        # Dumped votes are dicts, which a frozenset cannot hold
        ordered = sorted(votes, key=lambda vote: str(vote.user_id))
        return [vote.model_dump() for vote in ordered]

    @property
    def tally(self) -> VoteTally:
        """Vote tally derived from the vote set."""
        return VoteTally.from_votes(self.votes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def upvotes(self) -> int:
        """Number of upvotes."""
        return self.tally.upvotes

    @computed_field  # type: ignore[prop-decorator]
    @property
    def downvotes(self) -> int:
        """Number of downvotes."""
        return self.tally.downvotes
