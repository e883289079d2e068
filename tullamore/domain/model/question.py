"""Question aggregate root.

A question owns its vote set, its tag associations and its answers.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from tullamore.domain.model.common import DomainModel
from tullamore.domain.model.entry import Entry
from tullamore.domain.model.vote import Vote
from tullamore.domain.value import QuestionId, TagName, UserId


class Question(Entry):
    """Question aggregate root.

    ``id``, ``created_at`` and ``created_by`` never change once the question
    has been stored.
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    modified_by: Optional[UserId] = None
    last_updated_at: Optional[datetime] = None
    tags: frozenset[TagName] = frozenset()


class QuestionPatch(DomainModel):
    """Partial update for a question.

    Only fields that were explicitly supplied and are not None are applied.
    Identity and creation fields are not patchable.
    """

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    body: Optional[str] = Field(default=None, max_length=30000)
    tags: Optional[frozenset[TagName]] = None
    votes: Optional[frozenset[Vote]] = None
    modified_by: Optional[UserId] = None
    last_updated_at: Optional[datetime] = None

    def changes(self) -> dict[str, Any]:
        """Return the supplied, non-null fields."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }
