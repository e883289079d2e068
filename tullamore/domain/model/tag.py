"""Tag entity for categorizing questions."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tullamore.domain.model.common import DomainModel
from tullamore.domain.value import TagName


class Tag(DomainModel):
    """Tag entity for categorizing questions.

    The tag name is its identity. Tags are shared across questions.
    """

    name: TagName
    description: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def id(self) -> str:
        """Tag identifier (the name)."""
        return self.name.root
