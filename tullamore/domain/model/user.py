"""User entity.

Users author questions and answers and cast votes.
"""

from datetime import datetime

from pydantic import Field

from tullamore.domain.model.common import DomainModel
from tullamore.domain.value import UserId, Username


class User(DomainModel):
    """User account."""

    id: UserId
    username: Username
    created_at: datetime = Field(default_factory=datetime.now)
