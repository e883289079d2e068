"""Domain value objects for Tullamore."""

from tullamore.domain.value.identifiers import AnswerId, QuestionId, UserId
from tullamore.domain.value.types import EntryType, TagName, Username, VoteType

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    # Types
    "TagName",
    "Username",
    "VoteType",
    "EntryType",
]
