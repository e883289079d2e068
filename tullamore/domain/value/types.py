"""Domain value objects for Tullamore.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from tullamore.domain.value.common import RootValueObject


class VoteType(str, Enum):
    """Direction of a vote."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class EntryType(str, Enum):
    """Type of entry that can be voted on."""

    QUESTION = "question"
    ANSWER = "answer"


class TagName(RootValueObject[str]):
    """Tag name, which is also the tag's identity.

    Names are case sensitive and may contain punctuation other than "/",
    since the name is a single segment of the tag's URL.
    Examples: 'Java', 'C++', 'machine-learning'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name is not blank, has no slash and fits the limit."""
        if not v.strip():
            raise ValueError("Tag name must not be blank")
        if "/" in v:
            raise ValueError("Tag name must not contain '/'")
        if len(v) > 64:
            raise ValueError("Tag name must be at most 64 characters")
        return v


class Username(RootValueObject[str]):
    """Unique, human-readable user name."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username is not empty and within length limits."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v
