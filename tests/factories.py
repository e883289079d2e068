"""Builders for domain objects used across tests."""

from datetime import datetime
from uuid import uuid4

from tullamore.domain.model import Answer, Question, Tag, Vote
from tullamore.domain.value import (
    AnswerId,
    QuestionId,
    TagName,
    UserId,
    VoteType,
)


def make_tag(name: str, description: str | None = None) -> Tag:
    """Build a tag with the given name."""
    return Tag(name=TagName(name), description=description)


def make_question(
    title: str = "How do I reverse a list?",
    body: str | None = "Looking for the idiomatic way.",
    tags: list[str] | None = None,
    created_at: datetime | None = None,
    **fields,
) -> Question:
    """Build a question with a fresh ID.

    Args:
        title: Question title
        body: Question body
        tags: Tag names (the tags must exist before the question is added)
        created_at: Creation time, defaults to now
        fields: Any other Question fields
    """
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        body=body,
        tags=frozenset(TagName(name) for name in tags or []),
        created_at=created_at or datetime.now(),
        **fields,
    )


def make_answer(question_id: QuestionId, body: str = "Use reversed().", **fields) -> Answer:
    """Build an answer to a question with a fresh ID."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        body=body,
        **fields,
    )


def make_votes(upvotes: int, downvotes: int) -> frozenset[Vote]:
    """Build a vote set cast by distinct, random users."""
    return frozenset(
        [Vote(user_id=UserId(uuid4()), vote_type=VoteType.UPVOTE) for _ in range(upvotes)]
        + [
            Vote(user_id=UserId(uuid4()), vote_type=VoteType.DOWNVOTE)
            for _ in range(downvotes)
        ]
    )
