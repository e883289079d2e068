"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, List
from uuid import UUID

from tullamore.domain.model import Answer, Question, Tag, User, Vote
from tullamore.domain.value import (
    AnswerId,
    EntryType,
    QuestionId,
    TagName,
    UserId,
    Username,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_user_id(value: Any) -> UserId | None:
    return UserId(_uuid(value)) if value is not None else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        name=TagName(row["name"]),
        description=row.get("description"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return tag.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        user_id=UserId(_uuid(row["user_id"])),
        vote_type=VoteType(row["vote_type"]),
    )


def votes_to_rows(
    entry_type: EntryType, entry_id: UUID, votes: Iterable[Vote]
) -> List[Dict[str, Any]]:
    """Convert an entry's vote set to database rows.

    Args:
        entry_type: Whether the votes belong to a question or an answer
        entry_id: ID of the question or answer
        votes: Votes to convert

    Returns:
        List of dicts suitable for a bulk insert
    """
    return [
        {
            "entry_type": entry_type.value,
            "entry_id": entry_id,
            "user_id": vote.user_id,
            "vote_type": vote.vote_type.value,
        }
        for vote in votes
    ]


def row_to_question(
    row: Dict[str, Any], tag_names: Iterable[str], votes: Iterable[Vote]
) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Question row as dict
        tag_names: Names of the tags attached to the question
        votes: Votes cast on the question

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        body=row.get("body"),
        created_by=_optional_user_id(row.get("created_by")),
        modified_by=_optional_user_id(row.get("modified_by")),
        created_at=row["created_at"],
        last_updated_at=row.get("last_updated_at"),
        tags=frozenset(TagName(name) for name in tag_names),
        votes=frozenset(votes),
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to a questions table dict.

    Tags and votes live in their own tables; vote counts are derived.
    """
    return question.model_dump(exclude={"tags", "votes", "upvotes", "downvotes"})


def row_to_answer(row: Dict[str, Any], votes: Iterable[Vote]) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Answer row as dict
        votes: Votes cast on the answer

    Returns:
        Answer domain model
    """
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        created_by=_optional_user_id(row.get("created_by")),
        body=row.get("body"),
        chosen_answer=row["chosen_answer"],
        created_at=row["created_at"],
        votes=frozenset(votes),
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to an answers table dict."""
    return answer.model_dump(exclude={"votes", "upvotes", "downvotes"})
