"""Domain model entities for Tullamore."""

from tullamore.domain.model.answer import Answer
from tullamore.domain.model.entry import Entry
from tullamore.domain.model.question import Question, QuestionPatch
from tullamore.domain.model.tag import Tag
from tullamore.domain.model.user import User
from tullamore.domain.model.vote import Vote, VoteTally

__all__ = [
    "User",
    "Tag",
    "Vote",
    "VoteTally",
    "Entry",
    "Question",
    "QuestionPatch",
    "Answer",
]
