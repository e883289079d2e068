"""Unit tests for row <-> domain model mappers."""

from datetime import datetime
from uuid import uuid4

from tullamore.domain.model import Vote
from tullamore.domain.value import EntryType, TagName, UserId, VoteType
from tullamore.persistence.mappers import (
    answer_to_dict,
    question_to_dict,
    row_to_answer,
    row_to_question,
    row_to_tag,
    row_to_vote,
    tag_to_dict,
    votes_to_rows,
)
from tests.factories import make_answer, make_question, make_tag, make_votes


class TestQuestionMapping:
    """Tests for question mapping."""

    def test_question_dict_has_only_table_columns(self):
        question = make_question(votes=make_votes(upvotes=1, downvotes=1))

        data = question_to_dict(question)

        assert set(data) == {
            "id",
            "title",
            "body",
            "created_by",
            "modified_by",
            "created_at",
            "last_updated_at",
        }

    def test_row_to_question_restores_tags_and_votes(self):
        question = make_question(votes=make_votes(upvotes=2, downvotes=1))
        row = question_to_dict(question)
        row["id"] = str(row["id"])  # Drivers may hand back strings

        restored = row_to_question(
            row, tag_names=["Java", "C++"], votes=question.votes
        )

        assert restored.id == question.id
        assert restored.tags == frozenset({TagName("Java"), TagName("C++")})
        assert (restored.upvotes, restored.downvotes) == (2, 1)


class TestAnswerMapping:
    """Tests for answer mapping."""

    def test_round_trip_keeps_chosen_flag(self):
        answer = make_answer(make_question().id, chosen_answer=True)

        restored = row_to_answer(answer_to_dict(answer), votes=[])

        assert restored == answer


class TestTagAndVoteMapping:
    """Tests for tag and vote mapping."""

    def test_tag_dict_uses_plain_name(self):
        data = tag_to_dict(make_tag("C++", "Systems language"))

        assert data["name"] == "C++"
        assert row_to_tag(data).name == TagName("C++")

    def test_votes_to_rows(self):
        user_id = UserId(uuid4())
        entry_id = uuid4()
        votes = [Vote(user_id=user_id, vote_type=VoteType.DOWNVOTE)]

        rows = votes_to_rows(EntryType.ANSWER, entry_id, votes)

        assert rows == [
            {
                "entry_type": "answer",
                "entry_id": entry_id,
                "user_id": user_id,
                "vote_type": "downvote",
            }
        ]
        assert row_to_vote(rows[0]) == votes[0]

    def test_tag_timestamps_are_kept(self):
        created = datetime(2024, 1, 1)
        data = {
            "name": "Java",
            "description": None,
            "created_at": created,
            "updated_at": created,
        }

        assert row_to_tag(data).created_at == created
