"""Unit tests for vote tallies and entry models."""

import json
from uuid import uuid4

import pytest
from pydantic import ValidationError

from tullamore.domain.model import Question, QuestionPatch, Tag, Vote, VoteTally
from tullamore.domain.value import QuestionId, TagName, UserId, VoteType
from tests.factories import make_answer, make_question, make_votes


def _vote(vote_type: VoteType) -> Vote:
    return Vote(user_id=UserId(uuid4()), vote_type=vote_type)


class TestVoteTally:
    """Tests for VoteTally."""

    def test_counts_votes_by_type(self):
        """Three upvotes and one downvote."""
        votes = [
            _vote(VoteType.UPVOTE),
            _vote(VoteType.UPVOTE),
            _vote(VoteType.UPVOTE),
            _vote(VoteType.DOWNVOTE),
        ]

        tally = VoteTally.from_votes(votes)

        assert tally.upvotes == 3
        assert tally.downvotes == 1
        assert tally.score == 2

    def test_order_does_not_matter(self):
        votes = [_vote(VoteType.DOWNVOTE), _vote(VoteType.UPVOTE), _vote(VoteType.UPVOTE)]

        assert VoteTally.from_votes(votes) == VoteTally.from_votes(reversed(votes))

    def test_empty_vote_set(self):
        assert VoteTally.from_votes([]) == VoteTally(upvotes=0, downvotes=0)


class TestEntryVotes:
    """Tests for derived vote counts on entries."""

    def test_counts_are_derived_from_votes(self):
        question = make_question(votes=make_votes(upvotes=3, downvotes=1))

        assert question.upvotes == 3
        assert question.downvotes == 1

    def test_counts_are_serialized(self):
        question = make_question(votes=make_votes(upvotes=1, downvotes=0))

        dumped = question.model_dump()

        assert dumped["upvotes"] == 1
        assert dumped["downvotes"] == 0

    def test_votes_dump_as_list_ordered_by_user(self):
        question = make_question(votes=make_votes(upvotes=2, downvotes=1))

        dumped = question.model_dump()

        voters = [vote["user_id"] for vote in dumped["votes"]]
        assert voters == sorted(voters, key=str)
        assert Question(**dumped) == question

    def test_answer_with_votes_dumps_to_json(self):
        answer = make_answer(
            make_question().id, votes=make_votes(upvotes=1, downvotes=1)
        )

        dumped = json.loads(answer.model_dump_json())

        assert {vote["vote_type"] for vote in dumped["votes"]} == {"upvote", "downvote"}
        assert (dumped["upvotes"], dumped["downvotes"]) == (1, 1)

    def test_one_vote_per_user(self):
        """A user cannot both upvote and downvote the same entry."""
        user_id = UserId(uuid4())

        with pytest.raises(ValidationError):
            make_question(
                votes=frozenset(
                    {
                        Vote(user_id=user_id, vote_type=VoteType.UPVOTE),
                        Vote(user_id=user_id, vote_type=VoteType.DOWNVOTE),
                    }
                )
            )

    def test_with_changes_revalidates(self):
        question = make_question()

        with pytest.raises(ValidationError):
            question.with_changes(title="")


class TestQuestionModel:
    """Tests for Question and QuestionPatch."""

    def test_title_is_required(self):
        with pytest.raises(ValidationError):
            Question(id=QuestionId(uuid4()), title="")

    def test_title_length_limit(self):
        with pytest.raises(ValidationError):
            Question(id=QuestionId(uuid4()), title="x" * 301)

    def test_patch_changes_only_supplied_non_null_fields(self):
        patch = QuestionPatch(title="New", body=None)

        assert patch.changes() == {"title": "New"}


class TestTagModel:
    """Tests for Tag and TagName."""

    def test_tag_id_is_its_name(self):
        assert Tag(name=TagName("C++")).id == "C++"

    def test_blank_tag_name_is_rejected(self):
        with pytest.raises(ValidationError):
            TagName("   ")

    def test_tag_name_length_limit(self):
        with pytest.raises(ValidationError):
            TagName("x" * 65)


class TestTagName:
    """Tests for tag name validation."""

    def test_punctuation_is_allowed(self):
        assert TagName("C++").root == "C++"

    @pytest.mark.parametrize("name", ["", "   ", "C/C++", "x" * 65])
    def test_invalid_names_are_rejected(self, name):
        with pytest.raises(ValidationError):
            TagName(name)
