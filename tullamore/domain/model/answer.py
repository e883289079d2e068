"""Answer entity.

Answers respond to a question and are deleted along with it.
"""

from tullamore.domain.model.entry import Entry
from tullamore.domain.value import AnswerId, QuestionId


class Answer(Entry):
    """Answer to a question.

    At most one answer per question is the chosen answer; AnswerService
    maintains that rule when an answer is chosen.
    """

    id: AnswerId
    question_id: QuestionId
    chosen_answer: bool = False
