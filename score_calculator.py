"""Score calculation for a finished mock test attempt.

``calculate_score`` is a pure function: the same questions, answer key and
marking scheme always produce the same ``ScoreResult``. Questions without an
answer key entry are left out of the result. A question of an unknown type
is recorded with 0 / 0 and touches no section.
"""
from __future__ import annotations

import copy
import logging
from typing import Iterable, Mapping

from models import (
    AnswerKeyEntry,
    Marks,
    MarkingScheme,
    MultipleCorrectScheme,
    MultipleCorrectSectionScore,
    PartialCorrect,
    Question,
    QuestionScore,
    QuestionType,
    ScoreResult,
    SectionScore,
    SingleCorrectScheme,
)

logger = logging.getLogger(__name__)

DEFAULT_MARKING_SCHEME = MarkingScheme(
    single_correct=SingleCorrectScheme(
        global_=True,
        default=Marks(correct=4, incorrect=-1, unanswered=0),
    ),
    multiple_correct=MultipleCorrectScheme(
        all_correct=4,
        partial_correct=PartialCorrect(
            all_correct_options_three_marked=3,
            two_correct_options_marked=2,
            one_correct_option_marked=1,
        ),
        any_incorrect=-2,
        unanswered=0,
    ),
    numerical=Marks(correct=4, incorrect=0, unanswered=0),
)


def default_marking_scheme() -> MarkingScheme:
    """Fresh copy of the default scheme, safe for callers to edit."""
    return copy.deepcopy(DEFAULT_MARKING_SCHEME)


def _score_exact(
    user_answer: object,
    correct_answer: object,
    marks: Marks,
    section: SectionScore,
) -> tuple[int, bool]:
    """Shared rule for single-correct and numerical questions."""
    section.max_score += marks.correct
    if user_answer is None:
        section.unanswered += 1
        return marks.unanswered, False
    # Literal comparison: "9.80" does not match "9.8".
    if isinstance(user_answer, str) and user_answer == correct_answer:
        section.correct += 1
        return marks.correct, True
    section.incorrect += 1
    return marks.incorrect, False


def _score_multiple(
    user_answer: object,
    correct_answer: object,
    scheme: MultipleCorrectScheme,
    section: MultipleCorrectSectionScore,
) -> tuple[int, bool]:
    section.max_score += scheme.all_correct

    if user_answer is None or (isinstance(user_answer, list) and not user_answer):
        section.unanswered += 1
        return scheme.unanswered, False

    if not isinstance(user_answer, list) or not isinstance(correct_answer, list):
        # Answer shape does not match the key; no outcome applies.
        return 0, False

    marked = set(user_answer)
    correct_set = set(correct_answer)
    partial = scheme.partial_correct
    counts = section.partial_correct

    if not marked <= correct_set:
        section.any_incorrect += 1
        return scheme.any_incorrect, False

    if len(marked) == len(correct_set):
        section.all_correct += 1
        return scheme.all_correct, True
    if len(correct_set) == 4 and len(marked) == 3:
        counts.all_correct_options_three_marked += 1
        return partial.all_correct_options_three_marked, False
    if len(correct_set) >= 3 and len(marked) == 2:
        counts.two_correct_options_marked += 1
        return partial.two_correct_options_marked, False
    if len(correct_set) >= 2 and len(marked) == 1:
        counts.one_correct_option_marked += 1
        return partial.one_correct_option_marked, False

    # Remaining partial selections (e.g. 3 of 5) earn the anyIncorrect marks.
    section.any_incorrect += 1
    return scheme.any_incorrect, False


def calculate_score(
    questions: Iterable[Question],
    answer_key: Mapping[int, AnswerKeyEntry],
    marking_scheme: MarkingScheme,
) -> ScoreResult:
    """Score every question that has an answer key entry."""
    result = ScoreResult()
    sections = result.section_scores
    question_count = 0

    for question in questions:
        question_count += 1
        key = answer_key.get(question.id)
        if key is None:
            logger.debug("No answer key entry for question %s, skipping", question.id)
            continue

        if question.type == QuestionType.SINGLE_CORRECT:
            single = marking_scheme.single_correct
            marks = key.marks if not single.global_ and key.marks else single.default
            score, is_correct = _score_exact(
                question.user_answer, key.correct_answer, marks, sections.single_correct
            )
            sections.single_correct.score += score
            max_score = marks.correct
        elif question.type == QuestionType.MULTIPLE_CORRECT:
            score, is_correct = _score_multiple(
                question.user_answer,
                key.correct_answer,
                marking_scheme.multiple_correct,
                sections.multiple_correct,
            )
            sections.multiple_correct.score += score
            max_score = marking_scheme.multiple_correct.all_correct
        elif question.type == QuestionType.NUMERICAL:
            score, is_correct = _score_exact(
                question.user_answer,
                key.correct_answer,
                marking_scheme.numerical,
                sections.numerical,
            )
            sections.numerical.score += score
            max_score = marking_scheme.numerical.correct
        else:
            logger.debug(
                "Unknown type %r for question %s, scoring 0", question.type, question.id
            )
            score, is_correct, max_score = 0, False, 0

        result.question_scores[question.id] = QuestionScore(
            score=score,
            max_score=max_score,
            is_correct=is_correct,
            correct_answer=key.correct_answer,
            user_answer=question.user_answer,
        )

    result.total_score = (
        sections.single_correct.score
        + sections.multiple_correct.score
        + sections.numerical.score
    )
    result.total_max_score = (
        sections.single_correct.max_score
        + sections.multiple_correct.max_score
        + sections.numerical.max_score
    )
    logger.debug(
        "Scored %d of %d questions: %s / %s",
        len(result.question_scores),
        question_count,
        result.total_score,
        result.total_max_score,
    )
    return result
