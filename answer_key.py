"""Answer key validation and parsing.

Answer keys arrive as user-uploaded JSON, so every document is checked
structurally before the scorer sees it. A single bad entry rejects the
whole document.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, replace
from typing import Any, Mapping

from models import AnswerKeyEntry, Marks, QuestionType

logger = logging.getLogger(__name__)

MARK_FIELDS = ("correct", "incorrect", "unanswered")

SAMPLE_ANSWER_KEY: dict[str, dict[str, Any]] = {
    "1": {
        "type": "singleCorrect",
        "correctAnswer": "A",
        "marks": {"correct": 4, "incorrect": -1, "unanswered": 0},
    },
    "2": {"type": "singleCorrect", "correctAnswer": "B"},
    "3": {"type": "multipleCorrect", "correctAnswer": ["A", "C", "D"]},
    "4": {"type": "multipleCorrect", "correctAnswer": ["B", "D"]},
    "5": {"type": "numerical", "correctAnswer": "9.8"},
}


@dataclass(frozen=True)
class AnswerKeyIssue:
    question_id: str | None
    field: str | None
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "questionId": self.question_id,
            "field": self.field,
            "message": self.message,
        }


class InvalidAnswerKeyError(ValueError):
    """Raised when a document that failed validation is parsed."""

    def __init__(self, issues: list[AnswerKeyIssue]):
        self.issues = issues
        summary = issues[0].message if issues else "Invalid answer key"
        super().__init__(summary)


# Plain decimal or exponent literal; no underscores, no inf/nan spellings.
NUMERIC_ID = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")


def _parse_question_id(raw: object) -> float | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        if not NUMERIC_ID.match(raw):
            return None
        value = float(raw)
    else:
        return None
    if not math.isfinite(value):
        return None
    return value


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _entry_issue(question_id: str, question: object) -> AnswerKeyIssue | None:
    """Return the first rule this entry breaks, or None."""
    if _parse_question_id(question_id) is None:
        return AnswerKeyIssue(question_id, None, "Question id must be a number")

    if not isinstance(question, Mapping):
        return AnswerKeyIssue(question_id, None, "Entry must be an object")

    if "type" not in question or "correctAnswer" not in question:
        missing = "type" if "type" not in question else "correctAnswer"
        return AnswerKeyIssue(question_id, missing, f"Missing {missing}")

    question_type = question["type"]
    if not isinstance(question_type, str) or question_type not in QuestionType.values():
        return AnswerKeyIssue(
            question_id,
            "type",
            f"Type must be one of {', '.join(QuestionType.values())}",
        )

    correct_answer = question["correctAnswer"]
    if question_type == QuestionType.MULTIPLE_CORRECT:
        if (
            not isinstance(correct_answer, list)
            or not correct_answer
            or not all(isinstance(option, str) for option in correct_answer)
        ):
            return AnswerKeyIssue(
                question_id,
                "correctAnswer",
                "correctAnswer must be a non-empty list of options",
            )
    elif not isinstance(correct_answer, str):
        return AnswerKeyIssue(
            question_id, "correctAnswer", "correctAnswer must be a string"
        )

    marks = question.get("marks")
    if marks is not None:
        if not isinstance(marks, Mapping):
            return AnswerKeyIssue(question_id, "marks", "marks must be an object")
        for name in MARK_FIELDS:
            if name not in marks:
                return AnswerKeyIssue(question_id, f"marks.{name}", f"Missing marks.{name}")
            if not _is_number(marks[name]):
                return AnswerKeyIssue(
                    question_id, f"marks.{name}", f"marks.{name} must be a number"
                )
    return None


def answer_key_errors(candidate: object) -> list[AnswerKeyIssue]:
    """List every problem found in an answer key document."""
    if not isinstance(candidate, Mapping):
        return [AnswerKeyIssue(None, None, "Answer key must be an object")]
    if not candidate:
        return [AnswerKeyIssue(None, None, "Answer key has no questions")]

    issues = []
    for question_id, question in candidate.items():
        issue = _entry_issue(str(question_id), question)
        if issue is not None:
            issues.append(issue)
    return issues


def validate_answer_key(candidate: object) -> bool:
    return not answer_key_errors(candidate)


def parse_answer_key(document: object) -> dict[int, AnswerKeyEntry]:
    """Validate a raw document and convert it to entries keyed by question id."""
    issues = answer_key_errors(document)
    if issues:
        raise InvalidAnswerKeyError(issues)

    answer_key: dict[int, AnswerKeyEntry] = {}
    for raw_id, question in document.items():
        value = _parse_question_id(raw_id)
        if value is None or not value.is_integer():
            # Never matches a question id.
            logger.debug("Dropping answer key entry with non-integral id %r", raw_id)
            continue
        answer_key[int(value)] = AnswerKeyEntry.from_dict(question)
    return answer_key


def apply_question_marks(
    answer_key: Mapping[int, AnswerKeyEntry],
    overrides: Mapping[int, Marks],
) -> dict[int, AnswerKeyEntry]:
    """Attach per-question marks to single-correct entries."""
    updated = dict(answer_key)
    for question_id, marks in overrides.items():
        entry = updated.get(question_id)
        if entry is None or entry.type != QuestionType.SINGLE_CORRECT:
            continue
        updated[question_id] = replace(entry, marks=marks)
    return updated


def answer_key_to_document(answer_key: Mapping[int, AnswerKeyEntry]) -> dict[str, Any]:
    return {str(question_id): entry.to_dict() for question_id, entry in answer_key.items()}
