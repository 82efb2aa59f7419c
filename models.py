from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

Answer = Union[str, List[str], None]


class QuestionType(str, enum.Enum):
    """Question kinds a mock test can contain."""

    SINGLE_CORRECT = "singleCorrect"
    MULTIPLE_CORRECT = "multipleCorrect"
    NUMERICAL = "numerical"

    @classmethod
    def values(cls) -> List[str]:
        return [item.value for item in cls]


@dataclass
class Question:
    id: int
    type: str  # QuestionType value; anything else scores 0 / 0
    user_answer: Answer = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Question:
        return cls(
            id=int(data["id"]),
            type=data.get("type", ""),
            user_answer=data.get("userAnswer"),
        )


@dataclass
class Marks:
    correct: int
    incorrect: int
    unanswered: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Marks:
        return cls(
            correct=data["correct"],
            incorrect=data["incorrect"],
            unanswered=data["unanswered"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "correct": self.correct,
            "incorrect": self.incorrect,
            "unanswered": self.unanswered,
        }


@dataclass
class AnswerKeyEntry:
    type: str
    correct_answer: Union[str, List[str]]
    marks: Marks | None = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AnswerKeyEntry:
        marks = data.get("marks")
        correct_answer = data["correctAnswer"]
        if isinstance(correct_answer, list):
            correct_answer = list(correct_answer)
        return cls(
            type=data["type"],
            correct_answer=correct_answer,
            marks=Marks.from_dict(marks) if isinstance(marks, dict) else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "type": self.type,
            "correctAnswer": self.correct_answer,
        }
        if self.marks is not None:
            payload["marks"] = self.marks.to_dict()
        return payload


@dataclass
class PartialCorrect:
    """Partial-credit tiers; holds marks in a scheme and counts in a result."""

    all_correct_options_three_marked: int = 0
    two_correct_options_marked: int = 0
    one_correct_option_marked: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PartialCorrect:
        return cls(
            all_correct_options_three_marked=data["allCorrectOptionsThreeMarked"],
            two_correct_options_marked=data["twoCorrectOptionsMarked"],
            one_correct_option_marked=data["oneCorrectOptionMarked"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "allCorrectOptionsThreeMarked": self.all_correct_options_three_marked,
            "twoCorrectOptionsMarked": self.two_correct_options_marked,
            "oneCorrectOptionMarked": self.one_correct_option_marked,
        }


@dataclass
class SingleCorrectScheme:
    global_: bool
    default: Marks

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SingleCorrectScheme:
        return cls(global_=bool(data["global"]), default=Marks.from_dict(data["default"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"global": self.global_, "default": self.default.to_dict()}


@dataclass
class MultipleCorrectScheme:
    all_correct: int
    partial_correct: PartialCorrect
    any_incorrect: int
    unanswered: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MultipleCorrectScheme:
        return cls(
            all_correct=data["allCorrect"],
            partial_correct=PartialCorrect.from_dict(data["partialCorrect"]),
            any_incorrect=data["anyIncorrect"],
            unanswered=data["unanswered"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "allCorrect": self.all_correct,
            "partialCorrect": self.partial_correct.to_dict(),
            "anyIncorrect": self.any_incorrect,
            "unanswered": self.unanswered,
        }


@dataclass
class MarkingScheme:
    single_correct: SingleCorrectScheme
    multiple_correct: MultipleCorrectScheme
    numerical: Marks

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> MarkingScheme:
        return cls(
            single_correct=SingleCorrectScheme.from_dict(data["singleCorrect"]),
            multiple_correct=MultipleCorrectScheme.from_dict(data["multipleCorrect"]),
            numerical=Marks.from_dict(data["numerical"]),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "singleCorrect": self.single_correct.to_dict(),
            "multipleCorrect": self.multiple_correct.to_dict(),
            "numerical": self.numerical.to_dict(),
        }


@dataclass
class SectionScore:
    """Bucket for singleCorrect and numerical questions."""

    score: int = 0
    max_score: int = 0
    correct: int = 0
    incorrect: int = 0
    unanswered: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "maxScore": self.max_score,
            "correct": self.correct,
            "incorrect": self.incorrect,
            "unanswered": self.unanswered,
        }


@dataclass
class MultipleCorrectSectionScore:
    score: int = 0
    max_score: int = 0
    all_correct: int = 0
    partial_correct: PartialCorrect = field(default_factory=PartialCorrect)
    any_incorrect: int = 0
    unanswered: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "maxScore": self.max_score,
            "allCorrect": self.all_correct,
            "partialCorrect": self.partial_correct.to_dict(),
            "anyIncorrect": self.any_incorrect,
            "unanswered": self.unanswered,
        }


@dataclass
class SectionScores:
    single_correct: SectionScore = field(default_factory=SectionScore)
    multiple_correct: MultipleCorrectSectionScore = field(
        default_factory=MultipleCorrectSectionScore
    )
    numerical: SectionScore = field(default_factory=SectionScore)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "singleCorrect": self.single_correct.to_dict(),
            "multipleCorrect": self.multiple_correct.to_dict(),
            "numerical": self.numerical.to_dict(),
        }


@dataclass
class QuestionScore:
    score: int
    max_score: int
    is_correct: bool
    correct_answer: Union[str, List[str]]
    user_answer: Answer

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "maxScore": self.max_score,
            "isCorrect": self.is_correct,
            "correctAnswer": self.correct_answer,
            "userAnswer": self.user_answer,
        }


@dataclass
class ScoreResult:
    total_score: int = 0
    total_max_score: int = 0
    section_scores: SectionScores = field(default_factory=SectionScores)
    question_scores: Dict[int, QuestionScore] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalScore": self.total_score,
            "totalMaxScore": self.total_max_score,
            "sectionScores": self.section_scores.to_dict(),
            "questionScores": {
                question_id: item.to_dict()
                for question_id, item in self.question_scores.items()
            },
        }


@dataclass
class RunnerQuestion:
    """Question state held by the test runner while an attempt is in progress."""

    id: int
    type: str
    user_answer: Answer = None
    is_marked_for_review: bool = False
    is_visited: bool = False
    time_spent: int = 0
    visit_count: int = 0
    screenshot: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type,
            "userAnswer": self.user_answer,
            "isMarkedForReview": self.is_marked_for_review,
            "isVisited": self.is_visited,
            "timeSpent": self.time_spent,
            "visitCount": self.visit_count,
            "screenshot": self.screenshot,
        }
