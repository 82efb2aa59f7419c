"""Scoring-related Pydantic models."""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from models import MarkingScheme, Marks, Question


class MarksModel(BaseModel):
    """Marks awarded for each outcome of a question."""

    correct: int
    incorrect: int
    unanswered: int

    def to_marks(self) -> Marks:
        return Marks(
            correct=self.correct,
            incorrect=self.incorrect,
            unanswered=self.unanswered,
        )


class SingleCorrectSchemeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    global_: bool = Field(..., alias="global")
    default: MarksModel


class PartialCorrectModel(BaseModel):
    allCorrectOptionsThreeMarked: int
    twoCorrectOptionsMarked: int
    oneCorrectOptionMarked: int


class MultipleCorrectSchemeModel(BaseModel):
    allCorrect: int
    partialCorrect: PartialCorrectModel
    anyIncorrect: int
    unanswered: int


class MarkingSchemeModel(BaseModel):
    """Complete marking scheme; every field is required."""

    singleCorrect: SingleCorrectSchemeModel
    multipleCorrect: MultipleCorrectSchemeModel
    numerical: MarksModel

    def to_scheme(self) -> MarkingScheme:
        return MarkingScheme.from_dict(self.model_dump(by_alias=True))


class QuestionPayload(BaseModel):
    """Answered question as reported by the test runner."""

    id: int = Field(..., gt=0)
    type: str
    userAnswer: str | list[str] | None = None

    def to_question(self) -> Question:
        return Question(id=self.id, type=self.type, user_answer=self.userAnswer)


class ScoreRequest(BaseModel):
    """Model for scoring an attempt against an answer key."""

    questions: list[QuestionPayload]
    answerKey: Any
    markingScheme: MarkingSchemeModel | None = None
    questionMarks: dict[int, MarksModel] | None = None


class AnswerKeyIssueModel(BaseModel):
    questionId: str | None = None
    field: str | None = None
    message: str


class AnswerKeyValidationResponse(BaseModel):
    valid: bool
    errors: list[AnswerKeyIssueModel]
