"""Pydantic models."""
from api.models.analysis import AttemptSummaryRequest, AttemptTestConfig, RunnerQuestionPayload
from api.models.scoring import (
    AnswerKeyIssueModel,
    AnswerKeyValidationResponse,
    MarkingSchemeModel,
    MarksModel,
    QuestionPayload,
    ScoreRequest,
)
from api.models.tests import QuestionTypes, TestConfig

__all__ = [
    "AnswerKeyIssueModel",
    "AnswerKeyValidationResponse",
    "AttemptSummaryRequest",
    "AttemptTestConfig",
    "MarkingSchemeModel",
    "MarksModel",
    "QuestionPayload",
    "QuestionTypes",
    "RunnerQuestionPayload",
    "ScoreRequest",
    "TestConfig",
]
