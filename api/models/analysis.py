"""Attempt analysis Pydantic models."""
from pydantic import BaseModel, Field


class RunnerQuestionPayload(BaseModel):
    """Question state captured by the runner at submission."""

    id: int = Field(..., gt=0)
    type: str
    userAnswer: str | list[str] | None = None
    isMarkedForReview: bool = False
    isVisited: bool = False
    timeSpent: int = Field(0, ge=0)
    visitCount: int = Field(0, ge=0)


class AttemptTestConfig(BaseModel):
    """Part of the saved test configuration the summary needs; other keys are ignored."""

    timeInMinutes: int | None = Field(None, gt=0)


class AttemptSummaryRequest(BaseModel):
    """Model for summarising a submitted attempt."""

    questions: list[RunnerQuestionPayload]
    totalTestTime: int = Field(0, ge=0)
    testConfig: AttemptTestConfig | None = None

    def time_limit_seconds(self) -> int | None:
        if self.testConfig is None or not self.testConfig.timeInMinutes:
            return None
        return self.testConfig.timeInMinutes * 60
