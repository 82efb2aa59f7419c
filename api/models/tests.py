"""Test configuration Pydantic models."""
from typing import Literal

from pydantic import BaseModel, field_validator, model_validator

from models import QuestionType


class QuestionTypes(BaseModel):
    """Question types enabled in a basic configuration."""

    singleCorrect: bool = True
    multipleCorrect: bool = True
    numerical: bool = True

    def enabled(self) -> list[str]:
        """Enabled types in fixed section order."""
        flags = [
            (QuestionType.SINGLE_CORRECT, self.singleCorrect),
            (QuestionType.MULTIPLE_CORRECT, self.multipleCorrect),
            (QuestionType.NUMERICAL, self.numerical),
        ]
        return [question_type.value for question_type, enabled in flags if enabled]


class TestConfig(BaseModel):
    """Configuration for a practice test."""

    __test__ = False

    numQuestions: int = 30
    timeInMinutes: int = 180
    configType: Literal["basic", "advanced"] = "basic"
    questionTypes: QuestionTypes | None = None
    specificQuestionTypes: list[str] | None = None
    isScreenshotMode: bool = False
    screenshots: list[str | None] | None = None
    useServerStorage: bool = False

    @field_validator("numQuestions")
    @classmethod
    def _check_num_questions(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Number of questions must be greater than 0")
        return value

    @field_validator("timeInMinutes")
    @classmethod
    def _check_time(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Time must be greater than 0 minutes")
        return value

    @model_validator(mode="after")
    def _check_layout(self) -> "TestConfig":
        if self.configType == "basic":
            if self.questionTypes is None:
                self.questionTypes = QuestionTypes()
            if not self.questionTypes.enabled():
                raise ValueError("Please select at least one question type")
        else:
            types = self.specificQuestionTypes or []
            if len(types) != self.numQuestions:
                raise ValueError("Specify a question type for every question")
            invalid = [item for item in types if item not in QuestionType.values()]
            if invalid:
                raise ValueError(f"Unknown question type: {invalid[0]}")
        if self.isScreenshotMode:
            uploaded = [item for item in self.screenshots or [] if item is not None]
            if not uploaded:
                raise ValueError("Please upload at least one screenshot")
        return self
