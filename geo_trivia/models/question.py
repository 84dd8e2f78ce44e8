"""Question — a single trivia prompt and its expected answer."""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, field_validator


class QuestionType(IntEnum):
    CAPITAL_TO_COUNTRY = 0  # "What country is {capital} the capital of?"
    COUNTRY_TO_CAPITAL = 1  # "What is the capital city of {country}?"
    FACT_TO_COUNTRY = 2     # "Which country is being described by this fact: ..."


class Question(BaseModel):
    """One question, consumed once by the quiz session."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    answer: str
    type: QuestionType

    @field_validator("prompt", "answer")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def matches(self, attempt: str) -> bool:
        """Case-insensitive comparison, ignoring surrounding whitespace."""
        return attempt.strip().lower() == self.answer.strip().lower()
