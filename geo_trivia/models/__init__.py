"""Geo Trivia data models."""

from geo_trivia.models.config import TriviaConfig
from geo_trivia.models.question import Question, QuestionType
from geo_trivia.models.score import Score
from geo_trivia.models.world import Country

__all__ = [
    "Country",
    "Question",
    "QuestionType",
    "Score",
    "TriviaConfig",
]
