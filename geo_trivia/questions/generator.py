"""
Question Generator — draws randomized trivia questions from the repository.

Each draw picks a country uniformly, then a question type uniformly, then
(for fact questions only) a fact uniformly. The generator owns a single
random source for its whole lifetime, so a seeded source replays the same
sequence of questions.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional, Protocol

from geo_trivia.models.question import Question, QuestionType
from geo_trivia.models.world import FACTS_PER_COUNTRY, Country
from geo_trivia.world_model.repository import WorldRepository

logger = logging.getLogger(__name__)


class QuestionSource(Protocol):
    """Protocol for question generation — what the quiz session consumes."""

    def generate(self) -> Question: ...


class QuestionGenerator:
    """Builds one Question per call from a WorldRepository."""

    def __init__(
        self,
        repository: WorldRepository,
        rng: Optional[random.Random] = None,
    ):
        self.repository = repository
        self.rng = rng or random.Random()
        self._builders: Dict[QuestionType, Callable[[Country], Question]] = {}
        self._register_default_builders()

    def _register_default_builders(self) -> None:
        """Register one prompt builder per question type."""
        self._builders[QuestionType.CAPITAL_TO_COUNTRY] = self._capital_to_country
        self._builders[QuestionType.COUNTRY_TO_CAPITAL] = self._country_to_capital
        self._builders[QuestionType.FACT_TO_COUNTRY] = self._fact_to_country

    def generate(self) -> Question:
        """Draw a country and a question type, then build the question."""
        countries: List[Country] = list(self.repository.countries.values())
        country = self.rng.choice(countries)
        question_type = QuestionType(self.rng.randrange(len(QuestionType)))
        question = self._builders[question_type](country)
        logger.debug("Drew %s question about %s", question_type.name, country.name)
        return question

    # --- Builders ---

    def _capital_to_country(self, country: Country) -> Question:
        return Question(
            prompt=f"What country is {country.capital} the capital of?",
            answer=country.name,
            type=QuestionType.CAPITAL_TO_COUNTRY,
        )

    def _country_to_capital(self, country: Country) -> Question:
        return Question(
            prompt=f"What is the capital city of {country.name}?",
            answer=country.capital,
            type=QuestionType.COUNTRY_TO_CAPITAL,
        )

    def _fact_to_country(self, country: Country) -> Question:
        fact = country.facts[self.rng.randrange(FACTS_PER_COUNTRY)]
        return Question(
            prompt=f"Which country is being described by this fact: {fact}",
            answer=country.name,
            type=QuestionType.FACT_TO_COUNTRY,
        )
