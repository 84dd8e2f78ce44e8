"""Tests for core data models."""

from datetime import datetime

import pytest

from geo_trivia.errors import ValidationError
from geo_trivia.models import (
    Country,
    Question,
    QuestionType,
    Score,
    TriviaConfig,
)
from geo_trivia.world_model.repository import WorldRepository


def _make_country(**overrides) -> Country:
    fields = dict(
        name="Canada",
        capital="Ottawa",
        facts=(
            "It has the longest coastline of any country.",
            "Its flag features a red maple leaf.",
            "It has two official languages.",
        ),
    )
    fields.update(overrides)
    return Country(**fields)


class TestCountry:
    def test_create_country(self):
        country = _make_country()
        assert country.name == "Canada"
        assert country.capital == "Ottawa"
        assert len(country.facts) == 3

    def test_fields_are_trimmed(self):
        country = _make_country(name="  Canada ", capital=" Ottawa", facts=(" a ", "b", "c "))
        assert country.name == "Canada"
        assert country.capital == "Ottawa"
        assert country.facts == ("a", "b", "c")

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError):
            _make_country(name="   ")

    def test_blank_capital_rejected(self):
        with pytest.raises(ValueError):
            _make_country(capital="")

    def test_wrong_fact_count_rejected(self):
        with pytest.raises(ValueError):
            _make_country(facts=("one", "two"))
        with pytest.raises(ValueError):
            _make_country(facts=("one", "two", "three", "four"))

    def test_blank_fact_rejected(self):
        with pytest.raises(ValueError):
            _make_country(facts=("one", " ", "three"))

    def test_country_is_immutable(self):
        country = _make_country()
        with pytest.raises(Exception):
            country.name = "Mexico"


class TestQuestion:
    def test_matching_ignores_case_and_whitespace(self):
        question = Question(
            prompt="What country is Ottawa the capital of?",
            answer="Canada",
            type=QuestionType.CAPITAL_TO_COUNTRY,
        )
        assert question.matches(" Canada ") is True
        assert question.matches("canada") is True
        assert question.matches("CANADA\n") is True
        assert question.matches("Canad") is False
        assert question.matches("") is False

    def test_type_from_int(self):
        question = Question(prompt="p", answer="a", type=2)
        assert question.type is QuestionType.FACT_TO_COUNTRY

    def test_type_out_of_range(self):
        with pytest.raises(ValueError):
            Question(prompt="p", answer="a", type=3)

    def test_blank_answer_rejected(self):
        with pytest.raises(ValueError):
            Question(prompt="p", answer="  ", type=0)


class TestScore:
    def test_points_and_average(self):
        score = Score(games_played=5, correct_first=3, correct_second=2, incorrect=0)
        assert score.total_points == 8
        assert score.average_per_game == pytest.approx(1.6)

    def test_incorrect_answers_are_worth_nothing(self):
        score = Score(games_played=2, correct_first=4, correct_second=3, incorrect=13)
        assert score.total_points == 2 * 4 + 3
        assert score.average_per_game == pytest.approx(5.5)

    def test_zero_games_average_is_zero(self):
        assert Score.empty().average_per_game == 0.0
        odd = Score(games_played=0, correct_first=3, correct_second=1, incorrect=0)
        assert odd.average_per_game == 0.0

    def test_negative_counters_rejected(self):
        for field in ("games_played", "correct_first", "correct_second", "incorrect"):
            values = dict(games_played=1, correct_first=1, correct_second=1, incorrect=1)
            values[field] = -1
            with pytest.raises(ValueError):
                Score(**values)

    def test_formatted_timestamp(self):
        score = Score(
            games_played=1,
            correct_first=0,
            correct_second=0,
            incorrect=10,
            created_at=datetime(2025, 10, 31, 9, 5, 7),
        )
        assert score.formatted_timestamp == "2025-10-31 09:05:07"

    def test_default_timestamp_has_no_microseconds(self):
        assert Score.empty().created_at.microsecond == 0


class TestTriviaConfig:
    def test_defaults(self):
        config = TriviaConfig()
        assert config.data_dir == "data/countries"
        assert config.ledger_path == "score.txt"
        assert config.seed is None


class TestErrorTaxonomy:
    def test_record_and_component_errors_share_value_error(self):
        with pytest.raises(ValueError):
            _make_country(capital="   ")
        with pytest.raises(ValueError):
            Score(games_played=-1, correct_first=0, correct_second=0, incorrect=0)
        with pytest.raises(ValueError):
            WorldRepository({})

    def test_component_error_is_package_error(self):
        with pytest.raises(ValidationError):
            WorldRepository(None)
