"""Country — one entry of the geography corpus."""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator

FACTS_PER_COUNTRY = 3


class Country(BaseModel):
    """A country, its capital and exactly three facts. Immutable once loaded."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str                               # e.g., "Canada"
    capital: str                            # e.g., "Ottawa"
    facts: Tuple[str, ...]                  # Ordered, exactly FACTS_PER_COUNTRY

    @field_validator("name", "capital")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("facts")
    @classmethod
    def _three_facts(cls, facts: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(facts) != FACTS_PER_COUNTRY:
            raise ValueError(
                f"expected {FACTS_PER_COUNTRY} facts, got {len(facts)}"
            )
        stripped = tuple(f.strip() for f in facts)
        if any(not f for f in stripped):
            raise ValueError("facts must not be blank")
        return stripped
