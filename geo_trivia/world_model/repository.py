"""
World Repository — the read-only set of countries a session draws from.

Built by: CorpusLoader
Queried by: QuestionGenerator
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from geo_trivia.corpus.loader import CorpusLoader
from geo_trivia.errors import ValidationError
from geo_trivia.models.world import Country


class WorldRepository:
    """
    Immutable mapping of country name to Country.
    Constructed once per game session; never modified afterwards.
    """

    def __init__(self, countries: Optional[Mapping[str, Country]]):
        if countries is None:
            raise ValidationError("The country map cannot be None.")
        if not countries:
            raise ValidationError(
                "The country map cannot be empty; at least one country "
                "must be loaded."
            )
        self._countries: Dict[str, Country] = dict(countries)

    @classmethod
    def from_directory(cls, directory: str) -> "WorldRepository":
        """Load the corpus in `directory` and wrap it."""
        return cls(CorpusLoader(directory).load())

    @property
    def countries(self) -> Mapping[str, Country]:
        """Read-only view of all countries keyed by name."""
        return MappingProxyType(self._countries)

    def get(self, name: str) -> Optional[Country]:
        """Get a specific country by name."""
        return self._countries.get(name)

    def names(self) -> List[str]:
        """All country names, in load order."""
        return list(self._countries)

    def __len__(self) -> int:
        return len(self._countries)

    def __contains__(self, name: object) -> bool:
        return name in self._countries
