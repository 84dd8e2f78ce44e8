"""
Corpus Loader — turns the per-letter country files into Country records.

One file per letter a–z (w and x have no file), each holding blocks of:

    CountryName:CapitalCity
    Fact one.
    Fact two.
    Fact three.

Behavioral Contract:
- A missing or unreadable file is logged and skipped
- A malformed block is logged and skipped; the rest of its file still loads
- Later duplicate names overwrite earlier ones
- Only an empty result is fatal (ConfigurationError)
"""

import logging
import string
from pathlib import Path
from typing import Dict, Iterator, List

from pydantic import ValidationError as RecordValidationError

from geo_trivia.errors import ConfigurationError, DataFormatError, ValidationError
from geo_trivia.models.world import FACTS_PER_COUNTRY, Country
from geo_trivia.parsing.blocks import expect_line_count, split_blocks, split_pair

logger = logging.getLogger(__name__)

SKIPPED_LETTERS = "wx"
FILE_EXTENSION = ".txt"


def corpus_letters() -> Iterator[str]:
    """Letters that have a corpus file, in load order."""
    for letter in string.ascii_lowercase:
        if letter not in SKIPPED_LETTERS:
            yield letter


def parse_country_block(block: List[str]) -> Country:
    """
    Build a Country from one block.

    Raises DataFormatError for a bad layout and pydantic's ValidationError
    for blank fields; both are ValueErrors.
    """
    expect_line_count(block, 1 + FACTS_PER_COUNTRY)
    name, capital = split_pair(block[0])
    return Country(name=name, capital=capital, facts=tuple(block[1:]))


class CorpusLoader:
    """Loads every country file found in a directory."""

    def __init__(self, directory: str):
        if directory is None or not str(directory).strip():
            raise ValidationError("Corpus directory path cannot be blank.")
        self.directory = Path(directory)
        self.files_loaded = 0

    def file_for(self, letter: str) -> Path:
        return self.directory / f"{letter}{FILE_EXTENSION}"

    def load(self) -> Dict[str, Country]:
        """Load all letter files. Raises ConfigurationError if nothing loads."""
        countries: Dict[str, Country] = {}
        self.files_loaded = 0

        for letter in corpus_letters():
            path = self.file_for(letter)
            try:
                with open(path, "r", encoding="utf-8") as f:
                    text = f.read()
            except FileNotFoundError:
                logger.warning("Country data file not found, skipping: %s", path)
                continue
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Could not read country data file %s: %s", path, e)
                continue

            self.files_loaded += 1
            countries.update(self._parse_file(path, text))

        if not countries:
            raise ConfigurationError(
                f"No countries could be loaded from {self.directory}. "
                f"Check the data files and the configured path."
            )

        logger.info(
            "Loaded %d countries from %d files in %s",
            len(countries), self.files_loaded, self.directory,
        )
        return countries

    def _parse_file(self, path: Path, text: str) -> Dict[str, Country]:
        """Parse every block of one file, skipping malformed ones."""
        parsed: Dict[str, Country] = {}
        for number, block in enumerate(split_blocks(text), start=1):
            try:
                country = parse_country_block(block)
            except (DataFormatError, RecordValidationError) as e:
                logger.warning(
                    "Skipping malformed block %d in %s: %s", number, path, e
                )
                continue
            parsed[country.name] = country
        return parsed
