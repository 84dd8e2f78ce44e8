"""
Score Ledger — append-only history of finished sessions.

Every session that ends appends one Score. The ledger answers a single
question for the quiz: does this session beat the best average ever recorded?

Entry format (6 lines, entries separated by a blank line):

    Date and Time: 2025-10-31 14:05:09
    Games Played: 5
    Correct First Attempts: 3
    Correct Second Attempts: 2
    Incorrect Attempts: 0
    Total Score: 8 points

Behavioral Contract:
- Append-only. No entry is ever modified or deleted.
- A malformed entry is dropped on load; the rest of the file still loads.
- A missing file is an empty ledger.
- A failed save is logged; the score stays in memory for this process.
- A new high score must be strictly greater than the best stored average.
- Not safe for concurrent writers.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import ValidationError as RecordValidationError

from geo_trivia.errors import DataFormatError
from geo_trivia.models.score import TIMESTAMP_FORMAT, Score
from geo_trivia.parsing.blocks import (
    expect_line_count,
    parse_labeled_int,
    parse_labeled_value,
    split_blocks,
)

logger = logging.getLogger(__name__)

LINES_PER_ENTRY = 6

DATE_LABEL = "Date and Time"
GAMES_LABEL = "Games Played"
FIRST_LABEL = "Correct First Attempts"
SECOND_LABEL = "Correct Second Attempts"
INCORRECT_LABEL = "Incorrect Attempts"
TOTAL_LABEL = "Total Score"


def format_score_entry(score: Score) -> str:
    """Render a Score as its 6-line ledger entry (newline-terminated)."""
    lines = [
        f"{DATE_LABEL}: {score.formatted_timestamp}",
        f"{GAMES_LABEL}: {score.games_played}",
        f"{FIRST_LABEL}: {score.correct_first}",
        f"{SECOND_LABEL}: {score.correct_second}",
        f"{INCORRECT_LABEL}: {score.incorrect}",
        f"{TOTAL_LABEL}: {score.total_points} points",
    ]
    return "\n".join(lines) + "\n"


def parse_score_entry(lines: List[str]) -> Score:
    """
    Parse one 6-line ledger entry back into a Score.

    The total line must carry its label but its value is not checked
    against the counters; it is derived, not stored state.
    """
    expect_line_count(lines, LINES_PER_ENTRY)
    stamp = parse_labeled_value(lines[0], DATE_LABEL)
    try:
        created_at = datetime.strptime(stamp, TIMESTAMP_FORMAT)
    except ValueError:
        raise DataFormatError(f"unreadable timestamp: {stamp!r}") from None

    games = parse_labeled_int(lines[1], GAMES_LABEL)
    first = parse_labeled_int(lines[2], FIRST_LABEL)
    second = parse_labeled_int(lines[3], SECOND_LABEL)
    incorrect = parse_labeled_int(lines[4], INCORRECT_LABEL)
    parse_labeled_value(lines[5], TOTAL_LABEL)

    return Score(
        games_played=games,
        correct_first=first,
        correct_second=second,
        incorrect=incorrect,
        created_at=created_at,
    )


class ScoreLedger:
    """
    Append-only score history backed by a text file.
    The whole file is read once on construction; appends go to both the
    file and the in-memory history.
    """

    def __init__(self, path: str = "score.txt"):
        self.path = Path(path)
        self._scores: List[Score] = self._load()

    def _load(self) -> List[Score]:
        """Read every well-formed entry from the backing file."""
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read score history %s: %s", self.path, e)
            return []

        scores = []
        for number, block in enumerate(split_blocks(text), start=1):
            try:
                scores.append(parse_score_entry(block))
            except (DataFormatError, RecordValidationError) as e:
                logger.warning(
                    "Dropping malformed score entry %d in %s: %s",
                    number, self.path, e,
                )
        logger.info("Loaded %d score entries from %s", len(scores), self.path)
        return scores

    def append(self, score: Score) -> Score:
        """
        Append a score to the ledger. I/O failures are logged, not raised;
        the score is kept in memory either way.
        """
        entry = format_score_entry(score)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            padding = self._missing_separator()
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(padding)
                f.write(entry)
                f.write("\n")
        except OSError as e:
            logger.warning("Failed to save score to %s: %s", self.path, e)
        self._scores.append(score)
        return score

    def _missing_separator(self) -> str:
        """Newlines needed so the next entry starts after a blank line."""
        if not self.path.exists():
            return ""
        with open(self.path, "rb") as f:
            f.seek(0, os.SEEK_END)
            size = f.tell()
            f.seek(max(0, size - 4))
            tail = f.read().replace(b"\r\n", b"\n")
        if not tail or tail.endswith(b"\n\n"):
            return ""
        if tail.endswith(b"\n"):
            return "\n"
        return "\n\n"

    @property
    def history(self) -> Tuple[Score, ...]:
        """All scores in append order."""
        return tuple(self._scores)

    def count(self) -> int:
        """Total number of scores in the ledger."""
        return len(self._scores)

    def best(self) -> Optional[Score]:
        """The entry with the highest average; the earliest one on ties."""
        if not self._scores:
            return None
        return max(self._scores, key=lambda s: s.average_per_game)

    @property
    def highest_average(self) -> float:
        best = self.best()
        return best.average_per_game if best else 0.0

    @property
    def highest_timestamp(self) -> str:
        best = self.best()
        return best.formatted_timestamp if best else ""

    def is_new_high_score(self, score: Score) -> bool:
        """True iff the score's average strictly beats every stored average."""
        return score.average_per_game > self.highest_average
