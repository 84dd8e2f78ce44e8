"""Score — cumulative result of a play session."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

POINTS_FIRST_ATTEMPT = 2
POINTS_SECOND_ATTEMPT = 1
POINTS_INCORRECT = 0

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _now() -> datetime:
    return datetime.now().replace(microsecond=0)


class Score(BaseModel):
    """
    Immutable snapshot of a session's running totals.

    A new Score is built at the end of every round; the counters are
    cumulative across all rounds of one continuous session.
    """

    model_config = ConfigDict(frozen=True)

    games_played: int = Field(ge=0)
    correct_first: int = Field(ge=0)
    correct_second: int = Field(ge=0)
    incorrect: int = Field(ge=0)            # Missed on both attempts
    created_at: datetime = Field(default_factory=_now)

    @classmethod
    def empty(cls) -> "Score":
        """The all-zero score a new session starts from."""
        return cls(games_played=0, correct_first=0, correct_second=0, incorrect=0)

    @property
    def total_points(self) -> int:
        return (
            self.correct_first * POINTS_FIRST_ATTEMPT
            + self.correct_second * POINTS_SECOND_ATTEMPT
            + self.incorrect * POINTS_INCORRECT
        )

    @property
    def average_per_game(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.total_points / self.games_played

    @property
    def formatted_timestamp(self) -> str:
        return self.created_at.strftime(TIMESTAMP_FORMAT)
