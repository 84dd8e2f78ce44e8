"""
Quiz Session — runs rounds of questions and keeps the running score.

A round is a fixed batch of questions, each allowed two attempts. After each
round the player may continue; totals carry over from round to round. When
the player stops, the final score is checked against the ledger's record
and then appended to the ledger.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from geo_trivia.errors import ValidationError
from geo_trivia.ledger.store import ScoreLedger
from geo_trivia.models.question import Question
from geo_trivia.models.score import Score
from geo_trivia.questions.generator import QuestionSource
from geo_trivia.quiz.port import TextPort

logger = logging.getLogger(__name__)

QUESTIONS_PER_ROUND = 10

YES = "yes"
NO = "no"

CONGRATS_MESSAGE = (
    "CONGRATULATIONS! You are the new high score with an average of "
    "{new:.2f} points per game; the previous record was {previous:.2f} "
    "points per game on {when}."
)


class QuestionState(str, Enum):
    AWAITING_FIRST_ATTEMPT = "awaiting_first_attempt"
    AWAITING_SECOND_ATTEMPT = "awaiting_second_attempt"
    SCORED = "scored"


class AttemptOutcome(str, Enum):
    FIRST = "first"     # Correct on the first attempt
    SECOND = "second"   # Correct on the second attempt
    MISSED = "missed"   # Wrong on both attempts


class QuizSession:
    """
    One continuous play session.

    States per question:
      AWAITING_FIRST_ATTEMPT → (AWAITING_SECOND_ATTEMPT) → SCORED
    """

    def __init__(
        self,
        questions: QuestionSource,
        ledger: ScoreLedger,
        port: TextPort,
        on_new_record: Callable[[], None],
    ):
        if on_new_record is None or not callable(on_new_record):
            raise ValidationError("The on_new_record callback must be callable.")
        self.questions = questions
        self.ledger = ledger
        self.port = port
        self.on_new_record = on_new_record
        self._state: Optional[QuestionState] = None

    @property
    def state(self) -> Optional[QuestionState]:
        """State of the current (or last) question; None before the first."""
        return self._state

    def play(self) -> Score:
        """Play rounds until the player declines another; return the final score."""
        score = Score.empty()
        while True:
            score = self.play_round(score)
            self.report_score(score)
            if not self.ask_play_again():
                break
        self.finish(score)
        return score

    def play_round(self, carry: Score) -> Score:
        """Ask one round of questions and fold the results into `carry`."""
        tally: Dict[AttemptOutcome, int] = {outcome: 0 for outcome in AttemptOutcome}
        for number in range(1, QUESTIONS_PER_ROUND + 1):
            outcome = self.ask_question(number, self.questions.generate())
            tally[outcome] += 1

        score = Score(
            games_played=carry.games_played + 1,
            correct_first=carry.correct_first + tally[AttemptOutcome.FIRST],
            correct_second=carry.correct_second + tally[AttemptOutcome.SECOND],
            incorrect=carry.incorrect + tally[AttemptOutcome.MISSED],
        )
        logger.info(
            "Round %d finished: %d points total, %.2f per game",
            score.games_played, score.total_points, score.average_per_game,
        )
        return score

    def ask_question(self, number: int, question: Question) -> AttemptOutcome:
        """Present a question and grade up to two attempts."""
        self.port.write_line()
        self.port.write_line(f"Question {number}: {question.prompt}")
        self._state = QuestionState.AWAITING_FIRST_ATTEMPT
        outcome = AttemptOutcome.MISSED

        while self._state is not QuestionState.SCORED:
            attempt = self.port.read_line()

            if question.matches(attempt):
                outcome = (
                    AttemptOutcome.FIRST
                    if self._state is QuestionState.AWAITING_FIRST_ATTEMPT
                    else AttemptOutcome.SECOND
                )
                self.port.write_line("CORRECT")
                self._state = QuestionState.SCORED
            elif self._state is QuestionState.AWAITING_FIRST_ATTEMPT:
                self.port.write_line("INCORRECT.")
                self.port.write_line("Try again, last guess:")
                self._state = QuestionState.AWAITING_SECOND_ATTEMPT
            else:
                self.port.write_line("INCORRECT.")
                self.port.write_line(f"The correct answer is: {question.answer}")
                outcome = AttemptOutcome.MISSED
                self._state = QuestionState.SCORED

        return outcome

    def report_score(self, score: Score) -> None:
        """Write the cumulative score breakdown."""
        games = score.games_played
        self.port.write_line()
        self.port.write_line("--- Session Score Report ---")
        self.port.write_line(f"- {games} game{'' if games == 1 else 's'} played")
        self.port.write_line(
            f"- {score.correct_first} correct answers on the first attempt"
        )
        self.port.write_line(
            f"- {score.correct_second} correct answers on the second attempt"
        )
        self.port.write_line(
            f"- {score.incorrect} incorrect answers on two attempts each"
        )
        self.port.write_line("----------------------------")

    def ask_play_again(self) -> bool:
        """Ask until the player answers Yes or No (any case)."""
        self.port.write_line()
        self.port.write_line("Do you want to play another round? (Yes/No)")
        while True:
            reply = self.port.read_line().strip().lower()
            if reply == YES:
                return True
            if reply == NO:
                return False
            self.port.write_line("Invalid input. Please enter 'Yes' or 'No'.")

    def finish(self, score: Score) -> None:
        """
        Congratulate a new record holder, then persist the final score.
        The score is appended exactly once, even if the callback fails.
        """
        try:
            if self.ledger.is_new_high_score(score):
                self.port.write_line(
                    CONGRATS_MESSAGE.format(
                        new=score.average_per_game,
                        previous=self.ledger.highest_average,
                        when=self.ledger.highest_timestamp,
                    )
                )
                logger.info("New high score: %.2f", score.average_per_game)
                self.on_new_record()
        finally:
            self.ledger.append(score)
        logger.info(
            "Session ended after %d games with %d points",
            score.games_played, score.total_points,
        )
