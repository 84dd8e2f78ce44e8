"""
Geo Trivia command line — builds a session from configuration and plays it.

The multi-game menu that normally launches this quiz lives elsewhere; this
entry point runs the geography quiz on its own.
"""

import argparse
import logging
import random
import sys
from typing import Callable, List, Optional

from geo_trivia.errors import ConfigurationError
from geo_trivia.ledger.store import ScoreLedger
from geo_trivia.models.config import TriviaConfig
from geo_trivia.questions.generator import QuestionGenerator
from geo_trivia.quiz.port import ConsolePort, TextPort
from geo_trivia.quiz.session import QuizSession
from geo_trivia.world_model.repository import WorldRepository

logger = logging.getLogger(__name__)


def create_session(
    config: Optional[TriviaConfig] = None,
    port: Optional[TextPort] = None,
    on_new_record: Optional[Callable[[], None]] = None,
    repository: Optional[WorldRepository] = None,
    ledger: Optional[ScoreLedger] = None,
) -> QuizSession:
    """Wire a QuizSession from config, loading whatever was not supplied."""
    config = config or TriviaConfig()

    world = repository or WorldRepository.from_directory(config.data_dir)
    scores = ledger or ScoreLedger(config.ledger_path)
    rng = random.Random(config.seed) if config.seed is not None else random.Random()

    return QuizSession(
        questions=QuestionGenerator(world, rng=rng),
        ledger=scores,
        port=port or ConsolePort(),
        on_new_record=on_new_record or (lambda: logger.info("New record set")),
    )


def build_parser() -> argparse.ArgumentParser:
    defaults = TriviaConfig()
    ap = argparse.ArgumentParser(
        prog="geo-trivia",
        description="Terminal geography trivia: capitals, countries and facts.",
    )
    ap.add_argument("--data-dir", default=defaults.data_dir,
                    help="directory holding the a.txt … z.txt country files")
    ap.add_argument("--scores", default=defaults.ledger_path,
                    help="score history file (created on first save)")
    ap.add_argument("--seed", type=int, default=None,
                    help="seed the question draw for a reproducible game")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="log loading details and question draws")
    return ap


def main(argv: Optional[List[str]] = None, port: Optional[TextPort] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = TriviaConfig(
        data_dir=args.data_dir,
        ledger_path=args.scores,
        seed=args.seed,
    )

    try:
        session = create_session(config, port=port)
    except ConfigurationError as e:
        print(f"Cannot start the quiz: {e}", file=sys.stderr)
        return 2

    try:
        session.play()
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed before the session finished; score not saved")
        print("Quiz ended before the session finished.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
