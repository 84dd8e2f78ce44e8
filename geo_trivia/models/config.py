"""Runtime configuration for a trivia session."""

from typing import Optional

from pydantic import BaseModel


class TriviaConfig(BaseModel):
    """Where the corpus and the score ledger live."""

    data_dir: str = "data/countries"
    ledger_path: str = "score.txt"
    seed: Optional[int] = None              # Seeds the question draw when set
