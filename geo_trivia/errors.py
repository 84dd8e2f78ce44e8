"""Error taxonomy shared by the loaders, the repository and the quiz session."""


class TriviaError(Exception):
    """Base class for errors raised by the trivia engine."""
    pass


class ConfigurationError(TriviaError):
    """Raised when the corpus yields no countries at all."""
    pass


class ValidationError(TriviaError, ValueError):
    """
    Raised when a component is constructed with invalid arguments.

    Record models (Country, Question, Score, TriviaConfig) raise
    `pydantic.ValidationError` instead. Both are ValueErrors; catch
    ValueError to handle either.
    """
    pass


class DataFormatError(TriviaError, ValueError):
    """
    Raised when a block or a line does not follow its text format.

    Never escapes a loader: the offending block is logged and skipped.
    """
    pass
