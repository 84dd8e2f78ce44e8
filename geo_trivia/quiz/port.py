"""Text ports — the line-based I/O surface the quiz session talks to."""

from typing import Iterable, List, Protocol


class TextPort(Protocol):
    """Read one line of player input, write one line of output."""

    def read_line(self) -> str: ...

    def write_line(self, text: str = "") -> None: ...


class ConsolePort:
    """TextPort bound to the process's stdin/stdout."""

    def read_line(self) -> str:
        return input()

    def write_line(self, text: str = "") -> None:
        print(text)


class ScriptedPort:
    """
    TextPort fed from a fixed list of answers; records everything written.
    Raises EOFError once the script runs out, like a closed stdin.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: List[str] = list(lines)
        self.output: List[str] = []

    def read_line(self) -> str:
        if not self._lines:
            raise EOFError("scripted input exhausted")
        return self._lines.pop(0)

    def write_line(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def remaining(self) -> int:
        return len(self._lines)

    @property
    def transcript(self) -> str:
        return "\n".join(self.output)
