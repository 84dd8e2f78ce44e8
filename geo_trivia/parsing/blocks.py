"""
Block grammar shared by the country corpus and the score ledger.

Both formats are sequences of blocks separated by one or more blank lines.
A block is a fixed number of lines; each line is either free text or a
`Label: value` field.

Behavioral Contract:
- Line endings are normalised (\\r\\n, \\r and \\n are equivalent)
- Trailing whitespace never changes how a file splits into blocks
- A whitespace-only line is a separator, exactly like an empty one
- Field extraction checks the label, never just the position of a colon
"""

from typing import List, Tuple

from geo_trivia.errors import DataFormatError


def split_lines(text: str) -> List[str]:
    """Split text into lines, dropping trailing whitespace from each."""
    return [line.rstrip() for line in text.splitlines()]


def split_blocks(text: str) -> List[List[str]]:
    """Split text into blank-line separated blocks of non-empty lines."""
    blocks: List[List[str]] = []
    current: List[str] = []
    for line in split_lines(text):
        if line.strip():
            current.append(line.strip())
        elif current:
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)
    return blocks


def expect_line_count(block: List[str], count: int) -> None:
    """Raise DataFormatError unless the block has exactly `count` lines."""
    if len(block) != count:
        raise DataFormatError(
            f"expected {count} lines, got {len(block)}"
        )


def split_pair(line: str, separator: str = ":") -> Tuple[str, str]:
    """Split `left<sep>right` on the first separator, trimming both halves."""
    left, sep, right = line.partition(separator)
    if not sep:
        raise DataFormatError(f"missing '{separator}' in line: {line!r}")
    return left.strip(), right.strip()


def parse_labeled_value(line: str, label: str) -> str:
    """Return the trimmed value of a `Label: value` line."""
    found, value = split_pair(line)
    if found != label:
        raise DataFormatError(f"expected label {label!r}, got {found!r}")
    return value


def parse_labeled_int(line: str, label: str) -> int:
    """
    Return the integer value of a `Label: <int>` line.

    The value must be a single non-negative integer token.
    """
    value = parse_labeled_value(line, label)
    tokens = value.split()
    if not tokens:
        raise DataFormatError(f"missing value for {label!r}")
    if len(tokens) > 1:
        raise DataFormatError(f"trailing text after value for {label!r}: {value!r}")
    try:
        number = int(tokens[0])
    except ValueError:
        raise DataFormatError(
            f"value for {label!r} is not an integer: {tokens[0]!r}"
        ) from None
    if number < 0:
        raise DataFormatError(f"value for {label!r} is negative: {number}")
    return number
