"""Reading and writing the coordinate list and the high-score file."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Optional, Union

Coordinate = tuple[int, int]
PathLike = Union[str, Path]

_INT_RE = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _to_int(text: str) -> int:
    """Parse a 32-bit decimal integer, giving 0 for anything unparsable."""
    if not _INT_RE.fullmatch(text):
        return 0
    value = int(text)
    return value if _INT_MIN <= value <= _INT_MAX else 0


def parse_coordinates(lines: Iterable[str]) -> list[Optional[Coordinate]]:
    """Turn ``"x y"`` lines into coordinate pairs.

    A line that does not split into exactly two parts on a single space
    yields ``None``; it still occupies its place in the spawn sequence.
    Parts that are not integers count as 0.
    """
    result: list[Optional[Coordinate]] = []
    for line in lines:
        parts = line.rstrip("\r\n").split(" ")
        if len(parts) == 2:
            result.append((_to_int(parts[0]), _to_int(parts[1])))
        else:
            result.append(None)
    return result


def load_coordinates(path: PathLike) -> list[Optional[Coordinate]]:
    """Read the spawn coordinates from a text file, one ``"x y"`` per line."""
    with open(path, encoding="utf-8") as handle:
        return parse_coordinates(handle)


def read_high_score(path: PathLike) -> int:
    """Return the score on the last line of the file, or 0 if it is empty."""
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    return _to_int(lines[-1]) if lines else 0


def write_high_score(path: PathLike, score: int) -> None:
    """Replace the score file's contents with ``score``."""
    Path(path).write_text(str(score), encoding="utf-8")