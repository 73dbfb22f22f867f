"""Field delimiter detection for delimited text."""

import re
from typing import List

SEPARATOR_CANDIDATES = (";", ",", "\t", "|")
DEFAULT_SEPARATOR = ","
SAMPLE_LINES = 5

LINE_BREAK_RE = re.compile(r"\r?\n")


def detect_separator(text: str) -> str:
    """Guess the field delimiter of *text*.

    Each candidate is scored by the total number of naive split segments over
    the first non-blank lines. A later candidate must strictly beat the
    current best, so ties go to the earlier candidate in
    ``SEPARATOR_CANDIDATES``.

    Args:
        text: Raw delimited text.

    Returns:
        The chosen separator, or ``DEFAULT_SEPARATOR`` for blank input.
    """
    lines: List[str] = [
        line for line in LINE_BREAK_RE.split(text) if line.strip()
    ][:SAMPLE_LINES]

    if not lines:
        return DEFAULT_SEPARATOR

    best_separator = DEFAULT_SEPARATOR
    best_score = -1
    for separator in SEPARATOR_CANDIDATES:
        score = sum(line.count(separator) + 1 for line in lines)
        if score > best_score:
            best_score = score
            best_separator = separator

    return best_separator
