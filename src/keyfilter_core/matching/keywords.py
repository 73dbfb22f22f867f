"""Keyword lists: extraction from a reference dataset and free-text input."""
from __future__ import annotations

from typing import List, Optional, Sequence

from .._types import Dataset, FilterMode, KeywordInput

KEYWORD_SEPARATOR = ","
KEYWORD_JOINER = ", "


def extract_keywords(dataset: Optional[Dataset]) -> List[str]:
    """Collect the distinct non-blank cell values of *dataset*.

    Values are trimmed and kept in first-seen order (row by row, then column
    by column). Case is preserved and equality is exact.
    """
    if dataset is None:
        return []

    seen = set()
    keywords: List[str] = []
    for row in dataset.rows:
        for value in row.values():
            if value is None:
                continue
            text = str(value).strip()
            if text and text not in seen:
                seen.add(text)
                keywords.append(text)
    return keywords


def parse_keywords(text: str) -> List[str]:
    """Split comma-separated keyword text, dropping blank entries."""
    pieces = (piece.strip() for piece in text.split(KEYWORD_SEPARATOR))
    return [piece for piece in pieces if piece]


def join_keywords(keywords: Sequence[str]) -> str:
    """Inverse of :func:`parse_keywords` for display in a keyword box."""
    return KEYWORD_JOINER.join(keywords)


def reconcile_keyword_input(
    raw_text: str,
    mode: FilterMode,
    reference_keywords: Sequence[str] = (),
) -> KeywordInput:
    """Resolve edited keyword text into the effective keyword list.

    In comparison mode, clearing the keyword box falls back to the keywords
    extracted from the reference file, and the returned ``text`` is what the
    box should now display. In every other case the parsed list is used
    as-is (possibly empty) and ``text`` is *raw_text* unchanged.

    Args:
        raw_text: Current content of the keyword box.
        mode: Active filter mode.
        reference_keywords: Keywords extracted from the reference dataset.

    Returns:
        KeywordInput with the effective keywords, display text and whether
        the reference list was restored.
    """
    parsed = parse_keywords(raw_text)

    if not parsed and mode == FilterMode.MATCH_REQUIRED and reference_keywords:
        restored = list(reference_keywords)
        return KeywordInput(keywords=restored, text=join_keywords(restored), reverted=True)

    return KeywordInput(keywords=parsed, text=raw_text, reverted=False)
