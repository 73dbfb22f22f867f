"""Dataset construction from delimited text or a decoded cell matrix.

Both entry points produce the same ``Dataset`` shape, so matching and
rendering never need to know where the rows came from. Cell values are
coerced to text here and nowhere else.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Any, Dict, List, Optional, Sequence

from .._types import Dataset
from .separator import LINE_BREAK_RE, detect_separator
from .splitter import split_line

logger = logging.getLogger(__name__)

FALLBACK_HEADER = "Column {index}"


def resolve_headers(cells: Sequence[Any]) -> List[str]:
    """Turn raw header cells into header names.

    Blank cells become ``"Column <n>"`` (1-based). Duplicates are kept as-is.
    """
    headers = []
    for index, cell in enumerate(cells):
        name = cell_to_text(cell).strip()
        headers.append(name or FALLBACK_HEADER.format(index=index + 1))
    return headers


def cell_to_text(value: Any) -> str:
    """Coerce one workbook cell value to its display text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def _zip_row(headers: List[str], values: Sequence[str]) -> Dict[str, str]:
    # Fields beyond the header count are dropped; missing ones become "".
    row: Dict[str, str] = {}
    for index, header in enumerate(headers):
        row[header] = values[index] if index < len(values) else ""
    return row


def parse_delimited_text(text: str, source: Optional[str] = None) -> Dataset:
    """Parse delimited text into a ``Dataset``.

    The first non-blank line is the header row. Blank lines are ignored and
    the separator is detected once from the whole text.

    Args:
        text: Decoded file content.
        source: Optional path recorded on the dataset.

    Returns:
        Dataset with headers, rows and the detected separator. Blank text
        yields an empty dataset.
    """
    lines = [line.strip() for line in LINE_BREAK_RE.split(text)]
    lines = [line for line in lines if line]

    if not lines:
        return Dataset(source=source)

    separator = detect_separator(text)
    headers = resolve_headers(split_line(lines[0], separator))
    rows = [_zip_row(headers, split_line(line, separator)) for line in lines[1:]]

    logger.debug(
        "Parsed %d rows x %d columns (separator=%r)",
        len(rows), len(headers), separator,
    )
    return Dataset(headers=headers, rows=rows, separator=separator, source=source)


def build_dataset_from_matrix(
    matrix: Sequence[Optional[Sequence[Any]]],
    source: Optional[str] = None,
) -> Dataset:
    """Build a ``Dataset`` from a decoded worksheet matrix.

    Args:
        matrix: Row 0 holds the header cells, the remaining entries hold body
            rows. ``None`` entries are absent rows and are skipped.
        source: Optional path recorded on the dataset.

    Returns:
        Dataset with every cell converted to text.
    """
    if not matrix:
        return Dataset(source=source)

    headers = resolve_headers(matrix[0] or [])
    rows = []
    for raw_row in matrix[1:]:
        if raw_row is None:
            continue
        rows.append(_zip_row(headers, [cell_to_text(cell) for cell in raw_row]))

    logger.debug("Built %d rows x %d columns from cell matrix", len(rows), len(headers))
    return Dataset(headers=headers, rows=rows, source=source)
