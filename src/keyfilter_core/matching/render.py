"""Presentation helpers: the "Keywords found" column and CSV export."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd

from .._types import FilteredRow, MatchRecord

MATCHES_COLUMN = "Keywords found"


def matches_column(headers: Sequence[str]) -> str:
    """Name of the matches column, suffixed when a data header already uses it."""
    taken = set(headers)
    name = MATCHES_COLUMN
    suffix = 2
    while name in taken:
        name = f"{MATCHES_COLUMN} ({suffix})"
        suffix += 1
    return name


def group_matches(matches: Sequence[MatchRecord]) -> Dict[str, List[str]]:
    """Group match records by keyword, listing each column once."""
    grouped: Dict[str, List[str]] = {}
    for match in matches:
        headers = grouped.setdefault(match.keyword, [])
        if match.header not in headers:
            headers.append(match.header)
    return grouped


def format_matches(matches: Sequence[MatchRecord]) -> str:
    """Render matches as ``"keyword (col1, col2)"`` lines."""
    return "\n".join(
        f"{keyword} ({', '.join(headers)})"
        for keyword, headers in group_matches(matches).items()
    )


def to_records(
    filtered: Sequence[FilteredRow],
    headers: Sequence[str],
) -> List[Dict[str, Any]]:
    """Flatten filtered rows into dicts with a trailing matches column."""
    column = matches_column(headers)
    records = []
    for item in filtered:
        record = {header: item.row.get(header, "") for header in headers}
        record[column] = format_matches(item.matches)
        records.append(record)
    return records


def export_filtered(
    filtered: Sequence[FilteredRow],
    headers: Sequence[str],
    output_path: str | Path,
) -> str:
    """Write filtered rows (plus the matches column) to a CSV file.

    Returns:
        The path written to.
    """
    columns = list(dict.fromkeys(list(headers) + [matches_column(headers)]))
    df = pd.DataFrame(to_records(filtered, headers), columns=columns)
    out = Path(output_path)
    df.to_csv(out, index=False)
    return str(out)
