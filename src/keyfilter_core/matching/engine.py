"""Row filtering and match annotation.

Pure functions over in-memory rows. The caller owns the ``FilterConfig`` and
re-runs the engine whenever keywords, selected columns or case sensitivity
change.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from .._types import Dataset, FilterConfig, FilteredRow, FilterMode, MatchRecord


def _row_matches(
    row: Mapping[str, Any],
    columns: Sequence[str],
    keywords: Sequence[str],
    prepared: Sequence[str],
    case_sensitive: bool,
) -> List[MatchRecord]:
    matches: List[MatchRecord] = []
    for header in columns:
        value = row.get(header)
        if value is None:
            continue
        text = str(value) if case_sensitive else str(value).lower()
        for keyword, needle in zip(keywords, prepared):
            if not needle:
                continue
            if needle in text:
                matches.append(MatchRecord(keyword=keyword, header=header))
    return matches


def filter_rows(
    rows: Sequence[Mapping[str, Any]],
    headers: Sequence[str],
    config: FilterConfig,
    mode: FilterMode = FilterMode.SHOW_ALL_ON_EMPTY,
) -> List[FilteredRow]:
    """Filter *rows* by keyword containment within the selected columns.

    Only columns present in both *headers* and ``config.selected_columns``
    are searched, in header order. Each keyword/column hit becomes a
    ``MatchRecord`` carrying the keyword as written in the config.

    Inclusion policy:
        - ``SHOW_ALL_ON_EMPTY`` with no keywords: every row, no matches.
        - Otherwise: only rows with at least one match. In
          ``MATCH_REQUIRED`` mode an empty keyword list keeps nothing.

    Args:
        rows: Row mappings, e.g. ``Dataset.rows``.
        headers: Column order of the rows.
        config: Keywords, selected columns and case sensitivity.
        mode: Row inclusion policy.

    Returns:
        Kept rows in input order, each with its match records. ``row`` is
        the input mapping itself, not a copy.
    """
    keywords = list(config.keywords)

    if not keywords and mode == FilterMode.SHOW_ALL_ON_EMPTY:
        return [FilteredRow.model_construct(row=row, matches=[]) for row in rows]

    columns = [header for header in headers if header in config.selected_columns]
    if config.case_sensitive:
        prepared = keywords
    else:
        prepared = [keyword.lower() for keyword in keywords]

    filtered: List[FilteredRow] = []
    for row in rows:
        matches = _row_matches(row, columns, keywords, prepared, config.case_sensitive)
        if matches:
            filtered.append(FilteredRow.model_construct(row=row, matches=matches))
    return filtered


def filter_dataset(
    dataset: Dataset,
    config: FilterConfig,
    mode: FilterMode = FilterMode.SHOW_ALL_ON_EMPTY,
) -> List[FilteredRow]:
    """Shorthand for ``filter_rows(dataset.rows, dataset.headers, ...)``."""
    return filter_rows(dataset.rows, dataset.headers, config, mode)
