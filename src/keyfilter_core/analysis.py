"""High-level workflows: analyse one file, or compare a file against a reference.

Each call loads its inputs fresh and returns a plain dict, so callers can
re-run it whenever a keyword, column or case setting changes.
"""
from __future__ import annotations

import logging
from typing import Any, Collection, Dict, List, Optional, Sequence

from ._types import AnalysisResult, ComparisonResult, FilterConfig, FilterMode
from .ingestion import load_dataset
from .matching import (
    export_filtered,
    extract_keywords,
    filter_dataset,
    parse_keywords,
    reconcile_keyword_input,
    select_columns,
    to_records,
)

logger = logging.getLogger(__name__)


def analyse_file(
    file_path: str,
    keywords: str = "",
    columns: Optional[Sequence[str]] = None,
    case_sensitive: bool = False,
    preview_rows: int = 10,
    output_path: str = "",
) -> Dict[str, Any]:
    """Filter one file by keywords.

    With no keywords every row is kept.

    Args:
        file_path: CSV/text file or Excel workbook.
        keywords: Comma-separated keywords.
        columns: Columns to search (default: all).
        case_sensitive: Match keywords case-sensitively.
        preview_rows: Number of matched rows included in ``preview``.
        output_path: If provided, save all matched rows to this CSV.

    Returns:
        Dict with headers, row counts, effective settings and a preview.
    """
    dataset = load_dataset(file_path)
    selection = select_columns(dataset.headers, columns or [])
    config = FilterConfig(
        keywords=parse_keywords(keywords),
        selected_columns=selection.selected_columns,
        case_sensitive=case_sensitive,
    )

    filtered = filter_dataset(dataset, config, FilterMode.SHOW_ALL_ON_EMPTY)
    logger.info("Analysed %s: %d of %d rows kept", file_path, len(filtered), len(dataset.rows))

    result = AnalysisResult(
        file=file_path,
        headers=dataset.headers,
        total_rows=len(dataset.rows),
        matched_rows=len(filtered),
        keywords=config.keywords,
        selected_columns=_ordered(dataset.headers, config.selected_columns),
        columns_reset=selection.reset,
        case_sensitive=case_sensitive,
        preview=to_records(filtered[:preview_rows], dataset.headers),
    )
    if output_path:
        result.saved_to = export_filtered(filtered, dataset.headers, output_path)

    return result.model_dump()


def compare_files(
    reference_path: str,
    target_path: str,
    keywords: str = "",
    columns: Optional[Sequence[str]] = None,
    case_sensitive: bool = False,
    preview_rows: int = 10,
    output_path: str = "",
) -> Dict[str, Any]:
    """Keep the rows of *target_path* that contain a reference keyword.

    Keywords default to every distinct cell value of the reference file.
    Explicit *keywords* replace them; blank keyword text falls back to the
    reference keywords.

    Args:
        reference_path: File whose cell values seed the keyword list.
        target_path: File to filter.
        keywords: Comma-separated keywords overriding the reference list.
        columns: Target columns to search (default: all).
        case_sensitive: Match keywords case-sensitively.
        preview_rows: Number of matched rows included in ``preview``.
        output_path: If provided, save all matched rows to this CSV.

    Returns:
        Dict with the analysis fields plus reference keyword details.
    """
    reference = load_dataset(reference_path)
    reference_keywords = extract_keywords(reference)
    logger.info("Extracted %d keywords from %s", len(reference_keywords), reference_path)

    target = load_dataset(target_path)
    selection = select_columns(target.headers, columns or [])

    keyword_input = reconcile_keyword_input(
        keywords, FilterMode.MATCH_REQUIRED, reference_keywords
    )
    config = FilterConfig(
        keywords=keyword_input.keywords,
        selected_columns=selection.selected_columns,
        case_sensitive=case_sensitive,
    )

    filtered = filter_dataset(target, config, FilterMode.MATCH_REQUIRED)
    logger.info("Compared %s: %d of %d rows matched", target_path, len(filtered), len(target.rows))

    result = ComparisonResult(
        file=target_path,
        reference_file=reference_path,
        headers=target.headers,
        total_rows=len(target.rows),
        matched_rows=len(filtered),
        keywords=config.keywords,
        reference_keywords=len(reference_keywords),
        keyword_text=keyword_input.text,
        keywords_reverted=keyword_input.reverted,
        selected_columns=_ordered(target.headers, config.selected_columns),
        columns_reset=selection.reset,
        case_sensitive=case_sensitive,
        preview=to_records(filtered[:preview_rows], target.headers),
    )
    if output_path:
        result.saved_to = export_filtered(filtered, target.headers, output_path)

    return result.model_dump()


def _ordered(headers: Sequence[str], selected: Collection[str]) -> List[str]:
    return [header for header in dict.fromkeys(headers) if header in selected]
