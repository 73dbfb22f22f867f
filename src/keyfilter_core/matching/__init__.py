"""keyfilter Matching -- keyword lists, row filtering, and match rendering.

Public API:
    extract_keywords        -- Distinct cell values of a reference dataset
    parse_keywords          -- Comma-separated text to keyword list
    reconcile_keyword_input -- Keyword box edits with reference fallback
    filter_rows             -- Keyword filter with match annotation
    filter_dataset          -- filter_rows over a Dataset
    toggle_column / select_columns -- Column selection with reset-to-all
    format_matches          -- "Keywords found" cell text
    export_filtered         -- Save filtered rows to CSV
"""

from .keywords import (
    extract_keywords,
    parse_keywords,
    join_keywords,
    reconcile_keyword_input,
)

from .engine import filter_rows, filter_dataset

from .selection import (
    select_all_columns,
    toggle_column,
    select_columns,
    seed_reference_keywords,
)

from .render import (
    MATCHES_COLUMN,
    matches_column,
    group_matches,
    format_matches,
    to_records,
    export_filtered,
)

__all__ = [
    # Keywords
    "extract_keywords",
    "parse_keywords",
    "join_keywords",
    "reconcile_keyword_input",
    # Engine
    "filter_rows",
    "filter_dataset",
    # Selection
    "select_all_columns",
    "toggle_column",
    "select_columns",
    "seed_reference_keywords",
    # Render
    "MATCHES_COLUMN",
    "matches_column",
    "group_matches",
    "format_matches",
    "to_records",
    "export_filtered",
]
