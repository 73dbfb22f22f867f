"""keyfilter-core -- Keyword filtering and comparison for CSV and Excel tables.

Load a table, pick the columns to search, and keep the rows that contain
your keywords. Or let a reference file supply the keywords.

Quick start::

    from keyfilter_core import analyse_file, compare_files

    result = analyse_file("customers.csv", keywords="paris, lyon")
    print(result["matched_rows"], "of", result["total_rows"], "rows")

    comparison = compare_files("watchlist.xlsx", "customers.csv")
    for row in comparison["preview"]:
        print(row["Keywords found"])
"""

__version__ = "0.3.0"

# Types
from ._types import (
    Dataset,
    FilterConfig,
    FilterMode,
    MatchRecord,
    FilteredRow,
    KeywordInput,
    ColumnSelection,
    AnalysisResult,
    ComparisonResult,
)

# Ingestion
from .ingestion import (
    detect_separator,
    split_line,
    resolve_headers,
    parse_delimited_text,
    build_dataset_from_matrix,
    load_dataset,
)

# Matching
from .matching import (
    extract_keywords,
    parse_keywords,
    join_keywords,
    reconcile_keyword_input,
    filter_rows,
    filter_dataset,
    toggle_column,
    select_columns,
    format_matches,
    export_filtered,
)

# Workflows
from .analysis import analyse_file, compare_files

__all__ = [
    "__version__",
    # Types
    "Dataset",
    "FilterConfig",
    "FilterMode",
    "MatchRecord",
    "FilteredRow",
    "KeywordInput",
    "ColumnSelection",
    "AnalysisResult",
    "ComparisonResult",
    # Ingestion
    "detect_separator",
    "split_line",
    "resolve_headers",
    "parse_delimited_text",
    "build_dataset_from_matrix",
    "load_dataset",
    # Matching
    "extract_keywords",
    "parse_keywords",
    "join_keywords",
    "reconcile_keyword_input",
    "filter_rows",
    "filter_dataset",
    "toggle_column",
    "select_columns",
    "format_matches",
    "export_filtered",
    # Workflows
    "analyse_file",
    "compare_files",
]
