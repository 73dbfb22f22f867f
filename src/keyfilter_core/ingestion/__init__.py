"""keyfilter Ingestion -- separator detection, line splitting, dataset building."""

from .separator import detect_separator, SEPARATOR_CANDIDATES, DEFAULT_SEPARATOR
from .splitter import split_line
from .builder import (
    resolve_headers,
    cell_to_text,
    parse_delimited_text,
    build_dataset_from_matrix,
)
from .loader import read_text_file, read_workbook_matrix, load_dataset

__all__ = [
    "detect_separator",
    "SEPARATOR_CANDIDATES",
    "DEFAULT_SEPARATOR",
    "split_line",
    "resolve_headers",
    "cell_to_text",
    "parse_delimited_text",
    "build_dataset_from_matrix",
    "read_text_file",
    "read_workbook_matrix",
    "load_dataset",
]
