"""File loading: text files and Excel workbooks into datasets."""

import logging
import os
import zipfile
from pathlib import Path
from typing import Any, List, Optional, Tuple

from .._types import Dataset
from .builder import build_dataset_from_matrix, parse_delimited_text

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = {".csv", ".txt", ".tsv"}
WORKBOOK_EXTENSIONS = {".xlsx", ".xlsm"}

DEFAULT_ENCODING = "utf-8-sig"


def _resolve_path(file_path: str) -> Path:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    return path


def read_text_file(file_path: str, encoding: Optional[str] = None) -> str:
    """Read a text file.

    Args:
        file_path: Path to the file.
        encoding: Text encoding. Defaults to ``KEYFILTER_TEXT_ENCODING`` from
            the environment, then ``utf-8-sig``.

    Raises:
        FileNotFoundError: If file doesn't exist.
    """
    path = _resolve_path(file_path)
    encoding = encoding or os.getenv("KEYFILTER_TEXT_ENCODING", DEFAULT_ENCODING)
    return path.read_text(encoding=encoding)


def read_workbook_matrix(file_path: str) -> List[Optional[Tuple[Any, ...]]]:
    """Read the first worksheet of an Excel workbook as a matrix of cell values.

    Rows whose cells are all empty are returned as ``None`` so the dataset
    builder treats them as absent.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ImportError: If openpyxl is not installed.
        ValueError: If the file is not a readable workbook or has no worksheets.
    """
    path = _resolve_path(file_path)

    try:
        import openpyxl
    except ImportError:
        raise ImportError(
            "openpyxl not installed. Run: pip install openpyxl"
        )

    from openpyxl.utils.exceptions import InvalidFileException

    try:
        wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    except (zipfile.BadZipFile, InvalidFileException) as exc:
        raise ValueError(f"Cannot read workbook: {file_path}") from exc

    try:
        if not wb.worksheets:
            raise ValueError(f"Workbook has no worksheets: {file_path}")
        ws = wb.worksheets[0]
        matrix: List[Optional[Tuple[Any, ...]]] = []
        for row in ws.iter_rows(values_only=True):
            if all(cell is None for cell in row):
                matrix.append(None)
            else:
                matrix.append(row)
    finally:
        wb.close()

    # Leading blank rows would otherwise turn into a header row of fallbacks.
    while matrix and matrix[0] is None:
        matrix.pop(0)

    return matrix


def load_dataset(file_path: str, encoding: Optional[str] = None) -> Dataset:
    """Load a CSV/text file or an Excel workbook into a ``Dataset``.

    Args:
        file_path: Path to a ``.csv``, ``.txt``, ``.tsv``, ``.xlsx`` or
            ``.xlsm`` file.
        encoding: Text encoding for delimited files.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If the extension is not supported.
    """
    ext = Path(file_path).suffix.lower()

    if ext in TEXT_EXTENSIONS:
        dataset = parse_delimited_text(read_text_file(file_path, encoding), source=file_path)
    elif ext in WORKBOOK_EXTENSIONS:
        dataset = build_dataset_from_matrix(read_workbook_matrix(file_path), source=file_path)
    else:
        raise ValueError(f"Unsupported file type: {ext or file_path}")

    logger.info(
        "Loaded %s: %d rows, %d columns", file_path, len(dataset.rows), len(dataset.headers)
    )
    return dataset
