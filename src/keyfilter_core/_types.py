"""Shared result types for the keyfilter-core library.

All library functions return Python objects (dicts or Pydantic models).
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Set

from pydantic import BaseModel, Field


class FilterMode(str, Enum):
    """Row inclusion policy used by the filter engine.

    ``SHOW_ALL_ON_EMPTY`` is the analysis behaviour (no keywords, no filtering).
    ``MATCH_REQUIRED`` is the comparison behaviour (only matching rows).
    """

    SHOW_ALL_ON_EMPTY = "show-all-on-empty"
    MATCH_REQUIRED = "match-required"


# -- Ingestion types --

class Dataset(BaseModel):
    """Parsed tabular content of one imported file."""
    headers: List[str] = Field(default_factory=list)
    rows: List[Dict[str, str]] = Field(default_factory=list)
    separator: Optional[str] = None  # None for workbook sources
    source: Optional[str] = None


# -- Matching types --

class FilterConfig(BaseModel):
    """Caller-owned filter settings, re-applied on every change."""
    keywords: List[str] = Field(default_factory=list)
    selected_columns: Set[str] = Field(default_factory=set)
    case_sensitive: bool = False


class MatchRecord(BaseModel):
    """One keyword that hit one column of a row."""
    keyword: str
    header: str


class FilteredRow(BaseModel):
    """A row kept by the filter engine, with the matches that kept it."""
    row: Dict[str, Any]
    matches: List[MatchRecord] = Field(default_factory=list)


class KeywordInput(BaseModel):
    """Outcome of reconciling free keyword text against the reference list."""
    keywords: List[str] = Field(default_factory=list)
    text: str = ""
    reverted: bool = False


class ColumnSelection(BaseModel):
    """Columns the engine may search, and whether the selection was reset."""
    selected_columns: Set[str] = Field(default_factory=set)
    reset: bool = False


# -- Workflow types --

class AnalysisResult(BaseModel):
    """Result of filtering one file."""
    file: str
    headers: List[str]
    total_rows: int
    matched_rows: int
    keywords: List[str]
    selected_columns: List[str]
    columns_reset: bool = False
    case_sensitive: bool = False
    preview: List[Dict[str, Any]] = Field(default_factory=list)
    saved_to: Optional[str] = None


class ComparisonResult(AnalysisResult):
    """Result of filtering a target file with keywords from a reference file."""
    reference_file: str
    reference_keywords: int = 0
    keyword_text: str = ""
    keywords_reverted: bool = False
