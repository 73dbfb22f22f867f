"""Column selection and keyword seeding for filter configurations."""
from __future__ import annotations

import logging
from typing import Iterable, Sequence, Set

from .._types import ColumnSelection, FilterConfig

logger = logging.getLogger(__name__)


def select_all_columns(headers: Sequence[str]) -> Set[str]:
    """Selection used right after a dataset is imported."""
    return set(headers)


def toggle_column(
    selected: Iterable[str],
    header: str,
    checked: bool,
    headers: Sequence[str],
) -> ColumnSelection:
    """Include or exclude one column from the search.

    Unchecking the last selected column resets the selection to every header
    and flags ``reset`` so the caller can tell the user.
    """
    columns = set(selected)
    if checked:
        columns.add(header)
    else:
        columns.discard(header)

    if not columns:
        logger.warning("No column selected, resetting selection to all %d columns", len(headers))
        return ColumnSelection(selected_columns=select_all_columns(headers), reset=True)

    return ColumnSelection(selected_columns=columns)


def select_columns(headers: Sequence[str], requested: Iterable[str]) -> ColumnSelection:
    """Select the *requested* columns that exist in *headers*.

    An empty request selects everything. Unknown names are ignored; if none
    of the requested names exist the selection resets to every header.
    """
    requested = list(requested)
    if not requested:
        return ColumnSelection(selected_columns=select_all_columns(headers))

    known = set(headers)
    unknown = [name for name in requested if name not in known]
    if unknown:
        logger.warning("Ignoring unknown columns: %s", ", ".join(unknown))

    columns = {name for name in requested if name in known}
    if not columns:
        logger.warning("No column selected, resetting selection to all %d columns", len(headers))
        return ColumnSelection(selected_columns=select_all_columns(headers), reset=True)

    return ColumnSelection(selected_columns=columns)


def seed_reference_keywords(
    config: FilterConfig,
    reference_keywords: Sequence[str],
) -> FilterConfig:
    """Use the reference keywords when the config has none of its own."""
    if reference_keywords and not config.keywords:
        return config.model_copy(update={"keywords": list(reference_keywords)})
    return config
