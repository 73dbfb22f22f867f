"""Tests for keyword extraction, reconciliation and the filter engine."""

from keyfilter_core._types import (
    Dataset,
    FilterConfig,
    FilteredRow,
    FilterMode,
    MatchRecord,
)
from keyfilter_core.matching import (
    extract_keywords,
    filter_dataset,
    filter_rows,
    join_keywords,
    parse_keywords,
    reconcile_keyword_input,
)


ROWS = [
    {"Col1": "Une valeur", "Col2": "autre"},
    {"Col1": "Test en majuscule", "Col2": "quelque chose"},
]
HEADERS = ["Col1", "Col2"]


def _config(keywords, columns=HEADERS, case_sensitive=False):
    return FilterConfig(
        keywords=keywords,
        selected_columns=set(columns),
        case_sensitive=case_sensitive,
    )


# ── Keyword extraction ───────────────────────────────────────────────────────


def test_extract_distinct_first_seen_order():
    dataset = Dataset(
        headers=["A", "B"],
        rows=[{"A": "x", "B": "y"}, {"A": "x", "B": "z"}],
    )
    assert extract_keywords(dataset) == ["x", "y", "z"]


def test_extract_trims_and_skips_blanks():
    dataset = Dataset(
        headers=["A", "B"],
        rows=[{"A": "  Paris ", "B": ""}, {"A": "   ", "B": "Paris"}],
    )
    assert extract_keywords(dataset) == ["Paris"]


def test_extract_is_case_exact():
    dataset = Dataset(headers=["A"], rows=[{"A": "Paris"}, {"A": "paris"}])
    assert extract_keywords(dataset) == ["Paris", "paris"]


def test_extract_without_dataset():
    assert extract_keywords(None) == []


# ── Keyword parsing ──────────────────────────────────────────────────────────


def test_parse_keywords():
    assert parse_keywords(" alpha, beta ,,gamma ") == ["alpha", "beta", "gamma"]


def test_parse_only_commas():
    assert parse_keywords(" , ,, ") == []


def test_join_keywords():
    assert join_keywords(["Alpha", "Beta"]) == "Alpha, Beta"


# ── Reconciliation ───────────────────────────────────────────────────────────


def test_reconcile_reverts_to_reference_in_comparison():
    result = reconcile_keyword_input("   ", FilterMode.MATCH_REQUIRED, ["Alpha", "Beta"])
    assert result.text == "Alpha, Beta"
    assert result.keywords == ["Alpha", "Beta"]
    assert result.reverted is True


def test_reconcile_returns_a_copy_of_reference():
    reference = ["Alpha"]
    result = reconcile_keyword_input("", FilterMode.MATCH_REQUIRED, reference)
    result.keywords.append("Beta")
    assert reference == ["Alpha"]


def test_reconcile_keeps_empty_list_in_analysis():
    result = reconcile_keyword_input("  ", FilterMode.SHOW_ALL_ON_EMPTY, ["Alpha"])
    assert result.keywords == []
    assert result.text == "  "
    assert result.reverted is False


def test_reconcile_without_reference_keywords():
    result = reconcile_keyword_input(",", FilterMode.MATCH_REQUIRED, [])
    assert result.keywords == []
    assert result.text == ","


def test_reconcile_uses_typed_keywords():
    result = reconcile_keyword_input("gamma, delta", FilterMode.MATCH_REQUIRED, ["Alpha"])
    assert result.keywords == ["gamma", "delta"]
    assert result.text == "gamma, delta"
    assert result.reverted is False


# ── Filter engine ────────────────────────────────────────────────────────────


class TestFilterRows:
    def test_show_all_on_empty(self):
        filtered = filter_rows(ROWS, HEADERS, _config([]), FilterMode.SHOW_ALL_ON_EMPTY)
        assert [f.row for f in filtered] == ROWS
        assert all(f.matches == [] for f in filtered)

    def test_rows_are_not_copied(self):
        filtered = filter_rows(ROWS, HEADERS, _config([]), FilterMode.SHOW_ALL_ON_EMPTY)
        assert filtered[0].row is ROWS[0]

    def test_match_required_with_empty_keywords(self):
        assert filter_rows(ROWS, HEADERS, _config([]), FilterMode.MATCH_REQUIRED) == []

    def test_match_required_case_insensitive(self):
        filtered = filter_rows(ROWS, HEADERS, _config(["test"]), FilterMode.MATCH_REQUIRED)
        assert len(filtered) == 1
        assert filtered[0].row["Col1"] == "Test en majuscule"
        assert filtered[0].matches == [MatchRecord(keyword="test", header="Col1")]

    def test_case_sensitive_divergence(self):
        strict = filter_rows(
            ROWS, HEADERS, _config(["test"], case_sensitive=True), FilterMode.MATCH_REQUIRED
        )
        loose = filter_rows(
            ROWS, HEADERS, _config(["test"], case_sensitive=False), FilterMode.MATCH_REQUIRED
        )
        assert strict == []
        assert len(loose) == 1

    def test_keyword_keeps_original_casing(self):
        filtered = filter_rows(ROWS, HEADERS, _config(["TEST"]), FilterMode.MATCH_REQUIRED)
        assert filtered[0].matches[0].keyword == "TEST"

    def test_analysis_mode_filters_when_keywords_given(self):
        filtered = filter_rows(ROWS, HEADERS, _config(["autre"]), FilterMode.SHOW_ALL_ON_EMPTY)
        assert len(filtered) == 1
        assert filtered[0].matches == [MatchRecord(keyword="autre", header="Col2")]

    def test_only_selected_columns_searched(self):
        filtered = filter_rows(
            ROWS, HEADERS, _config(["autre"], columns=["Col1"]), FilterMode.MATCH_REQUIRED
        )
        assert filtered == []

    def test_selection_outside_headers_ignored(self):
        filtered = filter_rows(
            ROWS, ["Col1"], _config(["autre"], columns=["Col2"]), FilterMode.MATCH_REQUIRED
        )
        assert filtered == []

    def test_match_order_follows_headers_then_keywords(self):
        rows = [{"A": "alpha beta", "B": "beta"}]
        filtered = filter_rows(
            rows, ["A", "B"], _config(["beta", "alpha"], columns=["B", "A"]),
            FilterMode.MATCH_REQUIRED,
        )
        assert [(m.keyword, m.header) for m in filtered[0].matches] == [
            ("beta", "A"),
            ("alpha", "A"),
            ("beta", "B"),
        ]

    def test_empty_keyword_skipped(self):
        filtered = filter_rows(ROWS, HEADERS, _config([""]), FilterMode.SHOW_ALL_ON_EMPTY)
        assert filtered == []

    def test_none_cells_skipped(self):
        rows = [{"Col1": None, "Col2": "test"}]
        filtered = filter_rows(rows, HEADERS, _config(["test"]), FilterMode.MATCH_REQUIRED)
        assert filtered[0].matches == [MatchRecord(keyword="test", header="Col2")]

    def test_non_string_cells_coerced(self):
        rows = [{"Col1": 1975, "Col2": ""}]
        filtered = filter_rows(rows, HEADERS, _config(["97"]), FilterMode.MATCH_REQUIRED)
        assert len(filtered) == 1

    def test_input_order_preserved(self):
        rows = [{"Col1": "b test"}, {"Col1": "a test"}, {"Col1": "test"}]
        filtered = filter_rows(rows, ["Col1"], _config(["test"], columns=["Col1"]),
                               FilterMode.MATCH_REQUIRED)
        assert [f.row["Col1"] for f in filtered] == ["b test", "a test", "test"]

    def test_default_mode_is_show_all(self):
        assert len(filter_rows(ROWS, HEADERS, _config([]))) == 2


def test_filter_dataset():
    dataset = Dataset(headers=HEADERS, rows=ROWS)
    filtered = filter_dataset(dataset, _config(["valeur"]), FilterMode.MATCH_REQUIRED)
    assert len(filtered) == 1
    assert isinstance(filtered[0], FilteredRow)
