"""Shared test fixtures for keyfilter-core."""

import csv

import pytest


@pytest.fixture
def customers_csv(tmp_path):
    """Semicolon-separated customer file with a quoted field."""
    path = tmp_path / "customers.csv"
    rows = [
        ["Nom", "Ville", "Notes"],
        ["Alice Martin", "Paris", "Client fidèle"],
        ["Bob Durand", "Lyon", "Paris; Lyon; Nice"],
        ["Chloé Petit", "Marseille", ""],
        ["David Roux", "Nice", "Nouveau client"],
    ]
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, delimiter=";")
        writer.writerows(rows)
    return str(path)


@pytest.fixture
def reference_csv(tmp_path):
    """Comma-separated reference file whose values are the keywords."""
    path = tmp_path / "reference.csv"
    path.write_text("Ville,Code\nParis,75\nNice,06\nParis,\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def reference_xlsx(tmp_path):
    """Workbook with a blank header cell, numeric cells and a blank row."""
    openpyxl = pytest.importorskip("openpyxl")
    path = tmp_path / "reference.xlsx"
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Villes"
    ws.append(["Ville", None, "Population"])
    ws.append(["Paris", "FR", 2100000])
    ws.append([])
    ws.append(["Lyon", None, 520000.0])
    wb.save(path)
    return str(path)
