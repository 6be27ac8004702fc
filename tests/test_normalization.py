from __future__ import annotations

import math

import pandas as pd
import pytest

from goc_office_map.core import ascii_columns, parse_coordinate, parse_flag, to_ascii


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Montréal", "Montreal"),
        ("3400 Jean-Béraud Building", "3400 Jean-Beraud Building"),
        ("Trois-Rivières", "Trois-Rivieres"),
        ("Œuvre Æsir Straße", "OEuvre AEsir Strasse"),
        ("L’Esplanade Laurier", "L'Esplanade Laurier"),
        ("Plain ASCII, unchanged (1)", "Plain ASCII, unchanged (1)"),
    ],
)
def test_to_ascii(raw, expected):
    assert to_ascii(raw) == expected


def test_to_ascii_passes_missing_values():
    assert to_ascii(None) is None
    assert math.isnan(to_ascii(float("nan")))


def test_ascii_columns_only_touches_named_columns():
    df = pd.DataFrame({"municipality": ["Lévis"], "tenant_name": ["Santé Canada"]})
    out = ascii_columns(df, ("municipality", "not_there"))
    assert out.loc[0, "municipality"] == "Levis"
    assert out.loc[0, "tenant_name"] == "Santé Canada"
    assert df.loc[0, "municipality"] == "Lévis"


def test_parse_coordinate():
    parsed = parse_coordinate(pd.Series(["45.5", " -75.25 ", "", None, "abc"], dtype=object))
    assert parsed.iloc[0] == 45.5
    assert parsed.iloc[1] == -75.25
    assert parsed.iloc[2:].isna().all()


@pytest.mark.parametrize("raw, expected", [("TRUE", True), ("yes", True), (True, True), ("0", False), (None, False), ("", False)])
def test_parse_flag(raw, expected):
    assert parse_flag(raw) is expected
