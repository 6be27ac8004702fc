"""Text and coordinate normalisation."""

from __future__ import annotations

import unicodedata
from typing import Any

import pandas as pd


# Characters NFKD leaves alone but that have a plain-ASCII spelling.
_ASCII_SPELLINGS = str.maketrans({
    "Æ": "AE",
    "æ": "ae",
    "Œ": "OE",
    "œ": "oe",
    "ß": "ss",
    "Ø": "O",
    "ø": "o",
    "Đ": "D",
    "đ": "d",
    "Ð": "D",
    "ð": "d",
    "Ł": "L",
    "ł": "l",
    "Þ": "Th",
    "þ": "th",
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u2013": "-",
    "\u2014": "-",
    "\u00a0": " ",
})


def to_ascii(value: Any) -> Any:
    """Transliterate extended-Latin text to its closest ASCII spelling.

    Missing values pass through untouched.
    """
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return value
    s = str(value).translate(_ASCII_SPELLINGS)
    s = unicodedata.normalize("NFKD", s)
    return s.encode("ascii", "ignore").decode("ascii")


def ascii_columns(df: pd.DataFrame, columns: list[str] | tuple[str, ...]) -> pd.DataFrame:
    """Return a copy with the given text columns transliterated."""
    df = df.copy()
    for col in columns:
        if col in df.columns:
            df[col] = df[col].map(to_ascii)
    return df


def parse_coordinate(series: pd.Series) -> pd.Series:
    """Parse coordinate text as floats; unparseable values become NaN."""
    stripped = series.map(lambda v: v.strip() if isinstance(v, str) else v)
    return pd.to_numeric(stripped, errors="coerce").astype(float)


def has_text(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, str) and pd.isna(value):
        return False
    return bool(str(value).strip())


def parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if not has_text(value):
        return False
    return str(value).strip().lower() in {"true", "t", "yes", "y", "1"}
