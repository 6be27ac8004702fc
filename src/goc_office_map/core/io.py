"""IO helper utilities."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from .logging import configure_logging, logger


_ENCODINGS = ("utf-8-sig", "latin-1")


class MissingColumnsError(RuntimeError):
    """A source table lacks columns the pipeline depends on."""


def setup_logging(verbose: bool) -> None:
    """Initialise project logging."""
    configure_logging(verbose)


def read_registry_csv(path: str | Path, skip_rows: int = 0) -> pd.DataFrame:
    """Read a registry export as text cells, skipping its preamble.

    Exports from the registry are Latin-1 encoded; UTF-8 is tried first so
    hand-edited files keep their accents.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input table not found: {path}")
    for encoding in _ENCODINGS:
        try:
            df = pd.read_csv(path, skiprows=skip_rows, dtype=str, encoding=encoding)
            logger.debug("Loaded CSV %s (%d rows, encoding=%s)", path, len(df), encoding)
            return df
        except UnicodeDecodeError as exc:
            logger.debug("CSV read failed for %s with %s: %s", path, encoding, exc)
        except pd.errors.ParserError as exc:
            raise RuntimeError(f"Failed to parse CSV {path}: {exc}") from exc
    raise RuntimeError(f"Failed to read CSV: {path}")


def clean_headers(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with BOMs and surrounding whitespace removed from headers."""
    df = df.copy()
    df.columns = [str(c).replace("\ufeff", "").strip() for c in df.columns]
    return df


def require_columns(df: pd.DataFrame, cols: set[str], label: str) -> None:
    """Ensure the expected columns are available."""
    missing = set(cols) - set(df.columns)
    if missing:
        raise MissingColumnsError(f"{label} missing columns: {sorted(missing)}")
