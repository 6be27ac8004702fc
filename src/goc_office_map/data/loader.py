"""Loading and conforming the registry export tables."""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Mapping

import pandas as pd

from ..core import PipelineConfig, clean_headers, has_text, logger, read_registry_csv, require_columns
from .schemas import REGISTRY_SCHEMAS, SUPPLEMENT, TableSchema


@dataclass(frozen=True)
class RegistryTables:
    properties: pd.DataFrame
    structures: pd.DataFrame
    structure_uses: pd.DataFrame
    tenants: pd.DataFrame

    def counts(self) -> dict[str, int]:
        return {name: len(getattr(self, name)) for name in REGISTRY_SCHEMAS}


def conform_table(df: pd.DataFrame, schema: TableSchema) -> pd.DataFrame:
    """Select, rename and type the declared columns of a raw table."""
    df = clean_headers(df)
    require_columns(df, set(schema.columns), schema.label)
    rename = dict(schema.columns)
    if schema.optional:
        for raw, name in schema.optional.items():
            if raw not in df.columns:
                df[raw] = None
            rename[raw] = name
    out = df[list(rename)].rename(columns=rename).copy()

    for key in schema.keys:
        out[key] = out[key].map(lambda v: str(v).strip() if has_text(v) else None)
    missing_key = out[list(schema.keys)].isna().any(axis=1)
    if missing_key.any():
        logger.debug("%s: dropping %d rows without %s", schema.label, int(missing_key.sum()), "/".join(schema.keys))
        out = out[~missing_key]

    for col in schema.numeric:
        out[col] = pd.to_numeric(out[col], errors="coerce").astype(float)
    return out.reset_index(drop=True)


def load_table(path: str | Path, schema: TableSchema, skip_rows: int) -> pd.DataFrame:
    df = conform_table(read_registry_csv(path, skip_rows=skip_rows), schema)
    logger.info("Loaded %s: %d rows from %s", schema.label, len(df), path)
    return df


def load_registry(paths: Mapping[str, str | Path], config: PipelineConfig | None = None) -> RegistryTables:
    """Load the four registry tables named by ``paths``."""
    config = config or PipelineConfig()
    missing = [name for name in REGISTRY_SCHEMAS if not paths.get(name)]
    if missing:
        raise ValueError(f"Missing registry table paths: {', '.join(missing)}")
    tables = {
        name: load_table(paths[name], schema, config.preamble_rows)
        for name, schema in REGISTRY_SCHEMAS.items()
    }
    return RegistryTables(**tables)


def default_supplement_path() -> Path:
    return Path(str(resources.files(__package__).joinpath("supplement.csv")))


def load_supplement(path: str | Path | None = None) -> pd.DataFrame | None:
    """Load the curated office table.

    ``None`` selects the packaged table; an empty string disables it.
    """
    if path == "":
        logger.info("Supplementary offices disabled")
        return None
    if path is None:
        path = default_supplement_path()
    return load_table(path, SUPPLEMENT, skip_rows=0)
