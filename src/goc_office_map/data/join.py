"""Outer-join chain over the registry tables."""

from __future__ import annotations

import numpy as np
import pandas as pd

from ..core import logger
from .loader import RegistryTables


JOIN_KEYS = {"property_id", "structure_id"}


def _with_record_numbers(df: pd.DataFrame, column: str) -> pd.DataFrame:
    df = df.reset_index(drop=True).copy()
    df[column] = np.arange(len(df), dtype=float)
    return df


def _check_disjoint(left: pd.DataFrame, right: pd.DataFrame, on: str) -> None:
    clash = (set(left.columns) & set(right.columns)) - {on}
    if clash:
        raise ValueError(f"Join on {on} would collide on columns: {sorted(clash)}")


def join_registry(tables: RegistryTables) -> pd.DataFrame:
    """Left-join properties, structures, tenants and uses.

    One row per (structure, tenant record, use record). Structures without
    tenants or uses keep NaN on those sides; duplicate keys multiply out.
    ``tenant_record`` and ``use_record`` number the contributing source rows.
    """
    tenants = _with_record_numbers(tables.tenants, "tenant_record")
    uses = _with_record_numbers(tables.structure_uses, "use_record")

    steps = (
        (tables.structures, "property_id"),
        (tenants, "structure_id"),
        (uses, "structure_id"),
    )
    joined = tables.properties
    for right, key in steps:
        _check_disjoint(joined, right, key)
        joined = joined.merge(right, on=key, how="left", sort=False)

    logger.info(
        "Joined registry: %d rows covering %d structures",
        len(joined),
        int(joined["structure_id"].nunique()),
    )
    return joined.reset_index(drop=True)
