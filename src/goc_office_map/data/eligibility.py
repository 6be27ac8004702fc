"""Mapability predicate and duplicate collapse."""

from __future__ import annotations

import pandas as pd

from ..core import PipelineConfig, logger


DEDUP_KEY = ["property_id", "structure_id", "tenant_name", "use_type"]


def _present(series: pd.Series) -> pd.Series:
    return series.notna() & series.astype(str).str.strip().ne("")


def mappable_mask(joined: pd.DataFrame, config: PipelineConfig) -> pd.Series:
    """True for rows that can be placed on the public map."""
    office_use = joined["use_type"].isin(list(config.office_use_types)) | (
        joined["primary_use_group"] == config.office_primary_use_group
    )
    return (
        (joined["security_designation"] == config.public_security_designation)
        & _present(joined["latitude"])
        & _present(joined["longitude"])
        & (joined["country"] == config.domestic_country)
        & office_use
    )


def filter_mappable(joined: pd.DataFrame, config: PipelineConfig) -> pd.DataFrame:
    mask = mappable_mask(joined, config)
    kept = joined[mask]
    deduped = kept.drop_duplicates(subset=DEDUP_KEY, keep="first")
    logger.info("Eligible rows: %d of %d", len(deduped), len(joined))
    logger.debug(
        "Eligibility dropped %d rows; collapsed %d duplicates",
        int((~mask).sum()),
        len(kept) - len(deduped),
    )
    return deduped.reset_index(drop=True)
