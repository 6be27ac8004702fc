"""Custodian occupancy synthesis.

Registry tenant records rarely cover a whole building. The custodian is
credited with whatever floor area the tenants leave over, and correctional
properties are collapsed to a single custodian-occupied point because their
structure-level figures are unreliable.
"""

from __future__ import annotations

from enum import Enum

import pandas as pd

from ..core import PipelineConfig, logger


class RowOrigin(str, Enum):
    ORIGINAL = "original"
    SYNTHESIZED_CUSTODIAN = "synthesized_custodian"
    PROPERTY_AGGREGATE = "property_aggregate"
    SUPPLEMENT = "supplement"


OCCUPANCY_COLUMNS = [
    "property_id",
    "structure_id",
    "property_name",
    "structure_name",
    "street_address",
    "municipality",
    "jurisdiction_code",
    "property_jurisdiction_code",
    "latitude",
    "longitude",
    "custodian",
    "tenant_name",
    "floor_area",
    "row_origin",
]


def is_correctional(rows: pd.DataFrame, config: PipelineConfig) -> pd.Series:
    return rows["custodian"].isin(list(config.correctional_custodians))


def aggregate_correctional(rows: pd.DataFrame) -> pd.DataFrame:
    """One custodian row per property, sized by its largest structure."""
    first = rows.drop_duplicates(subset="property_id", keep="first")
    largest = rows.groupby("property_id", sort=False)["structure_floor_area"].max()
    return first.assign(
        tenant_name=first["custodian"],
        floor_area=first["property_id"].map(largest).astype(float),
        row_origin=RowOrigin.PROPERTY_AGGREGATE.value,
    )


def synthesize_custodian_rows(rows: pd.DataFrame, min_floor_area: float) -> pd.DataFrame:
    """Tenant rows plus a residual custodian row for every structure.

    Rows whose floor area is missing or under ``min_floor_area`` are dropped,
    including the residual row, so structures without tenants end up with a
    single custodian row holding the full structure area.
    """
    # A tenant joined against several use records is still one occupancy.
    occupancy = rows.drop_duplicates(subset=["structure_id", "tenant_record"], keep="first")
    structures = occupancy.drop_duplicates(subset="structure_id", keep="first")
    assigned = occupancy.groupby("structure_id", sort=False)["tenant_floor_area"].sum()

    tenants = occupancy[occupancy["tenant_record"].notna()].reset_index(drop=True)
    tenants = tenants.assign(
        floor_area=tenants["tenant_floor_area"].astype(float),
        row_origin=RowOrigin.ORIGINAL.value,
    )
    residual = structures.assign(
        tenant_name=structures["custodian"],
        floor_area=(structures["structure_floor_area"] - structures["structure_id"].map(assigned)).astype(float),
        row_origin=RowOrigin.SYNTHESIZED_CUSTODIAN.value,
    )

    # A custodian already listed as a tenant absorbs the residual into that row.
    own = tenants[tenants["tenant_name"] == tenants["custodian"]].drop_duplicates(subset="structure_id", keep="first")
    if not own.empty:
        spare = residual.set_index("structure_id")["floor_area"].fillna(0.0).clip(lower=0.0)
        tenants.loc[own.index, "floor_area"] = own["floor_area"] + own["structure_id"].map(spare)
        residual = residual[~residual["structure_id"].isin(own["structure_id"])]

    order = {sid: i for i, sid in enumerate(structures["structure_id"])}
    combined = pd.concat([tenants, residual], ignore_index=True)
    combined = combined.assign(_structure_order=combined["structure_id"].map(order))
    combined = combined.sort_values("_structure_order", kind="mergesort").drop(columns="_structure_order")

    keep = combined["floor_area"].notna() & (combined["floor_area"] >= min_floor_area)
    logger.debug("Dropped %d occupancy rows below %.0f sq. m.", int((~keep).sum()), min_floor_area)
    return combined[keep]


def assign_occupancy(filtered: pd.DataFrame, config: PipelineConfig) -> pd.DataFrame:
    """Split on custodian identity and rebuild the occupancy table."""
    correctional_mask = is_correctional(filtered, config)
    correctional = aggregate_correctional(filtered[correctional_mask])
    general = synthesize_custodian_rows(filtered[~correctional_mask], config.min_floor_area)
    occupancy = pd.concat([correctional[OCCUPANCY_COLUMNS], general[OCCUPANCY_COLUMNS]], ignore_index=True)
    counts = occupancy["row_origin"].value_counts()
    logger.info(
        "Occupancy rows: %d (%d tenant, %d custodian residual, %d correctional)",
        len(occupancy),
        int(counts.get(RowOrigin.ORIGINAL.value, 0)),
        int(counts.get(RowOrigin.SYNTHESIZED_CUSTODIAN.value, 0)),
        int(counts.get(RowOrigin.PROPERTY_AGGREGATE.value, 0)),
    )
    return occupancy
