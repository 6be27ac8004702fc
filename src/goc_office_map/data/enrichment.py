"""Coordinate parsing, jurisdiction acronyms, transliteration and co-working flags."""

from __future__ import annotations

import pandas as pd

from ..core import PipelineConfig, ascii_columns, has_text, logger, parse_coordinate, parse_flag
from .custodian import RowOrigin


TEXT_COLUMNS = ("property_name", "structure_name", "street_address", "municipality")

OFFICE_COLUMNS = [
    "structure_id",
    "property_id",
    "property_name",
    "structure_name",
    "street_address",
    "municipality",
    "jurisdiction",
    "latitude",
    "longitude",
    "tenant_name",
    "floor_area",
    "coworking",
    "row_origin",
]


def jurisdiction_acronyms(codes: pd.Series, config: PipelineConfig) -> pd.Series:
    """Map numeric province/territory codes to two-letter acronyms."""
    numeric = pd.to_numeric(codes, errors="coerce")
    return numeric.map(
        lambda code: config.jurisdiction_acronyms.get(int(code), config.unknown_jurisdiction)
        if pd.notna(code) and float(code).is_integer()
        else config.unknown_jurisdiction
    ).astype(object)


def _drop_unplaceable(df: pd.DataFrame, label: str) -> pd.DataFrame:
    df = df.assign(latitude=parse_coordinate(df["latitude"]), longitude=parse_coordinate(df["longitude"]))
    placeable = df["latitude"].notna() & df["longitude"].notna()
    if not placeable.all():
        logger.warning("%s: dropping %d rows with unparseable coordinates", label, int((~placeable).sum()))
    return df[placeable]


def normalize_offices(occupancy: pd.DataFrame, config: PipelineConfig) -> pd.DataFrame:
    df = _drop_unplaceable(occupancy, "Registry offices")
    codes = df["jurisdiction_code"].where(df["jurisdiction_code"].notna(), df["property_jurisdiction_code"])
    df = df.assign(jurisdiction=jurisdiction_acronyms(codes, config))
    df = ascii_columns(df, TEXT_COLUMNS)
    df = df.assign(coworking=df["structure_name"].isin(sorted(config.coworking_names)))
    return df[OFFICE_COLUMNS].reset_index(drop=True)


def normalize_supplement(supplement: pd.DataFrame, config: PipelineConfig) -> pd.DataFrame:
    """Bring curated rows into the office schema; flags are taken as given."""
    df = _drop_unplaceable(supplement, "Supplementary offices")
    df = ascii_columns(df, TEXT_COLUMNS)
    jurisdiction = df["jurisdiction"].map(
        lambda v: str(v).strip().upper() if has_text(v) else config.unknown_jurisdiction
    )
    df = df.assign(
        property_id=None,
        jurisdiction=jurisdiction.astype(object),
        coworking=df["coworking"].map(parse_flag).astype(bool),
        row_origin=RowOrigin.SUPPLEMENT.value,
    )
    return df[OFFICE_COLUMNS].reset_index(drop=True)


def sort_offices(df: pd.DataFrame) -> pd.DataFrame:
    """Stable sort by structure, then ascending floor area."""
    return df.sort_values(["structure_id", "floor_area"], kind="mergesort", na_position="last").reset_index(drop=True)


def enrich_offices(
    occupancy: pd.DataFrame,
    config: PipelineConfig,
    supplement: pd.DataFrame | None = None,
) -> pd.DataFrame:
    offices = normalize_offices(occupancy, config)
    if supplement is not None and not supplement.empty:
        extra = normalize_supplement(supplement, config)
        logger.info("Appending %d supplementary office rows", len(extra))
        offices = pd.concat([offices, extra], ignore_index=True)
    offices = offices.assign(coworking=offices["coworking"].astype(bool))
    return sort_offices(offices)
