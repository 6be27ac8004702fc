"""Declared layouts of the registry export tables.

Each schema maps the registry's column header to the canonical field name
used throughout the pipeline. Canonical names are unique across tables
apart from the join keys, so joins never need suffixes to tell sides apart.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TableSchema:
    label: str
    columns: dict[str, str]
    keys: tuple[str, ...]
    numeric: tuple[str, ...] = ()
    optional: dict[str, str] | None = None

    @property
    def fields(self) -> list[str]:
        names = list(self.columns.values())
        if self.optional:
            names.extend(self.optional.values())
        return names


PROPERTIES = TableSchema(
    label="Property table",
    columns={
        "Property Number (TEXT data)": "property_id",
        "Property Name": "property_name",
        "Custodian": "custodian",
        "Security Designation": "security_designation",
        "Country": "country",
        "Province or Territory Code (TEXT data)": "property_jurisdiction_code",
        "Primary Use Group": "primary_use_group",
    },
    keys=("property_id",),
    numeric=("property_jurisdiction_code",),
)

STRUCTURES = TableSchema(
    label="Structure table",
    columns={
        "Structure Number (TEXT data)": "structure_id",
        "Property Number (TEXT data)": "property_id",
        "Structure Name": "structure_name",
        "Street Address": "street_address",
        "Municipality": "municipality",
        "Province or Territory Code (TEXT data)": "jurisdiction_code",
        "Latitude": "latitude",
        "Longitude": "longitude",
        "Floor Area": "structure_floor_area",
    },
    keys=("structure_id", "property_id"),
    numeric=("jurisdiction_code", "structure_floor_area"),
)

STRUCTURE_USES = TableSchema(
    label="Structure use table",
    columns={
        "Structure Number (TEXT data)": "structure_id",
        "Structure Use": "use_type",
    },
    keys=("structure_id",),
)

TENANTS = TableSchema(
    label="Structure tenant table",
    columns={
        "Structure Number (TEXT data)": "structure_id",
        "Tenant Name": "tenant_name",
        "Floor Area": "tenant_floor_area",
    },
    keys=("structure_id",),
    numeric=("tenant_floor_area",),
)

# Hand-maintained offices missing from the export; headers are already canonical.
SUPPLEMENT = TableSchema(
    label="Supplementary office table",
    columns={
        "structure_id": "structure_id",
        "structure_name": "structure_name",
        "street_address": "street_address",
        "municipality": "municipality",
        "jurisdiction": "jurisdiction",
        "latitude": "latitude",
        "longitude": "longitude",
        "coworking": "coworking",
    },
    keys=("structure_id",),
    numeric=("floor_area",),
    optional={
        "property_name": "property_name",
        "tenant_name": "tenant_name",
        "floor_area": "floor_area",
    },
)

REGISTRY_SCHEMAS = {
    "properties": PROPERTIES,
    "structures": STRUCTURES,
    "structure_uses": STRUCTURE_USES,
    "tenants": TENANTS,
}
