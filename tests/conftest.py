from __future__ import annotations

import pandas as pd
import pytest

from goc_office_map.core import PipelineConfig
from goc_office_map.data import (
    OCCUPANCY_COLUMNS,
    PROPERTIES,
    STRUCTURES,
    STRUCTURE_USES,
    TENANTS,
    RegistryTables,
)


PSPC = "Public Services and Procurement Canada"
CSC = "Correctional Service of Canada"

PROPERTY_DEFAULTS = {
    "property_name": "Property",
    "custodian": PSPC,
    "security_designation": "Not Protected",
    "country": "Canada",
    "property_jurisdiction_code": 35.0,
    "primary_use_group": "Office",
}

STRUCTURE_DEFAULTS = {
    "structure_name": "Building",
    "street_address": "1 Main Street",
    "municipality": "Ottawa",
    "jurisdiction_code": 35.0,
    "latitude": "45.4215",
    "longitude": "-75.6972",
    "structure_floor_area": 1000.0,
}


def frame(records, columns, defaults=None, numeric=()) -> pd.DataFrame:
    rows = [{**(defaults or {}), **rec} for rec in records]
    df = pd.DataFrame(rows, columns=columns)
    for col in numeric:
        df[col] = pd.to_numeric(df[col], errors="coerce").astype(float)
    return df


def make_tables(properties, structures, uses=(), tenants=()) -> RegistryTables:
    return RegistryTables(
        properties=frame(properties, PROPERTIES.fields, PROPERTY_DEFAULTS, PROPERTIES.numeric),
        structures=frame(structures, STRUCTURES.fields, STRUCTURE_DEFAULTS, STRUCTURES.numeric),
        structure_uses=frame(uses, STRUCTURE_USES.fields),
        tenants=frame(tenants, TENANTS.fields, numeric=TENANTS.numeric),
    )


def make_occupancy(records) -> pd.DataFrame:
    defaults = {
        "property_id": "P1",
        "property_name": "Property",
        "structure_name": "Building",
        "street_address": "1 Main Street",
        "municipality": "Ottawa",
        "jurisdiction_code": 35.0,
        "property_jurisdiction_code": 35.0,
        "latitude": "45.4215",
        "longitude": "-75.6972",
        "custodian": PSPC,
        "tenant_name": "Dept X",
        "floor_area": 100.0,
        "row_origin": "original",
    }
    return frame(records, OCCUPANCY_COLUMNS, defaults, numeric=("floor_area", "jurisdiction_code", "property_jurisdiction_code"))


@pytest.fixture
def config() -> PipelineConfig:
    return PipelineConfig()


@pytest.fixture
def scenario_tables() -> RegistryTables:
    """One ordinary office with two tenants, one vacant building, one prison."""
    return make_tables(
        properties=[
            {"property_id": "P1", "property_name": "Central Campus"},
            {"property_id": "P2", "property_name": "Harbour Block", "property_jurisdiction_code": 12.0},
            {"property_id": "P9", "property_name": "Valley Institution", "custodian": CSC, "primary_use_group": "Law Enforcement and Corrections"},
        ],
        structures=[
            {"structure_id": "S1", "property_id": "P1", "structure_name": "Tower A", "structure_floor_area": 1000.0},
            {
                "structure_id": "S2",
                "property_id": "P2",
                "structure_name": "Pier Building",
                "municipality": "Halifax",
                "jurisdiction_code": 12.0,
                "latitude": "44.6488",
                "longitude": "-63.5752",
                "structure_floor_area": 2500.0,
            },
            {"structure_id": "S91", "property_id": "P9", "structure_name": "Admin", "structure_floor_area": 800.0, "latitude": "49.10", "longitude": "-122.30", "jurisdiction_code": 59.0},
            {"structure_id": "S92", "property_id": "P9", "structure_name": "Cell Block", "structure_floor_area": 4200.0, "latitude": "49.11", "longitude": "-122.31", "jurisdiction_code": 59.0},
        ],
        uses=[
            {"structure_id": "S1", "use_type": "Office"},
            {"structure_id": "S2", "use_type": "Office"},
            {"structure_id": "S91", "use_type": "Law Enforcement and Corrections"},
            {"structure_id": "S92", "use_type": "Law Enforcement and Corrections"},
        ],
        tenants=[
            {"structure_id": "S1", "tenant_name": "Dept X", "tenant_floor_area": 600.0},
            {"structure_id": "S1", "tenant_name": "Dept Y", "tenant_floor_area": 300.0},
        ],
    )
