"""Data processing for the federal office map."""

from .schemas import TableSchema, PROPERTIES, STRUCTURES, STRUCTURE_USES, TENANTS, SUPPLEMENT, REGISTRY_SCHEMAS
from .loader import RegistryTables, conform_table, load_table, load_registry, load_supplement, default_supplement_path
from .join import join_registry
from .eligibility import DEDUP_KEY, mappable_mask, filter_mappable
from .custodian import (
    RowOrigin,
    OCCUPANCY_COLUMNS,
    aggregate_correctional,
    synthesize_custodian_rows,
    assign_occupancy,
)
from .enrichment import (
    OFFICE_COLUMNS,
    jurisdiction_acronyms,
    normalize_offices,
    normalize_supplement,
    sort_offices,
    enrich_offices,
)
from .labels import format_floor_area, render_label, structure_labels, attach_labels
from .views import ALL_OFFICES_LAYER, COWORKING_LAYER, LayerView, OfficeViews, build_views
from .geodesy import haversine_m, offices_within_radius
from .pipeline import PipelineResult, run_office_pipeline

__all__ = [
    "TableSchema",
    "PROPERTIES",
    "STRUCTURES",
    "STRUCTURE_USES",
    "TENANTS",
    "SUPPLEMENT",
    "REGISTRY_SCHEMAS",
    "RegistryTables",
    "conform_table",
    "load_table",
    "load_registry",
    "load_supplement",
    "default_supplement_path",
    "join_registry",
    "DEDUP_KEY",
    "mappable_mask",
    "filter_mappable",
    "RowOrigin",
    "OCCUPANCY_COLUMNS",
    "aggregate_correctional",
    "synthesize_custodian_rows",
    "assign_occupancy",
    "OFFICE_COLUMNS",
    "jurisdiction_acronyms",
    "normalize_offices",
    "normalize_supplement",
    "sort_offices",
    "enrich_offices",
    "format_floor_area",
    "render_label",
    "structure_labels",
    "attach_labels",
    "ALL_OFFICES_LAYER",
    "COWORKING_LAYER",
    "LayerView",
    "OfficeViews",
    "build_views",
    "haversine_m",
    "offices_within_radius",
    "PipelineResult",
    "run_office_pipeline",
]
