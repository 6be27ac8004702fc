"""Data pipeline orchestration for the office map."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from ..core import PipelineConfig, ProgressReporter, logger
from .custodian import assign_occupancy
from .eligibility import filter_mappable
from .enrichment import enrich_offices
from .join import join_registry
from .labels import attach_labels
from .loader import RegistryTables
from .views import OfficeViews, build_views


@dataclass(frozen=True)
class PipelineResult:
    offices: pd.DataFrame
    views: OfficeViews
    metadata: dict[str, Any] = field(default_factory=dict)


def run_office_pipeline(
    tables: RegistryTables,
    config: PipelineConfig | None = None,
    supplement: pd.DataFrame | None = None,
) -> PipelineResult:
    """Join, filter, size, enrich and label the registry, then cut the views."""
    config = config or PipelineConfig()
    logger.info("Starting data pipeline")
    with ProgressReporter(6, label="Data stage") as progress:
        joined = join_registry(tables)
        progress.step("Joined registry tables")

        eligible = filter_mappable(joined, config)
        progress.step("Filtered mappable offices")

        occupancy = assign_occupancy(eligible, config)
        progress.step("Assigned custodian occupancy")

        enriched = enrich_offices(occupancy, config, supplement)
        progress.step("Normalised and enriched offices")

        offices = attach_labels(enriched)
        progress.step("Rendered labels")

        views = build_views(offices)
        progress.step("Built layer views")
        progress.finish("Data stage complete")

    metadata = {
        "record_counts": tables.counts(),
        "joined_rows": len(joined),
        "eligible_rows": len(eligible),
        "occupancy_rows": len(occupancy),
        "office_rows": len(offices),
        "structures": len(views.all_offices),
        "coworking_structures": len(views.coworking),
        "organizations": len(views.organizations),
    }
    logger.info(
        "Prepared %d office rows across %d structures and %d organizations",
        metadata["office_rows"],
        metadata["structures"],
        metadata["organizations"],
    )
    return PipelineResult(offices=offices, views=views, metadata=metadata)
