"""Layer tables consumed by the map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import pandas as pd

from ..core import logger


ALL_OFFICES_LAYER = "All Offices"
COWORKING_LAYER = "GCcoworking Locations"


@dataclass(frozen=True)
class LayerView:
    name: str
    table: pd.DataFrame
    show: bool = False


@dataclass(frozen=True)
class OfficeViews:
    all_offices: pd.DataFrame
    coworking: pd.DataFrame
    organizations: dict[str, pd.DataFrame]

    def layers(self) -> Iterator[LayerView]:
        """Layers in control order; only the all-offices layer starts visible."""
        yield LayerView(ALL_OFFICES_LAYER, self.all_offices, show=True)
        yield LayerView(COWORKING_LAYER, self.coworking)
        for name, table in self.organizations.items():
            yield LayerView(name, table)


def organization_names(offices: pd.DataFrame) -> list[str]:
    return sorted(offices["tenant_name"].dropna().astype(str).unique())


def build_views(offices: pd.DataFrame) -> OfficeViews:
    """Derive the layer tables; ``offices`` itself is never modified."""
    all_offices = offices.drop_duplicates(subset="structure_id", keep="first").reset_index(drop=True)
    coworking = all_offices[all_offices["coworking"]].reset_index(drop=True)
    organizations = {
        name: offices[offices["tenant_name"] == name].reset_index(drop=True)
        for name in organization_names(offices)
    }
    logger.info(
        "Built views: %d offices, %d co-working, %d organizations",
        len(all_offices),
        len(coworking),
        len(organizations),
    )
    return OfficeViews(all_offices=all_offices, coworking=coworking, organizations=organizations)
