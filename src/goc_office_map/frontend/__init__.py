"""Frontend helpers for building the Folium maps."""

from .layout import (
    RadiusSelector,
    LAYERED_MAP_FILE,
    radius_map_file,
    add_office_layer,
    office_map,
    build_office_maps,
)
from .colors import LAYER_PALETTE, layer_color

__all__ = [
    "RadiusSelector",
    "LAYERED_MAP_FILE",
    "radius_map_file",
    "add_office_layer",
    "office_map",
    "build_office_maps",
    "layer_color",
    "LAYER_PALETTE",
]
