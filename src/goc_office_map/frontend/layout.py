"""Folium rendering of the office layers."""

from __future__ import annotations

from importlib import resources

import folium
from branca.element import MacroElement
from jinja2 import Template

from ..core import PipelineConfig, logger
from ..data import LayerView, OfficeViews
from .colors import layer_color


CANADA_CENTER = (56.13, -96.35)
DEFAULT_ZOOM = 4
LAYERED_MAP_FILE = "map_goc_offices.html"


def _load_template(name: str) -> str:
    return resources.files(__package__).joinpath(f"templates/{name}").read_text()


class RadiusSelector(MacroElement):
    """Click to drop a marker with a fixed-radius circle; later clicks move both."""

    _template = Template(_load_template("radius_select.js"))

    def __init__(self, radius_m: float) -> None:
        super().__init__()
        self._name = "RadiusSelector"
        self.radius_m = float(radius_m)


def radius_map_file(radius_km: float) -> str:
    return f"map_goc_offices_{radius_km:g}km.html"


def add_office_layer(m: folium.Map, layer: LayerView, color: str, radius_px: int) -> folium.FeatureGroup:
    group = folium.FeatureGroup(name=layer.name, show=layer.show, overlay=True)
    for r in layer.table.itertuples(index=False):
        folium.CircleMarker(
            location=[float(r.latitude), float(r.longitude)],
            radius=radius_px,
            color=color,
            weight=1,
            fill=True,
            fill_color=color,
            fill_opacity=0.6,
        ).add_child(folium.Tooltip(r.label, sticky=True)).add_to(group)
    group.add_to(m)
    return group


def office_map(views: OfficeViews, config: PipelineConfig, tiles: str = "OpenStreetMap") -> folium.Map:
    m = folium.Map(location=list(CANADA_CENTER), zoom_start=DEFAULT_ZOOM, tiles=tiles)
    layers = list(views.layers())
    for i, layer in enumerate(layers):
        add_office_layer(m, layer, layer_color(i), config.marker_radius_px)
    folium.LayerControl(collapsed=False).add_to(m)

    offices = views.all_offices
    if not offices.empty:
        m.fit_bounds([
            [float(offices["latitude"].min()), float(offices["longitude"].min())],
            [float(offices["latitude"].max()), float(offices["longitude"].max())],
        ])
    logger.debug("Rendered %d layers", len(layers))
    return m


def build_office_maps(views: OfficeViews, config: PipelineConfig, tiles: str = "OpenStreetMap") -> dict[str, folium.Map]:
    """Both documents, keyed by output file name: plain layers, then with the radius tool."""
    layered = office_map(views, config, tiles)
    with_radius = office_map(views, config, tiles)
    RadiusSelector(config.radius_m).add_to(with_radius)
    return {
        LAYERED_MAP_FILE: layered,
        radius_map_file(config.radius_km): with_radius,
    }
