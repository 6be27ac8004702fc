"""Layer colours for the Folium maps."""

from __future__ import annotations

# ColorBrewer Dark2 followed by Set1; layers past the end reuse the cycle.
LAYER_PALETTE: tuple[str, ...] = (
    "#1b9e77",
    "#d95f02",
    "#7570b3",
    "#e7298a",
    "#66a61e",
    "#e6ab02",
    "#a6761d",
    "#666666",
    "#e41a1c",
    "#377eb8",
    "#4daf4a",
    "#984ea3",
    "#ff7f00",
    "#a65628",
    "#f781bf",
)


def layer_color(index: int) -> str:
    return LAYER_PALETTE[index % len(LAYER_PALETTE)]
