"""Hover labels for each structure."""

from __future__ import annotations

from html import escape
from typing import Any

import pandas as pd

from ..core import has_text, logger


# Map tooltips are emitted inside JavaScript template literals.
_TEMPLATE_LITERAL_ENTITIES = str.maketrans({"`": "&#96;", "$": "&#36;", "\\": "&#92;"})


def html_text(value: Any) -> str:
    return escape(str(value)).translate(_TEMPLATE_LITERAL_ENTITIES)


def format_floor_area(value: Any) -> str | None:
    if value is None or pd.isna(value):
        return None
    return f"{int(round(float(value))):,} sq. m."


def tenant_line(name: Any, area: Any) -> str | None:
    if not has_text(name):
        return None
    formatted = format_floor_area(area)
    if formatted is None:
        return html_text(name)
    return f"{html_text(name)}, {formatted}"


def render_label(rows: pd.DataFrame) -> str:
    """Label for one structure; ``rows`` must already be in display order."""
    first = rows.iloc[0]
    lines: list[str] = []
    for col in ("property_name", "structure_name"):
        if has_text(first[col]):
            lines.append(f"<strong>{html_text(first[col])}</strong>")
    if has_text(first["street_address"]):
        lines.append(html_text(first["street_address"]))
    municipality = str(first["municipality"]) if has_text(first["municipality"]) else ""
    lines.append(f"{html_text(municipality)}, {html_text(first['jurisdiction'])}")

    tenants = [line for line in (tenant_line(n, a) for n, a in zip(rows["tenant_name"], rows["floor_area"])) if line]
    label = "<br>".join(lines)
    if tenants:
        label += "<br><br>" + "<br>".join(tenants)
    return label


def structure_labels(offices: pd.DataFrame) -> dict[str, str]:
    """Largest tenant first; equal areas keep their incoming order."""
    ordered = offices.sort_values(
        ["structure_id", "floor_area"],
        ascending=[True, False],
        kind="mergesort",
        na_position="last",
    )
    return {sid: render_label(group) for sid, group in ordered.groupby("structure_id", sort=True)}


def attach_labels(offices: pd.DataFrame) -> pd.DataFrame:
    labels = structure_labels(offices)
    logger.info("Rendered %d structure labels", len(labels))
    return offices.assign(label=offices["structure_id"].map(labels))
