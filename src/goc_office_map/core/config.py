"""Policy constants for the office pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping


DEFAULT_PREAMBLE_ROWS = 15
DEFAULT_MIN_FLOOR_AREA = 10.0
DEFAULT_RADIUS_KM = 125.0
DEFAULT_MARKER_RADIUS_PX = 4

UNKNOWN_JURISDICTION = "XX"

# Statistics Canada SGC codes.
JURISDICTION_ACRONYMS: dict[int, str] = {
    10: "NL",
    11: "PE",
    12: "NS",
    13: "NB",
    24: "QC",
    35: "ON",
    46: "MB",
    47: "SK",
    48: "AB",
    59: "BC",
    60: "YT",
    61: "NT",
    62: "NU",
}

COWORKING_STRUCTURE_NAMES: frozenset[str] = frozenset({
    "L'Esplanade Laurier (commercial)",
    "L'Esplanade Laurier - West Tower",
    "Place d'Orleans Shopping Centre",
    "555 Legget Drive",
    "480 de la Cite Boulevard",
    "Minto Plaza",
    "3400 Jean-Beraud Building",
})

OFFICE_USE_TYPES: tuple[str, ...] = ("Office", "Law Enforcement and Corrections")
CORRECTIONAL_CUSTODIANS: tuple[str, ...] = ("Correctional Service of Canada",)


@dataclass(frozen=True)
class PipelineConfig:
    preamble_rows: int = DEFAULT_PREAMBLE_ROWS
    min_floor_area: float = DEFAULT_MIN_FLOOR_AREA
    radius_km: float = DEFAULT_RADIUS_KM
    marker_radius_px: int = DEFAULT_MARKER_RADIUS_PX
    domestic_country: str = "Canada"
    public_security_designation: str = "Not Protected"
    office_use_types: tuple[str, ...] = OFFICE_USE_TYPES
    office_primary_use_group: str = "Office"
    correctional_custodians: tuple[str, ...] = CORRECTIONAL_CUSTODIANS
    jurisdiction_acronyms: Mapping[int, str] = field(default_factory=lambda: dict(JURISDICTION_ACRONYMS))
    unknown_jurisdiction: str = UNKNOWN_JURISDICTION
    coworking_names: frozenset[str] = COWORKING_STRUCTURE_NAMES

    @property
    def radius_m(self) -> float:
        return self.radius_km * 1000.0

    def with_options(self, options: Mapping[str, Any]) -> "PipelineConfig":
        """Return a copy with the known, non-None options applied."""
        known = {f.name for f in fields(self)}
        updates: dict[str, Any] = {}
        for key, value in options.items():
            if key not in known or value is None:
                continue
            if key in {"min_floor_area", "radius_km"}:
                try:
                    value = float(value)
                except (TypeError, ValueError) as exc:
                    raise ValueError(f"{key} must be a number (got {value!r})") from exc
                if value < 0:
                    raise ValueError(f"{key} must not be negative (got {value!r})")
            elif key in {"preamble_rows", "marker_radius_px"}:
                try:
                    value = int(value)
                except (TypeError, ValueError) as exc:
                    raise ValueError(f"{key} must be an integer (got {value!r})") from exc
            elif key in {"office_use_types", "correctional_custodians"}:
                value = tuple(str(v) for v in value)
            elif key == "coworking_names":
                value = frozenset(str(v) for v in value)
            elif key == "jurisdiction_acronyms":
                value = {int(k): str(v) for k, v in dict(value).items()}
            updates[key] = value
        return replace(self, **updates)
