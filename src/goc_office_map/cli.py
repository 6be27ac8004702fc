from __future__ import annotations
import argparse
import json
import tomllib
from pathlib import Path

DEFAULT_OUT_DIR = "html"
DEFAULT_TILES = "OpenStreetMap"
_REQUIRED_PATHS = ("properties", "structures", "structure_uses", "tenants")
_OPTION_FIELDS = ("min_floor_area", "radius_km")

def _load_config(path: str) -> dict[str, object]:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    suffix = config_path.suffix.lower()
    if suffix in {".toml", ".tml"}:
        return tomllib.loads(config_path.read_text())
    if suffix == ".json":
        return json.loads(config_path.read_text())
    raise ValueError(f"Unsupported config format: {config_path.suffix}")

def _parse_point(value: object) -> tuple[float, float]:
    if isinstance(value, (list, tuple)) and len(value) == 2:
        parts = [str(v) for v in value]
    else:
        parts = str(value).split(",")
    if len(parts) != 2:
        raise ValueError(f"near must be LAT,LON (got {value!r})")
    try:
        lat, lon = (float(p.strip()) for p in parts)
    except ValueError as exc:
        raise ValueError(f"near must be LAT,LON (got {value!r})") from exc
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        raise ValueError(f"near is outside valid coordinates: {value!r}")
    return lat, lon

def _merge_config(args: argparse.Namespace, config: dict[str, object]) -> None:
    # Allow optional grouping inside the config (e.g. {"paths": {...}}).
    flat = {}
    if config:
        flat.update(config)
        for key in ("paths", "options"):
            section = config.get(key)
            if isinstance(section, dict):
                flat.update(section)

    defaults = {
        "out_dir": DEFAULT_OUT_DIR,
        "tiles": DEFAULT_TILES,
        "supplement": None,
        "near": None,
        "min_floor_area": None,
        "radius_km": None,
    }

    for field in _REQUIRED_PATHS:
        if getattr(args, field) is None and field in flat:
            setattr(args, field, flat[field])
    for field, default in defaults.items():
        current = getattr(args, field)
        if current is None:
            setattr(args, field, flat.get(field, default))
    if not args.verbose and isinstance(flat.get("verbose"), bool):
        args.verbose = flat["verbose"]

    # Pipeline policy overrides are checked by PipelineConfig.with_options
    args.options = {field: getattr(args, field) for field in _OPTION_FIELDS if getattr(args, field) is not None}
    for key in ("coworking_names", "correctional_custodians", "jurisdiction_acronyms", "preamble_rows"):
        if key in flat:
            args.options[key] = flat[key]

    if args.near is not None:
        args.near = _parse_point(args.near)
    args.out_dir = str(args.out_dir)

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Build the federal office maps")
    ap.add_argument("--config", help="Optional TOML/JSON config file with argument defaults")
    ap.add_argument("--properties", help="Property records CSV (registry export)")
    ap.add_argument("--structures", help="Structure records CSV (registry export)")
    ap.add_argument("--structure-uses", dest="structure_uses", help="Structure use records CSV (registry export)")
    ap.add_argument("--tenants", help="Structure tenant records CSV (registry export)")
    ap.add_argument("--supplement", help="Curated offices CSV (default: packaged table; '' to disable)")
    ap.add_argument("--out-dir", dest="out_dir", help=f"Output directory (default: {DEFAULT_OUT_DIR})")
    ap.add_argument("--tiles", help=f"Folium tile set (default: {DEFAULT_TILES})")
    ap.add_argument("--min-floor-area", dest="min_floor_area", type=float, help="Smallest occupancy kept, sq. m. (default: 10)")
    ap.add_argument("--radius-km", dest="radius_km", type=float, help="Radius of the selection circle (default: 125)")
    ap.add_argument("--near", help="LAT,LON: log offices within the radius of this point")
    ap.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")

    args = ap.parse_args(argv)

    try:
        config = _load_config(args.config) if args.config else {}
        _merge_config(args, config)
    except (FileNotFoundError, ValueError, tomllib.TOMLDecodeError) as exc:
        ap.error(str(exc))

    missing = [field for field in _REQUIRED_PATHS if getattr(args, field) is None]
    if missing:
        ap.error(f"the following arguments are required (supply via CLI or config): {', '.join(missing)}")

    return args
