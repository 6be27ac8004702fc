"""High-level orchestration of the map build process."""

from __future__ import annotations

from pathlib import Path

from .core import PipelineConfig, setup_logging, logger
from .data import load_registry, load_supplement, offices_within_radius, run_office_pipeline
from .frontend import build_office_maps


def _ensure_output_dir(path: str | Path) -> Path:
    target = Path(path)
    target.mkdir(parents=True, exist_ok=True)
    return target


def _report_nearby(views, point: tuple[float, float], config: PipelineConfig) -> None:
    lat, lon = point
    nearby = offices_within_radius(views.all_offices, lat, lon, config.radius_m)
    logger.info("%d offices within %g km of (%.5f, %.5f)", len(nearby), config.radius_km, lat, lon)
    for r in nearby.head(10).itertuples(index=False):
        logger.debug("  %s, %s (%.1f km)", r.structure_name, r.municipality, r.distance_km)


def build_maps(args) -> dict[str, Path]:
    setup_logging(args.verbose)
    config = PipelineConfig().with_options(getattr(args, "options", {}) or {})

    tables = load_registry(
        {
            "properties": args.properties,
            "structures": args.structures,
            "structure_uses": args.structure_uses,
            "tenants": args.tenants,
        },
        config,
    )
    supplement = load_supplement(args.supplement)
    result = run_office_pipeline(tables, config, supplement)

    if args.near is not None:
        _report_nearby(result.views, args.near, config)

    # Render everything before touching the output directory.
    maps = build_office_maps(result.views, config, args.tiles)
    out_dir = _ensure_output_dir(args.out_dir)
    staged: list[tuple[Path, Path]] = []
    try:
        for filename, m in maps.items():
            tmp = out_dir / f".{filename}.tmp"
            staged.append((tmp, out_dir / filename))
            m.save(str(tmp))
    except OSError:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise

    written: dict[str, Path] = {}
    for tmp, path in staged:
        tmp.replace(path)
        written[path.name] = path
        logger.info("Wrote %s", path)
    return written
