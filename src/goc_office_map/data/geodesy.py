"""Great-circle distances for the radius selection."""

from __future__ import annotations

import numpy as np
import pandas as pd


EARTH_RADIUS_M = 6_371_000.0


def haversine_m(lat1, lon1, lat2, lon2):
    """Great-circle distance in metres; accepts scalars or arrays."""
    phi1 = np.radians(lat1)
    phi2 = np.radians(lat2)
    d_phi = phi2 - phi1
    d_lambda = np.radians(np.asarray(lon2, dtype=float) - np.asarray(lon1, dtype=float))
    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_M * np.arcsin(np.sqrt(np.minimum(1.0, a)))


def offices_within_radius(table: pd.DataFrame, lat: float, lon: float, radius_m: float) -> pd.DataFrame:
    """Rows of ``table`` within ``radius_m`` of the point, nearest first."""
    distances = haversine_m(lat, lon, table["latitude"].to_numpy(dtype=float), table["longitude"].to_numpy(dtype=float))
    inside = table.assign(distance_km=distances / 1000.0)[distances <= radius_m]
    return inside.sort_values("distance_km", kind="mergesort").reset_index(drop=True)
