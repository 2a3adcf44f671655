# mapview/domain/geomath.py
import math

import numpy as np

EARTH_RADIUS_MI = 3963.0


def distance_mi(lon_a: float, lat_a: float, lon_b: float, lat_b: float) -> float:
    """Great-circle (haversine) distance in miles between two lon/lat points."""
    phi1 = math.radians(lat_a)
    phi2 = math.radians(lat_b)
    dphi = math.radians(lat_b - lat_a)
    dlambda = math.radians(lon_b - lon_a)

    hav = math.sin(dphi / 2.0) ** 2
    hav += math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2.0) ** 2
    return 2.0 * EARTH_RADIUS_MI * math.atan2(math.sqrt(hav), math.sqrt(1.0 - hav))


def bearing_deg(lon_a: float, lat_a: float, lon_b: float, lat_b: float) -> float:
    """
    Initial bearing from a to b, in degrees.
    Range is atan2's natural (-180, 180]; callers wanting compass [0, 360) normalize themselves.
    """
    phi1 = math.radians(lat_a)
    phi2 = math.radians(lat_b)
    dlambda = math.radians(lon_b - lon_a)

    y = math.sin(dlambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlambda)
    return math.degrees(math.atan2(y, x))


def distances_mi(lons: np.ndarray, lats: np.ndarray, lon: float, lat: float) -> np.ndarray:
    # vectorized distance_mi from every (lons[i], lats[i]) to (lon, lat)
    phi1 = np.radians(lats)
    phi2 = math.radians(lat)
    dphi = np.radians(lat - lats)
    dlambda = np.radians(lon - lons)

    hav = np.sin(dphi / 2.0) ** 2 + np.cos(phi1) * math.cos(phi2) * np.sin(dlambda / 2.0) ** 2
    hav = np.clip(hav, 0.0, 1.0)
    return 2.0 * EARTH_RADIUS_MI * np.arctan2(np.sqrt(hav), np.sqrt(1.0 - hav))
