import math

import numpy as np

from campus_nav.app.protocols import DistanceMetric
from campus_nav.domain.entities.geography import Point

EARTH_RADIUS_M = 6_371_000.0


def haversine_m(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in meters between two (lat, lng) pairs in degrees."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lng2 - lng1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    a = min(1.0, a)  # rounding near antipodes
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def planar_m(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


class HaversineMetric(DistanceMetric):
    def distance(self, a: Point, b: Point) -> float:
        return haversine_m(a.y, a.x, b.y, b.x)

    def many(self, p: Point, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        # xs = longitudes, ys = latitudes (degrees)
        phi1, phi2 = math.radians(p.y), np.radians(ys)
        dphi = np.radians(ys - p.y)
        dlmb = np.radians(xs - p.x)
        a = np.sin(dphi / 2) ** 2 + math.cos(phi1) * np.cos(phi2) * np.sin(dlmb / 2) ** 2
        a = np.minimum(a, 1.0)
        return 2 * EARTH_RADIUS_M * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


class PlanarMetric(DistanceMetric):
    def distance(self, a: Point, b: Point) -> float:
        return planar_m(a.x, a.y, b.x, b.y)

    def many(self, p: Point, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return np.hypot(xs - p.x, ys - p.y)
