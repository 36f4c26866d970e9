"""
Ограничивающая сфера вокруг облака точек.
"""

from typing import NamedTuple, Tuple

import numpy as np


class Sphere(NamedTuple):
    center: Tuple[float, float, float]
    radius: float


def build_bounding_sphere(points) -> Sphere:
    """Центр – середина AABB, радиус – максимальное расстояние до него."""
    pts = np.asarray(list(points), dtype=np.float32).reshape(-1, 3)
    if len(pts) == 0:
        return Sphere((0.0, 0.0, 0.0), 0.0)
    center = (pts.min(axis=0) + pts.max(axis=0)) * 0.5
    radius = float(np.linalg.norm(pts - center, axis=1).max())
    return Sphere(tuple(float(c) for c in center), radius)
