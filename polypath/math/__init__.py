"""
Математический суб‑пакет: Vec3.
"""

from polypath.math.vec3 import Vec3

__all__ = ["Vec3"]
