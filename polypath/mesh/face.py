# -*- coding: utf-8 -*-
"""
Грань (3 или 4 вершины) и её триангуляция веером.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional, Sequence, Tuple

from polypath.mesh.vertex import MaterialIdent, Vertex

MAX_FACE_VERTICES = 4


class Triangle(NamedTuple):
    v0: Vertex
    v1: Vertex
    v2: Vertex


def triangulate(vertices: Sequence[Vertex]) -> List[Triangle]:
    """
    3 вершины → один треугольник, 4 → два: (v0, v1, v2) и (v0, v2, v3).
    Порядок обхода исходной грани сохраняется.
    """
    if len(vertices) == 3:
        return [Triangle(vertices[0], vertices[1], vertices[2])]
    if len(vertices) == 4:
        v0, v1, v2, v3 = vertices
        return [Triangle(v0, v1, v2), Triangle(v0, v2, v3)]
    raise ValueError(f"cannot triangulate a face with {len(vertices)} vertices")


class Face:
    """Разрешённая грань: 4 слота вершин + размер и готовые треугольники."""

    __slots__ = ("_slots", "size", "triangles", "material")

    def __init__(self, vertices: Sequence[Vertex],
                 material: Optional[MaterialIdent] = None):
        size = len(vertices)
        self.triangles: Tuple[Triangle, ...] = tuple(triangulate(vertices))
        self.size = size
        self._slots = tuple(vertices) + (None,) * (MAX_FACE_VERTICES - size)
        self.material = material

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return self._slots[:self.size]

    def triangle_count(self) -> int:
        return len(self.triangles)

    def corners(self):
        """Все углы треугольников подряд (3 на треугольник)."""
        for tri in self.triangles:
            yield from tri

    def __repr__(self):
        return f"Face(size={self.size}, material={self.material})"
