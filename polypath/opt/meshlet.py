# -*- coding: utf-8 -*-
"""
Разбиение индексированного меша на кластеры треугольников (meshlets).

Каждый кластер хранит:
    * `vertices`  – глобальные индексы вершин (uint32),
    * `triangles` – локальные индексы в `vertices` (uint8, N×3),
    * `bounding`  – ограничивающую сферу,
    * `cone`      – средняя нормаль (x, y, z) и «ширина» конуса w.

Кластер закрывается, когда не хватает места под вершины/треугольники
или нормаль нового треугольника слишком расширяет конус.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from polypath.math.vec3 import Vec3
from polypath.opt.bounding import Sphere, build_bounding_sphere

MAX_LOCAL_VERTICES = 256


@dataclass
class Meshlet:
    cone: Tuple[float, float, float, float]
    bounding: Sphere
    vertices: np.ndarray
    triangles: np.ndarray

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)


def _position(vertex):
    return getattr(vertex, "position", vertex)


def triangle_normal(p0: Vec3, p1: Vec3, p2: Vec3) -> Vec3:
    """Единичная нормаль треугольника (нулевая для вырожденного)."""
    n = (p1 - p0).cross(p2 - p0)
    return n if n.is_zero() else n.normalized()


def _average(normals: Sequence[Vec3]) -> Vec3:
    avg = Vec3.zero()
    for n in normals:
        avg = avg + n
    return avg if avg.is_zero() else avg.normalized()


def _min_dot(normals: Sequence[Vec3], axis: Vec3) -> float:
    return min((axis.dot(n) for n in normals), default=1.0)


def cone_fits(normals: Sequence[Vec3], threshold: float) -> bool:
    if not normals:
        return True
    return _min_dot(normals, _average(normals)) >= threshold


def calc_cone(normals: Sequence[Vec3]) -> Tuple[float, float, float, float]:
    avg = _average(normals)
    mdot = _min_dot(normals, avg)
    w = 1.0 if mdot <= 0.0 else float(np.sqrt(max(0.0, 1.0 - mdot * mdot)))
    return (avg.x, avg.y, avg.z, w)


class _Builder:
    """Состояние текущего (ещё не закрытого) кластера."""

    def __init__(self):
        self.local: Dict[int, int] = {}     # глобальный индекс -> локальный
        self.vertices: List[int] = []
        self.triangles: List[Tuple[int, int, int]] = []
        self.normals: List[Vec3] = []
        self.points: List[tuple] = []

    def new_vertices(self, tri) -> int:
        return len({i for i in tri if i not in self.local})

    def add(self, tri, normal: Vec3, points) -> None:
        local = []
        for i in tri:
            if i not in self.local:
                self.local[i] = len(self.vertices)
                self.vertices.append(i)
            local.append(self.local[i])
        self.triangles.append(tuple(local))
        if not normal.is_zero():
            self.normals.append(normal)
        self.points.extend(points)

    def flush(self) -> Meshlet:
        return Meshlet(
            cone=calc_cone(self.normals),
            bounding=build_bounding_sphere(self.points),
            vertices=np.array(self.vertices, dtype=np.uint32),
            triangles=np.array(self.triangles, dtype=np.uint8).reshape(-1, 3),
        )


def build_meshlets(indices, vertices, cone_threshold: float = 0.5,
                   max_vertices: int = 64, max_triangles: int = 124) -> List[Meshlet]:
    """
    `indices` – индексный буфер (каждые 3 – треугольник), `vertices` –
    вершины (`Vertex` или кортежи позиций). `cone_threshold` обрезается
    до [0.1, 0.9]: чем больше, тем уже конус и тем больше кластеров.
    """
    if not 3 <= max_vertices <= MAX_LOCAL_VERTICES:
        raise ValueError(f"max_vertices must be in [3, {MAX_LOCAL_VERTICES}]")
    if max_triangles < 1:
        raise ValueError("max_triangles must be positive")
    indices = np.asarray(indices, dtype=np.int64).ravel()
    if len(indices) % 3:
        raise ValueError("index count must be a multiple of 3")
    threshold = min(max(cone_threshold, 0.1), 0.9)

    meshlets: List[Meshlet] = []
    current = _Builder()
    for i0, i1, i2 in indices.reshape(-1, 3).tolist():
        points = [_position(vertices[i]) for i in (i0, i1, i2)]
        normal = triangle_normal(*(Vec3.from_tuple(p) for p in points))

        tris_full = len(current.triangles) >= max_triangles
        verts_full = len(current.vertices) + current.new_vertices((i0, i1, i2)) > max_vertices
        too_wide = not normal.is_zero() and not cone_fits(current.normals + [normal], threshold)
        if current.triangles and (tris_full or verts_full or too_wide):
            meshlets.append(current.flush())
            current = _Builder()

        current.add((i0, i1, i2), normal, points)

    if current.triangles:
        meshlets.append(current.flush())
    return meshlets
