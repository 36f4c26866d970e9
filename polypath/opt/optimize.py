# -*- coding: utf-8 -*-
"""
Переупорядочивание треугольников для кэша вершин и построение индексов
для произвольного плоского списка треугольников.
"""

from typing import Dict, List, Sequence, Tuple

import numpy as np

from polypath.mesh.model import deduplicate
from polypath.mesh.vertex import Vertex


def _triangles(vertices: Sequence[Vertex]) -> List[Tuple[Vertex, Vertex, Vertex]]:
    if len(vertices) % 3:
        raise ValueError("every 3 vertices are 1 triangle")
    return [tuple(vertices[i:i + 3]) for i in range(0, len(vertices), 3)]


def optimize_vertex_order(vertices: Sequence[Vertex]) -> List[Vertex]:
    """
    Новый список треугольников, где соседние по вершинам треугольники
    идут подряд (обход смежности в глубину). Дубликаты треугольников
    отбрасываются.
    """
    triangles = _triangles(vertices)
    if not triangles:
        return []

    # вершина -> треугольники, которые её используют (в порядке появления)
    adjacency: Dict[Vertex, Dict[tuple, None]] = {}
    for tri in triangles:
        for vertex in tri:
            adjacency.setdefault(vertex, {})[tri] = None

    emitted = set()
    out: List[Vertex] = []
    stack: List[Vertex] = []
    pending = [v for tri in triangles for v in tri]

    current = pending.pop()
    while True:
        faces = adjacency.pop(current, None)
        if faces:
            for tri in faces:
                if tri in emitted:
                    continue
                emitted.add(tri)
                out.extend(tri)
                stack.extend(tri)

        # сначала недавно использованные вершины, потом остальные
        if stack:
            current = stack.pop()
        elif pending:
            current = pending.pop()
        else:
            break

    return out


def indexed_vertices(vertices: Sequence[Vertex]) -> Tuple[np.ndarray, List[Vertex]]:
    """(индексы uint32, уникальные вершины) для плоского списка треугольников."""
    _triangles(vertices)
    return deduplicate(vertices)
