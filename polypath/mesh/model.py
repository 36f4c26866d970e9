# -*- coding: utf-8 -*-
"""
Модель меша: файл → объекты → группы → грани → треугольники.

Дерево строится один раз (см. `polypath.mesh.builder`) и дальше только
читается; `vertices()` / `vertices_indexed()` – чистые запросы.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from polypath.mesh.attributes import AttributeTables
from polypath.mesh.face import Face
from polypath.mesh.vertex import MaterialIdent, Vertex


class Group:
    """Именованная группа граней с необязательным `mtluse`."""

    def __init__(self, name: str, mtluse: Optional[str] = None):
        self.name = name
        self.mtluse = mtluse
        self.faces: List[Face] = []

    def face_count(self) -> int:
        return len(self.faces)

    def faces_iter(self) -> Iterator[Face]:
        return iter(self.faces)

    def __repr__(self):
        return f"Group({self.name!r}, mtluse={self.mtluse!r}, faces={len(self.faces)})"


class Object:
    """Именованный объект с необязательным `mtllib` и списком групп."""

    def __init__(self, name: str, mtllib: Optional[str] = None):
        self.name = name
        self.mtllib = mtllib
        self.groups: List[Group] = []

    def group_count(self) -> int:
        return len(self.groups)

    def group_iter(self) -> Iterator[Group]:
        return iter(self.groups)

    def __repr__(self):
        return f"Object({self.name!r}, mtllib={self.mtllib!r}, groups={len(self.groups)})"


class ObjObject:
    """Корень разобранного файла: объекты, таблицы атрибутов, материалы."""

    def __init__(self, objects: List[Object], tables: AttributeTables,
                 materials: List[MaterialIdent]):
        self.objects = objects
        self.tables = tables
        self.materials = materials

    # -----------------------------------------------------------------
    # счётчики
    # -----------------------------------------------------------------
    def object_count(self) -> int:
        return len(self.objects)

    def group_count(self) -> int:
        return sum(o.group_count() for o in self.objects)

    def face_count(self) -> int:
        return sum(g.face_count() for o in self.objects for g in o.groups)

    def triangle_count(self) -> int:
        return sum(f.triangle_count() for f in self._faces())

    def vert_count(self) -> int:
        """Длина `vertices()`: по 3 вершины на треугольник."""
        return 3 * self.triangle_count()

    # -----------------------------------------------------------------
    # обход
    # -----------------------------------------------------------------
    def objects_iter(self) -> Iterator[Object]:
        return iter(self.objects)

    def _faces(self) -> Iterator[Face]:
        for obj in self.objects:
            for group in obj.groups:
                yield from group.faces

    def _corners(self) -> Iterator[Vertex]:
        for face in self._faces():
            yield from face.corners()

    # -----------------------------------------------------------------
    # плоские вершины
    # -----------------------------------------------------------------
    def vertices(self) -> Tuple[List[Vertex], List[MaterialIdent]]:
        """
        Все углы треугольников в порядке обхода дерева (каждые 3 подряд –
        один треугольник) + список использованных материалов.
        Дедупликации нет.
        """
        return list(self._corners()), list(self.materials)

    def vertices_indexed(self) -> Tuple[np.ndarray, List[Vertex], List[MaterialIdent]]:
        """
        Индексный буфер (uint32) + уникальные вершины в порядке первого
        появления + список материалов. Вершины сравниваются по всем полям
        бит в бит (`Vertex.key()`).
        """
        indices, unique = deduplicate(self._corners())
        return indices, unique, list(self.materials)

    def __repr__(self):
        return (f"ObjObject(objects={self.object_count()}, groups={self.group_count()}, "
                f"faces={self.face_count()})")


def deduplicate(corners) -> Tuple[np.ndarray, List[Vertex]]:
    vert_dict: Dict[tuple, int] = {}   # key -> index
    unique: List[Vertex] = []
    index_data: List[int] = []
    for vertex in corners:
        key = vertex.key()
        index = vert_dict.get(key)
        if index is None:
            index = len(unique)
            vert_dict[key] = index
            unique.append(vertex)
        index_data.append(index)
    return np.array(index_data, dtype=np.uint32), unique


def to_arrays(vertices: Sequence[Vertex]) -> Dict[str, Optional[np.ndarray]]:
    """
    Превратить список вершин в float32‑массивы для загрузки в GPU.
    Атрибут попадает в результат, только если он есть у каждой вершины.
    """
    def column(getter, width):
        values = [getter(v) for v in vertices]
        if not values or any(v is None for v in values):
            return None
        if any(len(v) != width for v in values):
            width = max(len(v) for v in values)
            values = [tuple(v) + (0.0,) * (width - len(v)) for v in values]
        return np.array(values, dtype=np.float32).reshape(-1, width)

    positions = np.array([v.position for v in vertices], dtype=np.float32).reshape(-1, 3)
    return {
        "positions": positions,
        "colors": column(lambda v: v.color, 3),
        "normals": column(lambda v: v.normal, 3),
        "texcoords": column(lambda v: v.texcoord, 2),
    }
