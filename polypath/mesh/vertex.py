# -*- coding: utf-8 -*-
"""
Разрешённая вершина (позиция + необязательные цвет/нормаль/texcoord +
индекс материала) и ссылка на материал.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple


class MaterialIdent(NamedTuple):
    """Непрозрачная ссылка на материал: имя библиотеки и имя материала."""
    mtllib: Optional[str]
    mtluse: Optional[str]


def _bits(values):
    if values is None:
        return None
    return struct.pack(f"<{len(values)}d", *values)


@dataclass(frozen=True, eq=False, init=False)
class Vertex:
    """
    Иммутабельная вершина. Отсутствующий атрибут – это `None`,
    а не нули: `normal=None` и `normal=(0, 0, 0)` – разные вершины.
    """

    __slots__ = ("position", "color", "normal", "texcoord", "material_index")

    position: Tuple[float, float, float]
    color: Optional[Tuple[float, float, float]]
    normal: Optional[Tuple[float, float, float]]
    texcoord: Optional[Tuple[float, ...]]
    material_index: Optional[int]

    def __init__(self, position, color=None, normal=None, texcoord=None,
                 material_index=None):
        # frozen‑dataclass: пишем через object.__setattr__
        object.__setattr__(self, "position", tuple(position))
        object.__setattr__(self, "color", tuple(color) if color is not None else None)
        object.__setattr__(self, "normal", tuple(normal) if normal is not None else None)
        object.__setattr__(self, "texcoord", tuple(texcoord) if texcoord is not None else None)
        object.__setattr__(self, "material_index", material_index)

    # -----------------------------------------------------------------
    # сравнение «бит в бит»
    # -----------------------------------------------------------------
    def key(self):
        """Хэшируемый ключ: float‑ы упакованы в байты IEEE‑754."""
        return (
            _bits(self.position),
            _bits(self.color),
            _bits(self.normal),
            _bits(self.texcoord),
            self.material_index,
        )

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def with_material(self, material_index: Optional[int]) -> "Vertex":
        return Vertex(self.position, self.color, self.normal, self.texcoord,
                      material_index)
