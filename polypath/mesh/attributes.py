# -*- coding: utf-8 -*-
"""
Таблицы атрибутов вершин: позиции (+ параллельные цвета), нормали,
texcoords. Только добавление во время разбора, только чтение после.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from polypath.errors import FormatError, ObjIndexError
from polypath.io.tokenizer import Record

POSITION = "position"
TEXCOORD = "texcoord"
NORMAL = "normal"


def _number(token: str, convert):
    # float()/int() пропускают '_' между цифрами ("1_0" → 10), в OBJ это ошибка
    if "_" in token:
        raise ValueError(token)
    return convert(token)


def parse_floats(args, record: Record) -> Tuple[float, ...]:
    try:
        return tuple(_number(a, float) for a in args)
    except ValueError:
        raise FormatError(f"'{record.keyword}' expects numbers, got {' '.join(args)}",
                          record.lineno, record.raw) from None


class AttributeTables:
    """Четыре независимых последовательности атрибутов одного файла."""

    def __init__(self):
        self.positions: List[Tuple[float, float, float]] = []
        self.colors: List[Optional[Tuple[float, float, float]]] = []
        self.normals: List[Tuple[float, float, float]] = []
        self.texcoords: List[Tuple[float, ...]] = []

    def __len__(self):
        return len(self.positions)

    def counts(self) -> dict:
        return {
            POSITION: len(self.positions),
            "color": sum(1 for c in self.colors if c is not None),
            NORMAL: len(self.normals),
            TEXCOORD: len(self.texcoords),
        }

    # -----------------------------------------------------------------
    # v / vn / vt
    # -----------------------------------------------------------------
    def add_position(self, args, record: Record) -> None:
        if len(args) not in (3, 6):
            raise FormatError(f"'v' expects 3 or 6 numbers, got {len(args)}",
                              record.lineno, record.raw)
        values = parse_floats(args, record)
        self.positions.append(values[:3])
        self.colors.append(values[3:] if len(values) == 6 else None)

    def add_normal(self, args, record: Record) -> None:
        if len(args) != 3:
            raise FormatError(f"'vn' expects 3 numbers, got {len(args)}",
                              record.lineno, record.raw)
        self.normals.append(parse_floats(args, record))

    def add_texcoord(self, args, record: Record) -> None:
        if len(args) not in (2, 3):
            raise FormatError(f"'vt' expects 2 or 3 numbers, got {len(args)}",
                              record.lineno, record.raw)
        self.texcoords.append(parse_floats(args, record))

    # -----------------------------------------------------------------
    # разрешение индексов
    # -----------------------------------------------------------------
    def _table(self, kind: str) -> list:
        if kind == POSITION:
            return self.positions
        if kind == TEXCOORD:
            return self.texcoords
        if kind == NORMAL:
            return self.normals
        raise KeyError(kind)

    def resolve(self, kind: str, token: str, record: Record) -> int:
        """
        1‑based (или отрицательный) индекс OBJ → 0‑based слот.
        Отрицательные индексы считаются от текущей длины таблицы,
        т.е. `-1` – последний добавленный к этому моменту элемент.
        """
        try:
            index = _number(token, int)
        except ValueError:
            raise FormatError(f"bad {kind} index '{token}'",
                              record.lineno, record.raw) from None
        size = len(self._table(kind))
        slot = index - 1 if index > 0 else size + index
        if index == 0 or not 0 <= slot < size:
            raise ObjIndexError(kind, index, size, record.lineno, record.raw)
        return slot

    def position(self, slot: int):
        return self.positions[slot]

    def color(self, slot: int):
        return self.colors[slot]

    def normal(self, slot: int):
        return self.normals[slot]

    def texcoord(self, slot: int):
        return self.texcoords[slot]
