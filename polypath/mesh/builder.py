# -*- coding: utf-8 -*-
"""
Построитель иерархии: поток записей → дерево ObjObject.

Держит два курсора – «текущий объект» и «текущая группа». Оба создаются
лениво через `_current_group()`, поэтому файл без `o`/`g` получает один
неявный объект с одной неявной группой.

Каждая запись применяется атомарно: сначала всё проверяется и
разрешается, потом меняется состояние.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from polypath.errors import FormatError
from polypath.io.tokenizer import Record
from polypath.mesh.attributes import AttributeTables, NORMAL, POSITION, TEXCOORD
from polypath.mesh.face import Face, MAX_FACE_VERTICES
from polypath.mesh.model import Group, Object, ObjObject
from polypath.mesh.vertex import MaterialIdent, Vertex
from polypath.utils.config import Config
from polypath.utils.logger import logger

# директива → метод построителя
DIRECTIVES = {
    "v": "_on_position",
    "vn": "_on_normal",
    "vt": "_on_texcoord",
    "f": "_on_face",
    "o": "_on_object",
    "g": "_on_group",
    "mtllib": "_on_mtllib",
    "usemtl": "_on_mtluse",
    "mtluse": "_on_mtluse",
    "s": "_on_smoothing",
}


class ObjBuilder:
    """Конечный автомат над директивами OBJ."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else Config()
        self.tables = AttributeTables()
        self.objects: List[Object] = []
        self.materials: List[MaterialIdent] = []
        self._material_index: Dict[MaterialIdent, int] = {}
        self._object: Optional[Object] = None
        self._object_implicit = False
        self._mtllib: Optional[str] = None   # последний mtllib, наследуется новыми объектами
        self._group: Optional[Group] = None
        self._ignored = set()

    # -----------------------------------------------------------------
    # курсоры
    # -----------------------------------------------------------------
    def _current_object(self) -> Object:
        if self._object is None:
            self._object = Object(self.config.default_name, self._mtllib)
            self._object_implicit = True
            self.objects.append(self._object)
        return self._object

    def _current_group(self) -> Group:
        if self._group is None:
            group = Group(self.config.default_name)
            self._current_object().groups.append(group)
            self._group = group
        return self._group

    # -----------------------------------------------------------------
    # публичный интерфейс
    # -----------------------------------------------------------------
    def feed(self, record: Record) -> None:
        handler = DIRECTIVES.get(record.keyword)
        if handler is None:
            self._on_unknown(record)
            return
        getattr(self, handler)(record)

    def feed_all(self, records: Iterable[Record]) -> "ObjBuilder":
        for record in records:
            self.feed(record)
        return self

    def finish(self) -> ObjObject:
        obj = ObjObject(self.objects, self.tables, self.materials)
        logger.info(f"[Parser] Built {obj.object_count()} object(s), "
                    f"{obj.group_count()} group(s), {obj.face_count()} face(s).")
        return obj

    # -----------------------------------------------------------------
    # атрибуты
    # -----------------------------------------------------------------
    def _on_position(self, record: Record) -> None:
        self.tables.add_position(record.args, record)

    def _on_normal(self, record: Record) -> None:
        self.tables.add_normal(record.args, record)

    def _on_texcoord(self, record: Record) -> None:
        self.tables.add_texcoord(record.args, record)

    # -----------------------------------------------------------------
    # группировка
    # -----------------------------------------------------------------
    def _on_object(self, record: Record) -> None:
        if not record.args:
            raise FormatError("'o' expects a name", record.lineno, record.raw)
        # неявный объект без граней (например, после mtllib/usemtl) заменяется
        if self._object_implicit and not any(g.faces for g in self._object.groups):
            self.objects.remove(self._object)
        self._object = Object(" ".join(record.args), self._mtllib)
        self._object_implicit = False
        self.objects.append(self._object)
        # группа по‑умолчанию нового объекта появится лениво
        self._group = None

    def _on_group(self, record: Record) -> None:
        name = " ".join(record.args) if record.args else self.config.default_name
        group = Group(name)
        self._current_object().groups.append(group)
        self._group = group

    def _on_mtllib(self, record: Record) -> None:
        if not record.args:
            raise FormatError("'mtllib' expects a path", record.lineno, record.raw)
        obj = self._current_object()
        path = " ".join(record.args)
        if obj.mtllib is not None and obj.mtllib != path:
            logger.warning(f"[Parser] line {record.lineno}: object '{obj.name}' "
                           f"replaces mtllib '{obj.mtllib}' with '{path}'")
        obj.mtllib = path
        self._mtllib = path

    def _on_mtluse(self, record: Record) -> None:
        if not record.args:
            raise FormatError(f"'{record.keyword}' expects a material name",
                              record.lineno, record.raw)
        group = self._current_group()
        name = " ".join(record.args)
        if group.mtluse is not None and group.mtluse != name:
            logger.warning(f"[Parser] line {record.lineno}: group '{group.name}' "
                           f"switches material '{group.mtluse}' -> '{name}'")
        group.mtluse = name

    def _on_smoothing(self, record: Record) -> None:
        # группы сглаживания не поддерживаются – директива игнорируется
        pass

    def _on_unknown(self, record: Record) -> None:
        if self.config.strict_directives:
            raise FormatError(f"unknown directive '{record.keyword}'",
                              record.lineno, record.raw)
        if record.keyword not in self._ignored:
            self._ignored.add(record.keyword)
            logger.debug(f"[Parser] line {record.lineno}: ignoring directive "
                         f"'{record.keyword}'")

    # -----------------------------------------------------------------
    # грани
    # -----------------------------------------------------------------
    def _on_face(self, record: Record) -> None:
        count = len(record.args)
        if not 3 <= count <= MAX_FACE_VERTICES:
            raise FormatError(f"face needs 3 or 4 vertices, got {count}",
                              record.lineno, record.raw)
        resolved = [self._resolve_corner(token, record) for token in record.args]

        # проверки пройдены – дальше только изменение состояния
        group = self._current_group()
        material = None
        material_index = None
        if group.mtluse is not None:
            material = MaterialIdent(self._current_object().mtllib, group.mtluse)
            material_index = self._register_material(material)
        vertices = [v.with_material(material_index) for v in resolved]
        group.faces.append(Face(vertices, material))

    def _resolve_corner(self, token: str, record: Record) -> Vertex:
        """Форматы: v, v/vt, v//vn, v/vt/vn."""
        parts = token.split("/")
        if len(parts) > 3 or not parts[0]:
            raise FormatError(f"bad face vertex '{token}'", record.lineno, record.raw)
        tables = self.tables
        slot = tables.resolve(POSITION, parts[0], record)
        texcoord = None
        normal = None
        if len(parts) > 1 and parts[1]:
            texcoord = tables.texcoord(tables.resolve(TEXCOORD, parts[1], record))
        if len(parts) > 2:
            if not parts[2]:
                raise FormatError(f"bad face vertex '{token}'", record.lineno, record.raw)
            normal = tables.normal(tables.resolve(NORMAL, parts[2], record))
        return Vertex(tables.position(slot), tables.color(slot), normal, texcoord)

    def _register_material(self, material: MaterialIdent) -> int:
        index = self._material_index.get(material)
        if index is None:
            index = len(self.materials)
            self._material_index[material] = index
            self.materials.append(material)
        return index


def build(records: Iterable[Record], config: Optional[Config] = None) -> ObjObject:
    """Собрать модель из готового потока записей."""
    return ObjBuilder(config).feed_all(records).finish()
