"""
Пакет mesh – вершины, таблицы атрибутов, грани, дерево модели и его
построитель.
"""

from polypath.mesh.vertex import Vertex, MaterialIdent
from polypath.mesh.attributes import AttributeTables
from polypath.mesh.face import Face, Triangle, triangulate
from polypath.mesh.model import Group, Object, ObjObject, to_arrays
from polypath.mesh.builder import ObjBuilder, build

__all__ = ["Vertex", "MaterialIdent", "AttributeTables", "Face", "Triangle",
           "triangulate", "Group", "Object", "ObjObject", "to_arrays",
           "ObjBuilder", "build"]
