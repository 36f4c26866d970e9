"""
polypath – разбор Wavefront OBJ в иерархию объект → группа → грань →
вершина и выгрузка вершин (плоско или с индексным буфером).
"""

from polypath.utils import logger, Config
from polypath.errors import ObjError, ObjIoError, FormatError, ObjIndexError
from polypath.io.tokenizer import Record, tokenize
from polypath.mesh import (
    Vertex, MaterialIdent, Face, Triangle, Group, Object, ObjObject,
    ObjBuilder, triangulate, to_arrays,
)
from polypath.io.reader import parse, read_from_file, load_obj
from polypath import opt

__version__ = "0.3.0"

__all__ = [
    "Config",
    "ObjError",
    "ObjIoError",
    "FormatError",
    "ObjIndexError",
    "Record",
    "tokenize",
    "Vertex",
    "MaterialIdent",
    "Face",
    "Triangle",
    "Group",
    "Object",
    "ObjObject",
    "ObjBuilder",
    "triangulate",
    "to_arrays",
    "parse",
    "read_from_file",
    "load_obj",
    "opt",
]
