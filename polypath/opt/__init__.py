"""
Пакет opt – порядок вершин, индексация, ограничивающие сферы, meshlets.
"""

from polypath.opt.optimize import optimize_vertex_order, indexed_vertices
from polypath.opt.bounding import Sphere, build_bounding_sphere
from polypath.opt.meshlet import Meshlet, build_meshlets

__all__ = ["optimize_vertex_order", "indexed_vertices", "Sphere",
           "build_bounding_sphere", "Meshlet", "build_meshlets"]
