#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Плоские и индексированные вершины, плюс оптимизация порядка и meshlets.

    python examples/vertices.py path/to/mesh.obj
"""

import sys

from polypath import read_from_file, to_arrays
from polypath.opt import optimize_vertex_order, indexed_vertices, build_meshlets
from polypath.utils import logger, Profiler


def main(path):
    obj = read_from_file(path)

    # каждые 3 вершины – один треугольник, общие вершины повторяются
    verts, materials = obj.vertices()
    print(f"verts: {len(verts)}  materials: {len(materials)}")

    # индексный буфер + уникальные вершины
    indices, unique, _ = obj.vertices_indexed()
    print(f"indices: {len(indices)}  --  verts: {len(unique)}")

    with Profiler("optimize_vertex_order"):
        ordered = optimize_vertex_order(verts)
    indices, unique = indexed_vertices(ordered)
    print(f"optimized indices: {len(indices)}  --  verts: {len(unique)}")

    meshlets = build_meshlets(indices, unique)
    print(f"meshlets: {len(meshlets)}")

    arrays = to_arrays(unique)
    print("positions:", arrays["positions"].shape)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        logger.error("usage: vertices.py <file.obj>")
        sys.exit(1)
    main(sys.argv[1])
