#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Обход иерархии .obj: файл → объекты → группы → грани → вершины.

    python examples/iter.py path/to/mesh.obj
"""

import sys

from polypath import read_from_file
from polypath.utils import logger


def main(path):
    # грани с 4 вершинами автоматически разбиваются на 2 треугольника
    obj = read_from_file(path)

    for o in obj.objects_iter():
        print(f"Object name: {o.name}")
        print(f"Object material: {o.mtllib}")

        for g in o.group_iter():
            print(f"  Group name: {g.name}")
            print(f"  Group material: {g.mtluse}")

            for f in g.faces_iter():
                for tri in f.triangles:
                    print("    Positions:", [v.position for v in tri])


if __name__ == "__main__":
    if len(sys.argv) < 2:
        logger.error("usage: iter.py <file.obj>")
        sys.exit(1)
    main(sys.argv[1])
