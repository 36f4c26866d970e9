# -*- coding: utf-8 -*-
"""
conftest.py – небольшие OBJ‑тексты, общие для всех тестов.
"""

import pytest

from polypath import parse


CUBE_OBJ = """\
# unit cube, 6 quads
mtllib cube.mtl
o Cube
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
v 0 0 1
v 1 0 1
v 1 1 1
v 0 1 1
vn 0 0 -1
vn 0 0 1
vt 0 0
vt 1 0
vt 1 1
vt 0 1
g front
usemtl red
f 1/1/1 2/2/1 3/3/1 4/4/1
f 5/1/2 6/2/2 7/3/2 8/4/2
g sides
usemtl blue
f 1 2 6 5
f 2 3 7 6
f 3 4 8 7
f 4 1 5 8
"""

TRIANGLES_OBJ = """\
v 0 0 0
v 1 0 0
v 0 1 0
v 1 1 0
f 1 2 3
f 2 4 3
"""


@pytest.fixture
def cube_text():
    return CUBE_OBJ


@pytest.fixture
def cube():
    return parse(CUBE_OBJ)


@pytest.fixture
def triangles():
    return parse(TRIANGLES_OBJ)
