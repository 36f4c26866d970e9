# -*- coding: utf-8 -*-
import pytest

from polypath import (
    Config, FormatError, MaterialIdent, ObjBuilder, ObjIndexError, parse, tokenize,
)

TRI = "v 0 0 0\nv 1 0 0\nv 0 1 0\n"


def positions(face):
    return [[v.position for v in tri] for tri in face.triangles]


def test_cube_hierarchy(cube):
    assert cube.object_count() == 1
    obj = next(cube.objects_iter())
    assert obj.name == "Cube"
    # mtllib перед `o` переходит к объекту, пустой неявный объект исчезает
    assert obj.mtllib == "cube.mtl"
    assert [(g.name, g.mtluse, g.face_count()) for g in obj.group_iter()] == [
        ("front", "red", 2),
        ("sides", "blue", 4),
    ]
    assert cube.group_count() == 2
    assert cube.face_count() == 6
    assert cube.triangle_count() == 12
    assert cube.vert_count() == 36


def test_implicit_object_and_group():
    obj = parse(TRI + "f 1 2 3\nf 3 2 1\n")
    assert obj.object_count() == 1
    o = obj.objects[0]
    assert o.name == "default"
    assert o.mtllib is None
    assert len(o.groups) == 1
    assert o.groups[0].name == "default"
    assert o.groups[0].face_count() == 2


def test_default_name_from_config():
    config = Config()
    config["parser"] = {"default_name": "unnamed"}
    obj = parse(TRI + "f 1 2 3\n", config)
    assert obj.objects[0].name == "unnamed"
    assert obj.objects[0].groups[0].name == "unnamed"


def test_objects_and_groups_in_order():
    text = TRI + "o A\nf 1 2 3\ng g1\nf 1 2 3\no B Part\ng g2\nf 1 2 3\ng\nf 1 2 3\n"
    obj = parse(text)
    assert [o.name for o in obj.objects] == ["A", "B Part"]
    assert [g.name for g in obj.objects[0].groups] == ["default", "g1"]
    assert [g.name for g in obj.objects[1].groups] == ["g2", "default"]


def test_comment_then_vertex():
    obj = parse("# hello\nv 0 0 0\n")
    assert len(obj.tables) == 1
    assert obj.objects == []


def test_quad_triangulation_order():
    obj = parse("v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\n")
    face = obj.objects[0].groups[0].faces[0]
    assert face.size == 4
    assert positions(face) == [
        [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0)],
        [(0.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)],
    ]


def test_negative_index_uses_length_at_reference():
    text = TRI + "f -3 -2 -1\nv 5 5 5\nf -1 -2 -3\n"
    faces = parse(text).objects[0].groups[0].faces
    assert positions(faces[0]) == [[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]]
    assert positions(faces[1]) == [[(5.0, 5.0, 5.0), (0.0, 1.0, 0.0), (1.0, 0.0, 0.0)]]


def test_face_index_grammars():
    text = TRI + "vt 0 0\nvt 1 0 0.5\nvn 0 0 1\n" \
        "f 1/1 2/2 3/1\nf 1//1 2//1 3//1\nf 1/2/1 2/1/1 3/2/1\n"
    faces = parse(text).objects[0].groups[0].faces
    v = faces[0].vertices[1]
    assert v.texcoord == (1.0, 0.0, 0.5)
    assert v.normal is None
    v = faces[1].vertices[0]
    assert v.texcoord is None
    assert v.normal == (0.0, 0.0, 1.0)
    v = faces[2].vertices[2]
    assert v.texcoord == (1.0, 0.0, 0.5)
    assert v.normal == (0.0, 0.0, 1.0)


def test_vertex_color_follows_position():
    obj = parse("v 0 0 0 1 0 0\nv 1 0 0\nv 0 1 0 0 0 1\nf 1 2 3\n")
    a, b, c = obj.objects[0].groups[0].faces[0].vertices
    assert a.color == (1.0, 0.0, 0.0)
    assert b.color is None
    assert c.color == (0.0, 0.0, 1.0)


def test_material_index_and_list():
    text = TRI + "mtllib lib.mtl\ng a\nusemtl m1\nf 1 2 3\ng b\nf 1 2 3\ng c\nusemtl m2\nf 1 2 3\n" \
        "g d\nusemtl m1\nf 1 2 3\n"
    obj = parse(text)
    groups = obj.objects[0].groups
    idx = [g.faces[0].vertices[0].material_index for g in groups]
    assert idx == [0, None, 1, 0]
    assert obj.materials == [MaterialIdent("lib.mtl", "m1"), MaterialIdent("lib.mtl", "m2")]
    assert groups[0].faces[0].material == MaterialIdent("lib.mtl", "m1")
    assert groups[1].faces[0].material is None


def test_mtluse_keyword_alias_and_replacement():
    text = TRI + "mtluse first\nf 1 2 3\nmtluse second\nf 1 2 3\n"
    obj = parse(text)
    group = obj.objects[0].groups[0]
    assert group.mtluse == "second"
    assert [f.vertices[0].material_index for f in group.faces] == [0, 1]
    assert obj.materials == [MaterialIdent(None, "first"), MaterialIdent(None, "second")]


def test_unknown_and_smoothing_directives_ignored():
    obj = parse(TRI + "vp 0.5 0.5\ns 1\ncstype bezier\ns off\nf 1 2 3\n")
    assert obj.face_count() == 1


def test_strict_directives():
    config = Config()
    config["parser"] = {"strict_directives": True}
    with pytest.raises(FormatError) as info:
        parse(TRI + "vp 0.5 0.5\n", config)
    assert info.value.lineno == 4


@pytest.mark.parametrize("face", ["f 1 2", "f 1", "f", "f 1 2 3 1 2"])
def test_bad_vertex_count(face):
    with pytest.raises(FormatError) as info:
        parse(TRI + face + "\n")
    assert info.value.lineno == 4
    assert info.value.line == face


@pytest.mark.parametrize("face, kind, index", [
    ("f 1 2 4", "position", 4),
    ("f 0 1 2", "position", 0),
    ("f 1 2 -4", "position", -4),
    ("f 1/1 2/1 3/1", "texcoord", 1),
    ("f 1//1 2//1 3//1", "normal", 1),
])
def test_index_errors(face, kind, index):
    with pytest.raises(ObjIndexError) as info:
        parse(TRI + face + "\n")
    assert info.value.kind == kind
    assert info.value.index == index
    assert info.value.lineno == 4


@pytest.mark.parametrize("line", ["f 1/2/3/4 2 3", "f /1 2 3", "f 1/1/ 2 3", "f a 2 3", "o", "mtllib",
                                  "usemtl", "v 1 nan? 2", "v 1_0 0 0", "vt 0_5 1",
                                  "f 0_1 2 3", "f 1//-1_0 2 3"])
def test_format_errors(line):
    with pytest.raises(FormatError):
        parse(TRI + "vt 0 0\nvn 0 0 1\n" + line + "\n")


def test_failed_face_leaves_builder_untouched():
    builder = ObjBuilder()
    records = list(tokenize(TRI + "f 1 2 9\n"))
    for record in records[:-1]:
        builder.feed(record)
    with pytest.raises(ObjIndexError):
        builder.feed(records[-1])
    assert builder.objects == []
    assert len(builder.tables) == 3
    builder.feed(next(tokenize("f 1 2 3")))
    assert builder.finish().face_count() == 1


def test_mtllib_name_with_hash():
    obj = parse("mtllib my#1.mtl\no X\n" + TRI + "usemtl m\nf 1 2 3\n")
    assert [o.mtllib for o in obj.objects_iter()] == ["my#1.mtl"]
    assert obj.materials == [MaterialIdent("my#1.mtl", "m")]


@pytest.mark.parametrize("prefix", ["mtllib scene.mtl\n", "usemtl m\n", "g empty\n"])
def test_empty_implicit_object_replaced_by_named(prefix):
    obj = parse(prefix + "o X\n" + TRI + "f 1 2 3\n")
    assert [(o.name, [g.name for g in o.groups]) for o in obj.objects] == [("X", ["default"])]


def test_implicit_object_with_faces_kept():
    obj = parse(TRI + "f 1 2 3\no X\nf 1 2 3\n")
    assert [o.name for o in obj.objects] == ["default", "X"]
