# -*- coding: utf-8 -*-
import numpy as np
import pytest

from wavemesh.assets.material import MaterialLibrary, Material
from wavemesh.errors import FaceReferenceError, MaterialLibraryError
from wavemesh.utils.loader import (
    FORM_V, FORM_V_VN, FORM_V_VT, FORM_V_VT_VN,
    GeometryCounts, face_form, first_pass, parse_face, resolve_index, second_pass,
)


def _lines(text):
    return [line.strip() + "\n" for line in text.strip().splitlines()]


def _run(text, directory="."):
    lines = _lines(text)
    counts, materials = first_pass(lines, directory)
    return counts, materials, second_pass(lines, counts, materials)


# ----------------------------------------------------------------------
# Грани
# ----------------------------------------------------------------------
@pytest.mark.parametrize("token, form", [
    ("1", FORM_V),
    ("1/2", FORM_V_VT),
    ("1//3", FORM_V_VN),
    ("1/2/3", FORM_V_VT_VN),
    ("1/2/3/4", None),
])
def test_face_form(token, form):
    assert face_form(token) == form


def test_face_ends_at_first_mismatching_corner():
    form, corners = parse_face(["1/1", "2/2", "3/3", "4//1", "5/5"])
    assert form == FORM_V_VT
    assert corners == [(1, 1, None), (2, 2, None), (3, 3, None)]


def test_face_with_garbage_first_token():
    assert parse_face(["a", "b", "c"]) == (FORM_V, [])


def test_resolve_positive_and_negative():
    assert resolve_index(1, 10, "position", 1) == 0
    assert resolve_index(10, 10, "position", 1) == 9
    assert resolve_index(-1, 10, "position", 1) == 9
    assert resolve_index(-10, 10, "position", 1) == 0


@pytest.mark.parametrize("reference", [0, 11, -11])
def test_resolve_out_of_range(reference):
    with pytest.raises(FaceReferenceError):
        resolve_index(reference, 10, "position", 5)


# ----------------------------------------------------------------------
# Проход 1
# ----------------------------------------------------------------------
def test_first_pass_counts():
    counts, materials = first_pass(_lines("""
        o thing
        v 0 0 0
        v 1 0 0
        v 1 1 0
        v 0 1 0
        v 0 2 0
        vt 0 0
        vn 0 0 1
        f 1 2 3
        f 1 2 3 4
        f 1 2 3 4 5
        f 1 2
        s off
    """))
    assert counts == GeometryCounts(positions=5, texcoords=1, normals=1, triangles=1 + 2 + 3)
    assert [m.name for m in materials] == ["default"]


def test_first_pass_loads_libraries_relative_to_directory(write_file, tmp_path):
    write_file("mats/a.mtl", "newmtl a\n")
    write_file("mats/b.mtl", "newmtl b\nnewmtl c\n")
    counts, materials = first_pass(["mtllib mats/a.mtl mats/b.mtl\n"], tmp_path)
    assert [m.name for m in materials] == ["a", "b", "c"]
    assert materials.index_of("c") == 2


def test_first_pass_missing_library(tmp_path):
    with pytest.raises(MaterialLibraryError):
        first_pass(["mtllib missing.mtl\n"], tmp_path)


# ----------------------------------------------------------------------
# Проход 2
# ----------------------------------------------------------------------
def test_second_pass_triangle_count_matches_first_pass():
    counts, _, geometry = _run("""
        v 0 0 0
        v 1 0 0
        v 1 1 0
        v 0 1 0
        v 0 2 0
        f 1 2 3 4 5
        f 1 2 3
    """)
    assert len(geometry.index_buffer) == 3 * counts.triangles
    assert len(geometry.attribute_buffer) == counts.triangles
    assert geometry.index_buffer.dtype == np.uint32


def test_fan_triangulation_order():
    _, _, geometry = _run("""
        v 0 0 0
        v 1 0 0
        v 1 1 0
        v 0 1 0
        f 1 2 3 4
    """)
    assert geometry.index_buffer.tolist() == [0, 1, 2, 0, 2, 3]
    assert len(geometry.vertex_buffer) == 4


def test_negative_indices_are_relative():
    text = "\n".join(f"v {i} 0 0" for i in range(10)) + "\nf -1 -2 -3\n"
    _, _, geometry = _run(text)
    positions = geometry.vertex_buffer["position"][geometry.index_buffer]
    assert positions[:, 0].tolist() == [9.0, 8.0, 7.0]


def test_negative_indices_follow_parse_position():
    _, _, geometry = _run("""
        v 0 0 0
        v 1 0 0
        v 2 0 0
        f -3 -2 -1
        v 3 0 0
        v 4 0 0
        v 5 0 0
        f -3 -2 -1
    """)
    positions = geometry.vertex_buffer["position"][geometry.index_buffer]
    assert positions[:, 0].tolist() == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]


def test_all_face_forms():
    _, _, geometry = _run("""
        v 0 0 0
        v 1 0 0
        v 0 1 0
        vt 0.5 0.5
        vn 0 0 1
        f 1 2 3
        f 1/1 2/1 3/1
        f 1//1 2//1 3//1
        f 1/1/1 2/1/1 3/1/1
    """)
    vb = geometry.vertex_buffer
    # четыре комбинации атрибутов → четыре разные вершины на каждую позицию
    assert len(vb) == 12
    first = geometry.index_buffer[9]
    np.testing.assert_array_equal(vb["texcoord"][first], [0.5, 0.5])
    np.testing.assert_array_equal(vb["normal"][first], [0, 0, 1])


def test_shared_corners_are_welded():
    _, _, geometry = _run("""
        v 0 0 0
        v 1 0 0
        v 1 1 0
        v 0 1 0
        f 1 2 3
        f 1 3 4
    """)
    assert len(geometry.vertex_buffer) == 4
    assert geometry.index_buffer.tolist() == [0, 1, 2, 0, 2, 3]


def test_usemtl_switches_material():
    lines = _lines("""
        v 0 0 0
        v 1 0 0
        v 0 1 0
        f 1 2 3
        usemtl glass
        f 1 2 3
        usemtl nothing_like_this
        f 1 2 3
    """)
    materials = MaterialLibrary([Material("stone"), Material("glass", alpha=0.5)])
    counts, _ = first_pass(lines)
    geometry = second_pass(lines, counts, materials)
    assert geometry.attribute_buffer.tolist() == [0, 1, 0]


def test_bad_reference_raises():
    with pytest.raises(FaceReferenceError):
        _run("""
            v 0 0 0
            v 1 0 0
            f 1 2 3
        """)


def test_index_invariant_holds():
    _, _, geometry = _run("""
        v 0 0 0
        v 1 0 0
        v 1 1 0
        v 0 1 0
        vt 0 0
        vt 1 0
        vt 1 1
        f 1/1 2/2 3/3 4/1
        f 4/3 3/2 1/1
    """)
    assert geometry.index_buffer.max() < len(geometry.vertex_buffer)
