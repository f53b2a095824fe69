# -*- coding: utf-8 -*-
import pytest

from wavemesh.assets.material import DEFAULT_MATERIAL_NAME, Material, default_material
from wavemesh.assets.mtl_loader import count_materials, load_material_library


def test_defaults_on_newmtl(write_file):
    lib = load_material_library(write_file("a.mtl", "newmtl plain\n"))
    (m,) = lib.materials
    assert m.name == "plain"
    assert m.ambient == (0.2, 0.2, 0.2, 1.0)
    assert m.diffuse == (0.8, 0.8, 0.8, 1.0)
    assert m.specular == (0.0, 0.0, 0.0, 1.0)
    assert m.shininess == 0.0
    assert m.alpha == 1.0
    assert m.color_map == ""
    assert m.bump_map == ""


def test_all_directives(write_file):
    lib = load_material_library(write_file("a.mtl", """
        # exported
        newmtl shiny
        Ka 0.1 0.2 0.3
        Kd 0.4 0.5 0.6
        Ks 0.7 0.8 0.9
        Ns 500
        d 0.25
        map_Kd tex/diffuse.png
        map_bump tex/normal.png
        Ni 1.45
    """))
    m = lib[0]
    assert m.ambient == (0.1, 0.2, 0.3, 1.0)
    assert m.diffuse == (0.4, 0.5, 0.6, 1.0)
    assert m.specular == (0.7, 0.8, 0.9, 1.0)
    assert m.shininess == pytest.approx(0.5)
    assert m.alpha == 0.25
    assert m.color_map == "tex/diffuse.png"
    assert m.bump_map == "tex/normal.png"
    assert m.has_bump_map


def test_tr_and_d_normalize_to_same_alpha(write_file):
    lib = load_material_library(write_file("a.mtl", """
        newmtl glass_tr
        Tr 0.3
        newmtl glass_d
        d 0.7
    """))
    assert lib[0].alpha == pytest.approx(0.7)
    assert lib[1].alpha == pytest.approx(0.7)


def test_illum_1_zeroes_specular(write_file):
    lib = load_material_library(write_file("a.mtl", """
        newmtl matte
        Ks 1 1 1
        illum 1
        newmtl lit
        Ks 1 1 1
        illum 2
    """))
    assert lib[0].specular == (0.0, 0.0, 0.0, 1.0)
    assert lib[1].specular == (1.0, 1.0, 1.0, 1.0)


def test_bump_aliases(write_file):
    lib = load_material_library(write_file("a.mtl", """
        newmtl a
        map_Bump a_n.png
        newmtl b
        bump b_n.png
    """))
    assert [m.bump_map for m in lib] == ["a_n.png", "b_n.png"]


def test_malformed_lines_are_tolerated(write_file):
    lib = load_material_library(write_file("a.mtl", """
        Kd 1 0 0
        newmtl broken
        Ns lots
        d
        illum two
        Kd 0.5
        frobnicate 1 2 3
    """))
    (m,) = lib.materials
    assert m.shininess == 0.0
    assert m.alpha == 1.0
    assert m.diffuse == (0.5, 0.0, 0.0, 1.0)


def test_lookup_by_name(write_file):
    lib = load_material_library(write_file("a.mtl", """
        newmtl red
        newmtl green
        newmtl blue
    """))
    assert len(lib) == 3
    assert lib.index_of("green") == 1
    assert lib.index_of("missing") == 0
    assert "blue" in lib
    assert not lib.has_bump_maps


def test_missing_file_returns_none(tmp_path):
    assert load_material_library(tmp_path / "nope.mtl") is None


def test_count_materials_counts_newmtl_only():
    lines = ["newmtl a\n", "Kd 1 1 1\n", "newmtl b\n", "# newmtl c\n"]
    assert count_materials(lines) == 2


def test_material_is_immutable():
    m = default_material()
    assert m.name == DEFAULT_MATERIAL_NAME
    with pytest.raises(AttributeError):
        m.alpha = 0.5
    assert isinstance(m._replace(alpha=0.5), Material)
