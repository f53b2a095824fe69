# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: запись OBJ/MTL‑текста во временный
каталог и сброс общего Config между тестами.
"""

import textwrap
from pathlib import Path

import pytest

from wavemesh.utils.config import Config


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip("\n")


# ----------------------------------------------------------------------
# Записать файл модели / материалов в tmp_path
# ----------------------------------------------------------------------
@pytest.fixture
def write_file(tmp_path):
    """write_file("name.obj", "...") -> Path"""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(_dedent(text), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def triangle_obj(write_file) -> Path:
    """Один треугольник в плоскости XY."""
    return write_file("triangle.obj", """
        v 0 0 0
        v 1 0 0
        v 0 1 0
        f 1 2 3
    """)


@pytest.fixture
def quad_obj(write_file) -> Path:
    return write_file("quad.obj", """
        v 0 0 0
        v 1 0 0
        v 1 1 0
        v 0 1 0
        f 1 2 3 4
    """)


@pytest.fixture
def textured_cube(write_file) -> Path:
    """Куб 2×2×2 с uv, нормалями и bump‑картой – для касательных."""
    write_file("cube.mtl", """
        newmtl stone
        Kd 0.6 0.6 0.6
        map_Kd textures/stone.png
        map_bump textures/stone_n.png
    """)
    return write_file("cube.obj", """
        mtllib cube.mtl
        v -1 -1  1
        v  1 -1  1
        v  1  1  1
        v -1  1  1
        v -1 -1 -1
        v  1 -1 -1
        v  1  1 -1
        v -1  1 -1
        vt 0 0
        vt 1 0
        vt 1 1
        vt 0 1
        vn 0 0 1
        vn 0 0 -1
        vn 1 0 0
        vn -1 0 0
        vn 0 1 0
        vn 0 -1 0
        usemtl stone
        f 1/1/1 2/2/1 3/3/1 4/4/1
        f 6/1/2 5/2/2 8/3/2 7/4/2
        f 2/1/3 6/2/3 7/3/3 3/4/3
        f 5/1/4 1/2/4 4/3/4 8/4/4
        f 4/1/5 3/2/5 7/3/5 8/4/5
        f 5/1/6 6/2/6 2/3/6 1/4/6
    """)


# ----------------------------------------------------------------------
# Config – singleton, поэтому сбрасываем его вокруг каждого теста
# ----------------------------------------------------------------------
@pytest.fixture(autouse=True)
def fresh_config():
    Config.reset()
    yield
    Config.reset()
