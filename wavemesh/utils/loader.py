# -*- coding: utf-8 -*-
"""
Парсер Wavefront OBJ в два прохода.

Проход 1 (`first_pass`) только считает: позиции, texcoords, нормали
и треугольники (полигон из k углов → k‑2 треугольника веером), плюс
загружает библиотеки материалов из `mtllib`.

Проход 2 (`second_pass`) читает файл заново в буферы точного размера,
разрешает индексы граней (1‑based и отрицательные относительные),
триангулирует веером от первого угла и прогоняет каждый угол через
сварщик вершин.

Поддерживаются только v / vt / vn / f / mtllib / usemtl; всё остальное
пропускается целиком.
"""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple, Optional

import numpy as np

from wavemesh.assets.material import MaterialLibrary, default_material
from wavemesh.assets.mtl_loader import load_material_library
from wavemesh.errors import FaceReferenceError, MaterialLibraryError, ObjImportError
from wavemesh.mesh.vertex import make_candidate
from wavemesh.mesh.welder import VertexWelder
from wavemesh.utils.logger import logger
from wavemesh.utils.tokenizer import SkippedDirectives, iter_directives, parse_floats

# формы записи угла грани
FORM_V = "v"
FORM_V_VT = "v/vt"
FORM_V_VN = "v//vn"
FORM_V_VT_VN = "v/vt/vn"

# (позиция, texcoord | None, нормаль | None) – сырые ссылки из файла
Corner = tuple[int, Optional[int], Optional[int]]


class GeometryCounts(NamedTuple):
    positions: int = 0
    texcoords: int = 0
    normals: int = 0
    triangles: int = 0


class Geometry(NamedTuple):
    """Результат второго прохода."""
    vertex_buffer: np.ndarray
    index_buffer: np.ndarray
    attribute_buffer: np.ndarray


# ---------------------------------------------------------------------
# Грани
# ---------------------------------------------------------------------
def face_form(token: str) -> str | None:
    """Определить форму угла по первому токену грани."""
    if "//" in token:
        return FORM_V_VN
    parts = token.split("/")
    if len(parts) == 1:
        return FORM_V
    if len(parts) == 2:
        return FORM_V_VT
    if len(parts) == 3:
        return FORM_V_VT_VN
    return None


def parse_corner(token: str, form: str) -> Corner | None:
    """Разобрать угол в заданной форме; None – если токен ей не соответствует."""
    parts = token.split("/")
    try:
        if form == FORM_V and len(parts) == 1:
            return int(parts[0]), None, None
        if form == FORM_V_VT and len(parts) == 2:
            return int(parts[0]), int(parts[1]), None
        if form == FORM_V_VN and len(parts) == 3 and not parts[1]:
            return int(parts[0]), None, int(parts[2])
        if form == FORM_V_VT_VN and len(parts) == 3 and parts[1]:
            return int(parts[0]), int(parts[1]), int(parts[2])
    except ValueError:
        return None
    return None


def parse_face(args: list[str]) -> tuple[str | None, list[Corner]]:
    """
    Форма берётся из первого токена; грань заканчивается на первом
    угле, который в эту форму не укладывается.
    """
    if not args:
        return None, []
    form = face_form(args[0])
    corners: list[Corner] = []
    if form is None:
        return None, corners
    for token in args:
        corner = parse_corner(token, form)
        if corner is None:
            break
        corners.append(corner)
    return form, corners


def fan_triangle_count(corner_count: int) -> int:
    return max(corner_count - 2, 0)


def resolve_index(reference: int, available: int, kind: str, line_no: int) -> int:
    """
    1‑based → 0‑based; отрицательная ссылка считается от числа уже
    прочитанных элементов (-1 – последний).
    """
    index = available + reference if reference < 0 else reference - 1
    if not 0 <= index < available:
        raise FaceReferenceError(kind, reference, available, line_no)
    return index


# ---------------------------------------------------------------------
# Проход 1
# ---------------------------------------------------------------------
def first_pass(lines, directory: Path | str = ".") -> tuple[GeometryCounts, MaterialLibrary]:
    """
    Посчитать элементы и загрузить материалы.
    Без объявленных материалов создаётся один "default".
    """
    directory = Path(directory)
    positions = texcoords = normals = triangles = 0
    materials = MaterialLibrary()
    skipped = SkippedDirectives("Loader")

    for directive in iter_directives(lines):
        keyword = directive.keyword
        if keyword == "v":
            positions += 1
        elif keyword == "vt":
            texcoords += 1
        elif keyword == "vn":
            normals += 1
        elif keyword == "f":
            _, corners = parse_face(directive.args)
            triangles += fan_triangle_count(len(corners))
        elif keyword == "mtllib":
            for name in directive.args:
                library = load_material_library(directory / name)
                if library is None:
                    raise MaterialLibraryError(directory / name)
                materials = materials.merged(library)
        elif keyword == "usemtl":
            pass  # нужен только во втором проходе
        else:
            skipped.skip(directive)

    if len(materials) == 0:
        materials = MaterialLibrary([default_material()])

    counts = GeometryCounts(positions, texcoords, normals, triangles)
    logger.debug(f"[Loader] First pass: {counts}, {len(materials)} material(s)")
    return counts, materials


# ---------------------------------------------------------------------
# Проход 2
# ---------------------------------------------------------------------
class _Emitter:
    """Состояние второго прохода: сырые массивы, счётчики, буферы."""

    def __init__(self, counts: GeometryCounts, welder: VertexWelder):
        self.counts = counts
        self.welder = welder
        self.positions = np.zeros((counts.positions, 3), dtype=np.float32)
        self.texcoords = np.zeros((counts.texcoords, 2), dtype=np.float32)
        self.normals = np.zeros((counts.normals, 3), dtype=np.float32)
        self.index_buffer = np.zeros(counts.triangles * 3, dtype=np.uint32)
        self.attribute_buffer = np.zeros(counts.triangles, dtype=np.int32)
        self.num_positions = 0
        self.num_texcoords = 0
        self.num_normals = 0
        self.num_triangles = 0

    @staticmethod
    def _push(array: np.ndarray, count: int, values) -> int:
        if count >= len(array):
            raise ObjImportError("Geometry changed between import passes")
        array[count] = values
        return count + 1

    def add_position(self, args):
        self.num_positions = self._push(self.positions, self.num_positions, parse_floats(args, 3))

    def add_texcoord(self, args):
        self.num_texcoords = self._push(self.texcoords, self.num_texcoords, parse_floats(args, 2))

    def add_normal(self, args):
        self.num_normals = self._push(self.normals, self.num_normals, parse_floats(args, 3))

    def _resolve(self, corner: Corner, line_no: int) -> Corner:
        v, vt, vn = corner
        v = resolve_index(v, self.num_positions, "position", line_no)
        if vt is not None:
            vt = resolve_index(vt, self.num_texcoords, "texcoord", line_no)
        if vn is not None:
            vn = resolve_index(vn, self.num_normals, "normal", line_no)
        return v, vt, vn

    def _weld(self, corner: Corner) -> int:
        v, vt, vn = corner
        candidate = make_candidate(
            self.positions[v],
            self.texcoords[vt] if vt is not None else None,
            self.normals[vn] if vn is not None else None,
        )
        return self.welder.weld(v, candidate)

    def add_face(self, corners: list[Corner], material: int, line_no: int):
        resolved = [self._resolve(c, line_no) for c in corners]
        anchor = resolved[0]
        for i in range(1, len(resolved) - 1):
            tri = self.num_triangles
            if tri >= self.counts.triangles:
                raise ObjImportError("Geometry changed between import passes")
            base = tri * 3
            self.index_buffer[base] = self._weld(anchor)
            self.index_buffer[base + 1] = self._weld(resolved[i])
            self.index_buffer[base + 2] = self._weld(resolved[i + 1])
            self.attribute_buffer[tri] = material
            self.num_triangles += 1


def second_pass(lines, counts: GeometryCounts, materials: MaterialLibrary,
                welder: VertexWelder | None = None) -> Geometry:
    """Заполнить буферы. Бросает ObjImportError при битых ссылках граней."""
    welder = welder if welder is not None else VertexWelder()
    emitter = _Emitter(counts, welder)
    active_material = 0

    for directive in iter_directives(lines):
        keyword = directive.keyword
        if keyword == "v":
            emitter.add_position(directive.args)
        elif keyword == "vt":
            emitter.add_texcoord(directive.args)
        elif keyword == "vn":
            emitter.add_normal(directive.args)
        elif keyword == "f":
            _, corners = parse_face(directive.args)
            if len(corners) >= 3:
                emitter.add_face(corners, active_material, directive.line_no)
        elif keyword == "usemtl":
            name = directive.rest
            if name not in materials:
                logger.debug(f"[Loader] Unknown material '{name}', using material 0")
            active_material = materials.index_of(name, 0)

    if emitter.num_triangles != counts.triangles:
        raise ObjImportError("Geometry changed between import passes")

    return Geometry(welder.to_vertex_buffer(), emitter.index_buffer,
                    emitter.attribute_buffer)
