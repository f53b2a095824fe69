# -*- coding: utf-8 -*-
"""
Касательный базис (tangent / bitangent / handedness) для normal‑map.

1️⃣  Для каждого треугольника решаем систему 2×2, связывающую рёбра
    в пространстве модели с рёбрами в uv. Если |det| < 1e-6
    (вырожденная развёртка) – берём канонический базис
    T = (1, 0, 0), B = (0, 1, 0).
2️⃣  Накопленные T и B раскладываем по трём вершинам.
3️⃣  На вершине: Грам‑Шмидт T относительно нормали, нормировка,
    B' = N × T. Знак dot(B', B_накопленный) даёт handedness (±1),
    который пишется в tangent.w; в bitangent кладём B'.
"""

import numpy as np

from wavemesh.mesh.normals import normalize_rows

DEGENERATE_DET = 1e-6


def triangle_basis(positions: np.ndarray, texcoords: np.ndarray,
                   triangles: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """(T, 3) tangent и bitangent каждого треугольника (не нормированы)."""
    p0 = positions[triangles[:, 0]]
    edge1 = positions[triangles[:, 1]] - p0
    edge2 = positions[triangles[:, 2]] - p0

    uv0 = texcoords[triangles[:, 0]]
    tex_edge1 = texcoords[triangles[:, 1]] - uv0
    tex_edge2 = texcoords[triangles[:, 2]] - uv0

    det = tex_edge1[:, 0] * tex_edge2[:, 1] - tex_edge2[:, 0] * tex_edge1[:, 1]
    degenerate = np.abs(det) < DEGENERATE_DET
    inv_det = 1.0 / np.where(degenerate, 1.0, det)

    tangent = (tex_edge2[:, 1:2] * edge1 - tex_edge1[:, 1:2] * edge2) * inv_det[:, None]
    bitangent = (-tex_edge2[:, 0:1] * edge1 + tex_edge1[:, 0:1] * edge2) * inv_det[:, None]

    tangent[degenerate] = (1.0, 0.0, 0.0)
    bitangent[degenerate] = (0.0, 1.0, 0.0)
    return tangent, bitangent


def _perpendicular(normals: np.ndarray) -> np.ndarray:
    """Какой‑нибудь единичный вектор ⟂ нормали (для нулевой нормали – X)."""
    axis = np.zeros_like(normals)
    use_x = np.abs(normals[:, 0]) < 0.9
    axis[use_x, 0] = 1.0
    axis[~use_x, 1] = 1.0
    perp = normalize_rows(np.cross(normals, axis))
    zero = ~np.any(perp, axis=1)
    perp[zero] = (1.0, 0.0, 0.0)
    return perp


def generate_tangents(vertex_buffer: np.ndarray, index_buffer: np.ndarray) -> None:
    """Заполнить поля `tangent` и `bitangent` вершинного буфера (in‑place)."""
    count = len(vertex_buffer)
    triangles = index_buffer.reshape(-1, 3).astype(np.intp)
    positions = vertex_buffer["position"].astype(np.float64)
    texcoords = vertex_buffer["texcoord"].astype(np.float64)

    tri_tangent, tri_bitangent = triangle_basis(positions, texcoords, triangles)

    tangent_sum = np.zeros((count, 3), dtype=np.float64)
    bitangent_sum = np.zeros((count, 3), dtype=np.float64)
    for corner in range(3):
        np.add.at(tangent_sum, triangles[:, corner], tri_tangent)
        np.add.at(bitangent_sum, triangles[:, corner], tri_bitangent)

    # нормаль из файла может быть не единичной – работаем с направлением
    normals = normalize_rows(vertex_buffer["normal"].astype(np.float64))

    n_dot_t = np.sum(normals * tangent_sum, axis=1, keepdims=True)
    tangent = tangent_sum - normals * n_dot_t
    lengths = np.linalg.norm(tangent, axis=1)
    collapsed = lengths < 1e-12
    tangent = normalize_rows(tangent)
    if np.any(collapsed):
        tangent[collapsed] = _perpendicular(normals[collapsed])

    bitangent = np.cross(normals, tangent)
    handedness = np.where(np.sum(bitangent * bitangent_sum, axis=1) >= 0.0, 1.0, -1.0)

    out = vertex_buffer["tangent"]
    out[:, 0:3] = tangent
    out[:, 3] = handedness
    vertex_buffer["bitangent"] = bitangent
