# -*- coding: utf-8 -*-
"""
Сглаженные нормали вершин.

Для каждого треугольника берётся ненормированное edge1 × edge2
(оба ребра от вершины 0) и прибавляется ко всем трём вершинам –
вклад пропорционален площади. После этого нормали нормируются.
"""

import numpy as np


def face_normals(positions: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """(T, 3) ненормированные нормали граней."""
    v0 = positions[triangles[:, 0]]
    v1 = positions[triangles[:, 1]]
    v2 = positions[triangles[:, 2]]
    return np.cross(v1 - v0, v2 - v0)


def normalize_rows(vectors: np.ndarray) -> np.ndarray:
    """Нормировать строки; нулевые строки остаются нулевыми."""
    lengths = np.linalg.norm(vectors, axis=1, keepdims=True)
    out = np.zeros_like(vectors)
    np.divide(vectors, lengths, out=out, where=lengths > 0.0)
    return out


def generate_normals(vertex_buffer: np.ndarray, index_buffer: np.ndarray) -> None:
    """Перезаписать поле `normal` вершинного буфера (in‑place)."""
    triangles = index_buffer.reshape(-1, 3).astype(np.intp)
    positions = vertex_buffer["position"].astype(np.float64)

    accumulated = np.zeros((len(vertex_buffer), 3), dtype=np.float64)
    normals = face_normals(positions, triangles)
    for corner in range(3):
        np.add.at(accumulated, triangles[:, corner], normals)

    vertex_buffer["normal"] = normalize_rows(accumulated)
