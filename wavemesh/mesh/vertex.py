# -*- coding: utf-8 -*-
"""
Формат вершины – interleaved‑запись, готовая к загрузке в GPU:

    position  3 × float32
    texcoord  2 × float32
    normal    3 × float32
    tangent   4 × float32   (xyz + знак handedness)
    bitangent 3 × float32

Итого 60 байт на вершину.
"""

import numpy as np

VERTEX_DTYPE = np.dtype([
    ("position", np.float32, 3),
    ("texcoord", np.float32, 2),
    ("normal", np.float32, 3),
    ("tangent", np.float32, 4),
    ("bitangent", np.float32, 3),
])

# position + texcoord + normal – то, что сравнивает сварщик
WELD_RECORD_SIZE = 8


def empty_vertex_buffer(count: int = 0) -> np.ndarray:
    return np.zeros(count, dtype=VERTEX_DTYPE)


def make_candidate(position, texcoord=None, normal=None) -> np.ndarray:
    """Собрать запись (pos, uv, normal); отсутствующие части – нули."""
    record = np.zeros(WELD_RECORD_SIZE, dtype=np.float32)
    record[0:3] = position
    if texcoord is not None:
        record[3:5] = texcoord
    if normal is not None:
        record[5:8] = normal
    return record
