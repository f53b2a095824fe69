"""
Габариты модели (AABB) и масштабирование позиций.

radius здесь – наибольшая из сторон box‑а, а не евклидов радиус
описанной сферы.
"""

from typing import NamedTuple

import numpy as np


class Bounds(NamedTuple):
    center: np.ndarray
    width: float
    height: float
    length: float
    radius: float


def compute_bounds(vertex_buffer: np.ndarray) -> Bounds:
    if len(vertex_buffer) == 0:
        return Bounds(np.zeros(3, dtype=np.float32), 0.0, 0.0, 0.0, 0.0)

    positions = vertex_buffer["position"]
    lo = positions.min(axis=0)
    hi = positions.max(axis=0)
    center = ((lo + hi) / 2.0).astype(np.float32)
    width, height, length = (float(e) for e in (hi - lo))
    return Bounds(center, width, height, length, max(width, height, length))


def scale_positions(vertex_buffer: np.ndarray, factor: float, offset=(0.0, 0.0, 0.0)) -> None:
    """position = (position + offset) * factor, in‑place."""
    positions = vertex_buffer["position"]
    positions += np.asarray(offset, dtype=np.float32)
    positions *= np.float32(factor)
