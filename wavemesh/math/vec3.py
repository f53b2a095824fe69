# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float32) – центр модели и т.п.
"""
import numpy as np


class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float32)

    @classmethod
    def from_np(cls, arr) -> "Vec3":
        x, y, z = (float(c) for c in np.asarray(arr).reshape(3))
        return cls(x, y, z)

    # -------------------------------------------------
    # только чтение: центр модели не правится снаружи
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    def __sub__(self, other):
        return Vec3(*(self._v - other._v))

    def __neg__(self):
        return Vec3(*(-self._v))

    def length(self):
        return float(np.linalg.norm(self._v))

    def as_np(self) -> np.ndarray:
        """Копия 3‑элементного массива float32."""
        return self._v.copy()

    def to_tuple(self) -> tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __eq__(self, other):
        return isinstance(other, Vec3) and bool(np.array_equal(self._v, other._v))

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"
