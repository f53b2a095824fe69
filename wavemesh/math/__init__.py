"""
Математический суб‑пакет: Vec3.
"""

from wavemesh.math.vec3 import Vec3

__all__ = ["Vec3"]
