"""
Геометрия: формат вершины, сварка, нормали, касательные, габариты.
"""

from wavemesh.mesh.vertex import VERTEX_DTYPE, empty_vertex_buffer, make_candidate
from wavemesh.mesh.welder import VertexWelder
from wavemesh.mesh.normals import generate_normals
from wavemesh.mesh.tangents import generate_tangents
from wavemesh.mesh.bounds import Bounds, compute_bounds, scale_positions

__all__ = [
    "VERTEX_DTYPE",
    "empty_vertex_buffer",
    "make_candidate",
    "VertexWelder",
    "generate_normals",
    "generate_tangents",
    "Bounds",
    "compute_bounds",
    "scale_positions",
]
