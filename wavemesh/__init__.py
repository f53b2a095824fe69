"""
wavemesh – импортёр Wavefront OBJ/MTL в буферы, готовые для рендерера:
сваренные вершины, uint32‑индексы, таблица материалов, меши по
материалам, нормали и касательный базис, габариты.
"""

from wavemesh.utils import logger
from wavemesh.math import Vec3
from wavemesh.assets import Material, MaterialLibrary, load_material_library
from wavemesh.mesh import VERTEX_DTYPE, VertexWelder
from wavemesh.scene import Mesh, Model, load_model, model_to_dict

__version__ = "1.0.0"

__all__ = [
    "Vec3",
    "Material",
    "MaterialLibrary",
    "load_material_library",
    "VERTEX_DTYPE",
    "VertexWelder",
    "Mesh",
    "Model",
    "load_model",
    "model_to_dict",
]
