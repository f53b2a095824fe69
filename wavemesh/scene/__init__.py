"""
Пакет scene – модель, её меши и сводка.
"""

from wavemesh.scene.mesh import Mesh, build_meshes
from wavemesh.scene.model import Model, load_model
from wavemesh.scene.model_io import model_to_dict

__all__ = ["Mesh", "build_meshes", "Model", "load_model", "model_to_dict"]
