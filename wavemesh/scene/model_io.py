# wavemesh/scene/model_io.py
"""
Сводка импортированной модели в словарь (для JSON).
Буферы не выгружаются – только счётчики, флаги, габариты,
материалы и диапазоны мешей.
"""

from typing import Dict, Any

from wavemesh.assets.material import Material
from wavemesh.scene.model import Model


# ----------------------------------------------------------------------
def material_to_dict(material: Material) -> Dict[str, Any]:
    return {
        "name": material.name,
        "ambient": list(material.ambient),
        "diffuse": list(material.diffuse),
        "specular": list(material.specular),
        "shininess": material.shininess,
        "alpha": material.alpha,
        "color_map": material.color_map,
        "bump_map": material.bump_map,
    }


# ----------------------------------------------------------------------
def model_to_dict(model: Model) -> Dict[str, Any]:
    """Model → словарь из чисел/строк/списков."""
    return {
        "path": model.path,
        "counts": {
            "vertices": model.number_of_vertices,
            "triangles": model.number_of_triangles,
            "indices": model.number_of_indices,
            "materials": model.number_of_materials,
            "meshes": model.number_of_meshes,
        },
        "flags": {
            "positions": model.has_positions,
            "texcoords": model.has_texcoords,
            "normals": model.has_normals,
            "tangents": model.has_tangents,
        },
        "bounds": {
            "center": list(model.get_center().to_tuple()),
            "width": model.get_width(),
            "height": model.get_height(),
            "length": model.get_length(),
            "radius": model.get_radius(),
        },
        "materials": [material_to_dict(m) for m in model.materials],
        "meshes": [
            {
                "start_index": mesh.start_index,
                "triangle_count": mesh.triangle_count,
                "material": model.material_of(mesh).name,
            }
            for mesh in model.meshes
        ],
    }
