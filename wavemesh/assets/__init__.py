"""
Материалы: запись Material, таблица и загрузчик .mtl.
"""

from wavemesh.assets.material import Material, MaterialLibrary, default_material
from wavemesh.assets.mtl_loader import load_material_library

__all__ = ["Material", "MaterialLibrary", "default_material", "load_material_library"]
