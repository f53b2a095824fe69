# -*- coding: utf-8 -*-
"""
Модель, загруженная из Wavefront OBJ.

Владеет всеми буферами, готовыми для внешнего рендерера:

    vertex_buffer    – interleaved VERTEX_DTYPE (pos, uv, normal, tangent, bitangent)
    index_buffer     – uint32, по 3 индекса на треугольник
    attribute_buffer – индекс материала для каждого треугольника
    materials        – неизменяемый кортеж Material
    meshes           – кортеж Mesh, от непрозрачных к прозрачным

Конвейер `import_file`:
    проход 1 → проход 2 (сварка) → меши → габариты → нормали → касательные.

Импорт либо полностью успешен (True), либо модель остаётся пустой
(False); исключения наружу не выходят.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np

from wavemesh.assets.material import Material
from wavemesh.errors import ObjImportError
from wavemesh.math.vec3 import Vec3
from wavemesh.mesh.bounds import compute_bounds, scale_positions
from wavemesh.mesh.normals import generate_normals
from wavemesh.mesh.tangents import generate_tangents
from wavemesh.mesh.vertex import VERTEX_DTYPE, empty_vertex_buffer
from wavemesh.scene.mesh import Mesh, build_meshes
from wavemesh.utils.config import Config
from wavemesh.utils.loader import first_pass, second_pass
from wavemesh.utils.logger import logger
from wavemesh.utils.profiler import Profiler


class Model:
    """Импортированная OBJ‑модель + её габариты."""

    def __init__(self):
        self.unload()

    # -----------------------------------------------------------------
    # Жизненный цикл
    # -----------------------------------------------------------------
    def unload(self) -> None:
        """Сбросить модель в пустое состояние."""
        self.vertex_buffer: np.ndarray = empty_vertex_buffer()
        self.index_buffer: np.ndarray = np.zeros(0, dtype=np.uint32)
        self.attribute_buffer: np.ndarray = np.zeros(0, dtype=np.int32)
        self.materials: tuple[Material, ...] = ()
        self.meshes: tuple[Mesh, ...] = ()

        self.has_positions = False
        self.has_texcoords = False
        self.has_normals = False
        self.has_tangents = False

        self._directory = ""
        self._center = np.zeros(3, dtype=np.float32)
        self._width = self._height = self._length = self._radius = 0.0

    def import_file(self, filename, rebuild_normals: bool = False,
                    with_tangents: bool | None = None) -> bool:
        """
        Загрузить OBJ (и его mtllib).

        rebuild_normals   – пересчитать нормали, даже если они есть в файле.
        with_tangents     – None: только при наличии bump‑карты у
                            какого‑либо материала; True/False – принудительно.
        """
        self.unload()
        path = Path(filename)
        directory = path.parent

        try:
            with path.open("r", encoding="utf-8", errors="replace") as f:
                with Profiler(f"{path.name}: first pass"):
                    counts, library = first_pass(f, directory)
                f.seek(0)
                with Profiler(f"{path.name}: second pass"):
                    geometry = second_pass(f, counts, library)
        except OSError as exc:
            logger.warning(f"[Model] Cannot open {path}: {exc}")
            self.unload()
            return False
        except ObjImportError as exc:
            logger.warning(f"[Model] Failed to import {path}: {exc}")
            self.unload()
            return False

        self._directory = str(directory)
        self.vertex_buffer = geometry.vertex_buffer
        self.index_buffer = geometry.index_buffer
        self.attribute_buffer = geometry.attribute_buffer
        self.materials = library.materials

        self.has_positions = counts.positions > 0
        self.has_texcoords = counts.texcoords > 0
        self.has_normals = counts.normals > 0

        with Profiler(f"{path.name}: meshes"):
            self.meshes = build_meshes(self.attribute_buffer, self.materials)
        self._update_bounds()

        if rebuild_normals or not self.has_normals:
            with Profiler(f"{path.name}: normals"):
                generate_normals(self.vertex_buffer, self.index_buffer)
            self.has_normals = True

        if with_tangents is None:
            with_tangents = library.has_bump_maps
        if with_tangents:
            self.build_tangents()

        logger.info(
            f"[Model] Imported {path.name}: {self.number_of_vertices} vertices, "
            f"{self.number_of_triangles} triangles, {len(self.meshes)} mesh(es), "
            f"{len(self.materials)} material(s)"
        )
        return True

    # -----------------------------------------------------------------
    # Геометрия
    # -----------------------------------------------------------------
    def build_normals(self) -> None:
        """Принудительно пересчитать сглаженные нормали."""
        generate_normals(self.vertex_buffer, self.index_buffer)
        self.has_normals = True

    def build_tangents(self) -> None:
        with Profiler("tangents"):
            generate_tangents(self.vertex_buffer, self.index_buffer)
        self.has_tangents = True

    def normalize(self, scale_to: float = 1.0, center: bool = True) -> None:
        """
        Отмасштабировать модель так, чтобы radius стал `scale_to`;
        при center=True центр box‑а переезжает в начало координат.
        """
        bounds = compute_bounds(self.vertex_buffer)
        if bounds.radius == 0.0:
            logger.debug("[Model] normalize(): zero radius, nothing to scale")
            self._update_bounds()
            return

        offset = -bounds.center if center else np.zeros(3, dtype=np.float32)
        scale_positions(self.vertex_buffer, scale_to / bounds.radius, offset)
        self._update_bounds()

    def reverse_winding(self) -> None:
        """Сменить обход треугольников; нормали и касательные разворачиваются."""
        triangles = self.index_buffer.reshape(-1, 3)
        triangles[:, [1, 2]] = triangles[:, [2, 1]]
        self.vertex_buffer["normal"] *= -1.0
        self.vertex_buffer["tangent"][:, 0:3] *= -1.0

    def _update_bounds(self) -> None:
        bounds = compute_bounds(self.vertex_buffer)
        self._center = bounds.center
        self._width = bounds.width
        self._height = bounds.height
        self._length = bounds.length
        self._radius = bounds.radius

    # -----------------------------------------------------------------
    # Габариты
    # -----------------------------------------------------------------
    def get_center(self) -> Vec3:
        return Vec3.from_np(self._center)

    def get_width(self) -> float:
        return self._width

    def get_height(self) -> float:
        return self._height

    def get_length(self) -> float:
        return self._length

    def get_radius(self) -> float:
        return self._radius

    # -----------------------------------------------------------------
    # Доступ к данным
    # -----------------------------------------------------------------
    def get_vertex(self, i: int) -> np.void:
        return self.vertex_buffer[i]

    def get_material(self, i: int) -> Material:
        return self.materials[i]

    def get_mesh(self, i: int) -> Mesh:
        return self.meshes[i]

    def material_of(self, mesh: Mesh) -> Material:
        return self.materials[mesh.material_index]

    def texture_candidates(self, texture_path: str) -> list[str]:
        """
        Куда смотреть загрузчику текстур: путь как записан в .mtl,
        затем имя файла в каталоге модели. Существование не проверяется.
        """
        if not texture_path:
            return []
        candidates = [texture_path]
        basename = texture_path.replace("\\", "/").rsplit("/", 1)[-1]
        local = str(Path(self._directory) / basename)
        if local != texture_path:
            candidates.append(local)
        return candidates

    @property
    def path(self) -> str:
        """Каталог исходного файла."""
        return self._directory

    @property
    def number_of_vertices(self) -> int:
        return len(self.vertex_buffer)

    @property
    def number_of_triangles(self) -> int:
        return len(self.attribute_buffer)

    @property
    def number_of_indices(self) -> int:
        return len(self.index_buffer)

    @property
    def number_of_materials(self) -> int:
        return len(self.materials)

    @property
    def number_of_meshes(self) -> int:
        return len(self.meshes)

    @property
    def vertex_size(self) -> int:
        return VERTEX_DTYPE.itemsize

    @property
    def index_size(self) -> int:
        return self.index_buffer.dtype.itemsize

    def __repr__(self) -> str:
        return (f"Model(vertices={self.number_of_vertices}, "
                f"triangles={self.number_of_triangles}, meshes={self.number_of_meshes})")


def load_model(filename, config: Config | None = None,
               rebuild_normals: bool = False) -> Model | None:
    """
    Импорт с настройками из Config: пересчёт нормалей, политика
    касательных ("auto" / true / false) и опциональная нормализация.
    Возвращает None, если импорт не удался.
    """
    cfg = config if config is not None else Config()
    import_cfg = cfg["import"]
    norm_cfg = cfg["normalize"]

    tangents = import_cfg.get("generate_tangents", "auto")
    tangents = None if tangents == "auto" else bool(tangents)
    rebuild_normals = rebuild_normals or bool(import_cfg.get("rebuild_normals", False))

    model = Model()
    if not model.import_file(filename, rebuild_normals=rebuild_normals,
                             with_tangents=tangents):
        return None

    if norm_cfg.get("enabled", False):
        model.normalize(float(norm_cfg.get("radius", 1.0)),
                        bool(norm_cfg.get("center", True)))
    return model
