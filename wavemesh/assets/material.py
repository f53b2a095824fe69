# -*- coding: utf-8 -*-
"""
Материал Wavefront MTL и таблица материалов модели.

`Material` – неизменяемая запись (NamedTuple): после импорта таблица
материалов «заморожена», меши ссылаются на материал по индексу.
Пути к текстурам хранятся как есть – их разрешение и загрузка лежат
на внешнем рендерере.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

Color = tuple[float, float, float, float]

DEFAULT_MATERIAL_NAME = "default"


class Material(NamedTuple):
    """Параметры освещения + пути к картам (color / bump)."""
    name: str
    ambient: Color = (0.2, 0.2, 0.2, 1.0)
    diffuse: Color = (0.8, 0.8, 0.8, 1.0)
    specular: Color = (0.0, 0.0, 0.0, 1.0)
    shininess: float = 0.0
    alpha: float = 1.0
    color_map: str = ""
    bump_map: str = ""

    @property
    def has_bump_map(self) -> bool:
        return bool(self.bump_map)


def default_material() -> Material:
    """Материал, который получает модель без mtllib."""
    return Material(name=DEFAULT_MATERIAL_NAME)


class MaterialLibrary:
    """
    Упорядоченная таблица материалов + поиск индекса по имени.

    При повторяющемся имени поиск возвращает последний материал
    с этим именем.
    """

    def __init__(self, materials=(), path: str | None = None):
        self.materials: tuple[Material, ...] = tuple(materials)
        self.path = path
        self._lookup: dict[str, int] = {
            m.name: i for i, m in enumerate(self.materials)
        }

    # -----------------------------------------------------------------
    def index_of(self, name: str, fallback: int = 0) -> int:
        return self._lookup.get(name, fallback)

    def __contains__(self, name: str) -> bool:
        return name in self._lookup

    def __len__(self) -> int:
        return len(self.materials)

    def __iter__(self) -> Iterator[Material]:
        return iter(self.materials)

    def __getitem__(self, index: int) -> Material:
        return self.materials[index]

    # -----------------------------------------------------------------
    def merged(self, other: "MaterialLibrary") -> "MaterialLibrary":
        """Новая таблица: материалы `other` дописываются в конец."""
        return MaterialLibrary(self.materials + other.materials, path=self.path)

    @property
    def has_bump_maps(self) -> bool:
        return any(m.has_bump_map for m in self.materials)

    def __repr__(self) -> str:
        return f"MaterialLibrary({[m.name for m in self.materials]})"
