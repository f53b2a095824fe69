"""
Меш – непрерывный диапазон индексного буфера с одним материалом
(единица draw‑call'а).
"""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np

from wavemesh.assets.material import Material


class Mesh(NamedTuple):
    """
    start_index    – смещение в индексном буфере (в индексах, не треугольниках)
    triangle_count – число треугольников
    material_index – индекс в замороженной таблице материалов модели
    """
    start_index: int
    triangle_count: int
    material_index: int

    @property
    def index_count(self) -> int:
        return self.triangle_count * 3

    @property
    def end_index(self) -> int:
        return self.start_index + self.index_count


def build_meshes(attribute_buffer: np.ndarray,
                 materials: Sequence[Material]) -> tuple[Mesh, ...]:
    """
    Каждая максимальная непрерывная серия треугольников с одинаковым
    материалом → отдельный Mesh. Повторное появление материала дальше
    по файлу даёт новый Mesh (серии не склеиваются).

    Результат отсортирован по убыванию alpha материала: сначала
    непрозрачное, в конце – самое прозрачное. Сортировка стабильная,
    при равной alpha сохраняется порядок в файле.
    """
    if len(attribute_buffer) == 0:
        return ()

    breaks = np.flatnonzero(np.diff(attribute_buffer)) + 1
    starts = np.concatenate(([0], breaks))
    ends = np.concatenate((breaks, [len(attribute_buffer)]))

    meshes = [
        Mesh(int(start) * 3, int(end - start), int(attribute_buffer[start]))
        for start, end in zip(starts, ends)
    ]
    meshes.sort(key=lambda mesh: -materials[mesh.material_index].alpha)
    return tuple(meshes)
