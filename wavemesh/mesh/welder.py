# -*- coding: utf-8 -*-
"""
Сварка вершин (дедупликация) во время второго прохода.

Кэш – словарь «индекс исходной позиции → список уже выданных
вершин с этой позицией». Кандидат сравнивается с каждой вершиной
корзины побайтно (без epsilon): значения пришли прямо из токенов
файла, поэтому одинаковый текст даёт одинаковые байты. Разные
uv/нормали при той же позиции дают разные вершины – так
сохраняются швы развёртки и жёсткие рёбра.
"""

from __future__ import annotations

import numpy as np

from wavemesh.mesh.vertex import WELD_RECORD_SIZE, empty_vertex_buffer


class VertexWelder:
    """weld(source_index, candidate) -> индекс в вершинном буфере."""

    def __init__(self):
        self._buckets: dict[int, list[int]] = {}
        self._records: list[bytes] = []

    def __len__(self) -> int:
        return len(self._records)

    def weld(self, source_index: int, candidate: np.ndarray) -> int:
        record = np.ascontiguousarray(candidate, dtype=np.float32)
        if record.size != WELD_RECORD_SIZE:
            raise ValueError(
                f"Weld candidate must hold {WELD_RECORD_SIZE} floats, got {record.size}"
            )
        key = record.tobytes()

        bucket = self._buckets.get(source_index)
        if bucket is None:
            index = self._append(key)
            self._buckets[source_index] = [index]
            return index

        for index in bucket:
            if self._records[index] == key:
                return index

        index = self._append(key)
        bucket.append(index)
        return index

    def _append(self, key: bytes) -> int:
        self._records.append(key)
        return len(self._records) - 1

    def bucket(self, source_index: int) -> list[int]:
        """Копия корзины (для отладки и тестов)."""
        return list(self._buckets.get(source_index, ()))

    def to_vertex_buffer(self) -> np.ndarray:
        """Сварённые записи → массив VERTEX_DTYPE (tangent/bitangent = 0)."""
        buffer = empty_vertex_buffer(len(self._records))
        if self._records:
            flat = np.frombuffer(b"".join(self._records), dtype=np.float32)
            flat = flat.reshape(-1, WELD_RECORD_SIZE)
            buffer["position"] = flat[:, 0:3]
            buffer["texcoord"] = flat[:, 3:5]
            buffer["normal"] = flat[:, 5:8]
        return buffer

    def clear(self) -> None:
        self._buckets.clear()
        self._records.clear()
