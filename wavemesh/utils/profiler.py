"""
Контекст‑менеджер профайлинга – измеряет время стадии импорта.
"""

import time
from wavemesh.utils.logger import logger


class Profiler:
    """Замер времени блока; результат пишется в лог и в `elapsed_ms`."""
    def __init__(self, name: str):
        self.name = name
        self._start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000.0
        logger.debug(f"[Profiler] {self.name}: {self.elapsed_ms:.2f} ms")
