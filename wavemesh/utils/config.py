"""
Простой загрузчик/сохранитель настроек импорта в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
Без пути настройки живут только в памяти.
"""

import copy
import json
from pathlib import Path
from wavemesh.utils.logger import logger

DEFAULT_CONFIG = {
    "import": {"rebuild_normals": False, "generate_tangents": "auto"},
    "normalize": {"enabled": False, "radius": 1.0, "center": True},
    "log_level": "INFO",
}


def _merge(defaults: dict, data: dict) -> dict:
    """Наложить `data` поверх `defaults` (вложенные секции – тоже)."""
    merged = copy.deepcopy(defaults)
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str | None = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path) if path is not None else None
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть общий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path is None:
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            return
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    raw = json.load(f)
                if not isinstance(raw, dict):
                    raise ValueError("top-level JSON value must be an object")
                self.data = _merge(DEFAULT_CONFIG, raw)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        if self.path is None:
            return
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
