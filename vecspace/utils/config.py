"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию (файл создаётся
только явным вызовом save()).
"""

import copy
import json
from pathlib import Path
from vecspace.utils.logger import logger

DEFAULT_CONFIG = {
    "pixel_size": 1.0,
    "background": {"sentinel_rgba": [255, 255, 255, 255]},
    "text": {
        "font_path": None,
        "font_size": 16,
        "color": [0, 0, 0, 255],
        "antialias": False,
    },
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "vecspace.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть текущий экземпляр – следующий Config() перечитает файл."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
        else:
            logger.info("[Config] No config file – using defaults.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)

    def save(self):
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

    def lookup(self, section: str, key: str):
        """Значение из вложенной секции, с откатом к DEFAULT_CONFIG."""
        value = (self.data.get(section) or {}).get(key)
        if value is None:
            value = DEFAULT_CONFIG.get(section, {}).get(key)
        return value
