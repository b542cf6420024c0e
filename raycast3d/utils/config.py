"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from raycast3d.utils.logger import logger

DEFAULT_CONFIG = {
    "window": {"width": 1280, "height": 720, "title": "Ray Cast Picking"},
    "log_level": "INFO",
    # None → встроенная модель из пакета raycast_app
    "model_path": None,
    "camera": {
        "fov": 60.0,
        "aspect": 1920 / 1080,
        "near": 0.1,
        "far": 750.0,
        "position": [0.0, 1.5, 2.0],
        "translation_speed": 2.0,
        "mouse_button": 2,
    },
    "indicators": {
        "ray_color": [1.0, 1.0, 0.0],
        "ray_thickness": 0.01,
        "marker_color": [1.0, 0.0, 1.0],
        "marker_radius": 0.02,
    },
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "config.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть загруженный экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, json.JSONDecodeError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, copy.deepcopy(DEFAULT_CONFIG.get(key)))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    def section(self, key) -> dict:
        """Словарь‑секция, дополненный значениями по‑умолчанию."""
        merged = copy.deepcopy(DEFAULT_CONFIG.get(key, {}))
        merged.update(self.data.get(key) or {})
        return merged
