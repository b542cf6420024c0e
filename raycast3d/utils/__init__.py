# raycast3d/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger    – готовый объект logging.Logger (с level INFO)
    * set_level – смена уровня логирования (из конфига)
    * Config    – JSON‑конфигурация
    * Profiler  – замер времени блока кода
    * load_obj  – загрузка Wavefront OBJ
"""

from .logger import logger, set_level
from .config import Config, DEFAULT_CONFIG
from .profiler import Profiler
from .loader import load_obj

__all__ = ["logger", "set_level", "Config", "DEFAULT_CONFIG", "Profiler", "load_obj"]
