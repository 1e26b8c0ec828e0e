# vec3kit/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger – готовый объект logging.Logger (с level INFO)
    * Config – конфигурация пакета (JSON‑файл)
"""

from .logger import logger
from .config import Config, DEFAULT_CONFIG

__all__ = ["logger", "Config", "DEFAULT_CONFIG"]
