# -*- coding: utf-8 -*-
"""
conftest.py – изоляция конфигурации.
Каждый тест получает «чистый» Config, привязанный к временному файлу,
чтобы vec3kit.json из рабочего каталога не влиял на результаты.
"""

import pytest

from vec3kit.utils.config import Config


@pytest.fixture(autouse=True)
def config(tmp_path):
    """Свежий Config поверх tmp_path/vec3kit.json (файла ещё нет)."""
    Config.reset()
    cfg = Config(str(tmp_path / "vec3kit.json"))
    yield cfg
    Config.reset()
