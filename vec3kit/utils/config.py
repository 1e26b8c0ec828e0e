"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – используются настройки по‑умолчанию
(на диск ничего не пишется, пока не вызван save()).
"""

import json
from pathlib import Path
from vec3kit.utils.logger import logger

DEFAULT_CONFIG = {
    # что делать при нормализации нулевого вектора: "nan" | "raise"
    "normalize_zero": "nan",
    # число знаков после запятой в repr(Vec3)
    "repr_precision": 3,
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "vec3kit.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить синглтон – следующий Config(...) перечитает файл."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("top-level JSON value must be an object")
                self.data = data
                self._validate()
                logger.info(f"[Config] Loaded configuration from {self.path}.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = DEFAULT_CONFIG.copy()
        else:
            logger.info("[Config] No config file – using defaults.")
            self.data = DEFAULT_CONFIG.copy()

    def _validate(self):
        """Невалидные значения из файла заменяются значениями по‑умолчанию."""
        mode = self.data.get("normalize_zero", DEFAULT_CONFIG["normalize_zero"])
        if mode not in ("nan", "raise"):
            logger.error(f"[Config] Invalid normalize_zero {mode!r} – using default.")
            self.data["normalize_zero"] = DEFAULT_CONFIG["normalize_zero"]

        precision = self.data.get("repr_precision", DEFAULT_CONFIG["repr_precision"])
        # bool – подкласс int, его не принимаем
        if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
            logger.error(f"[Config] Invalid repr_precision {precision!r} – using default.")
            self.data["repr_precision"] = DEFAULT_CONFIG["repr_precision"]

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
        return self.data.get(key, DEFAULT_CONFIG.get(key, default))
