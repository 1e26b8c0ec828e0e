# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float64, неизменяемый).

Операторы:
    a + b, a + s, s + a   – покомпонентная сумма / сдвиг на скаляр
    a - b, a - s          – покомпонентная разность / сдвиг на скаляр
    a * b                 – скалярное произведение (float)
    a * s, s * a          – масштабирование
    -a                    – отрицание
    a == b                – точное покомпонентное сравнение (IEEE‑754)

Все операции возвращают новый объект, исходные векторы не меняются.
Ошибок не сигнализируем: NaN / inf распространяются по правилам IEEE‑754.
"""
import math
from numbers import Real
from typing import Iterator, Tuple

import numpy as np

from vec3kit.utils.config import Config
from vec3kit.utils.logger import logger


class ZeroLengthError(ArithmeticError):
    """Нормализация нулевого вектора в режиме normalize_zero = "raise"."""


class Vec3:
    __slots__ = ("_v",)

    # numpy‑скаляры слева (np.float64(2) * v) отдают управление нашим __r*__
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float64)
        self._v.flags.writeable = False

    @staticmethod
    def zero() -> "Vec3":
        return Vec3(0.0, 0.0, 0.0)

    # -------------------------------------------------
    # свойства (только чтение)
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other):
        if isinstance(other, Vec3):
            return Vec3(*(self._v + other._v))
        if isinstance(other, Real):
            return Vec3(*(self._v + other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Vec3):
            return Vec3(*(self._v - other._v))
        if isinstance(other, Real):
            return Vec3(*(self._v - other))
        return NotImplemented

    def __mul__(self, other):
        """Vec3 * Vec3 – скалярное произведение, Vec3 * число – масштаб."""
        if isinstance(other, Vec3):
            return self.dot(other)
        if isinstance(other, Real):
            return Vec3(*(self._v * other))
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> "Vec3":
        return Vec3(*(-self._v))

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        # NaN != NaN, -0.0 == 0.0
        return bool((self._v == other._v).all())

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other: "Vec3") -> float:
        """Скалярное произведение: x1*x2 + y1*y2 + z1*z2 (слева направо)."""
        x1, y1, z1 = self._v.tolist()
        x2, y2, z2 = other._v.tolist()
        return x1 * x2 + y1 * y2 + z1 * z2

    def length(self) -> float:
        """Евклидова длина, sqrt(x*x + y*y + z*z)."""
        x, y, z = self._v.tolist()
        return math.sqrt(x * x + y * y + z * z)

    def norm(self) -> "Vec3":
        """
        Нормализованный вектор (каждая компонента делится на length()).

        Для нулевого вектора по умолчанию получаем (nan, nan, nan) без
        предупреждений NumPy; при normalize_zero = "raise" – ZeroLengthError.
        """
        n = self.length()
        if n == 0.0:
            mode = Config()["normalize_zero"]
            logger.debug(f"[Vec3] Normalizing zero-length vector (mode={mode}).")
            if mode == "raise":
                raise ZeroLengthError("cannot normalize a zero-length Vec3")
            if mode != "nan":
                raise ValueError(f"Unknown normalize_zero mode: {mode!r}")
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vec3(*(self._v / n))

    def as_np(self) -> np.ndarray:
        """Копия 3‑элементного массива float64 (уже доступная для записи)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return 3

    # -------------------------------------------------
    # представление
    # -------------------------------------------------
    def __repr__(self):
        p = int(Config()["repr_precision"])
        return f"Vec3({self.x:.{p}f}, {self.y:.{p}f}, {self.z:.{p}f})"
