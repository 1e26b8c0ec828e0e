"""
vec3kit – неизменяемый трёхмерный вектор (float64) для Python.
"""

from vec3kit.utils import logger, Config
from vec3kit.math import Vec3, ZeroLengthError

__version__ = "1.0.0"

__all__ = [
    "Vec3",
    "ZeroLengthError",
    "Config",
    "logger",
]
