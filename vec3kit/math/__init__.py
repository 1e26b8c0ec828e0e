"""
Математический суб‑пакет: Vec3.
"""

from vec3kit.math.vec3 import Vec3, ZeroLengthError

__all__ = ["Vec3", "ZeroLengthError"]
