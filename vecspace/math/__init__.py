"""
Математический суб‑пакет: скалярные помощники, Vector, VectorSpace.
"""

from vecspace.math import helper
from vecspace.math.vector import Vector, rotate_pitch, rotate_yaw, rotate_roll
from vecspace.math.vector_space import VectorSpace, VectorsView

__all__ = [
    "helper",
    "Vector",
    "VectorSpace",
    "VectorsView",
    "rotate_pitch",
    "rotate_yaw",
    "rotate_roll",
]
