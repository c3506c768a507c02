# vecspace/math/vector.py
"""
Изменяемый трёхмерный вектор (float64).

Все методы‑мутаторы меняют сам объект и возвращают его же, поэтому вызовы
можно выстраивать цепочкой::

    v = Vector(1, 2, 3).multiply(2).rotate_yaw(90).normalize()

Арифметические методы принимают три формы аргументов:
    * ``(x, y, z)`` – по значению на каждую ось;
    * ``(s)``       – одно число для всех трёх осей;
    * ``(vector)``  – компоненты другого вектора.

Внимание: ``divide`` на ноль по какой‑либо оси оставляет эту ось без
изменений (ни inf, ни исключения). Поэтому ``normalize`` нулевого вектора
тоже ничего не меняет.
"""

from math import cos, sin, sqrt
from typing import Iterable, Optional, Tuple

import numpy as np

from vecspace.math import helper


def unpack_components(x, y=None, z=None) -> Tuple[float, float, float]:
    """Привести (x, y, z) | (s) | (Vector) к тройке чисел."""
    if isinstance(x, Vector):
        if y is not None or z is not None:
            raise TypeError("expected a single Vector argument")
        return x.x, x.y, x.z
    if y is None and z is None:
        return x, x, x
    if y is None or z is None:
        raise TypeError("expected 1 or 3 components")
    return x, y, z


class Vector:
    """Трёхмерный вектор с fluent‑арифметикой и вращениями."""

    __slots__ = ("_v",)

    def __init__(self, x: float, y: float, z: float):
        self._v = np.array([x, y, z], dtype=np.float64)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    # -----------------------------------------------------------------
    # арифметика (меняет сам объект, возвращает self)
    # -----------------------------------------------------------------
    def set(self, x, y=None, z=None) -> "Vector":
        self._v[:] = unpack_components(x, y, z)
        return self

    def add(self, x, y=None, z=None) -> "Vector":
        self._v += unpack_components(x, y, z)
        return self

    def subtract(self, x, y=None, z=None) -> "Vector":
        self._v -= unpack_components(x, y, z)
        return self

    def multiply(self, x, y=None, z=None) -> "Vector":
        self._v *= unpack_components(x, y, z)
        return self

    def divide(self, x, y=None, z=None) -> "Vector":
        """Деление по осям; ось с нулевым делителем не меняется."""
        for i, d in enumerate(unpack_components(x, y, z)):
            if d != 0.0:
                self._v[i] /= d
        return self

    # -----------------------------------------------------------------
    # вращения (углы в градусах)
    # -----------------------------------------------------------------
    def _rotate(self, a: int, b: int, degrees: float) -> "Vector":
        rad = helper.to_radians(degrees)
        c, s = cos(rad), sin(rad)
        va, vb = self._v[a], self._v[b]
        self._v[a] = va * c - vb * s
        self._v[b] = vb * c + va * s
        return self

    def rotate_pitch(self, pitch: float) -> "Vector":
        """Вращение вокруг оси X (плоскость y‑z)."""
        return self._rotate(1, 2, pitch)

    def rotate_yaw(self, yaw: float) -> "Vector":
        """Вращение вокруг оси Y (плоскость x‑z)."""
        return self._rotate(0, 2, yaw)

    def rotate_roll(self, roll: float) -> "Vector":
        """Вращение вокруг оси Z (плоскость x‑y)."""
        return self._rotate(0, 1, roll)

    # -----------------------------------------------------------------
    # прочие мутаторы
    # -----------------------------------------------------------------
    def zero(self) -> "Vector":
        return self.set(0.0)

    def randomize(self, rng: Optional[np.random.Generator] = None) -> "Vector":
        """Каждая ось – равномерно из [0, 1)."""
        rng = rng if rng is not None else helper.generator()
        self._v[:] = rng.random(3)
        return self

    def normalize(self) -> "Vector":
        return self.divide(self.length())

    # -----------------------------------------------------------------
    # измерения
    # -----------------------------------------------------------------
    def length(self) -> float:
        """Евклидова длина."""
        x, y, z = self._v
        return sqrt(x * x + y * y + z * z)

    def distance(self, x, y=None, z=None) -> float:
        """Расстояние до точки (x, y, z) или до другого вектора."""
        if y is None and not isinstance(x, Vector):
            raise TypeError("distance expects 3 components or a Vector")
        ox, oy, oz = unpack_components(x, y, z)
        dx, dy, dz = ox - self._v[0], oy - self._v[1], oz - self._v[2]
        return sqrt(dx * dx + dy * dy + dz * dz)

    def copy(self) -> "Vector":
        return Vector(*self._v)

    # -----------------------------------------------------------------
    # сравнение
    # -----------------------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    # -----------------------------------------------------------------
    # представление / приведение
    # -----------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y}, {self.z})"

    def as_np(self) -> np.ndarray:
        """Копия 3‑компонентного ndarray (float64)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())


# ---------------------------------------------------------------------
# пакетные вращения: каждый вектор коллекции по порядку, на месте
# ---------------------------------------------------------------------
def rotate_pitch(vectors: Iterable[Vector], pitch: float) -> None:
    for v in vectors:
        v.rotate_pitch(pitch)


def rotate_yaw(vectors: Iterable[Vector], yaw: float) -> None:
    for v in vectors:
        v.rotate_yaw(yaw)


def rotate_roll(vectors: Iterable[Vector], roll: float) -> None:
    for v in vectors:
        v.rotate_roll(roll)
