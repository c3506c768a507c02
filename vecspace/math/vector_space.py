# vecspace/math/vector_space.py
"""
VectorSpace – упорядоченный изменяемый набор векторов с пакетными
операциями (арифметика, вращения), удалением по предикату, кешируемым
read‑only представлением и «зеркальным» снимком значений (temp()).

Пространство хранит сами объекты Vector, а не копии: изменение вектора через
пространство видно всем, кто держит ссылку на тот же объект.

Класс рассчитан на работу из одного потока, блокировок нет.
"""

import numbers
import weakref
from collections.abc import Sequence
from typing import Callable, Iterator, List, Optional

import numpy as np

from vecspace.math import vector as _vector
from vecspace.math.vector import Vector, unpack_components
from vecspace.utils.logger import logger


class VectorsView(Sequence):
    """Read‑only представление живого списка векторов."""

    __slots__ = ("_vectors",)

    def __init__(self, vectors: List[Vector]):
        self._vectors = vectors

    def __getitem__(self, index):
        if isinstance(index, slice):
            return tuple(self._vectors[index])
        return self._vectors[index]

    def __len__(self) -> int:
        return len(self._vectors)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._vectors)

    def __repr__(self) -> str:
        return f"VectorsView({self._vectors!r})"


class VectorSpace:
    """
    Набор векторов.

    Варианты создания::

        VectorSpace(v1, v2, v3)     # перечислением
        VectorSpace([v1, v2, v3])   # из любого iterable
        VectorSpace(128)            # пустое, с подсказкой ёмкости
    """

    def __init__(self, *vectors):
        self._view: Optional[VectorsView] = None
        self._temp: Optional[weakref.ref] = None

        if len(vectors) == 1 and not isinstance(vectors[0], Vector):
            arg = vectors[0]
            if isinstance(arg, bool):
                raise TypeError("capacity must be an integer, got bool")
            if isinstance(arg, numbers.Integral):
                if arg < 0:
                    raise ValueError(f"negative capacity: {arg}")
                items = []
            else:
                items = list(arg)
        else:
            items = list(vectors)

        for item in items:
            if not isinstance(item, Vector):
                raise TypeError(f"VectorSpace holds Vector, got {type(item).__name__}")
        self._vectors: List[Vector] = items

    # -----------------------------------------------------------------
    # состав набора
    # -----------------------------------------------------------------
    def _invalidate(self) -> None:
        self._view = None
        self.clear_temp()

    def add_vector(self, vector: Vector) -> None:
        self._vectors.append(vector)
        self._invalidate()

    def remove_vector(self, vector: Vector) -> bool:
        """
        Удалить первый структурно равный вектор; True, если нашёлся.

        Сравнение только через ==, без проверки идентичности: вектор с NaN
        не равен никому, даже самому себе.
        """
        for i, v in enumerate(self._vectors):
            if v == vector:
                del self._vectors[i]
                self._invalidate()
                return True
        return False

    def remove_vector_if(self, predicate: Callable[[Vector], bool]) -> bool:
        """Удалить все векторы, для которых predicate истинен."""
        kept = [v for v in self._vectors if not predicate(v)]
        if len(kept) == len(self._vectors):
            return False
        # срез сохраняет тот же объект списка, на который смотрит VectorsView
        self._vectors[:] = kept
        self._invalidate()
        return True

    def trim_to_size(self) -> "VectorSpace":
        """Список Python сам управляет ёмкостью; метод оставлен для API."""
        return self

    # -----------------------------------------------------------------
    # пакетная арифметика
    # -----------------------------------------------------------------
    def add(self, x, y=None, z=None) -> "VectorSpace":
        x, y, z = unpack_components(x, y, z)
        for v in self._vectors:
            v.add(x, y, z)
        return self

    def subtract(self, x, y=None, z=None) -> "VectorSpace":
        x, y, z = unpack_components(x, y, z)
        for v in self._vectors:
            v.subtract(x, y, z)
        return self

    def multiply(self, x, y=None, z=None) -> "VectorSpace":
        x, y, z = unpack_components(x, y, z)
        for v in self._vectors:
            v.multiply(x, y, z)
        return self

    def divide(self, x, y=None, z=None) -> "VectorSpace":
        """Как Vector.divide: ось с нулевым делителем не меняется."""
        x, y, z = unpack_components(x, y, z)
        for v in self._vectors:
            v.divide(x, y, z)
        return self

    # -----------------------------------------------------------------
    # вращения
    # -----------------------------------------------------------------
    def rotate_pitch(self, pitch: float) -> "VectorSpace":
        _vector.rotate_pitch(self._vectors, pitch)
        return self

    def rotate_yaw(self, yaw: float) -> "VectorSpace":
        _vector.rotate_yaw(self._vectors, yaw)
        return self

    def rotate_roll(self, roll: float) -> "VectorSpace":
        _vector.rotate_roll(self._vectors, roll)
        return self

    # -----------------------------------------------------------------
    # снимок значений
    # -----------------------------------------------------------------
    def temp(self) -> "VectorSpace":
        """
        Глубокий снимок текущих значений.

        Снимок удерживается слабой ссылкой: пока вызывающий код держит его,
        повторный temp() обновляет те же объекты через Vector.set, без новых
        аллокаций. Когда сборщик его освободил – строится заново.
        """
        mirror = self._temp() if self._temp is not None else None
        if mirror is None or mirror.size() != self.size():
            mirror = self.copy()
            self._temp = weakref.ref(mirror)
            logger.debug(f"[VectorSpace] Snapshot rebuilt ({mirror.size()} vectors)")
        else:
            for dst, src in zip(mirror._vectors, self._vectors):
                dst.set(src)
        return mirror

    def clear_temp(self) -> None:
        self._temp = None

    # -----------------------------------------------------------------
    # доступ
    # -----------------------------------------------------------------
    def get_vectors(self) -> VectorsView:
        """Read‑only представление; один и тот же объект до изменения состава."""
        if self._view is None:
            self._view = VectorsView(self._vectors)
        return self._view

    def size(self) -> int:
        return len(self._vectors)

    def copy(self) -> "VectorSpace":
        """Новое пространство с новыми Vector‑объектами тех же значений."""
        return VectorSpace([v.copy() for v in self._vectors])

    def as_np(self) -> np.ndarray:
        """Массив (n, 3) float64 текущих значений."""
        return np.array([v.to_tuple() for v in self._vectors],
                        dtype=np.float64).reshape(-1, 3)

    def __len__(self) -> int:
        return len(self._vectors)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._vectors)

    def __getitem__(self, index: int) -> Vector:
        return self._vectors[index]

    def __repr__(self) -> str:
        return f"VectorSpace(size={len(self._vectors)})"
