# vecspace/math/helper.py
# ---------------------------------------------------------------
# Скалярные помощники в дополнение к модулю math:
# - перевод углов,
# - кубический корень и генератор случайных чисел,
# - целочисленная арифметика с контролем переполнения (32/64 бит),
# - НОД / НОК.
# ---------------------------------------------------------------

from typing import Iterable

import numpy as np

E = 2.718281828459045
PI = 3.141592653589793

_LIMITS = {
    32: (-(1 << 31), (1 << 31) - 1),
    64: (-(1 << 63), (1 << 63) - 1),
}

_rng = np.random.default_rng()


def to_radians(degrees: float) -> float:
    return degrees * PI / 180


def to_degrees(radians: float) -> float:
    return radians * 180 / PI


def cbrt(a: float) -> float:
    return float(np.cbrt(a))


def random() -> float:
    """Равномерное число из [0, 1) общего генератора процесса."""
    return float(_rng.random())


def seed(value=None) -> None:
    """Пересоздать общий генератор (для воспроизводимости)."""
    global _rng
    _rng = np.random.default_rng(value)


def generator() -> np.random.Generator:
    return _rng


# -----------------------------------------------------------------
# целые числа фиксированной ширины
# -----------------------------------------------------------------
def _limits(bits: int):
    try:
        return _LIMITS[bits]
    except KeyError:
        raise ValueError(f"unsupported integer width: {bits}") from None


def _checked(value: int, bits: int) -> int:
    lo, hi = _limits(bits)
    if value < lo or value > hi:
        raise OverflowError(f"integer overflow ({bits}-bit)")
    return value


def add_exact(x: int, y: int, bits: int = 32) -> int:
    return _checked(x + y, bits)


def subtract_exact(x: int, y: int, bits: int = 32) -> int:
    return _checked(x - y, bits)


def multiply_exact(x: int, y: int, bits: int = 32) -> int:
    return _checked(x * y, bits)


def increment_exact(a: int, bits: int = 32) -> int:
    return _checked(a + 1, bits)


def decrement_exact(a: int, bits: int = 32) -> int:
    return _checked(a - 1, bits)


def negate_exact(a: int, bits: int = 32) -> int:
    return _checked(-a, bits)


def to_int_exact(a: int) -> int:
    """Сужение 64 → 32 бит."""
    return _checked(a, 32)


def floor_div(x: int, y: int, bits: int = 32) -> int:
    """Деление с округлением вниз. MIN // -1 даёт MIN, как в дополнительном коде."""
    lo, _ = _limits(bits)
    _checked(x, bits)
    _checked(y, bits)
    if x == lo and y == -1:
        return lo
    return x // y


def floor_mod(x: int, y: int, bits: int = 32) -> int:
    _checked(x, bits)
    _checked(y, bits)
    return x % y


# -----------------------------------------------------------------
# НОД / НОК
# -----------------------------------------------------------------
def gcd(x: int, y: int) -> int:
    """Алгоритм Евклида. Отрицательные аргументы запрещены."""
    if x < 0 or y < 0:
        raise ArithmeticError("negative int")
    if x == 0 or y == 0:
        return abs(x - y)
    while x % y != 0:
        x, y = y, x % y
    return y


def lcm(x: int, y: int, bits: int = 32) -> int:
    """НОК; lcm(0, 0) делит на gcd(0, 0) == 0 и даёт ZeroDivisionError."""
    if x < 0 or y < 0:
        raise ArithmeticError("negative int")
    return _checked(x * y // gcd(x, y), bits)


def _fold(func, values: Iterable[int]) -> int:
    values = list(values)
    if not values:
        raise ValueError("empty sequence")
    result = values[0]
    for value in values:
        result = func(result, value)
    return result


def gcd_all(values: Iterable[int]) -> int:
    return _fold(gcd, values)


def lcm_all(values: Iterable[int]) -> int:
    return _fold(lcm, values)
