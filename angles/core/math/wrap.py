"""
Wrap — Нормализация углов в каноническом диапазоне

Сведение значения угла к полуоткрытому интервалу:
- unsigned: [0, period)
- signed:   [-period/2, period/2)

где period = 2π (радианы), 360 (градусы) или 400 (грады).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Используется floor-based modulo (оператор % для float), а не усечённый
   остаток math.fmod: отрицательные значения попадают в правильный интервал
   (wrap_radians(-π) == π)
2. Правая граница signed-диапазона не достигается: +period/2 → -period/2,
   -period/2 остаётся -period/2
3. -0.0 канонизируется в 0.0
4. NaN/Inf распространяются (результат NaN)
"""

import math
from typing import Final

from angles.core.math.numerical_safeguards import canonical_zero

# =============================================================================
# ПЕРИОДЫ
# =============================================================================

TAU: Final[float] = 2.0 * math.pi

RADIANS_PER_TURN: Final[float] = TAU
DEGREES_PER_TURN: Final[float] = 360.0
GRADIANS_PER_TURN: Final[float] = 400.0


# =============================================================================
# WRAP
# =============================================================================


def wrap_scalar(value: float, units_per_turn: float, signed: bool = False) -> float:
    """
    Нормализация скалярного значения угла в полуоткрытый интервал.

    Args:
        value: Значение угла в произвольных единицах
        units_per_turn: Единиц в полном обороте (TAU, 360, 400)
        signed: [-half, half) если True, иначе [0, units_per_turn)

    Returns:
        Нормализованное значение

    Examples:
        >>> wrap_scalar(-90.0, 360.0)
        270.0
        >>> wrap_scalar(180.0, 360.0, signed=True)
        -180.0
    """
    # Python % для float: результат имеет знак делителя → [0, units_per_turn]
    r = value % units_per_turn

    # Для крошечных отрицательных value округление даёт ровно units_per_turn
    if r >= units_per_turn:
        r -= units_per_turn

    if signed and r >= units_per_turn / 2.0:
        r -= units_per_turn

    return canonical_zero(r)


def wrap_radians(value: float, signed: bool = False) -> float:
    """Нормализация радиан в [0, τ) или [-π, π)."""
    return wrap_scalar(value, RADIANS_PER_TURN, signed)


def wrap_degrees(value: float, signed: bool = False) -> float:
    """Нормализация градусов в [0, 360) или [-180, 180)."""
    return wrap_scalar(value, DEGREES_PER_TURN, signed)


def wrap_gradians(value: float, signed: bool = False) -> float:
    """Нормализация градов в [0, 400) или [-200, 200)."""
    return wrap_scalar(value, GRADIANS_PER_TURN, signed)
