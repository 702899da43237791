"""
AngleUnits — Централизованный модуль конверсии угловых единиц

Единственный допустимый способ преобразований между:
- радианами (каноническое хранение)
- градусами
- градами (400 на оборот)
- оборотами (turns)
- DMS (градусы, угловые минуты, угловые секунды)

Все конверсии — чистые функции над float. NaN/Inf не валидируются
и распространяются.
"""

import math
from enum import Enum
from typing import Final

from angles.core.errors import InvalidArgument
from angles.core.math.numerical_safeguards import (
    canonical_zero,
    is_valid_float,
    validate_decimals,
)
from angles.core.math.wrap import (
    DEGREES_PER_TURN,
    GRADIANS_PER_TURN,
    RADIANS_PER_TURN,
    TAU,
)

# =============================================================================
# КОНСТАНТЫ КОНВЕРСИИ
# =============================================================================

DEGREES_PER_RADIAN: Final[float] = 180.0 / math.pi
RADIANS_PER_DEGREE: Final[float] = math.pi / 180.0

GRADIANS_PER_RADIAN: Final[float] = 200.0 / math.pi
RADIANS_PER_GRADIAN: Final[float] = math.pi / 200.0

DEGREES_PER_GRADIAN: Final[float] = 0.9

ARCMINUTES_PER_DEGREE: Final[float] = 60.0
ARCSECONDS_PER_ARCMINUTE: Final[float] = 60.0
ARCSECONDS_PER_DEGREE: Final[float] = 3600.0

# Допустимые значения smallest_unit для degrees_to_dms
DMS_DEGREES: Final[int] = 0
DMS_ARCMINUTES: Final[int] = 1
DMS_ARCSECONDS: Final[int] = 2


# =============================================================================
# ENUMS
# =============================================================================


class AngleUnit(str, Enum):
    """Текстовый токен угловой единицы (CSS-нотация)"""

    RADIAN = "rad"
    DEGREE = "deg"
    GRADIAN = "grad"
    TURN = "turn"


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def degrees_to_radians(degrees: float) -> float:
    """Градусы → радианы: d·π/180."""
    return degrees * RADIANS_PER_DEGREE


def radians_to_degrees(radians: float) -> float:
    """Радианы → градусы: r·180/π."""
    return radians * DEGREES_PER_RADIAN


def gradians_to_radians(gradians: float) -> float:
    """Грады → радианы: g·π/200."""
    return gradians * RADIANS_PER_GRADIAN


def radians_to_gradians(radians: float) -> float:
    """Радианы → грады: r·200/π."""
    return radians * GRADIANS_PER_RADIAN


def turns_to_radians(turns: float) -> float:
    """Обороты → радианы: t·2π."""
    return turns * RADIANS_PER_TURN


def radians_to_turns(radians: float) -> float:
    """Радианы → обороты: r/2π."""
    return radians / RADIANS_PER_TURN


def degrees_to_gradians(degrees: float) -> float:
    """Градусы → грады: d/0.9."""
    return degrees / DEGREES_PER_GRADIAN


def gradians_to_degrees(gradians: float) -> float:
    """Грады → градусы: g·0.9."""
    return gradians * DEGREES_PER_GRADIAN


def to_radians(value: float, unit: AngleUnit) -> float:
    """
    Конверсия значения в указанной единице в радианы.

    Args:
        value: Значение угла
        unit: Единица значения

    Returns:
        Угол в радианах
    """
    unit = AngleUnit(unit)
    if unit is AngleUnit.DEGREE:
        return degrees_to_radians(value)
    if unit is AngleUnit.GRADIAN:
        return gradians_to_radians(value)
    if unit is AngleUnit.TURN:
        return turns_to_radians(value)
    return value


# =============================================================================
# DMS
# =============================================================================


def dms_to_degrees(degrees: float, minutes: float = 0.0, seconds: float = 0.0) -> float:
    """
    Конверсия DMS → десятичные градусы: d + m/60 + s/3600.

    Знаки частей не нормализуются: компоненты складываются арифметически.
    Для -12° 34′ 56″ вызывать dms_to_degrees(-12, -34, -56);
    для -12° 0′ 56″ — dms_to_degrees(-12, 0, -56).
    Диапазон частей не проверяется (120′ = 2°).

    Examples:
        >>> dms_to_degrees(12, 30)
        12.5
        >>> dms_to_degrees(-12, -30)
        -12.5
    """
    return degrees + minutes / ARCMINUTES_PER_DEGREE + seconds / ARCSECONDS_PER_DEGREE


def degrees_to_dms(
    degrees: float,
    smallest_unit: int = DMS_ARCSECONDS,
    decimals: int | None = None,
) -> tuple[float, ...]:
    """
    Разложение десятичных градусов на градусы, минуты и секунды.

    Алгоритм (над |degrees|, знак применяется в конце ко всем частям):
    1. Целая часть градусов
    2. smallest_unit >= 1: дробный остаток × 60 → минуты (целая часть)
    3. smallest_unit == 2: дробный остаток минут × 60 → секунды
    4. Округление наименьшей компоненты до decimals знаков
    5. Перенос: секунды >= 60 → 0, минуты += 1; минуты >= 60 → 0, градусы += 1

    Порядок "округление, затем перенос" обязателен:
    29.999999999° при decimals=3 → (30, 0, 0), а не (29, 60, 0) или (29, 59, 60).

    Args:
        degrees: Угол в градусах
        smallest_unit: 0 — градусы, 1 — + минуты, 2 — + секунды (default: 2)
        decimals: Знаков после запятой для наименьшей компоненты
            (None — без округления)

    Returns:
        Кортеж из 1, 2 или 3 float. Только наименьшая компонента может быть
        дробной; все ненулевые компоненты одного знака

    Raises:
        InvalidArgument: smallest_unit ∉ {0, 1, 2} или decimals < 0

    Examples:
        >>> degrees_to_dms(12.5, 1)
        (12.0, 30.0)
        >>> degrees_to_dms(29.999999999, 2, 3)
        (30.0, 0.0, 0.0)
    """
    if smallest_unit not in (DMS_DEGREES, DMS_ARCMINUTES, DMS_ARCSECONDS):
        raise InvalidArgument(
            f"smallest_unit must be 0 (degrees), 1 (arcminutes) or 2 (arcseconds), "
            f"got {smallest_unit}"
        )
    validate_decimals(decimals)

    # NaN/Inf не раскладываются: значение уходит в градусы, остальное NaN
    if not is_valid_float(degrees):
        return (degrees,) + (math.nan,) * smallest_unit

    sign = -1.0 if degrees < 0 else 1.0
    abs_deg = abs(degrees)

    if smallest_unit == DMS_DEGREES:
        d = abs_deg
        if decimals is not None:
            d = round(d, decimals)
        parts = [d]

    elif smallest_unit == DMS_ARCMINUTES:
        d = float(math.floor(abs_deg))
        m = (abs_deg - d) * ARCMINUTES_PER_DEGREE
        if decimals is not None:
            m = round(m, decimals)

        if m >= ARCMINUTES_PER_DEGREE:
            m = 0.0
            d += 1.0
        parts = [d, m]

    else:
        d = float(math.floor(abs_deg))
        f_min = (abs_deg - d) * ARCMINUTES_PER_DEGREE
        m = float(math.floor(f_min))
        s = (f_min - m) * ARCSECONDS_PER_ARCMINUTE
        if decimals is not None:
            s = round(s, decimals)

        if s >= ARCSECONDS_PER_ARCMINUTE:
            s = 0.0
            m += 1.0
        if m >= ARCMINUTES_PER_DEGREE:
            m = 0.0
            d += 1.0
        parts = [d, m, s]

    return tuple(canonical_zero(sign * part) for part in parts)
