"""
Angle Formatting — Сериализация угла в строку

Стили:
- 'rad', 'deg', 'grad', 'turn' → число + токен единицы без пробела ("12.50deg")
- 'd'   → "D°"
- 'dm'  → "D° M′"
- 'dms' → "D° M′ S″"

В DMS-стилях дробной может быть только наименьшая компонента; старшие
компоненты выводятся целыми. Знак выводится один раз перед градусами и
относится ко всем компонентам (так же его читает парсер).

decimals=None → кратчайшее представление float, которое читается обратно
без потерь.
"""

import math
from enum import Enum

from angles.core.domain.units import (
    DMS_ARCMINUTES,
    DMS_ARCSECONDS,
    DMS_DEGREES,
    degrees_to_dms,
    radians_to_degrees,
    radians_to_gradians,
    radians_to_turns,
)
from angles.core.errors import InvalidArgument
from angles.core.math.numerical_safeguards import canonical_zero, validate_decimals

# =============================================================================
# ENUMS
# =============================================================================


class FormatStyle(str, Enum):
    """Стиль строкового представления угла"""

    RAD = "rad"
    DEG = "deg"
    GRAD = "grad"
    TURN = "turn"
    D = "d"
    DM = "dm"
    DMS = "dms"


DEGREE_SIGN = "°"
ARCMINUTE_SIGN = "′"
ARCSECOND_SIGN = "″"

_DMS_SMALLEST_UNIT = {
    FormatStyle.D: DMS_DEGREES,
    FormatStyle.DM: DMS_ARCMINUTES,
    FormatStyle.DMS: DMS_ARCSECONDS,
}


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def resolve_style(style: "FormatStyle | str") -> FormatStyle:
    """
    Приведение стиля к FormatStyle (без учёта регистра).

    Raises:
        InvalidArgument: Если стиль не поддерживается
    """
    if isinstance(style, FormatStyle):
        return style
    try:
        return FormatStyle(str(style).lower())
    except ValueError:
        allowed = ", ".join(s.value for s in FormatStyle)
        raise InvalidArgument(
            f"Invalid format style {style!r}. Allowed: {allowed}"
        ) from None


def format_float(value: float, decimals: int | None = None) -> str:
    """
    Форматирование float с фиксированным числом знаков.

    Args:
        value: Значение
        decimals: Знаков после запятой (дополняется нулями, без разделителей
            тысяч); None — кратчайшее точное представление

    Raises:
        InvalidArgument: Если decimals < 0

    Examples:
        >>> format_float(12.5, 2)
        '12.50'
        >>> format_float(-0.0)
        '0.0'
    """
    validate_decimals(decimals)
    value = canonical_zero(value)

    if decimals is None:
        return repr(value)
    return f"{value:.{decimals}f}"


def _format_whole(value: float) -> str:
    # Старшие DMS-компоненты всегда целые; NaN/Inf выводятся как есть
    if math.isfinite(value):
        return str(int(value))
    return repr(value)


# =============================================================================
# ФОРМАТИРОВАНИЕ УГЛА
# =============================================================================


def format_dms(degrees: float, smallest_unit: int = DMS_ARCSECONDS, decimals: int | None = None) -> str:
    """
    Форматирование градусов как "D°", "D° M′" или "D° M′ S″".

    Args:
        degrees: Угол в градусах
        smallest_unit: 0 — градусы, 1 — + минуты, 2 — + секунды
        decimals: Знаков после запятой для наименьшей компоненты

    Examples:
        >>> format_dms(-12.5, 1, 1)
        '-12° 30.0′'
    """
    validate_decimals(decimals)

    sign = "-" if degrees < 0 else ""
    parts = degrees_to_dms(abs(degrees), smallest_unit, decimals)

    if smallest_unit == DMS_DEGREES:
        (d,) = parts
        return f"{sign}{format_float(d, decimals)}{DEGREE_SIGN}"

    if smallest_unit == DMS_ARCMINUTES:
        d, m = parts
        return (
            f"{sign}{_format_whole(d)}{DEGREE_SIGN} "
            f"{format_float(m, decimals)}{ARCMINUTE_SIGN}"
        )

    d, m, s = parts
    return (
        f"{sign}{_format_whole(d)}{DEGREE_SIGN} "
        f"{_format_whole(m)}{ARCMINUTE_SIGN} "
        f"{format_float(s, decimals)}{ARCSECOND_SIGN}"
    )


def format_angle(
    radians: float,
    style: "FormatStyle | str" = FormatStyle.RAD,
    decimals: int | None = None,
) -> str:
    """
    Строковое представление угла, заданного в радианах.

    Args:
        radians: Угол в радианах
        style: Стиль (регистр не важен), default: 'rad'
        decimals: Знаков после запятой (для DMS-стилей — у наименьшей
            компоненты); None — кратчайшее точное представление

    Returns:
        Строка, которую Angle.parse читает обратно

    Raises:
        InvalidArgument: decimals < 0 или неизвестный стиль

    Examples:
        >>> format_angle(math.pi, "turn", 2)
        '0.50turn'
    """
    validate_decimals(decimals)
    style = resolve_style(style)

    if style is FormatStyle.RAD:
        return format_float(radians, decimals) + style.value
    if style is FormatStyle.DEG:
        return format_float(radians_to_degrees(radians), decimals) + style.value
    if style is FormatStyle.GRAD:
        return format_float(radians_to_gradians(radians), decimals) + style.value
    if style is FormatStyle.TURN:
        return format_float(radians_to_turns(radians), decimals) + style.value

    return format_dms(radians_to_degrees(radians), _DMS_SMALLEST_UNIT[style], decimals)
