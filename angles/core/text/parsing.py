"""
Angle Parsing — Разбор строкового представления угла

Грамматика (пробелы по краям обрезаются):
1. Число с единицей: "12deg", "12 DEG", "-1.5e-3rad", "0.5 turn", "100grad"
   Число: необязательный знак, дробная часть и экспонента. Токен единицы
   без учёта регистра: rad, deg, grad, turn.
2. DMS: "12° 34′ 56″", "-12°34'56\"", "12°", "12° 30′"
   Знак (если есть) относится ко всем компонентам:
   "-12°34'56\"" ≡ dms(-12, -34, -56). Минуты завершаются ′ или ',
   секунды — ″ или ". Секунды допустимы только после минут.
3. Всё остальное, включая пустую строку → ParseError.

Результат разбора — ParsedUnitValue или ParsedDMS; построение Angle
выполняет Angle.parse через фабрики from_*.
"""

import logging
import re
from typing import NamedTuple

from angles.core.domain.units import AngleUnit
from angles.core.errors import ParseError

logger = logging.getLogger(__name__)


# =============================================================================
# РЕЗУЛЬТАТЫ РАЗБОРА
# =============================================================================


class ParsedUnitValue(NamedTuple):
    """Число с единицей измерения."""

    value: float
    unit: AngleUnit


class ParsedDMS(NamedTuple):
    """Компоненты DMS со знаком, уже применённым к каждой части."""

    degrees: float
    minutes: float
    seconds: float


# =============================================================================
# ГРАММАТИКА
# =============================================================================

_UNSIGNED_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"

_UNIT_PATTERN = re.compile(
    rf"^(?P<value>[-+]?{_UNSIGNED_NUMBER})\s*(?P<unit>rad|deg|grad|turn)$",
    re.IGNORECASE,
)

_DMS_PATTERN = re.compile(
    rf"^(?P<sign>[-+]?)\s*"
    rf"(?P<deg>{_UNSIGNED_NUMBER})\s*°"
    rf"(?:\s*(?P<min>{_UNSIGNED_NUMBER})\s*[′']"
    rf"(?:\s*(?P<sec>{_UNSIGNED_NUMBER})\s*[″\"])?)?$"
)


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_angle_text(text: str) -> ParsedUnitValue | ParsedDMS:
    """
    Разбор строки в число с единицей или DMS-компоненты.

    Args:
        text: Строка с углом

    Returns:
        ParsedUnitValue для "12deg", ParsedDMS для "12° 34′ 56″"

    Raises:
        ParseError: Если строка пустая, не строка или не соответствует
            грамматике

    Examples:
        >>> parse_angle_text(" 0.25   turn ")
        ParsedUnitValue(value=0.25, unit=<AngleUnit.TURN: 'turn'>)
        >>> parse_angle_text("-12°30'")
        ParsedDMS(degrees=-12.0, minutes=-30.0, seconds=-0.0)
    """
    if not isinstance(text, str):
        raise ParseError(f"Angle text must be a string, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        logger.debug("Rejected empty angle text %r", text)
        raise ParseError(f"The provided string {text!r} does not represent a valid angle")

    match = _UNIT_PATTERN.match(stripped)
    if match:
        return ParsedUnitValue(
            value=float(match.group("value")),
            unit=AngleUnit(match.group("unit").lower()),
        )

    match = _DMS_PATTERN.match(stripped)
    if match:
        sign = -1.0 if match.group("sign") == "-" else 1.0
        minutes = match.group("min")
        seconds = match.group("sec")
        return ParsedDMS(
            degrees=sign * float(match.group("deg")),
            minutes=sign * float(minutes) if minutes is not None else sign * 0.0,
            seconds=sign * float(seconds) if seconds is not None else sign * 0.0,
        )

    logger.debug("Rejected angle text %r", text)
    raise ParseError(f"The provided string {text!r} does not represent a valid angle")
