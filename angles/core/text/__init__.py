"""
Текстовый формат угла: разбор и форматирование.

Строка вида "12.50deg" или "12° 34′ 56″" — стабильный формат обмена углами.
"""

from angles.core.text.formatting import (
    ARCMINUTE_SIGN,
    ARCSECOND_SIGN,
    DEGREE_SIGN,
    FormatStyle,
    format_angle,
    format_dms,
    format_float,
    resolve_style,
)
from angles.core.text.parsing import ParsedDMS, ParsedUnitValue, parse_angle_text

__all__ = [
    # Formatting
    "ARCMINUTE_SIGN",
    "ARCSECOND_SIGN",
    "DEGREE_SIGN",
    "FormatStyle",
    "format_angle",
    "format_dms",
    "format_float",
    "resolve_style",
    # Parsing
    "ParsedDMS",
    "ParsedUnitValue",
    "parse_angle_text",
]
