"""
angles — плоский угол как значение

    >>> from angles import Angle
    >>> Angle.parse("10deg").equals(Angle.from_degrees(370))
    True
"""

from angles.core.domain import Angle, AngleUnit
from angles.core.errors import AngleError, DivisionByZero, InvalidArgument, ParseError
from angles.core.math import (
    RAD_EPSILON,
    TAU,
    TRIG_EPSILON,
    wrap_degrees,
    wrap_gradians,
    wrap_radians,
)
from angles.core.text import FormatStyle

__all__ = [
    "Angle",
    "AngleUnit",
    "FormatStyle",
    # Errors
    "AngleError",
    "DivisionByZero",
    "InvalidArgument",
    "ParseError",
    # Constants
    "RAD_EPSILON",
    "TAU",
    "TRIG_EPSILON",
    # Wrap
    "wrap_degrees",
    "wrap_gradians",
    "wrap_radians",
]
