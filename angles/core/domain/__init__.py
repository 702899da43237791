"""
Domain models and value objects.

Contains the Angle value type and the angular unit conversions.
"""

from angles.core.domain.angle import Angle
from angles.core.domain.units import (
    ARCMINUTES_PER_DEGREE,
    ARCSECONDS_PER_ARCMINUTE,
    ARCSECONDS_PER_DEGREE,
    DEGREES_PER_GRADIAN,
    DEGREES_PER_RADIAN,
    DEGREES_PER_TURN,
    GRADIANS_PER_RADIAN,
    GRADIANS_PER_TURN,
    RADIANS_PER_DEGREE,
    RADIANS_PER_GRADIAN,
    RADIANS_PER_TURN,
    TAU,
    AngleUnit,
    degrees_to_dms,
    degrees_to_gradians,
    degrees_to_radians,
    dms_to_degrees,
    gradians_to_degrees,
    gradians_to_radians,
    radians_to_degrees,
    radians_to_gradians,
    radians_to_turns,
    to_radians,
    turns_to_radians,
)

__all__ = [
    # Angle model
    "Angle",
    # Units module — Constants
    "ARCMINUTES_PER_DEGREE",
    "ARCSECONDS_PER_ARCMINUTE",
    "ARCSECONDS_PER_DEGREE",
    "DEGREES_PER_GRADIAN",
    "DEGREES_PER_RADIAN",
    "DEGREES_PER_TURN",
    "GRADIANS_PER_RADIAN",
    "GRADIANS_PER_TURN",
    "RADIANS_PER_DEGREE",
    "RADIANS_PER_GRADIAN",
    "RADIANS_PER_TURN",
    "TAU",
    # Units module — Types
    "AngleUnit",
    # Units module — Functions
    "degrees_to_dms",
    "degrees_to_gradians",
    "degrees_to_radians",
    "dms_to_degrees",
    "gradians_to_degrees",
    "gradians_to_radians",
    "radians_to_degrees",
    "radians_to_gradians",
    "radians_to_turns",
    "to_radians",
    "turns_to_radians",
]
