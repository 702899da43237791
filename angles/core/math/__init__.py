"""
Core math modules для angles

Математические примитивы: epsilon-защиты, нормализация углов,
тригонометрия с обработкой сингулярностей.
"""

# Numerical Safeguards
from angles.core.math.numerical_safeguards import (
    # Epsilon constants
    RAD_EPSILON,
    TRIG_EPSILON,
    # NaN/Inf
    canonical_zero,
    is_valid_float,
    # Safe inverse
    signed_inverse,
    signed_quotient,
    # Epsilon comparisons
    compare_with_tolerance,
    is_zero,
    # Validation
    validate_decimals,
    validate_non_negative,
)

# Wrap
from angles.core.math.wrap import (
    DEGREES_PER_TURN,
    GRADIANS_PER_TURN,
    RADIANS_PER_TURN,
    TAU,
    wrap_degrees,
    wrap_gradians,
    wrap_radians,
    wrap_scalar,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "RAD_EPSILON",
    "TRIG_EPSILON",
    # Numerical Safeguards — NaN/Inf
    "canonical_zero",
    "is_valid_float",
    # Numerical Safeguards — Safe inverse
    "signed_inverse",
    "signed_quotient",
    # Numerical Safeguards — Epsilon comparisons
    "compare_with_tolerance",
    "is_zero",
    # Numerical Safeguards — Validation
    "validate_decimals",
    "validate_non_negative",
    # Wrap — Constants
    "DEGREES_PER_TURN",
    "GRADIANS_PER_TURN",
    "RADIANS_PER_TURN",
    "TAU",
    # Wrap — Functions
    "wrap_degrees",
    "wrap_gradians",
    "wrap_radians",
    "wrap_scalar",
]
