"""
Trig — Тригонометрия и гиперболические функции с обработкой сингулярностей

Встроенные math.tan и 1/math.sin вблизи полюсов дают огромные, но конечные
значения (tan(π/2) ≈ 1.6e16), потому что π/2 не представимо точно.
Здесь знаменатель с |x| <= TRIG_EPSILON считается нулём, и результат —
бесконечность со знаком, соответствующим направлению предела.

Все функции принимают значение в радианах.
"""

import math

from angles.core.math.numerical_safeguards import (
    TRIG_EPSILON,
    signed_inverse,
    signed_quotient,
)

# =============================================================================
# КРУГОВЫЕ ФУНКЦИИ
# =============================================================================


def tan(radians: float, eps: float = TRIG_EPSILON) -> float:
    """
    Тангенс с ±inf при cos ≈ 0.

    Знак бесконечности — знак sin/cos, т.е. определяется остаточным
    значением cos: tan(π/2) = +inf, так как cos(π/2) ≈ +6.1e-17.

    Args:
        radians: Угол в радианах
        eps: Порог нуля для cos (default: TRIG_EPSILON)
    """
    return signed_quotient(math.sin(radians), math.cos(radians), eps)


def sec(radians: float, eps: float = TRIG_EPSILON) -> float:
    """Секанс 1/cos."""
    return signed_inverse(math.cos(radians), eps)


def csc(radians: float, eps: float = TRIG_EPSILON) -> float:
    """Косеканс 1/sin."""
    return signed_inverse(math.sin(radians), eps)


def cot(radians: float, eps: float = TRIG_EPSILON) -> float:
    """
    Котангенс 1/tan.

    При tan = ±inf результат ±0.0, при tan ≈ 0 — ±inf.
    """
    return signed_inverse(tan(radians, eps), eps)


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sinh(radians: float) -> float:
    """
    Гиперболический синус.

    math.sinh бросает OverflowError для |x| > ~710; здесь результат
    переполнения — ±inf, как у IEEE-754.
    """
    try:
        return math.sinh(radians)
    except OverflowError:
        return math.copysign(math.inf, radians)


def cosh(radians: float) -> float:
    """Гиперболический косинус (+inf при переполнении)."""
    try:
        return math.cosh(radians)
    except OverflowError:
        return math.inf


def sech(radians: float, eps: float = TRIG_EPSILON) -> float:
    """Гиперболический секанс 1/cosh (cosh >= 1, сингулярностей нет)."""
    return signed_inverse(cosh(radians), eps)


def csch(radians: float, eps: float = TRIG_EPSILON) -> float:
    """Гиперболический косеканс 1/sinh: ±inf в нуле."""
    return signed_inverse(sinh(radians), eps)


def coth(radians: float, eps: float = TRIG_EPSILON) -> float:
    """Гиперболический котангенс 1/tanh: ±inf в нуле."""
    return signed_inverse(math.tanh(radians), eps)
