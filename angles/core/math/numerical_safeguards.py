"""
Numerical Safeguards — Safe Math Primitives для углов

Модуль обеспечивает численную устойчивость угловых вычислений:
- Epsilon-параметры для сравнений углов и детекции сингулярностей
- Обратное значение с корректной бесконечностью вблизи нуля (signed infinity)
- Канонизация -0.0 → 0.0
- Epsilon-сравнения float
- Валидация параметров операций

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на (почти) ноль никогда не бросает исключение в trig-функциях:
   результат — ±inf со знаком знаменателя
2. NaN/Inf во входных данных не подавляются, а распространяются
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from angles.core.errors import InvalidArgument

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность кругового сравнения углов (радианы)
# Используется в Angle.compare / Angle.equals по умолчанию
RAD_EPSILON: Final[float] = 1e-9

# Порог детекции нулевого знаменателя в trig/hyperbolic функциях
# Если |x| <= TRIG_EPSILON → x считается нулём, результат 1/x = ±inf
TRIG_EPSILON: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ И КАНОНИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def canonical_zero(value: float) -> float:
    """
    Канонизация отрицательного нуля: -0.0 → 0.0.

    Остальные значения (включая NaN/Inf) возвращаются без изменений.

    Examples:
        >>> canonical_zero(-0.0)
        0.0
        >>> canonical_zero(-1.5)
        -1.5
    """
    if value == 0.0:
        return 0.0
    return value


# =============================================================================
# БЕЗОПАСНОЕ ОБРАТНОЕ ЗНАЧЕНИЕ
# =============================================================================


def signed_inverse(value: float, eps: float = TRIG_EPSILON) -> float:
    """
    Обратное значение 1/x с корректной бесконечностью вблизи нуля.

    Если |x| <= eps, x считается нулём, и результат — бесконечность
    со знаком x (знак нуля учитывается: -0.0 → -inf). Это даёт правильный
    предел для csc/sec/cot и их гиперболических аналогов вместо огромного,
    но конечного числа.

    Args:
        value: Знаменатель
        eps: Порог нуля (default: TRIG_EPSILON)

    Returns:
        1/value или ±inf

    Examples:
        >>> signed_inverse(2.0)
        0.5
        >>> signed_inverse(1e-14)
        inf
        >>> signed_inverse(-0.0)
        -inf
    """
    if abs(value) <= eps:
        return math.copysign(math.inf, value)
    return 1.0 / value


def signed_quotient(numerator: float, denominator: float, eps: float = TRIG_EPSILON) -> float:
    """
    Частное numerator/denominator с ±inf при почти нулевом знаменателе.

    Знак бесконечности — знак частного: знак числителя, умноженный на знак
    (остаточного) знаменателя. Используется для tan = sin/cos.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        eps: Порог нуля (default: TRIG_EPSILON)

    Returns:
        numerator/denominator или ±inf
    """
    if abs(denominator) <= eps:
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_zero(value: float, tol: float = TRIG_EPSILON) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = RAD_EPSILON,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: RAD_EPSILON)

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(2.0, 1.0)
        1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если value < 0 или NaN
    """
    if math.isnan(value):
        raise InvalidArgument(f"{name} must be a number, got {value}")

    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")


def validate_decimals(decimals: int | None) -> None:
    """
    Валидация количества знаков после запятой.

    None означает "без округления" и допустим.

    Raises:
        InvalidArgument: Если decimals < 0
    """
    if decimals is not None and decimals < 0:
        raise InvalidArgument(f"decimals must be non-negative or None, got {decimals}")
