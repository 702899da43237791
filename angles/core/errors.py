"""
Angle Errors — Единая таксономия ошибок

Все ошибки пакета наследуются от AngleError и дополнительно от
соответствующего встроенного исключения, чтобы вызывающий код мог
ловить их как ValueError / ZeroDivisionError.

- ParseError: некорректная или пустая строка для Angle.parse
- InvalidArgument: параметр вне допустимой области
  (decimals < 0, smallest_unit ∉ {0, 1, 2}, eps < 0, неизвестный стиль)
- DivisionByZero: нулевой делитель в Angle.div
"""


class AngleError(Exception):
    """Базовая ошибка пакета angles."""


class ParseError(AngleError, ValueError):
    """
    Строка не описывает угол.

    Angle.try_parse преобразует эту ошибку в результат (False, None).
    """


class InvalidArgument(AngleError, ValueError):
    """Параметр операции вне допустимой области."""


class DivisionByZero(AngleError, ZeroDivisionError):
    """Деление угла на ноль."""
