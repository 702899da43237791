"""
Angle — Модель плоского угла

Immutable Pydantic модель, хранящая угол в радианах (единственное поле).
Все операции возвращают новый экземпляр; нормализация выполняется только
явно через wrap().

Возможности:
- Фабрики из радиан, градусов, градов, оборотов, DMS и строки
- Конверсии во все единицы и разложение на DMS
- Круговое сравнение (по модулю 2π) с толерантностью
- Арифметика (+, -, *, /) без неявной нормализации
- Тригонометрия и гиперболические функции с ±inf в сингулярностях
- Сериализация в строку (7 стилей) и обратный разбор

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. from_radians(r).to_radians() == r (точно)
2. Структурное равенство (==) — побитовое сравнение радиан;
   доменное равенство — equals() по круговому расстоянию
3. parse(a.format(style, 17)).equals(a) для всех стилей
"""

import math
from typing import ClassVar

from pydantic import BaseModel, Field

from angles.core.domain.units import (
    AngleUnit,
    degrees_to_dms,
    degrees_to_radians,
    dms_to_degrees,
    gradians_to_radians,
    radians_to_degrees,
    radians_to_gradians,
    radians_to_turns,
    turns_to_radians,
)
from angles.core.errors import DivisionByZero, ParseError
from angles.core.math import trig
from angles.core.math.numerical_safeguards import (
    RAD_EPSILON,
    TRIG_EPSILON,
    compare_with_tolerance,
    validate_non_negative,
)
from angles.core.math.wrap import TAU, wrap_degrees, wrap_gradians, wrap_radians
from angles.core.text.formatting import FormatStyle, format_angle
from angles.core.text.parsing import ParsedDMS, parse_angle_text


class Angle(BaseModel):
    """
    Плоский угол, хранимый в радианах.

    Создаётся только через фабрики:
        >>> Angle.from_degrees(180).to_turns()
        0.5
        >>> Angle.parse("12° 30′").to_degrees()
        12.5

    Immutable модель (frozen=True): копируется и разделяется свободно.
    """

    radians: float = Field(..., description="Мера угла в радианах (без нормализации)")

    model_config = {"frozen": True}  # Immutable

    TAU: ClassVar[float] = TAU
    RAD_EPSILON: ClassVar[float] = RAD_EPSILON
    TRIG_EPSILON: ClassVar[float] = TRIG_EPSILON

    wrap_radians = staticmethod(wrap_radians)
    wrap_degrees = staticmethod(wrap_degrees)
    wrap_gradians = staticmethod(wrap_gradians)

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def from_radians(cls, radians: float) -> "Angle":
        """Угол из радиан."""
        return cls(radians=radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> "Angle":
        """Угол из градусов."""
        return cls(radians=degrees_to_radians(degrees))

    @classmethod
    def from_gradians(cls, gradians: float) -> "Angle":
        """Угол из градов (400 на оборот)."""
        return cls(radians=gradians_to_radians(gradians))

    @classmethod
    def from_turns(cls, turns: float) -> "Angle":
        """Угол из оборотов."""
        return cls(radians=turns_to_radians(turns))

    @classmethod
    def from_dms(cls, degrees: float, minutes: float = 0.0, seconds: float = 0.0) -> "Angle":
        """
        Угол из градусов, угловых минут и секунд.

        Части складываются арифметически (d + m/60 + s/3600), знаки не
        выравниваются: для -12° 34′ 56″ передавать (-12, -34, -56).
        """
        return cls.from_degrees(dms_to_degrees(degrees, minutes, seconds))

    @classmethod
    def parse(cls, text: str) -> "Angle":
        """
        Разбор угла из строки ("12deg", "0.5 turn", "-12°34'56\\"").

        Raises:
            ParseError: Если строка пустая или не описывает угол
        """
        parsed = parse_angle_text(text)

        if isinstance(parsed, ParsedDMS):
            return cls.from_dms(parsed.degrees, parsed.minutes, parsed.seconds)

        if parsed.unit is AngleUnit.DEGREE:
            return cls.from_degrees(parsed.value)
        if parsed.unit is AngleUnit.GRADIAN:
            return cls.from_gradians(parsed.value)
        if parsed.unit is AngleUnit.TURN:
            return cls.from_turns(parsed.value)
        return cls.from_radians(parsed.value)

    @classmethod
    def try_parse(cls, text: str) -> tuple[bool, "Angle | None"]:
        """
        Разбор без исключений.

        Returns:
            (True, angle) при успехе, (False, None) при ошибке разбора
        """
        try:
            return True, cls.parse(text)
        except ParseError:
            return False, None

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def to_radians(self) -> float:
        return self.radians

    def to_degrees(self) -> float:
        return radians_to_degrees(self.radians)

    def to_gradians(self) -> float:
        return radians_to_gradians(self.radians)

    def to_turns(self) -> float:
        return radians_to_turns(self.radians)

    def to_dms(self, smallest_unit: int = 2, decimals: int | None = None) -> tuple[float, ...]:
        """
        Разложение на (градусы[, минуты[, секунды]]).

        Args:
            smallest_unit: 0 — градусы, 1 — + минуты, 2 — + секунды (default: 2)
            decimals: Округление наименьшей компоненты (None — без округления)

        Raises:
            InvalidArgument: smallest_unit ∉ {0, 1, 2} или decimals < 0
        """
        return degrees_to_dms(self.to_degrees(), smallest_unit, decimals)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def add(self, other: "Angle") -> "Angle":
        """Сумма углов (без нормализации)."""
        return Angle(radians=self.radians + other.radians)

    def sub(self, other: "Angle") -> "Angle":
        """Разность углов (без нормализации)."""
        return Angle(radians=self.radians - other.radians)

    def mul(self, k: float) -> "Angle":
        """Угол, умноженный на скаляр."""
        return Angle(radians=self.radians * k)

    def div(self, k: float) -> "Angle":
        """
        Угол, делённый на скаляр.

        Raises:
            DivisionByZero: Если k == 0
        """
        if k == 0:
            raise DivisionByZero(f"Cannot divide angle {self} by zero")
        return Angle(radians=self.radians / k)

    def abs(self) -> "Angle":
        """Угол с неотрицательной мерой."""
        return Angle(radians=abs(self.radians))

    def __add__(self, other: object) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, k: object) -> "Angle":
        if not isinstance(k, (int, float)) or isinstance(k, bool):
            return NotImplemented
        return self.mul(k)

    __rmul__ = __mul__

    def __truediv__(self, k: object) -> "Angle":
        if not isinstance(k, (int, float)) or isinstance(k, bool):
            return NotImplemented
        return self.div(k)

    def __neg__(self) -> "Angle":
        return Angle(radians=-self.radians)

    def __abs__(self) -> "Angle":
        return self.abs()

    # =========================================================================
    # НОРМАЛИЗАЦИЯ И СРАВНЕНИЕ
    # =========================================================================

    def wrap(self, signed: bool = False) -> "Angle":
        """
        Новый угол в диапазоне [0, τ) или, при signed=True, [-π, π).

        Исходный угол не изменяется.
        """
        return Angle(radians=wrap_radians(self.radians, signed))

    def compare(self, other: "Angle", eps: float = RAD_EPSILON) -> int:
        """
        Круговое сравнение с толерантностью.

        delta = wrap_radians(other - self, signed=True):
        - |delta| <= eps → 0 (углы равны по модулю полного оборота)
        - delta > 0 → -1 (other впереди, self "меньше")
        - иначе → 1

        Raises:
            InvalidArgument: Если eps < 0
        """
        validate_non_negative(eps, "eps")

        delta = wrap_radians(other.radians - self.radians, signed=True)
        return compare_with_tolerance(0.0, delta, eps)

    def equals(self, other: "Angle", eps: float = RAD_EPSILON) -> bool:
        """Равенство по круговому расстоянию (10° equals 370°)."""
        return self.compare(other, eps) == 0

    # =========================================================================
    # ТРИГОНОМЕТРИЯ
    # =========================================================================

    def sin(self) -> float:
        return math.sin(self.radians)

    def cos(self) -> float:
        return math.cos(self.radians)

    def tan(self) -> float:
        """Тангенс; ±inf при |cos| <= TRIG_EPSILON."""
        return trig.tan(self.radians)

    def sec(self) -> float:
        """Секанс 1/cos; ±inf (знак cos) при |cos| <= TRIG_EPSILON."""
        return trig.sec(self.radians)

    def csc(self) -> float:
        """Косеканс 1/sin; ±inf (знак sin) при |sin| <= TRIG_EPSILON."""
        return trig.csc(self.radians)

    def cot(self) -> float:
        """Котангенс 1/tan; ±inf (знак tan) при |tan| <= TRIG_EPSILON."""
        return trig.cot(self.radians)

    def sinh(self) -> float:
        return trig.sinh(self.radians)

    def cosh(self) -> float:
        return trig.cosh(self.radians)

    def tanh(self) -> float:
        return math.tanh(self.radians)

    def sech(self) -> float:
        return trig.sech(self.radians)

    def csch(self) -> float:
        return trig.csch(self.radians)

    def coth(self) -> float:
        return trig.coth(self.radians)

    # =========================================================================
    # СТРОКИ
    # =========================================================================

    def format(self, style: FormatStyle | str = FormatStyle.RAD, decimals: int | None = None) -> str:
        """
        Строковое представление угла.

        Стили: 'rad', 'deg', 'grad', 'turn' ("12.50deg"), 'd' ("12.5°"),
        'dm' ("12° 30.0′"), 'dms' ("12° 30′ 0.0″").

        Raises:
            InvalidArgument: decimals < 0 или неизвестный стиль
        """
        return format_angle(self.radians, style, decimals)

    def __str__(self) -> str:
        return self.format()
