"""
Тесты текстового формата угла: разбор и форматирование

Проверяет:
1. Разбор чисел с единицами (регистр, пробелы, знак, экспонента)
2. Разбор DMS (Unicode и ASCII символы, знак на всех компонентах)
3. Отказ на некорректных строках (ParseError / try_parse)
4. Форматирование во всех стилях, округление и перенос
5. Round-trip parse(format(a, style, 17)).equals(a)
"""

import logging
import math
import random

import pytest

from angles.core.domain import Angle
from angles.core.errors import InvalidArgument, ParseError
from angles.core.text import (
    FormatStyle,
    ParsedDMS,
    ParsedUnitValue,
    format_float,
    parse_angle_text,
)
from angles.core.domain.units import AngleUnit

# =============================================================================
# РАЗБОР
# =============================================================================


class TestParseUnits:
    """Тесты разбора числа с единицей"""

    def test_degrees(self) -> None:
        assert Angle.parse("12deg").equals(Angle.from_degrees(12))
        assert Angle.parse("12 DEG").equals(Angle.from_degrees(12))
        assert Angle.parse("+12.0Deg").equals(Angle.from_degrees(12))

    def test_other_units(self) -> None:
        assert Angle.parse("0.5 turn").equals(Angle.from_turns(0.5))
        assert Angle.parse("100grad").equals(Angle.from_degrees(90))
        assert Angle.parse(f"{math.pi!r}rad").equals(Angle.from_radians(math.pi))

    def test_whitespace_trimmed(self) -> None:
        assert Angle.parse(" 0.25   turn ").equals(Angle.from_turns(0.25))
        assert Angle.parse("\t-45 deg\n").equals(Angle.from_degrees(-45))

    def test_number_forms(self) -> None:
        """Дробная часть и экспонента"""
        assert Angle.parse("-1.5e-3rad").to_radians() == -1.5e-3
        assert Angle.parse(".5turn").equals(Angle.from_turns(0.5))
        assert Angle.parse("1E2grad").equals(Angle.from_gradians(100))

    def test_parsed_unit_value(self) -> None:
        parsed = parse_angle_text("12 GRAD")
        assert parsed == ParsedUnitValue(value=12.0, unit=AngleUnit.GRADIAN)


class TestParseDms:
    """Тесты разбора DMS"""

    def test_unicode_symbols(self) -> None:
        assert Angle.parse("12° 34′ 56″").equals(Angle.from_dms(12, 34, 56))

    def test_ascii_symbols_and_sign(self) -> None:
        """Знак применяется ко всем компонентам"""
        assert Angle.parse("-12°34'56\"").equals(Angle.from_dms(-12, -34, -56))
        assert not Angle.parse("-12°34'56\"").equals(Angle.from_dms(-12, 34, 56))

    def test_parsed_components_signed(self) -> None:
        parsed = parse_angle_text("-12° 34′ 56″")
        assert parsed == ParsedDMS(degrees=-12.0, minutes=-34.0, seconds=-56.0)

    def test_degree_and_minute_prefixes(self) -> None:
        """Стили 'd' и 'dm' читаются обратно"""
        assert Angle.parse("12.5°").equals(Angle.from_degrees(12.5))
        assert Angle.parse("12° 30′").equals(Angle.from_degrees(12.5))
        assert Angle.parse("-12° 30.5'").equals(Angle.from_dms(-12, -30.5))

    def test_whitespace_inside_dms(self) -> None:
        assert Angle.parse("  12 ° 34 ′ 56 ″ ").equals(Angle.from_dms(12, 34, 56))
        assert Angle.parse("- 12°34′56″").equals(Angle.from_dms(-12, -34, -56))

    def test_decimal_seconds(self) -> None:
        assert Angle.parse("0° 0′ 1.5″").equals(Angle.from_dms(0, 0, 1.5))


class TestParseRejects:
    """Тесты отказа на некорректных строках"""

    BAD_INPUTS = [
        "",
        "   ",
        "not an angle",
        "12",
        "deg",
        "-",
        "12 degrees",
        "12°56″",
        "34′ 56″",
        "12° 34′ 56″ extra",
        "1.2.3deg",
        "12rad5",
        "--12deg",
    ]

    @pytest.mark.parametrize("text", BAD_INPUTS)
    def test_parse_raises(self, text: str) -> None:
        with pytest.raises(ParseError):
            Angle.parse(text)

    @pytest.mark.parametrize("text", BAD_INPUTS)
    def test_try_parse_returns_false(self, text: str) -> None:
        assert Angle.try_parse(text) == (False, None)

    def test_try_parse_success(self) -> None:
        ok, angle = Angle.try_parse("12deg")
        assert ok is True
        assert isinstance(angle, Angle)
        assert angle.equals(Angle.from_degrees(12))

    def test_non_string_input(self) -> None:
        """Не-строка — ParseError, try_parse не бросает"""
        with pytest.raises(ParseError):
            Angle.parse(None)  # type: ignore[arg-type]
        assert Angle.try_parse(12) == (False, None)  # type: ignore[arg-type]

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="does not represent a valid angle"):
            Angle.parse("not an angle")

    def test_rejection_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="angles.core.text.parsing"):
            Angle.try_parse("not an angle")
        assert "Rejected angle text" in caplog.text


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


class TestFormat:
    """Тесты Angle.format"""

    def test_unit_styles(self) -> None:
        a = Angle.from_degrees(12.5)
        assert a.format("deg", 2) == "12.50deg"
        assert Angle.from_radians(math.pi).format("rad", 3) == "3.142rad"
        assert Angle.from_degrees(180).format("turn", 2) == "0.50turn"
        assert Angle.from_degrees(90).format("grad", 1) == "100.0grad"

    def test_dms_styles(self) -> None:
        a = Angle.from_degrees(12.5)
        assert a.format("d", 2) == "12.50°"
        assert a.format("dm", 1) == "12° 30.0′"
        assert Angle.from_dms(12, 34, 56).format("dms", 2) == "12° 34′ 56.00″"
        assert Angle.from_dms(12, 34, 56).format("dms", 0) == "12° 34′ 56″"

    def test_negative_dms(self) -> None:
        """Знак выводится один раз, перед градусами"""
        assert Angle.from_dms(-12, -34, -56).format("dms", 1) == "-12° 34′ 56.0″"
        assert Angle.from_degrees(-12.5).format("dm", 0) == "-12° 30′"

    def test_dms_carry(self) -> None:
        assert Angle.from_degrees(29.999999999).format("dms", 3) == "30° 0′ 0.000″"

    def test_style_case_insensitive(self) -> None:
        a = Angle.from_degrees(12.5)
        assert a.format("DEG", 1) == "12.5deg"
        assert a.format(FormatStyle.DEG, 1) == "12.5deg"

    def test_invalid_style_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="Invalid format style"):
            Angle.from_degrees(12.5).format("xyz")

    def test_negative_decimals_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="decimals"):
            Angle.from_degrees(12.5).format("deg", -1)

    def test_default_str(self) -> None:
        """str() — радианы в кратчайшем представлении"""
        assert str(Angle.from_radians(1.5)) == "1.5rad"
        assert str(Angle.from_radians(-0.0)) == "0.0rad"
        assert Angle.from_radians(1.5).format() == "1.5rad"

    def test_format_float(self) -> None:
        assert format_float(12.5, 2) == "12.50"
        assert format_float(1234567.0, 1) == "1234567.0"
        assert format_float(0.1) == "0.1"


class TestFormatParseRoundtrip:
    """Round-trip parse(format(...)) для всех стилей"""

    @pytest.mark.parametrize("style", [s.value for s in FormatStyle])
    def test_random_roundtrip_17_decimals(self, style: str) -> None:
        rng = random.Random(1337)
        for _ in range(200):
            a = Angle.from_radians(rng.uniform(-1e4, 1e4))
            b = Angle.parse(a.format(style, 17))
            assert b.equals(a), (style, a, a.format(style, 17))

    @pytest.mark.parametrize("style", [s.value for s in FormatStyle])
    def test_random_roundtrip_shortest(self, style: str) -> None:
        rng = random.Random(7)
        for _ in range(200):
            a = Angle.from_radians(rng.uniform(-10.0, 10.0))
            assert Angle.parse(a.format(style)).equals(a)

    def test_tiny_values_roundtrip(self) -> None:
        """Экспонента в кратчайшем представлении читается парсером"""
        for style in FormatStyle:
            a = Angle.from_radians(1e-20)
            assert Angle.parse(a.format(style)).equals(a)
