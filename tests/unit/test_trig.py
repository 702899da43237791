"""
Тесты тригонометрии с обработкой сингулярностей

Проверяет:
1. Значения в регулярных точках совпадают с math
2. ±inf в полюсах tan/sec/csc/cot вместо огромных конечных значений
3. Знак бесконечности соответствует направлению предела
4. Гиперболические функции: сингулярности в нуле, переполнение → ±inf
"""

import math

import pytest

from angles.core.domain import Angle
from angles.core.math import trig


class TestCircularRegularPoints:
    """Тесты значений вне сингулярностей"""

    def test_sixty_degrees(self) -> None:
        a = Angle.from_degrees(60)
        assert a.sin() == pytest.approx(math.sqrt(3) / 2)
        assert a.cos() == pytest.approx(0.5)
        assert a.tan() == pytest.approx(math.sqrt(3))
        assert a.sec() == pytest.approx(2.0)
        assert a.csc() == pytest.approx(2 / math.sqrt(3))
        assert a.cot() == pytest.approx(1 / math.sqrt(3))

    def test_forty_five_degrees(self) -> None:
        a = Angle.from_degrees(45)
        assert a.tan() == pytest.approx(1.0)
        assert a.cot() == pytest.approx(1.0)


class TestCircularSingularities:
    """Тесты ±inf в полюсах"""

    def test_tan_at_right_angle(self) -> None:
        """math.tan(π/2) ≈ 1.6e16, здесь — +inf"""
        assert math.isfinite(math.tan(math.pi / 2))
        assert Angle.from_degrees(90).tan() == math.inf

    def test_tan_sign_follows_limit(self) -> None:
        """Знак совпадает со знаком прямого вычисления sin/cos"""
        assert Angle.from_degrees(-90).tan() == -math.inf
        assert Angle.from_degrees(270).tan() == math.copysign(math.inf, math.tan(math.radians(270)))

    def test_sec_at_right_angle(self) -> None:
        assert Angle.from_degrees(90).sec() == math.inf

    def test_csc_at_zero(self) -> None:
        assert math.isinf(Angle.from_degrees(0).csc())
        assert math.isinf(Angle.from_degrees(180).csc())

    def test_csc_side_of_zero(self) -> None:
        """Чуть выше нуля синуса → +inf, чуть ниже → -inf"""
        assert Angle.from_radians(1e-14).csc() > 0
        assert Angle.from_radians(-1e-14).csc() < 0
        assert Angle.from_radians(1e-14).csc() == math.inf
        assert Angle.from_radians(-1e-14).csc() == -math.inf

    def test_cot_at_zero_and_right_angle(self) -> None:
        """cot(0) = +inf, cot(90°) = 0"""
        assert Angle.from_degrees(0).cot() == math.inf
        assert Angle.from_degrees(90).cot() == 0.0

    def test_custom_eps(self) -> None:
        """Порог можно ослабить на уровне модуля trig"""
        assert trig.csc(1e-6, eps=1e-5) == math.inf
        assert trig.csc(1e-6) == pytest.approx(1e6)


class TestHyperbolic:
    """Тесты гиперболических функций"""

    def test_direct_values(self) -> None:
        a = Angle.from_radians(1.0)
        assert a.sinh() == pytest.approx(math.sinh(1.0))
        assert a.cosh() == pytest.approx(math.cosh(1.0))
        assert a.tanh() == pytest.approx(math.tanh(1.0))
        assert a.sech() == pytest.approx(1 / math.cosh(1.0))
        assert a.csch() == pytest.approx(1 / math.sinh(1.0))
        assert a.coth() == pytest.approx(1 / math.tanh(1.0))

    def test_singularities_at_zero(self) -> None:
        """csch/coth в нуле → ±inf по знаку нуля, sech(0) = 1"""
        assert Angle.from_radians(0.0).csch() == math.inf
        assert Angle.from_radians(-0.0).csch() == -math.inf
        assert Angle.from_radians(0.0).coth() == math.inf
        assert Angle.from_radians(-1e-14).coth() == -math.inf
        assert Angle.from_radians(0.0).sech() == 1.0

    def test_overflow_gives_infinity(self) -> None:
        """math.sinh(1000) бросает OverflowError, здесь — ±inf"""
        assert Angle.from_radians(1000.0).sinh() == math.inf
        assert Angle.from_radians(-1000.0).sinh() == -math.inf
        assert Angle.from_radians(-1000.0).cosh() == math.inf
        assert Angle.from_radians(1000.0).sech() == 0.0
        assert Angle.from_radians(1000.0).tanh() == 1.0
