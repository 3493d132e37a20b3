"""
Тесты Constants

Проверяет:
1. Базовые значения и sentinel
2. Встроенные PI и Ln10 (декодирование wire-блобов)
3. E = exp(1) и кэширование
"""

import math

import pytest

from bigfloat import NAN, NEGATIVE_INFINITY, ONE, POSITIVE_INFINITY, ZERO, e, ln10, pi

PI_TEXT = "3.141592653589793238462643383279502884197169399375105820974"
LN10_TEXT = (
    "2.302585092994045684017991454684364207601101488628772976033327900967"
    "5726096773524802359972050895982984"
)


class TestBasicConstants:
    """Тесты ZERO / ONE / sentinel"""

    def test_zero_one(self) -> None:
        assert ZERO.is_zero
        assert str(ONE) == "1"

    def test_sentinels(self) -> None:
        assert NAN.is_nan
        assert POSITIVE_INFINITY.is_positive_infinity
        assert NEGATIVE_INFINITY.is_negative_infinity


class TestEmbeddedConstants:
    """Тесты PI / Ln10 / E"""

    def test_pi_digits(self) -> None:
        value = pi()
        assert str(value) == PI_TEXT
        assert value.scale == 57

    def test_pi_matches_double(self) -> None:
        assert float(pi()) == pytest.approx(math.pi, rel=1e-15)

    def test_ln10_digits(self) -> None:
        value = ln10()
        assert str(value) == LN10_TEXT
        assert value.scale == 100

    def test_ln10_matches_double(self) -> None:
        assert float(ln10()) == pytest.approx(math.log(10), rel=1e-15)

    def test_e_is_exp_one(self) -> None:
        assert str(e()).startswith("2.71828182845904523536028747135266249775724709369995")
        assert e().scale == 999

    def test_cached(self) -> None:
        assert pi() is pi()
        assert e() is e()
