"""
Тесты представления BigFloat

Проверяет:
1. Каноническую нормализацию (хвостовые нули, sentinel)
2. Предикаты и знак
3. Python-протокол: hash, bool, repr, str
4. increment / decrement / reciprocal
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from bigfloat import BigFloat, FloatKind, from_float_exact


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestNormalization:
    """Тесты канонической формы"""

    def test_trailing_zeros_stripped(self) -> None:
        """Хвостовые нули дробной части удаляются"""
        value = BigFloat(1500, 3)
        assert value.mantissa == 15
        assert value.scale == 1

    def test_integer_zeros_kept(self) -> None:
        """При scale == 0 нули целой части остаются"""
        value = BigFloat(100, 0)
        assert value.mantissa == 100
        assert value.scale == 0

    def test_zero_collapses_to_scale_zero(self) -> None:
        """Ноль с любым scale становится (0, 0)"""
        value = BigFloat(0, 5)
        assert value.mantissa == 0
        assert value.scale == 0

    def test_negative_mantissa_normalized(self) -> None:
        value = BigFloat(-2500, 3)
        assert (value.mantissa, value.scale) == (-25, 1)

    def test_already_canonical_unchanged(self) -> None:
        value = BigFloat(314, 2)
        assert (value.mantissa, value.scale) == (314, 2)

    def test_negative_scale_rejected(self) -> None:
        """Отрицательный scale у конечного значения недопустим"""
        with pytest.raises(ValueError, match="scale must be non-negative"):
            BigFloat(1, -1)

    def test_non_integer_mantissa_rejected(self) -> None:
        with pytest.raises(TypeError):
            BigFloat(1.5, 0)

    def test_sentinel_discards_mantissa_and_scale(self) -> None:
        """Sentinel всегда хранит (0, 0)"""
        value = BigFloat(123, 4, FloatKind.NAN)
        assert value.mantissa == 0
        assert value.scale == 0
        assert value.is_nan

    def test_kind_accepts_string(self) -> None:
        value = BigFloat(kind="POSITIVE_INFINITY")
        assert value.kind is FloatKind.POSITIVE_INFINITY

    def test_equal_values_share_representation(self) -> None:
        """Равные значения имеют одинаковое представление"""
        a = BigFloat(15, 1)
        b = BigFloat(150000, 5)
        assert (a.mantissa, a.scale) == (b.mantissa, b.scale)

    def test_immutable(self) -> None:
        value = BigFloat(1)
        with pytest.raises(AttributeError):
            value.mantissa = 2


# =============================================================================
# ТЕСТЫ ПРЕДИКАТОВ
# =============================================================================


class TestPredicates:
    """Тесты is_* и sign"""

    def test_finite_predicates(self) -> None:
        value = BigFloat(5)
        assert value.is_finite
        assert not value.is_nan
        assert not value.is_infinity
        assert not value.is_zero

    def test_zero(self) -> None:
        assert BigFloat(0).is_zero
        assert BigFloat(0, 3).is_zero

    def test_sentinels_are_not_zero(self) -> None:
        """Sentinel с mantissa 0 не считается нулём"""
        assert not BigFloat.nan().is_zero
        assert not BigFloat.positive_infinity().is_zero
        assert not BigFloat.negative_infinity().is_zero

    def test_infinity_predicates(self) -> None:
        pos = BigFloat.positive_infinity()
        neg = BigFloat.negative_infinity()
        assert pos.is_positive_infinity and pos.is_infinity
        assert neg.is_negative_infinity and neg.is_infinity
        assert not pos.is_negative_infinity
        assert not neg.is_positive_infinity
        assert not pos.is_finite

    @pytest.mark.parametrize(
        "value,expected",
        [
            (BigFloat(42), 1),
            (BigFloat(-42, 3), -1),
            (BigFloat(0), 0),
            (BigFloat.positive_infinity(), 1),
            (BigFloat.negative_infinity(), -1),
            (BigFloat.nan(), 0),
        ],
    )
    def test_sign(self, value: BigFloat, expected: int) -> None:
        assert value.sign == expected


# =============================================================================
# ТЕСТЫ PYTHON-ПРОТОКОЛА
# =============================================================================


class TestProtocol:
    """Тесты hash / bool / repr / str"""

    def test_repr(self) -> None:
        assert repr(BigFloat(628, 2)) == "BigFloat('6.28')"
        assert repr(BigFloat.nan()) == "BigFloat('NaN')"

    def test_str(self) -> None:
        assert str(BigFloat(-5, 3)) == "-0.005"
        assert str(BigFloat.negative_infinity()) == "-Infinity"

    def test_bool(self) -> None:
        assert not BigFloat(0)
        assert BigFloat(1, 5)
        assert BigFloat.nan()
        assert BigFloat.positive_infinity()

    def test_hash_consistent_with_int(self) -> None:
        assert hash(BigFloat(2)) == hash(2)
        assert hash(BigFloat(-7)) == hash(-7)

    def test_hash_consistent_with_float_and_fraction(self) -> None:
        assert hash(BigFloat(15, 1)) == hash(1.5)
        assert hash(BigFloat(25, 2)) == hash(Fraction(1, 4))

    def test_hash_consistent_with_non_dyadic_float(self) -> None:
        """Равные значения имеют равный hash и для 0.1, не только для 1.5"""
        exact = from_float_exact(0.1)
        assert exact == 0.1
        assert hash(exact) == hash(0.1)
        assert len({exact, 0.1}) == 1
        assert {0.1: "tenth"}[exact] == "tenth"

    def test_decimal_literal_is_distinct_from_double(self) -> None:
        tenth = BigFloat(1, 1)
        assert tenth != 0.1
        assert len({tenth, 0.1}) == 2

    def test_hash_consistent_with_decimal(self) -> None:
        assert hash(BigFloat(125, 2)) == hash(Decimal("1.25"))

    def test_hash_of_equal_values(self) -> None:
        assert hash(BigFloat(15, 1)) == hash(BigFloat(150, 2))

    def test_hash_infinity(self) -> None:
        assert hash(BigFloat.positive_infinity()) == hash(float("inf"))
        assert hash(BigFloat.negative_infinity()) == hash(float("-inf"))

    def test_usable_as_dict_key(self) -> None:
        """Поиск по int-ключу находит равный BigFloat"""
        table = {BigFloat(2): "two", BigFloat(15, 1): "one and a half"}
        assert table[2] == "two"
        assert table[BigFloat(150, 2)] == "one and a half"

    def test_nan_in_set_by_identity(self) -> None:
        nan = BigFloat.nan()
        assert nan in {nan}
        assert len({BigFloat.nan(), BigFloat.nan()}) == 2


# =============================================================================
# ТЕСТЫ ВСПОМОГАТЕЛЬНЫХ ОПЕРАЦИЙ
# =============================================================================


class TestHelpers:
    """Тесты increment / decrement / reciprocal / фабрик"""

    def test_increment(self) -> None:
        assert BigFloat(15, 1).increment() == BigFloat(25, 1)

    def test_decrement(self) -> None:
        assert BigFloat(0).decrement() == BigFloat(-1)

    def test_increment_infinity(self) -> None:
        assert BigFloat.positive_infinity().increment().is_positive_infinity

    def test_reciprocal(self) -> None:
        assert BigFloat(4).reciprocal == BigFloat(25, 2)

    def test_reciprocal_of_zero(self) -> None:
        assert BigFloat(0).reciprocal.is_positive_infinity

    def test_from_value(self) -> None:
        assert BigFloat.from_value(3) == BigFloat(3)
        assert BigFloat.from_value(0.25) == BigFloat(25, 2)
        assert BigFloat.from_value(Decimal("1.10")) == BigFloat(11, 1)

    def test_from_value_returns_same_bigfloat(self) -> None:
        value = BigFloat(7)
        assert BigFloat.from_value(value) is value

    def test_from_value_unsupported(self) -> None:
        with pytest.raises(TypeError, match="Unsupported numeric type"):
            BigFloat.from_value("1.5")

    def test_parse_factory(self) -> None:
        assert BigFloat.parse("1.5") == BigFloat(15, 1)
