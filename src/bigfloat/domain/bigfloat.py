"""
BigFloat — Десятичное число произвольной точности

Значение конечного числа: mantissa × 10^(-scale), где mantissa — целое
произвольной длины, scale >= 0. Помимо конечных значений тип имеет три
sentinel-состояния: NaN, +Infinity, -Infinity (семантика IEEE-754).

Модуль содержит:
- Каноническое представление и его нормализацию
- Предикаты (is_zero, is_nan, sign, ...)
- Арифметические и побитовые операторы с выравниванием scale
- Сравнения с NaN-семантикой

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Конечное значение всегда в канонической форме: scale == 0 или
   последняя цифра mantissa ненулевая
2. Sentinel всегда хранит mantissa == 0 и scale == 0
3. Доменные ошибки арифметики (0/0, inf - inf, ...) не бросают
   исключений, а дают NaN/Infinity
4. Значения immutable
"""

import math
import operator
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction

from bigfloat.config import DEFAULT_LIMITS, PrecisionLimits
from bigfloat.math.alignment import align, pow10, trunc_div, trunc_divmod


# =============================================================================
# ENUMS
# =============================================================================


class FloatKind(str, Enum):
    """Вариант значения: конечное число или одно из sentinel-состояний."""

    FINITE = "FINITE"
    POSITIVE_INFINITY = "POSITIVE_INFINITY"
    NEGATIVE_INFINITY = "NEGATIVE_INFINITY"
    NAN = "NAN"


# =============================================================================
# VALUE TYPE
# =============================================================================


@dataclass(frozen=True, eq=False, repr=False)
class BigFloat:
    """
    Immutable десятичное число: mantissa × 10^(-scale) либо sentinel.

    Конструктор всегда нормализует: пока mantissa делится на 10 и
    scale > 0, mantissa /= 10 и scale -= 1.

    Examples:
        >>> BigFloat(1500, 3)
        BigFloat('1.5')
        >>> BigFloat(314, 2) * BigFloat(2)
        BigFloat('6.28')
        >>> BigFloat(kind=FloatKind.NAN)
        BigFloat('NaN')
    """

    mantissa: int = 0
    scale: int = 0
    kind: FloatKind = FloatKind.FINITE

    def __post_init__(self) -> None:
        kind = FloatKind(self.kind)
        mantissa = operator.index(self.mantissa)
        scale = operator.index(self.scale)

        if kind is not FloatKind.FINITE:
            mantissa, scale = 0, 0
        elif scale < 0:
            raise ValueError(f"scale must be non-negative, got {scale}")

        # Каноническая форма
        while scale > 0 and mantissa % 10 == 0:
            mantissa //= 10
            scale -= 1

        object.__setattr__(self, "mantissa", int(mantissa))
        object.__setattr__(self, "scale", scale)
        object.__setattr__(self, "kind", kind)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def nan(cls) -> "BigFloat":
        return cls(kind=FloatKind.NAN)

    @classmethod
    def positive_infinity(cls) -> "BigFloat":
        return cls(kind=FloatKind.POSITIVE_INFINITY)

    @classmethod
    def negative_infinity(cls) -> "BigFloat":
        return cls(kind=FloatKind.NEGATIVE_INFINITY)

    @classmethod
    def from_value(cls, value) -> "BigFloat":
        """
        Конверсия нативного числа в BigFloat.

        Поддерживаются int, float, Decimal и numpy-скаляры. Scale берётся
        из дробных цифр текстового (для float) или фиксированного (для
        Decimal) представления.

        Raises:
            TypeError: Если тип не поддерживается
        """
        if isinstance(value, BigFloat):
            return value
        from bigfloat.codec.native import from_native

        return from_native(value)

    @classmethod
    def parse(cls, text: str) -> "BigFloat":
        """Разбор десятичной/экспоненциальной строки (см. codec.text.parse)."""
        from bigfloat.codec.text import parse

        return parse(text)

    @classmethod
    def from_bytes(cls, data: bytes) -> "BigFloat":
        from bigfloat.codec.binary import from_bytes

        return from_bytes(data)

    def to_bytes(self) -> bytes:
        from bigfloat.codec.binary import to_bytes

        return to_bytes(self)

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    @property
    def is_finite(self) -> bool:
        return self.kind is FloatKind.FINITE

    @property
    def is_zero(self) -> bool:
        return self.kind is FloatKind.FINITE and self.mantissa == 0

    @property
    def is_nan(self) -> bool:
        return self.kind is FloatKind.NAN

    @property
    def is_positive_infinity(self) -> bool:
        return self.kind is FloatKind.POSITIVE_INFINITY

    @property
    def is_negative_infinity(self) -> bool:
        return self.kind is FloatKind.NEGATIVE_INFINITY

    @property
    def is_infinity(self) -> bool:
        return self.is_positive_infinity or self.is_negative_infinity

    @property
    def sign(self) -> int:
        """
        Знак значения: NaN → 0, +Infinity → 1, -Infinity → -1,
        конечное → знак mantissa.
        """
        if self.kind is FloatKind.NAN:
            return 0
        if self.kind is FloatKind.POSITIVE_INFINITY:
            return 1
        if self.kind is FloatKind.NEGATIVE_INFINITY:
            return -1
        return (self.mantissa > 0) - (self.mantissa < 0)

    @property
    def reciprocal(self) -> "BigFloat":
        """1 / x (с пределом дробных разрядов деления)."""
        return divide(BigFloat(1), self)

    def increment(self) -> "BigFloat":
        return add(self, BigFloat(1))

    def decrement(self) -> "BigFloat":
        return subtract(self, BigFloat(1))

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __hash__(self) -> int:
        # Согласован с == для int, Decimal и float (точное двоичное значение)
        if self.kind is FloatKind.NAN:
            return object.__hash__(self)
        if self.kind is FloatKind.POSITIVE_INFINITY:
            return hash(math.inf)
        if self.kind is FloatKind.NEGATIVE_INFINITY:
            return hash(-math.inf)
        if self.scale == 0:
            return hash(self.mantissa)
        return hash(Fraction(self.mantissa, pow10(self.scale)))

    def __bool__(self) -> bool:
        return not self.is_zero

    def __str__(self) -> str:
        from bigfloat.codec.text import format_bigfloat

        return format_bigfloat(self)

    def __repr__(self) -> str:
        return f"BigFloat('{self}')"

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __float__(self) -> float:
        from bigfloat.codec.native import to_float

        return to_float(self)

    def __int__(self) -> int:
        from bigfloat.codec.native import to_int

        return to_int(self)

    def __round__(self, ndigits: int | None = None):
        """
        round(x) → int, round(x, n) → BigFloat с n дробными разрядами.

        Целый результат проходит через to_int: NaN → 0, ±Infinity →
        OverflowError.
        """
        from bigfloat.codec.native import to_int
        from bigfloat.math.rounding import round_half_away

        if ndigits is None:
            return to_int(round_half_away(self))
        return round_half_away(self, ndigits)

    def __trunc__(self) -> int:
        from bigfloat.codec.native import to_int

        return to_int(self)

    def __floor__(self) -> int:
        from bigfloat.codec.native import to_int
        from bigfloat.math.rounding import floor

        return to_int(floor(self))

    def __ceil__(self) -> int:
        from bigfloat.codec.native import to_int
        from bigfloat.math.rounding import ceiling

        return to_int(ceiling(self))

    # -------------------------------------------------------------------------
    # Binary operators
    # -------------------------------------------------------------------------

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    def __radd__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return add(other, self)

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return subtract(self, other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return subtract(other, self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return multiply(self, other)

    def __rmul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return multiply(other, self)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return divide(self, other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return divide(other, self)

    def __mod__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return remainder(self, other)

    def __rmod__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return remainder(other, self)

    def __and__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return bitwise_and(self, other)

    def __rand__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return bitwise_and(other, self)

    def __or__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return bitwise_or(self, other)

    def __ror__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return bitwise_or(other, self)

    def __xor__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return bitwise_xor(self, other)

    def __rxor__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return bitwise_xor(other, self)

    def __pow__(self, other, modulo=None):
        if modulo is not None:
            return NotImplemented
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from bigfloat.math.transcendental import power

        return power(self, other)

    def __rpow__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        from bigfloat.math.transcendental import power

        return power(other, self)

    # -------------------------------------------------------------------------
    # Unary operators
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigFloat":
        return negate(self)

    def __pos__(self) -> "BigFloat":
        return self

    def __invert__(self) -> "BigFloat":
        return invert(self)

    def __abs__(self) -> "BigFloat":
        return absolute(self)

    # -------------------------------------------------------------------------
    # Comparisons
    # -------------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented
        return equals(self, other)

    def __ne__(self, other) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented
        return not_equals(self, other)

    def __lt__(self, other) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented
        return less_than(self, other)

    def __gt__(self, other) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented
        return greater_than(self, other)

    def __le__(self, other) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented
        return equals(self, other) or less_than(self, other)

    def __ge__(self, other) -> bool:
        other = _comparable(other)
        if other is None:
            return NotImplemented
        return equals(self, other) or greater_than(self, other)


# =============================================================================
# COERCION
# =============================================================================


def _coerce(value) -> BigFloat | None:
    """Приведение операнда к BigFloat; None для неподдерживаемых типов."""
    if isinstance(value, BigFloat):
        return value
    if isinstance(value, int):
        return BigFloat(value)
    if isinstance(value, (float, Decimal)):
        return BigFloat.from_value(value)

    from bigfloat.codec.native import is_native_number

    if is_native_number(value):
        return BigFloat.from_value(value)
    return None


def _comparable(value) -> BigFloat | None:
    """Операнд сравнения: float берётся по точному двоичному значению."""
    from bigfloat.codec.native import from_float_exact, is_binary_float

    if is_binary_float(value):
        return from_float_exact(value)
    return _coerce(value)


def _signed_infinity(sign: int) -> BigFloat:
    if sign > 0:
        return BigFloat.positive_infinity()
    if sign < 0:
        return BigFloat.negative_infinity()
    return BigFloat.nan()


# =============================================================================
# ARITHMETIC
# =============================================================================


def add(a: BigFloat, b: BigFloat) -> BigFloat:
    """
    Сложение.

    NaN на любой стороне → NaN; +Infinity + -Infinity → NaN;
    одна бесконечность → эта бесконечность.
    """
    if a.is_nan or b.is_nan:
        return BigFloat.nan()
    if a.is_infinity and b.is_infinity and a.kind is not b.kind:
        return BigFloat.nan()
    if a.is_infinity:
        return a
    if b.is_infinity:
        return b

    m_a, m_b, scale = align(a.mantissa, a.scale, b.mantissa, b.scale)
    return BigFloat(m_a + m_b, scale)


def subtract(a: BigFloat, b: BigFloat) -> BigFloat:
    """a - b := a + (-b)"""
    return add(a, negate(b))


def multiply(a: BigFloat, b: BigFloat) -> BigFloat:
    """
    Умножение.

    Бесконечность в операнде → бесконечность со знаком произведения
    знаков, либо NaN если второй операнд ноль. Конечные операнды не
    выравниваются: scale результата = сумма scale.
    """
    if a.is_nan or b.is_nan:
        return BigFloat.nan()
    if a.is_infinity or b.is_infinity:
        return _signed_infinity(a.sign * b.sign)
    return BigFloat(a.mantissa * b.mantissa, a.scale + b.scale)


def divide(a: BigFloat, b: BigFloat, limits: PrecisionLimits | None = None) -> BigFloat:
    """
    Деление с пределом дробных разрядов.

    Конечная десятичная дробь возвращается точно. Бесконечная дробь
    (например 1/3) усекается (не округляется) на limits.division_digits
    дробных разрядах.

    Sentinel-таблица:
        inf / inf → NaN
        x / 0 → ±Infinity по знаку x, 0 / 0 → NaN
        ±inf / y → бесконечность со знаком sign(a) * sign(b)
        x / ±inf → 0

    Args:
        a: Делимое
        b: Делитель
        limits: Пределы точности (default: DEFAULT_LIMITS)

    Returns:
        Частное

    Examples:
        >>> divide(BigFloat(1), BigFloat(4))
        BigFloat('0.25')
        >>> divide(BigFloat(1), BigFloat(0))
        BigFloat('Infinity')
    """
    if a.is_nan or b.is_nan:
        return BigFloat.nan()
    if a.is_infinity and b.is_infinity:
        return BigFloat.nan()
    if b.is_zero:
        return _signed_infinity(a.sign)
    if a.is_infinity:
        return _signed_infinity(a.sign * b.sign)
    if b.is_infinity:
        return BigFloat(0)

    digits = (limits or DEFAULT_LIMITS).division_digits
    m_a, m_b, _ = align(a.mantissa, a.scale, b.mantissa, b.scale)

    # Long division до digits разрядов за одно целочисленное деление:
    # усечённое частное с digits дробными разрядами; если дробь
    # конечна, нормализация убирает хвостовые нули.
    quotient = trunc_div(m_a * pow10(digits), m_b)
    return BigFloat(quotient, digits)


def remainder(a: BigFloat, b: BigFloat) -> BigFloat:
    """
    Остаток от деления (знак совпадает со знаком делимого).

    NaN, бесконечное делимое или нулевой делитель → NaN;
    бесконечный делитель → a без изменений.
    """
    if a.is_nan or b.is_nan or a.is_infinity or b.is_zero:
        return BigFloat.nan()
    if b.is_infinity:
        return a

    m_a, m_b, scale = align(a.mantissa, a.scale, b.mantissa, b.scale)
    _, rest = trunc_divmod(m_a, m_b)
    return BigFloat(rest, scale)


# =============================================================================
# BITWISE
# =============================================================================
# Операции над битами выровненных мантисс (two's complement целого
# произвольной длины), а не над десятичным значением.


def bitwise_and(a: BigFloat, b: BigFloat) -> BigFloat:
    if not (a.is_finite and b.is_finite):
        return BigFloat.nan()
    m_a, m_b, scale = align(a.mantissa, a.scale, b.mantissa, b.scale)
    return BigFloat(m_a & m_b, scale)


def bitwise_or(a: BigFloat, b: BigFloat) -> BigFloat:
    if not (a.is_finite and b.is_finite):
        return BigFloat.nan()
    m_a, m_b, scale = align(a.mantissa, a.scale, b.mantissa, b.scale)
    return BigFloat(m_a | m_b, scale)


def bitwise_xor(a: BigFloat, b: BigFloat) -> BigFloat:
    if not (a.is_finite and b.is_finite):
        return BigFloat.nan()
    m_a, m_b, scale = align(a.mantissa, a.scale, b.mantissa, b.scale)
    return BigFloat(m_a ^ m_b, scale)


# =============================================================================
# UNARY
# =============================================================================


def negate(value: BigFloat) -> BigFloat:
    if value.is_nan:
        return value
    if value.is_positive_infinity:
        return BigFloat.negative_infinity()
    if value.is_negative_infinity:
        return BigFloat.positive_infinity()
    return BigFloat(-value.mantissa, value.scale)


def invert(value: BigFloat) -> BigFloat:
    """Побитовое NOT мантиссы; sentinel возвращается без изменений."""
    if not value.is_finite:
        return value
    return BigFloat(~value.mantissa, value.scale)


def absolute(value: BigFloat) -> BigFloat:
    if value.is_nan:
        return value
    if value.is_infinity:
        return BigFloat.positive_infinity()
    return BigFloat(abs(value.mantissa), value.scale)


# =============================================================================
# COMPARISONS
# =============================================================================


def equals(a: BigFloat, b: BigFloat) -> bool:
    """
    Равенство: NaN не равен ничему (включая себя); бесконечности
    равны только бесконечностям того же знака.
    """
    if a.is_nan or b.is_nan:
        return False
    if not a.is_finite or not b.is_finite:
        return a.kind is b.kind
    m_a, m_b, _ = align(a.mantissa, a.scale, b.mantissa, b.scale)
    return m_a == m_b


def not_equals(a: BigFloat, b: BigFloat) -> bool:
    """Отрицание equals; при NaN на любой стороне всегда True."""
    if a.is_nan or b.is_nan:
        return True
    return not equals(a, b)


def less_than(a: BigFloat, b: BigFloat) -> bool:
    """
    a < b. NaN → False; +Infinity больше всего кроме себя,
    -Infinity меньше всего кроме себя.
    """
    if a.is_nan or b.is_nan:
        return False
    if not a.is_finite and a.kind is b.kind:
        return False
    if a.is_negative_infinity or b.is_positive_infinity:
        return True
    if a.is_positive_infinity or b.is_negative_infinity:
        return False
    m_a, m_b, _ = align(a.mantissa, a.scale, b.mantissa, b.scale)
    return m_a < m_b


def greater_than(a: BigFloat, b: BigFloat) -> bool:
    return less_than(b, a)
