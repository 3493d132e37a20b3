"""
Native codec — конверсии между BigFloat и нативными числовыми типами

Входящие (без потерь):
- int / numpy integer → scale 0
- float → scale из shortest round-trip repr (экспонента раскрывается)
- float32 / numpy floating → scale из shortest repr соответствующей ширины
- Decimal → scale из экспоненты фиксированной записи
- NaN / ±Infinity float и Decimal → соответствующий sentinel

Исходящие (сужающие, возможны потери):
- NaN → 0, +Infinity → максимум типа, -Infinity → минимум типа
- конечное → mantissa / 10^scale с усечением к нулю; для float
  дробный остаток добавляется как remainder / 10^scale
"""

import math
from decimal import Decimal

import numpy as np

from bigfloat.codec.text import digits_to_int, int_to_digits, parse
from bigfloat.domain.bigfloat import BigFloat, FloatKind
from bigfloat.math.alignment import pow10, trunc_div, trunc_divmod


# =============================================================================
# INBOUND
# =============================================================================


def is_native_number(value) -> bool:
    """Поддерживается ли значение конверсией from_native."""
    return isinstance(value, (int, float, Decimal, np.integer, np.floating))


def from_int(value) -> BigFloat:
    return BigFloat(int(value))


def _sentinel_for_float(value: float) -> BigFloat | None:
    if math.isnan(value):
        return BigFloat.nan()
    if math.isinf(value):
        return BigFloat.positive_infinity() if value > 0 else BigFloat.negative_infinity()
    return None


def from_float(value: float) -> BigFloat:
    """
    Конверсия double.

    Используется shortest round-trip repr, поэтому 0.1 → BigFloat('0.1'),
    а не точное двоичное значение 0.1000000000000000055511151231257827...

    Examples:
        >>> from_float(0.1)
        BigFloat('0.1')
        >>> from_float(1.5e-7)
        BigFloat('0.00000015')
    """
    value = float(value)
    sentinel = _sentinel_for_float(value)
    if sentinel is not None:
        return sentinel
    return parse(repr(value))


def from_float_exact(value) -> BigFloat:
    """
    Точное двоичное значение double (или numpy floating) в десятичной записи.

    Любой конечный double — двоично-рациональное число, поэтому его
    десятичное разложение конечно и переносится без потерь.

    Examples:
        >>> from_float_exact(0.5)
        BigFloat('0.5')
        >>> str(from_float_exact(0.1))[:22]
        '0.10000000000000000555'
    """
    value = float(value)
    sentinel = _sentinel_for_float(value)
    if sentinel is not None:
        return sentinel
    return from_decimal(Decimal(value))


def is_binary_float(value) -> bool:
    return isinstance(value, (float, np.floating))


def from_numpy_float(value: np.floating) -> BigFloat:
    """Конверсия numpy floating любой ширины по её shortest repr."""
    sentinel = _sentinel_for_float(float(value))
    if sentinel is not None:
        return sentinel
    return parse(np.format_float_positional(value, unique=True, trim="-"))


def from_float32(value) -> BigFloat:
    """
    Конверсия single precision.

    Examples:
        >>> from_float32(0.1)
        BigFloat('0.1')
    """
    return from_numpy_float(np.float32(value))


def from_decimal(value: Decimal) -> BigFloat:
    """
    Конверсия Decimal без потерь.

    Examples:
        >>> from_decimal(Decimal("1.250"))
        BigFloat('1.25')
        >>> from_decimal(Decimal("12E3"))
        BigFloat('12000')
    """
    if value.is_nan():
        return BigFloat.nan()
    if value.is_infinite():
        return BigFloat.negative_infinity() if value.is_signed() else BigFloat.positive_infinity()

    sign, digits, exponent = value.as_tuple()
    mantissa = digits_to_int("".join(str(d) for d in digits))
    if sign:
        mantissa = -mantissa
    if exponent >= 0:
        return BigFloat(mantissa * pow10(exponent))
    return BigFloat(mantissa, -exponent)


def from_native(value) -> BigFloat:
    """
    Универсальная конверсия нативного числа.

    Raises:
        TypeError: Если тип не поддерживается
    """
    if isinstance(value, BigFloat):
        return value
    if isinstance(value, (int, np.integer)):
        return from_int(value)
    if isinstance(value, np.floating):
        return from_numpy_float(value)
    if isinstance(value, float):
        return from_float(value)
    if isinstance(value, Decimal):
        return from_decimal(value)
    raise TypeError(f"Unsupported numeric type: {type(value)}")


# =============================================================================
# OUTBOUND
# =============================================================================


def to_int(value: BigFloat) -> int:
    """
    Целая часть (усечение к нулю).

    NaN → 0. У неограниченного int нет максимума, поэтому бесконечность
    не конвертируется.

    Raises:
        OverflowError: Для ±Infinity
    """
    if value.is_nan:
        return 0
    if value.is_infinity:
        raise OverflowError(f"cannot convert {value} to an unbounded integer")
    return trunc_div(value.mantissa, pow10(value.scale))


def to_float(value: BigFloat) -> float:
    """
    Конверсия в double: целая часть + remainder / 10^scale.

    Целая часть вне диапазона double → ±inf.
    """
    if value.kind is FloatKind.NAN:
        return math.nan
    if value.kind is FloatKind.POSITIVE_INFINITY:
        return math.inf
    if value.kind is FloatKind.NEGATIVE_INFINITY:
        return -math.inf

    divisor = pow10(value.scale)
    whole, rest = trunc_divmod(value.mantissa, divisor)
    try:
        whole_float = float(whole)
    except OverflowError:
        return math.inf if whole > 0 else -math.inf
    return whole_float + rest / divisor


def to_native(value: BigFloat, dtype):
    """
    Конверсия в numpy-скаляр заданного dtype.

    Целые dtype: NaN → 0, +Infinity → iinfo.max, -Infinity → iinfo.min,
    конечное → усечённая целая часть.
    Вещественные dtype: через double с приведением ширины.

    Args:
        value: Значение
        dtype: numpy dtype или его имя (np.int32, "uint8", np.float32, ...)

    Returns:
        numpy-скаляр типа dtype

    Raises:
        OverflowError: Если конечная целая часть не помещается в целый dtype
        TypeError: Если dtype не целый и не вещественный

    Examples:
        >>> int(to_native(BigFloat.positive_infinity(), np.int8))
        127
    """
    dtype = np.dtype(dtype)

    if dtype.kind in "iu":
        info = np.iinfo(dtype)
        if value.is_nan:
            return dtype.type(0)
        if value.is_positive_infinity:
            return dtype.type(info.max)
        if value.is_negative_infinity:
            return dtype.type(info.min)
        whole = to_int(value)
        if not int(info.min) <= whole <= int(info.max):
            raise OverflowError(f"{value} does not fit {dtype.name}")
        return dtype.type(whole)

    if dtype.kind == "f":
        with np.errstate(over="ignore"):
            return dtype.type(to_float(value))

    raise TypeError(f"Unsupported native dtype: {dtype}")


def to_float32(value: BigFloat) -> np.float32:
    return to_native(value, np.float32)


def to_decimal(value: BigFloat) -> Decimal:
    """
    Конверсия в Decimal без потерь для конечных значений.

    NaN → Decimal(0); ±Infinity → Decimal("±Infinity").
    """
    if value.kind is FloatKind.NAN:
        return Decimal(0)
    if value.kind is FloatKind.POSITIVE_INFINITY:
        return Decimal("Infinity")
    if value.kind is FloatKind.NEGATIVE_INFINITY:
        return Decimal("-Infinity")

    digits = tuple(int(d) for d in int_to_digits(abs(value.mantissa)))
    return Decimal((int(value.mantissa < 0), digits, -value.scale))
