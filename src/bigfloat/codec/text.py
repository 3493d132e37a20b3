"""
Text codec — разбор и форматирование десятичных строк

Разбор:
- Sentinel-литералы "nan", "infinity", "+infinity", "-infinity"
  (без учёта регистра)
- Экспоненциальная запись раскрывается в позиционную до разбора
- Остаток обязан быть целым со знаком и необязательной дробной частью

Форматирование:
- Sentinel → "NaN" / "Infinity" / "-Infinity"
- scale == 0 → целое без точки
- scale > 0 → |mantissa|, дополненная нулями слева до scale + 1 цифр,
  с точкой за scale цифр от конца

str(int) и int(str) ограничены sys.get_int_max_str_digits(), поэтому
цифры конвертируются через Decimal, у которого такого предела нет.
"""

import logging
import re
from decimal import Decimal
from typing import Final

from bigfloat.domain.bigfloat import BigFloat, FloatKind

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

NAN_LITERAL: Final[str] = "NaN"
POSITIVE_INFINITY_LITERAL: Final[str] = "Infinity"
NEGATIVE_INFINITY_LITERAL: Final[str] = "-Infinity"

_SENTINEL_LITERALS: Final[dict[str, FloatKind]] = {
    "nan": FloatKind.NAN,
    "infinity": FloatKind.POSITIVE_INFINITY,
    "+infinity": FloatKind.POSITIVE_INFINITY,
    "-infinity": FloatKind.NEGATIVE_INFINITY,
}

_POSITIONAL_PATTERN: Final[re.Pattern] = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_SCIENTIFIC_PATTERN: Final[re.Pattern] = re.compile(
    r"([+-]?)([0-9]+\.?[0-9]*|\.[0-9]+)[eE]([+-]?[0-9]+)"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigFloatFormatError(ValueError):
    """Строка не является десятичным/экспоненциальным числом."""

    pass


# =============================================================================
# DIGIT HELPERS
# =============================================================================


def digits_to_int(digits: str) -> int:
    """Строка десятичных цифр → int без ограничения длины."""
    return int(Decimal(digits))


def int_to_digits(value: int) -> str:
    """Неотрицательный int → строка десятичных цифр без ограничения длины."""
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    return str(Decimal(value))


# =============================================================================
# SCIENTIFIC NOTATION
# =============================================================================


def expand_scientific(text: str) -> str:
    """
    Раскрытие экспоненциальной записи в позиционную.

    Строка без 'e'/'E' возвращается без изменений. Хвостовые нули
    дробной части отбрасываются.

    Raises:
        BigFloatFormatError: Если запись с экспонентой некорректна

    Examples:
        >>> expand_scientific("1.5E3")
        '1500'
        >>> expand_scientific("-2.5e-3")
        '-0.0025'
        >>> expand_scientific("12.5e-1")
        '1.25'
    """
    if "e" not in text and "E" not in text:
        return text

    match = _SCIENTIFIC_PATTERN.fullmatch(text)
    if match is None:
        raise BigFloatFormatError(f"Invalid scientific notation: {text!r}")

    sign, significand = match.group(1), match.group(2)
    try:
        exponent = int(match.group(3))
    except ValueError as e:
        raise BigFloatFormatError(f"Exponent out of range: {text[:40]!r}...") from e
    whole, _, fraction = significand.partition(".")
    digits = whole + fraction
    point = len(whole) + exponent

    if point >= len(digits):
        expanded = digits + "0" * (point - len(digits))
    elif point <= 0:
        expanded = "0." + "0" * (-point) + digits
    else:
        expanded = digits[:point] + "." + digits[point:]

    if "." in expanded:
        expanded = expanded.rstrip("0").rstrip(".")
    expanded = expanded.lstrip("0")
    if not expanded or expanded.startswith("."):
        expanded = "0" + expanded

    return ("-" if sign == "-" else "") + expanded


# =============================================================================
# PARSE / FORMAT
# =============================================================================


def parse(text: str) -> BigFloat:
    """
    Разбор строки в BigFloat.

    Args:
        text: "123", "-0.5", ".25", "1.5e-3", "NaN", "-Infinity", ...

    Returns:
        Каноническое значение; scale = число дробных цифр после
        раскрытия экспоненты

    Raises:
        TypeError: Если text не строка
        BigFloatFormatError: Если строка не является числом

    Examples:
        >>> parse("6.28")
        BigFloat('6.28')
        >>> parse("1E2")
        BigFloat('100')
        >>> parse("infinity")
        BigFloat('Infinity')
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    stripped = text.strip()
    kind = _SENTINEL_LITERALS.get(stripped.lower())
    if kind is not None:
        return BigFloat(kind=kind)

    expanded = expand_scientific(stripped)
    if _POSITIONAL_PATTERN.fullmatch(expanded) is None:
        logger.debug("parse_rejected", extra={"text": text})
        raise BigFloatFormatError(f"Invalid decimal string: {text!r}")

    negative = expanded.startswith("-")
    whole, _, fraction = expanded.lstrip("+-").partition(".")
    mantissa = digits_to_int(whole + fraction)
    return BigFloat(-mantissa if negative else mantissa, len(fraction))


def format_bigfloat(value: BigFloat) -> str:
    """
    Каноническое строковое представление.

    Examples:
        >>> format_bigfloat(BigFloat(628, 2))
        '6.28'
        >>> format_bigfloat(BigFloat(-5, 3))
        '-0.005'
    """
    if value.kind is FloatKind.NAN:
        return NAN_LITERAL
    if value.kind is FloatKind.POSITIVE_INFINITY:
        return POSITIVE_INFINITY_LITERAL
    if value.kind is FloatKind.NEGATIVE_INFINITY:
        return NEGATIVE_INFINITY_LITERAL

    prefix = "-" if value.mantissa < 0 else ""
    digits = int_to_digits(abs(value.mantissa))
    if value.scale == 0:
        return prefix + digits

    digits = digits.rjust(value.scale + 1, "0")
    return f"{prefix}{digits[:-value.scale]}.{digits[-value.scale:]}"
