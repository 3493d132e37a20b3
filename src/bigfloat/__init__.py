"""
bigfloat — десятичные числа с плавающей точкой произвольной точности

Значение = mantissa × 10^(-scale) с неограниченной mantissa, плюс
sentinel-состояния NaN, +Infinity, -Infinity (семантика IEEE-754).

Точная десятичная арифметика без ошибок двоичных дробей; предел точности
есть только у операций, результат которых не обязан быть конечной
дробью (деление, корни, логарифмы, экспоненты).

Examples:
    >>> from bigfloat import BigFloat, sqrt
    >>> BigFloat.parse("1.5") + BigFloat.parse("2.25")
    BigFloat('3.75')
    >>> sqrt(BigFloat(4))
    BigFloat('2')
    >>> BigFloat(1) / BigFloat(0)
    BigFloat('Infinity')
"""

# Config
from bigfloat.config import DEFAULT_LIMITS, PrecisionLimits

# Domain
from bigfloat.domain import (
    BigFloat,
    BigFloatPayload,
    FloatKind,
    absolute,
    add,
    bitwise_and,
    bitwise_or,
    bitwise_xor,
    divide,
    equals,
    from_json,
    greater_than,
    invert,
    less_than,
    multiply,
    negate,
    not_equals,
    remainder,
    subtract,
    to_json,
)

# Codec
from bigfloat.codec import (
    BigFloatFormatError,
    BigFloatSerializationError,
    expand_scientific,
    format_bigfloat,
    from_bytes,
    from_decimal,
    from_float,
    from_float32,
    from_float_exact,
    from_int,
    from_native,
    parse,
    to_bytes,
    to_decimal,
    to_float,
    to_float32,
    to_int,
    to_native,
)

# Constants
from bigfloat.constants import (
    NAN,
    NEGATIVE_INFINITY,
    ONE,
    POSITIVE_INFINITY,
    ZERO,
    e,
    ln10,
    pi,
)

# Math
from bigfloat.math.rounding import ceiling, floor, round_half_away, truncate
from bigfloat.math.transcendental import (
    acos,
    asin,
    atan,
    atan2,
    cos,
    cosh,
    exp,
    log,
    log10,
    log_base,
    power,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)

# Contracts
from bigfloat.contracts import bigfloat_from_payload, validate_bigfloat_payload

__version__ = "0.1.0"

__all__ = [
    # Config
    "DEFAULT_LIMITS",
    "PrecisionLimits",
    # Domain: Types
    "BigFloat",
    "FloatKind",
    "BigFloatPayload",
    # Domain: Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "remainder",
    "negate",
    "absolute",
    "bitwise_and",
    "bitwise_or",
    "bitwise_xor",
    "invert",
    # Domain: Comparisons
    "equals",
    "not_equals",
    "less_than",
    "greater_than",
    # Domain: JSON
    "to_json",
    "from_json",
    # Codec: Exceptions
    "BigFloatFormatError",
    "BigFloatSerializationError",
    # Codec: Text
    "expand_scientific",
    "format_bigfloat",
    "parse",
    # Codec: Binary
    "from_bytes",
    "to_bytes",
    # Codec: Native
    "from_decimal",
    "from_float",
    "from_float32",
    "from_float_exact",
    "from_int",
    "from_native",
    "to_decimal",
    "to_float",
    "to_float32",
    "to_int",
    "to_native",
    # Constants
    "ZERO",
    "ONE",
    "POSITIVE_INFINITY",
    "NEGATIVE_INFINITY",
    "NAN",
    "e",
    "ln10",
    "pi",
    # Math: Rounding
    "round_half_away",
    "truncate",
    "floor",
    "ceiling",
    # Math: Transcendental
    "exp",
    "log",
    "log10",
    "log_base",
    "power",
    "sqrt",
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "atan2",
    "sinh",
    "cosh",
    "tanh",
    # Contracts
    "validate_bigfloat_payload",
    "bigfloat_from_payload",
]
