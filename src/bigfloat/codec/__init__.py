"""
Codec modules для BigFloat

Граница с внешним миром: строки, wire-формат, нативные числа.
"""

from .binary import BigFloatSerializationError, from_bytes, to_bytes
from .native import (
    from_decimal,
    from_float,
    from_float32,
    from_float_exact,
    from_int,
    from_native,
    to_decimal,
    to_float,
    to_float32,
    to_int,
    to_native,
)
from .text import BigFloatFormatError, expand_scientific, format_bigfloat, parse

__all__ = [
    # Text
    "BigFloatFormatError",
    "expand_scientific",
    "format_bigfloat",
    "parse",
    # Binary
    "BigFloatSerializationError",
    "from_bytes",
    "to_bytes",
    # Native
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
]
