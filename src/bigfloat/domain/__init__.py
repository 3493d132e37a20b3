"""
Domain models для BigFloat

Значение BigFloat, его операторы и JSON-представление.
"""

from .bigfloat import (
    BigFloat,
    FloatKind,
    absolute,
    add,
    bitwise_and,
    bitwise_or,
    bitwise_xor,
    divide,
    equals,
    greater_than,
    invert,
    less_than,
    multiply,
    negate,
    not_equals,
    remainder,
    subtract,
)
from .payload import BigFloatPayload, from_json, to_json

__all__ = [
    # Value type
    "BigFloat",
    "FloatKind",
    # Arithmetic
    "add",
    "subtract",
    "multiply",
    "divide",
    "remainder",
    "negate",
    "absolute",
    # Bitwise
    "bitwise_and",
    "bitwise_or",
    "bitwise_xor",
    "invert",
    # Comparisons
    "equals",
    "not_equals",
    "less_than",
    "greater_than",
    # JSON payload
    "BigFloatPayload",
    "to_json",
    "from_json",
]
