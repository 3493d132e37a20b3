"""
Contract Validation Module

JSON Schema контракт значения BigFloat (schema/bigfloat.json).
"""

from .validators import (
    BIGFLOAT_SCHEMA,
    BigFloatPayloadValidator,
    ContractValidator,
    SchemaLoader,
    bigfloat_from_payload,
    default_loader,
    validate_bigfloat_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigFloatPayloadValidator",
    # Functions
    "default_loader",
    "validate_bigfloat_payload",
    "bigfloat_from_payload",
    # Constants
    "BIGFLOAT_SCHEMA",
]
