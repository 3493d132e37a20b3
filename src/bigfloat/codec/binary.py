"""
Binary codec — фиксированный wire-формат

Формат:
    [4 байта: scale, signed int32 little-endian]
    [N байт: mantissa, минимальный two's complement little-endian]

Sentinel-состояния кодируются зарезервированными значениями scale
(mantissa при этом 0, один байт 0x00):
    -1 → +Infinity
    -2 → -Infinity
    -3 → NaN
"""

from typing import Final

from bigfloat.domain.bigfloat import BigFloat, FloatKind


# =============================================================================
# CONSTANTS
# =============================================================================

SCALE_SIZE_BYTES: Final[int] = 4

WIRE_SCALE_POSITIVE_INFINITY: Final[int] = -1
WIRE_SCALE_NEGATIVE_INFINITY: Final[int] = -2
WIRE_SCALE_NAN: Final[int] = -3

_WIRE_SCALE_BY_KIND: Final[dict[FloatKind, int]] = {
    FloatKind.POSITIVE_INFINITY: WIRE_SCALE_POSITIVE_INFINITY,
    FloatKind.NEGATIVE_INFINITY: WIRE_SCALE_NEGATIVE_INFINITY,
    FloatKind.NAN: WIRE_SCALE_NAN,
}
_KIND_BY_WIRE_SCALE: Final[dict[int, FloatKind]] = {
    scale: kind for kind, scale in _WIRE_SCALE_BY_KIND.items()
}


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigFloatSerializationError(ValueError):
    """Буфер не соответствует wire-формату."""

    pass


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def wire_scale(value: BigFloat) -> int:
    """Значение поля scale в wire-формате (с учётом sentinel)."""
    if value.is_finite:
        return value.scale
    return _WIRE_SCALE_BY_KIND[value.kind]


def _mantissa_size(mantissa: int) -> int:
    # Минимальная длина two's complement: 0 → 1 байт, 128 → 2 байта
    magnitude = mantissa if mantissa >= 0 else ~mantissa
    return magnitude.bit_length() // 8 + 1


def to_bytes(value: BigFloat) -> bytes:
    """
    Сериализация в wire-формат.

    Raises:
        BigFloatSerializationError: Если scale не помещается в int32

    Examples:
        >>> to_bytes(BigFloat(628, 2)).hex()
        '020000007402'
    """
    scale = wire_scale(value)
    try:
        header = scale.to_bytes(SCALE_SIZE_BYTES, "little", signed=True)
    except OverflowError as e:
        raise BigFloatSerializationError(
            f"scale {scale} does not fit the {SCALE_SIZE_BYTES}-byte header"
        ) from e

    mantissa = value.mantissa
    return header + mantissa.to_bytes(_mantissa_size(mantissa), "little", signed=True)


def from_bytes(data: bytes) -> BigFloat:
    """
    Десериализация из wire-формата.

    Пустая mantissa (ровно 4 байта) трактуется как 0.

    Raises:
        BigFloatSerializationError: Если буфер короче 4 байт или scale
            содержит неизвестное зарезервированное значение
    """
    data = bytes(data)
    if len(data) < SCALE_SIZE_BYTES:
        raise BigFloatSerializationError(
            f"buffer must hold at least {SCALE_SIZE_BYTES} bytes, got {len(data)}"
        )

    scale = int.from_bytes(data[:SCALE_SIZE_BYTES], "little", signed=True)
    mantissa = int.from_bytes(data[SCALE_SIZE_BYTES:], "little", signed=True)

    if scale >= 0:
        return BigFloat(mantissa, scale)

    kind = _KIND_BY_WIRE_SCALE.get(scale)
    if kind is None:
        raise BigFloatSerializationError(f"Unknown reserved scale value: {scale}")
    return BigFloat(kind=kind)
