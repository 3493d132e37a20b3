"""
BigFloatPayload — JSON-представление BigFloat

Immutable Pydantic модель для обмена значениями через JSON.
Полная совместимость с JSON Schema (contracts/schema/bigfloat.json).

Mantissa передаётся строкой десятичных цифр: JSON number теряет
точность за пределами double.
"""

from pydantic import BaseModel, Field, field_validator

from bigfloat.codec.text import digits_to_int, int_to_digits
from bigfloat.domain.bigfloat import BigFloat, FloatKind


# =============================================================================
# CONSTANTS
# =============================================================================

SCALE_MAX = 2**31 - 1


# =============================================================================
# PAYLOAD MODEL
# =============================================================================


class BigFloatPayload(BaseModel):
    """
    JSON-контракт значения BigFloat.

    Sentinel-значения обязаны нести mantissa "0" и scale 0.
    """

    kind: FloatKind = Field(FloatKind.FINITE, description="Вариант значения")
    mantissa: str = Field(
        "0", pattern=r"^-?[0-9]+$", description="Мантисса, десятичные цифры со знаком"
    )
    scale: int = Field(0, ge=0, le=SCALE_MAX, description="Число дробных разрядов")

    model_config = {"frozen": True}

    @field_validator("mantissa")
    @classmethod
    def validate_sentinel_mantissa(cls, v: str, info) -> str:
        """Sentinel не несёт мантиссы"""
        kind = info.data.get("kind")
        if kind is not None and kind is not FloatKind.FINITE and v.lstrip("-") != "0":
            raise ValueError(f"{kind.value} payload must carry mantissa '0', got {v!r}")
        return v

    @field_validator("scale")
    @classmethod
    def validate_sentinel_scale(cls, v: int, info) -> int:
        """Sentinel не несёт scale"""
        kind = info.data.get("kind")
        if kind is not None and kind is not FloatKind.FINITE and v != 0:
            raise ValueError(f"{kind.value} payload must carry scale 0, got {v}")
        return v

    @classmethod
    def from_bigfloat(cls, value: BigFloat) -> "BigFloatPayload":
        sign = "-" if value.mantissa < 0 else ""
        return cls(
            kind=value.kind,
            mantissa=sign + int_to_digits(abs(value.mantissa)),
            scale=value.scale,
        )

    def to_bigfloat(self) -> BigFloat:
        """Каноническое значение (mantissa нормализуется конструктором)."""
        negative = self.mantissa.startswith("-")
        mantissa = digits_to_int(self.mantissa.lstrip("-"))
        return BigFloat(-mantissa if negative else mantissa, self.scale, self.kind)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def to_json(value: BigFloat) -> str:
    """Сериализация BigFloat в JSON-строку контракта."""
    return BigFloatPayload.from_bigfloat(value).model_dump_json()


def from_json(text: str | bytes) -> BigFloat:
    """
    Десериализация BigFloat из JSON-строки контракта.

    Raises:
        pydantic.ValidationError: Если JSON не соответствует контракту
    """
    return BigFloatPayload.model_validate_json(text).to_bigfloat()
