"""
Tests for BigFloat JSON payload and JSON Schema contract

Комплексное тестирование JSON-представления:
- Pydantic модель BigFloatPayload (валидация, immutability, конверсия)
- to_json / from_json
- Валидность самой схемы
- Детекция нарушений required/enum/pattern/const
- Интеграция Pydantic модели со схемой
"""

import json
from pathlib import Path

import pytest
from jsonschema import ValidationError as SchemaValidationError
from pydantic import ValidationError

from bigfloat import (
    BigFloat,
    BigFloatPayload,
    FloatKind,
    bigfloat_from_payload,
    from_json,
    parse,
    to_json,
    validate_bigfloat_payload,
)
from bigfloat.contracts import BigFloatPayloadValidator, SchemaLoader, default_loader


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_finite_payload():
    """Валидный payload конечного значения."""
    return {"kind": "FINITE", "mantissa": "-628", "scale": 2}


@pytest.fixture
def valid_nan_payload():
    """Валидный payload NaN."""
    return {"kind": "NAN", "mantissa": "0", "scale": 0}


# =============================================================================
# ТЕСТЫ PYDANTIC МОДЕЛИ
# =============================================================================


class TestBigFloatPayload:
    """Тесты BigFloatPayload"""

    def test_from_bigfloat(self) -> None:
        payload = BigFloatPayload.from_bigfloat(parse("-6.28"))
        assert payload.kind == FloatKind.FINITE
        assert payload.mantissa == "-628"
        assert payload.scale == 2

    def test_from_sentinel(self) -> None:
        payload = BigFloatPayload.from_bigfloat(BigFloat.negative_infinity())
        assert payload.kind == FloatKind.NEGATIVE_INFINITY
        assert payload.mantissa == "0"
        assert payload.scale == 0

    def test_to_bigfloat_normalizes(self) -> None:
        payload = BigFloatPayload(kind=FloatKind.FINITE, mantissa="1500", scale=3)
        value = payload.to_bigfloat()
        assert (value.mantissa, value.scale) == (15, 1)

    def test_negative_mantissa(self) -> None:
        payload = BigFloatPayload(mantissa="-5", scale=3)
        assert payload.to_bigfloat() == parse("-0.005")

    def test_long_mantissa(self) -> None:
        digits = "9" * 6000
        payload = BigFloatPayload(mantissa=digits, scale=10)
        assert BigFloatPayload.from_bigfloat(payload.to_bigfloat()).mantissa == digits

    @pytest.mark.parametrize("mantissa", ["12a", "", "1.5", "+5", " 1"])
    def test_invalid_mantissa(self, mantissa: str) -> None:
        with pytest.raises(ValidationError):
            BigFloatPayload(mantissa=mantissa, scale=0)

    @pytest.mark.parametrize("scale", [-1, 2**31])
    def test_invalid_scale(self, scale: int) -> None:
        with pytest.raises(ValidationError):
            BigFloatPayload(mantissa="1", scale=scale)

    def test_sentinel_with_mantissa_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must carry mantissa"):
            BigFloatPayload(kind=FloatKind.NAN, mantissa="5", scale=0)

    def test_sentinel_with_scale_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must carry scale 0"):
            BigFloatPayload(kind=FloatKind.POSITIVE_INFINITY, mantissa="0", scale=3)

    def test_immutable(self) -> None:
        payload = BigFloatPayload(mantissa="1", scale=0)
        with pytest.raises(ValidationError):
            payload.scale = 5


# =============================================================================
# ТЕСТЫ JSON
# =============================================================================


class TestJson:
    """Тесты to_json / from_json"""

    def test_to_json(self) -> None:
        data = json.loads(to_json(parse("6.28")))
        assert data == {"kind": "FINITE", "mantissa": "628", "scale": 2}

    def test_sentinel_to_json(self) -> None:
        data = json.loads(to_json(BigFloat.nan()))
        assert data == {"kind": "NAN", "mantissa": "0", "scale": 0}

    @pytest.mark.parametrize("text", ["0", "-123.456", "0.0001", "Infinity", "-Infinity"])
    def test_round_trip(self, text: str) -> None:
        assert str(from_json(to_json(parse(text)))) == text

    def test_nan_round_trip(self) -> None:
        assert from_json(to_json(BigFloat.nan())).is_nan

    def test_from_json_bytes(self) -> None:
        assert from_json(b'{"kind": "FINITE", "mantissa": "5", "scale": 1}') == parse("0.5")

    def test_from_json_invalid(self) -> None:
        with pytest.raises(ValidationError):
            from_json('{"kind": "FINITE", "mantissa": "abc", "scale": 0}')
        with pytest.raises(ValidationError):
            from_json('{"kind": "HUGE", "mantissa": "1", "scale": 0}')


# =============================================================================
# ТЕСТЫ ЗАГРУЗКИ СХЕМ
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика JSON Schema"""

    def test_load_bigfloat_schema(self) -> None:
        schema = SchemaLoader().load_schema("bigfloat")
        assert schema["title"] == "BigFloat"
        assert schema["required"] == ["kind", "mantissa", "scale"]

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("bigfloat") is loader.load_schema("bigfloat")

    def test_default_loader_shared(self) -> None:
        assert default_loader() is default_loader()

    def test_custom_directory(self, tmp_path: Path) -> None:
        (tmp_path / "flag.json").write_text('{"type": "boolean"}', encoding="utf-8")
        assert SchemaLoader(tmp_path).load_schema("flag") == {"type": "boolean"}

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ СХЕМОЙ
# =============================================================================


class TestBigFloatSchema:
    """Тесты валидации JSON-представления схемой"""

    def test_valid_finite(self, valid_finite_payload) -> None:
        validate_bigfloat_payload(valid_finite_payload)

    def test_valid_sentinel(self, valid_nan_payload) -> None:
        validate_bigfloat_payload(valid_nan_payload)

    @pytest.mark.parametrize("field", ["kind", "mantissa", "scale"])
    def test_missing_required_field(self, valid_finite_payload, field: str) -> None:
        del valid_finite_payload[field]
        with pytest.raises(SchemaValidationError, match=field):
            validate_bigfloat_payload(valid_finite_payload)

    def test_additional_property_rejected(self, valid_finite_payload) -> None:
        valid_finite_payload["precision"] = 10
        with pytest.raises(SchemaValidationError):
            validate_bigfloat_payload(valid_finite_payload)

    def test_unknown_kind(self, valid_finite_payload) -> None:
        valid_finite_payload["kind"] = "NEGATIVE_ZERO"
        with pytest.raises(SchemaValidationError):
            validate_bigfloat_payload(valid_finite_payload)

    def test_mantissa_must_be_string(self, valid_finite_payload) -> None:
        valid_finite_payload["mantissa"] = -628
        with pytest.raises(SchemaValidationError):
            validate_bigfloat_payload(valid_finite_payload)

    def test_mantissa_pattern(self, valid_finite_payload) -> None:
        valid_finite_payload["mantissa"] = "6.28"
        with pytest.raises(SchemaValidationError):
            validate_bigfloat_payload(valid_finite_payload)

    def test_negative_scale(self, valid_finite_payload) -> None:
        valid_finite_payload["scale"] = -1
        with pytest.raises(SchemaValidationError):
            validate_bigfloat_payload(valid_finite_payload)

    def test_sentinel_mantissa_must_be_zero(self, valid_nan_payload) -> None:
        valid_nan_payload["mantissa"] = "7"
        with pytest.raises(SchemaValidationError):
            validate_bigfloat_payload(valid_nan_payload)

    def test_sentinel_scale_must_be_zero(self, valid_nan_payload) -> None:
        valid_nan_payload["scale"] = 2
        with pytest.raises(SchemaValidationError):
            validate_bigfloat_payload(valid_nan_payload)

    def test_iter_errors_collects_all(self) -> None:
        validator = BigFloatPayloadValidator()
        errors = list(validator.iter_errors({"kind": "NAN", "mantissa": "7", "scale": 2}))
        assert len(errors) == 2
        assert not validator.is_valid({"kind": "NAN", "mantissa": "7", "scale": 2})

    def test_pydantic_output_matches_schema(self) -> None:
        """model_dump(mode='json') проходит JSON Schema"""
        for value in (parse("-6.28"), BigFloat(0), BigFloat.positive_infinity(), BigFloat.nan()):
            payload = BigFloatPayload.from_bigfloat(value)
            validate_bigfloat_payload(payload.model_dump(mode="json"))

    def test_error_messages_name_paths(self) -> None:
        messages = BigFloatPayloadValidator().error_messages({"kind": "NAN", "mantissa": "7", "scale": 2})
        assert len(messages) == 2
        assert messages[0].startswith("$.mantissa: ")
        assert messages[1].startswith("$.scale: ")

    def test_error_messages_empty_for_valid(self, valid_finite_payload) -> None:
        assert BigFloatPayloadValidator().error_messages(valid_finite_payload) == []


# =============================================================================
# ТЕСТЫ КОНВЕРСИИ ПРОВЕРЕННЫХ ДАННЫХ
# =============================================================================


class TestPayloadToBigFloat:
    """Тесты bigfloat_from_payload / BigFloatPayloadValidator.to_bigfloat"""

    def test_finite(self, valid_finite_payload) -> None:
        assert bigfloat_from_payload(valid_finite_payload) == parse("-6.28")

    def test_sentinel(self, valid_nan_payload) -> None:
        assert bigfloat_from_payload(valid_nan_payload).is_nan

    def test_normalizes(self) -> None:
        value = BigFloatPayloadValidator().to_bigfloat({"kind": "FINITE", "mantissa": "2500", "scale": 3})
        assert (value.mantissa, value.scale) == (25, 1)

    def test_schema_violation_raises_before_conversion(self, valid_nan_payload) -> None:
        valid_nan_payload["scale"] = 4
        with pytest.raises(SchemaValidationError):
            bigfloat_from_payload(valid_nan_payload)
