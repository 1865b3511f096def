# tests/schema/test_data_validators.py
"""
Tests for the data validators
"""

import pytest

from schemaguard.core.errors import SchemaDefinitionError
from schemaguard.core.schema import (
    BUILTIN_VALIDATORS,
    CallableDataValidator,
    DataValidator,
    JsonDataValidator,
    RejectAllDataValidator,
    resolve_validator,
)


class TestJsonDataValidator:

    @pytest.mark.parametrize("data", [b'{"a": 1}', b"[1, 2]", b'"text"', b"42"])
    def test_accepts_json(self, data):
        assert JsonDataValidator().is_valid(data)

    @pytest.mark.parametrize("data", [b"{", b"not json", b"\xff\xfe"])
    def test_rejects_other(self, data):
        assert not JsonDataValidator().is_valid(data)

    def test_empty(self):
        assert JsonDataValidator().is_valid(b"")
        assert not JsonDataValidator(allow_empty=False).is_valid(b"")


class TestProtocol:

    def test_builtins_satisfy_protocol(self):
        for validator in BUILTIN_VALIDATORS.values():
            assert isinstance(validator, DataValidator)

    def test_callable_wrapper(self):
        validator = CallableDataValidator(lambda data: len(data) < 4, name="short")

        assert validator.is_valid(b"abc")
        assert not validator.is_valid(b"abcd")
        assert "short" in repr(validator)

    def test_reject_all(self):
        assert not RejectAllDataValidator().is_valid(b"")


class TestResolve:

    def test_default_when_unnamed(self):
        assert resolve_validator(None) is BUILTIN_VALIDATORS["default"]

    def test_case_insensitive(self):
        assert resolve_validator("JSON") is BUILTIN_VALIDATORS["json"]

    def test_extra_validators(self):
        custom = RejectAllDataValidator()

        assert resolve_validator("custom", {"custom": custom}) is custom

    def test_unknown(self):
        with pytest.raises(SchemaDefinitionError) as exc_info:
            resolve_validator("protobuf")

        assert "json" in exc_info.value.details["available"]
