# tests/schema/test_builder.py
"""
Tests for SchemaBuilder defaults and selector handling
"""

import re

import pytest

from schemaguard.core.errors import SchemaDefinitionError, codes
from schemaguard.core.schema import (
    Allowance,
    DefaultDataValidator,
    PathPattern,
    Schema,
    SchemaBuilder,
)


class TestDefaults:
    """A schema built from a path and documentation only"""

    def test_allowances_default_to_can(self):
        schema = Schema.builder("/a").documentation("doc").build()

        assert schema.ephemeral == Allowance.CAN
        assert schema.sequential == Allowance.CAN
        assert schema.watched == Allowance.CAN

    def test_deletable_by_default(self):
        assert Schema.builder("/a").documentation("doc").build().can_be_deleted is True

    def test_validator_accepts_everything(self):
        schema = Schema.builder("/a").documentation("doc").build()

        assert isinstance(schema.data_validator, DefaultDataValidator)
        assert schema.data_validator.is_valid(b"")
        assert schema.data_validator.is_valid(b"\x00\xffanything")

    def test_name_defaults_to_raw_path(self):
        assert SchemaBuilder(pattern="/a/.*").documentation("doc").build().name == "/a/.*"


class TestSelector:

    def test_exact_path(self):
        schema = SchemaBuilder(path="/a/b").documentation("doc").build()

        assert schema.is_exact
        assert schema.matches("/a/b")
        assert not schema.matches("/a/b/c")

    def test_pattern_full_match(self):
        schema = SchemaBuilder(pattern="/a/.*").documentation("doc").build()

        assert schema.matches("/a/b")
        assert not schema.matches("/x/a/b")

    def test_compiled_pattern_keeps_flags(self):
        schema = Schema.builder(re.compile("/Locks/.*", re.IGNORECASE)).documentation("doc").build()

        assert schema.matches("/locks/one")
        assert schema.selector == PathPattern("/Locks/.*", re.IGNORECASE)

    def test_both_rejected(self):
        with pytest.raises(SchemaDefinitionError) as exc_info:
            SchemaBuilder(path="/a", pattern="/a/.*")

        assert exc_info.value.error_code == codes.INVALID_ARGUMENT

    def test_neither_rejected(self):
        with pytest.raises(SchemaDefinitionError):
            SchemaBuilder()

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_path_rejected(self, blank):
        with pytest.raises(SchemaDefinitionError):
            SchemaBuilder(path=blank)

    @pytest.mark.parametrize("blank", ["", "\t"])
    def test_blank_pattern_rejected(self, blank):
        with pytest.raises(SchemaDefinitionError):
            SchemaBuilder(pattern=blank)

    def test_invalid_regex_rejected(self):
        with pytest.raises(SchemaDefinitionError):
            SchemaBuilder(pattern="/a/(unclosed")


class TestSetters:

    def test_allowances_from_strings(self):
        schema = (
            Schema.builder("/a")
            .documentation("doc")
            .ephemeral("must")
            .sequential("CANNOT")
            .watched(Allowance.MUST)
            .can_be_deleted(False)
            .build()
        )

        assert schema.ephemeral == Allowance.MUST
        assert schema.sequential == Allowance.CANNOT
        assert schema.watched == Allowance.MUST
        assert schema.can_be_deleted is False

    def test_unknown_allowance(self):
        with pytest.raises(SchemaDefinitionError):
            Schema.builder("/a").ephemeral("sometimes")

    def test_metadata_is_read_only(self):
        schema = Schema.builder("/a").documentation("doc").metadata(owner="infra").build()

        assert schema.metadata["owner"] == "infra"
        with pytest.raises(TypeError):
            schema.metadata["owner"] = "someone"
