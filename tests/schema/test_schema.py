# tests/schema/test_schema.py
"""
Tests for Schema validation and identity
"""

import re

import pytest

from schemaguard.core.errors import SchemaViolation, SchemaDefinitionError, codes
from schemaguard.core.schema import (
    Allowance,
    CreateMode,
    ExactPath,
    JsonDataValidator,
    RejectAllDataValidator,
    Schema,
    SchemaBuilder,
)


def make_schema(**kwargs) -> Schema:
    builder = SchemaBuilder(path=kwargs.pop("path", "/a/b")).documentation(
        kwargs.pop("documentation", "test schema")
    )
    for key, value in kwargs.items():
        getattr(builder, key)(value)
    return builder.build()


ALL_BOOLS = (True, False)


class TestDeletion:
    """validate_deletion depends on can_be_deleted only"""

    @pytest.mark.parametrize("watched", list(Allowance))
    def test_deletable(self, watched):
        make_schema(can_be_deleted=True, watched=watched).validate_deletion()

    @pytest.mark.parametrize("watched", list(Allowance))
    def test_not_deletable(self, watched):
        schema = make_schema(can_be_deleted=False, watched=watched)

        with pytest.raises(SchemaViolation) as exc_info:
            schema.validate_deletion()

        assert exc_info.value.reason == codes.CANNOT_BE_DELETED
        assert exc_info.value.schema is schema


class TestWatcher:
    """validate_watcher against each Allowance"""

    @pytest.mark.parametrize("is_watching", ALL_BOOLS)
    def test_can_never_fails(self, is_watching):
        make_schema(watched=Allowance.CAN).validate_watcher(is_watching)

    def test_cannot_rejects_watch(self):
        schema = make_schema(watched=Allowance.CANNOT)

        with pytest.raises(SchemaViolation) as exc_info:
            schema.validate_watcher(True)

        assert exc_info.value.reason == "cannot be watched"

    def test_cannot_allows_no_watch(self):
        make_schema(watched=Allowance.CANNOT).validate_watcher(False)

    def test_must_rejects_missing_watch(self):
        schema = make_schema(watched=Allowance.MUST)

        with pytest.raises(SchemaViolation) as exc_info:
            schema.validate_watcher(False)

        assert exc_info.value.reason == "must be watched"

    def test_must_allows_watch(self):
        make_schema(watched=Allowance.MUST).validate_watcher(True)


class TestCreate:
    """validate_create flag checks and ordering"""

    @pytest.mark.parametrize("is_ephemeral", ALL_BOOLS)
    @pytest.mark.parametrize("is_sequential", ALL_BOOLS)
    def test_can_never_fails(self, is_ephemeral, is_sequential):
        make_schema().validate_create(is_ephemeral, is_sequential, b"data")

    @pytest.mark.parametrize(
        "attr,allowance,is_ephemeral,is_sequential,reason",
        [
            ("ephemeral", Allowance.CANNOT, True, False, "cannot be ephemeral"),
            ("ephemeral", Allowance.MUST, False, False, "must be ephemeral"),
            ("sequential", Allowance.CANNOT, False, True, "cannot be sequential"),
            ("sequential", Allowance.MUST, False, False, "must be sequential"),
        ],
    )
    def test_violations(self, attr, allowance, is_ephemeral, is_sequential, reason):
        schema = make_schema(**{attr: allowance})

        with pytest.raises(SchemaViolation) as exc_info:
            schema.validate_create(is_ephemeral, is_sequential, b"")

        assert exc_info.value.reason == reason

    @pytest.mark.parametrize(
        "attr,allowance,is_ephemeral,is_sequential",
        [
            ("ephemeral", Allowance.CANNOT, False, False),
            ("ephemeral", Allowance.MUST, True, False),
            ("sequential", Allowance.CANNOT, False, False),
            ("sequential", Allowance.MUST, False, True),
        ],
    )
    def test_matching_flags_pass(self, attr, allowance, is_ephemeral, is_sequential):
        make_schema(**{attr: allowance}).validate_create(is_ephemeral, is_sequential, b"")

    def test_ephemeral_reported_before_sequential(self):
        schema = make_schema(
            ephemeral=Allowance.MUST,
            sequential=Allowance.MUST,
            data_validator=RejectAllDataValidator(),
        )

        with pytest.raises(SchemaViolation) as exc_info:
            schema.validate_create(False, False, b"")

        assert exc_info.value.reason == "must be ephemeral"

    def test_sequential_reported_before_data(self):
        schema = make_schema(
            sequential=Allowance.CANNOT,
            data_validator=RejectAllDataValidator(),
        )

        with pytest.raises(SchemaViolation) as exc_info:
            schema.validate_create(False, True, b"")

        assert exc_info.value.reason == "cannot be sequential"

    def test_data_checked_last(self):
        schema = make_schema(data_validator=JsonDataValidator())

        with pytest.raises(SchemaViolation) as exc_info:
            schema.validate_create(False, False, b"{not json")

        assert exc_info.value.reason == "data is not valid"

    def test_create_mode(self):
        schema = make_schema(ephemeral=Allowance.MUST, sequential=Allowance.MUST)

        schema.validate_create_mode(CreateMode.EPHEMERAL_SEQUENTIAL, b"")
        with pytest.raises(SchemaViolation) as exc_info:
            schema.validate_create_mode(CreateMode.EPHEMERAL, b"")

        assert exc_info.value.reason == "must be sequential"


class TestData:

    def test_valid_data(self):
        make_schema(data_validator=JsonDataValidator()).validate_data(b'{"owner": "a"}')

    def test_invalid_data(self):
        schema = make_schema(data_validator=lambda data: data.startswith(b"v1:"))

        schema.validate_data(b"v1:payload")
        with pytest.raises(SchemaViolation) as exc_info:
            schema.validate_data(b"v2:payload")

        assert exc_info.value.reason == codes.DATA_NOT_VALID
        assert exc_info.value.error_code == codes.SCHEMA_VIOLATION


class TestIdentity:
    """Schemas are identified by their path selector alone"""

    def test_same_exact_path_is_equal(self):
        a = make_schema(documentation="one", ephemeral=Allowance.MUST)
        b = make_schema(
            documentation="two",
            ephemeral=Allowance.CANNOT,
            watched=Allowance.MUST,
            can_be_deleted=False,
            data_validator=RejectAllDataValidator(),
        )

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_same_pattern_is_equal(self):
        a = SchemaBuilder(pattern="/a/.*").documentation("one").build()
        b = Schema.builder(re.compile("/a/.*")).documentation("two").watched("must").build()

        assert a == b
        assert hash(a) == hash(b)

    def test_exact_and_pattern_differ(self):
        exact = SchemaBuilder(path="/a/.*").documentation("doc").build()
        pattern = SchemaBuilder(pattern="/a/.*").documentation("doc").build()

        assert exact != pattern

    def test_different_paths_differ(self):
        assert make_schema(path="/a") != make_schema(path="/b")

    def test_immutable(self):
        schema = make_schema()

        with pytest.raises(AttributeError):
            schema.can_be_deleted = False


class TestConstruction:

    def test_missing_documentation(self):
        with pytest.raises(SchemaDefinitionError):
            SchemaBuilder(path="/a").build()

    def test_blank_documentation(self):
        with pytest.raises(SchemaDefinitionError):
            SchemaBuilder(path="/a").documentation("   ").build()

    def test_missing_validator(self):
        with pytest.raises(SchemaDefinitionError):
            Schema(
                selector=ExactPath("/a"),
                documentation="doc",
                data_validator=None,
                ephemeral=Allowance.CAN,
                sequential=Allowance.CAN,
                watched=Allowance.CAN,
                can_be_deleted=True,
            )

    def test_missing_allowance(self):
        with pytest.raises(SchemaDefinitionError):
            Schema(
                selector=ExactPath("/a"),
                documentation="doc",
                data_validator=RejectAllDataValidator(),
                ephemeral=None,
                sequential=Allowance.CAN,
                watched=Allowance.CAN,
                can_be_deleted=True,
            )

    def test_missing_selector(self):
        with pytest.raises(SchemaDefinitionError):
            Schema(
                selector=None,
                documentation="doc",
                data_validator=RejectAllDataValidator(),
                ephemeral=Allowance.CAN,
                sequential=Allowance.CAN,
                watched=Allowance.CAN,
                can_be_deleted=True,
            )


class TestRendering:

    def test_raw_path_exact(self):
        assert make_schema(path="/config/app").raw_path == "/config/app"

    def test_raw_path_pattern(self):
        schema = Schema.builder(re.compile(r"/locks/lock-\d+")).documentation("locks").build()

        assert schema.raw_path == r"/locks/lock-\d+"
        assert not schema.is_exact

    def test_to_documentation(self):
        schema = make_schema(
            path="/config",
            documentation="Application config",
            watched=Allowance.MUST,
            data_validator=JsonDataValidator(),
        )

        text = schema.to_documentation()

        assert "Path: /config" in text
        assert "Documentation: Application config" in text
        assert "Validator: JsonDataValidator" in text
        assert "watched: MUST" in text
        assert "canBeDeleted: True" in text
        assert text == schema.to_documentation()

    def test_to_dict(self):
        data = SchemaBuilder(pattern="/x/.*").documentation("doc").name("x").build().to_dict()

        assert data["name"] == "x"
        assert data["is_regex"] is True
        assert data["ephemeral"] == "can"
        assert data["data_validator"] == "DefaultDataValidator"
