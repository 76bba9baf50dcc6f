"""
Unit tests for core data models.
"""

import pytest
from pydantic import ValidationError

from modelgen.core.errors import ConfigurationError, PreconditionViolation
from modelgen.core.models import (
    ColumnDescriptor,
    CompositePrimaryKey,
    Dialect,
    NoPrimaryKey,
    RelationshipSet,
    SinglePrimaryKey,
    TableSchema,
    ValidationRule,
    primary_key_from,
    resolve_dialect,
)


class TestColumnDescriptor:
    """Tests for ColumnDescriptor model"""

    def test_create_valid_numeric_column(self):
        column = ColumnDescriptor(name="amount", family="numeric", precision=7, scale=2)

        assert column.nullable is True
        assert column.is_supported is True

    def test_other_family_is_not_supported(self):
        column = ColumnDescriptor(name="avatar", family="other", data_type="bytea")

        assert column.is_supported is False

    @pytest.mark.parametrize("fields", [
        {"data_size": 0},
        {"precision": 0},
        {"precision": 3, "scale": 4},
        {"precision": 3, "scale": -1},
        {"scale": 2},
    ])
    def test_structurally_invalid_column_raises(self, fields):
        with pytest.raises(PreconditionViolation):
            ColumnDescriptor(name="broken", family="numeric", **fields)

    def test_unknown_family_rejected(self):
        with pytest.raises(ValidationError):
            ColumnDescriptor(name="x", family="spatial")

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ColumnDescriptor(name="", family="text")

    def test_column_is_immutable(self):
        column = ColumnDescriptor(name="email", family="text", data_size=50)

        with pytest.raises(ValidationError):
            column.data_size = 10


class TestPrimaryKey:
    """Tests for the primary key variants"""

    def test_variants_from_names(self):
        assert isinstance(primary_key_from([]), NoPrimaryKey)
        assert primary_key_from(["id"]) == SinglePrimaryKey(name="id")
        assert primary_key_from(["a", "b"]) == CompositePrimaryKey(names=("a", "b"))

    def test_names(self):
        assert NoPrimaryKey().names == ()
        assert SinglePrimaryKey(name="id").names == ("id",)

    def test_composite_needs_two_columns(self):
        with pytest.raises(ValidationError):
            CompositePrimaryKey(names=("only",))


class TestRelationshipSet:
    """Tests for RelationshipSet"""

    def test_lowercased_and_deduplicated_in_first_seen_order(self):
        relationships = RelationshipSet.from_names(["Orders", "orders", "Items"])

        assert relationships.names == ("orders", "items")

    def test_blank_names_dropped(self):
        assert RelationshipSet.from_names(["", "  ", "Region"]).names == ("region",)


class TestTableSchema:
    """Tests for TableSchema"""

    def test_derived_views(self, customers_schema):
        assert customers_schema.primary_key == SinglePrimaryKey(name="id")
        assert customers_schema.relationship_set.names == ("regions", "salesreps")

    def test_columns_keep_order(self, customers_schema):
        assert [c.name for c in customers_schema.columns] == [
            "id", "name", "nickname", "credit_limit", "born_on", "avatar"
        ]

    def test_table_name_required(self):
        with pytest.raises(ValidationError):
            TableSchema(table_name="", columns=())


class TestValidationRule:
    """Tests for ValidationRule"""

    def test_group_and_option(self):
        rule = ValidationRule(column_name="email", kind="length_limit", parameters={"maximum": 50})

        assert rule.group == "text"
        assert rule.option("maximum") == 50
        assert rule.option("allow_blank") is None
        assert rule.option("allow_blank", False) is False

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            ValidationRule(column_name="email", kind="uniqueness")


class TestResolveDialect:
    """Tests for dialect resolution"""

    def test_explicit_argument_wins(self, monkeypatch):
        monkeypatch.setenv("MODELGEN_DIALECT", "current")

        assert resolve_dialect("legacy") is Dialect.LEGACY
        assert resolve_dialect(Dialect.CURRENT) is Dialect.CURRENT

    def test_case_insensitive(self):
        assert resolve_dialect(" Legacy ") is Dialect.LEGACY

    def test_environment_then_default(self, monkeypatch):
        assert resolve_dialect() is Dialect.CURRENT

        monkeypatch.setenv("MODELGEN_DIALECT", "legacy")
        assert resolve_dialect() is Dialect.LEGACY

    def test_unknown_dialect(self):
        with pytest.raises(ConfigurationError, match="Unknown dialect"):
            resolve_dialect("rails7")
