"""
Core data models for the model generator.

All models use Pydantic for runtime validation and are immutable once built.
"""

from .column_descriptor import NUMERIC, OTHER, SUPPORTED_FAMILIES, TEMPORAL, TEXT, ColumnDescriptor
from .dialect import DEFAULT_DIALECT, Dialect, resolve_dialect
from .primary_key import (
    CompositePrimaryKey,
    NoPrimaryKey,
    PrimaryKey,
    SinglePrimaryKey,
    primary_key_from,
)
from .relationship_set import RelationshipSet
from .table_schema import GeneratedArtifacts, TableSchema
from .test_assertion import AccessorCheck, ColumnTestGroup, TestAssertion, TestSuite
from .validation_rule import RULE_GROUPS, ValidationRule

__all__ = [
    "ColumnDescriptor",
    "TEXT",
    "NUMERIC",
    "TEMPORAL",
    "OTHER",
    "SUPPORTED_FAMILIES",
    "Dialect",
    "DEFAULT_DIALECT",
    "resolve_dialect",
    "PrimaryKey",
    "NoPrimaryKey",
    "SinglePrimaryKey",
    "CompositePrimaryKey",
    "primary_key_from",
    "RelationshipSet",
    "TableSchema",
    "GeneratedArtifacts",
    "TestAssertion",
    "AccessorCheck",
    "ColumnTestGroup",
    "TestSuite",
    "ValidationRule",
    "RULE_GROUPS",
]
