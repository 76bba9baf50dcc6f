"""
Derivation of test assertions mirroring the generated validation rules.

Assertions are derived from the column metadata directly, not from the
rendered model, and take their expected messages from the shared message
vocabulary. Assigned values are fixed so that the same schema always yields
the same test file.
"""

from typing import Sequence

from modelgen.core.models import (
    NUMERIC,
    TEMPORAL,
    TEXT,
    AccessorCheck,
    ColumnDescriptor,
    ColumnTestGroup,
    CompositePrimaryKey,
    NoPrimaryKey,
    SinglePrimaryKey,
    TestAssertion,
    TestSuite,
    primary_key_from,
)
from modelgen.core.rendering.ruby import ruby_number, ruby_string
from modelgen.core.rules import compute_bound, exceed_bound, message_for, supported_columns

from .test_renderer import render_test_suite

# Filler used to build over-long strings
FILLER_CHARACTER = "x"

NON_STRING_VALUE = "12345"
NON_NUMERIC_VALUE = ruby_string("abc")
NIL_VALUE = "nil"

ACCEPTED_TYPES = {
    TEXT: ("String",),
    NUMERIC: ("Numeric",),
    TEMPORAL: ("Date", "Time", "DateTime"),
}

AnyPrimaryKey = NoPrimaryKey | SinglePrimaryKey | CompositePrimaryKey


def accessor_check(column: ColumnDescriptor) -> AccessorCheck:
    """Accessor existence and type check; nullable columns also accept nil."""
    types = ACCEPTED_TYPES[column.family]
    if column.nullable:
        types = ("NilClass",) + types
    return AccessorCheck(column_name=column.name, accepted_types=types)


def text_assertions(column: ColumnDescriptor) -> list[TestAssertion]:
    assertions = [
        TestAssertion(
            column_name=column.name,
            description="rejects non-string values",
            assigned_value=NON_STRING_VALUE,
            expected_outcome="invalid",
            expected_error_message=message_for("format"),
        )
    ]

    if column.data_size is not None:
        too_long = FILLER_CHARACTER * (column.data_size + 1)
        assertions.append(TestAssertion(
            column_name=column.name,
            description=f"rejects values longer than {column.data_size} characters",
            assigned_value=ruby_string(too_long),
            expected_outcome="invalid",
            expected_error_message=message_for("length_limit", maximum=column.data_size),
        ))

    return assertions


def numeric_assertions(column: ColumnDescriptor) -> list[TestAssertion]:
    assertions = [
        TestAssertion(
            column_name=column.name,
            description="rejects non-numeric values",
            assigned_value=NON_NUMERIC_VALUE,
            expected_outcome="invalid",
            expected_error_message=message_for("numeric_range", "not_a_number"),
        )
    ]

    if column.precision is None:
        return assertions

    bound = compute_bound(column.precision, column.scale or 0)
    assertions.append(TestAssertion(
        column_name=column.name,
        description=f"rejects values above {bound.upper}",
        assigned_value=exceed_bound(bound.upper),
        expected_outcome="invalid",
        expected_error_message=message_for("numeric_range", "less_than_or_equal_to", bound=ruby_number(bound.upper)),
    ))
    assertions.append(TestAssertion(
        column_name=column.name,
        description=f"rejects values below {bound.lower}",
        assigned_value=exceed_bound(bound.lower),
        expected_outcome="invalid",
        expected_error_message=message_for("numeric_range", "greater_than_or_equal_to", bound=ruby_number(bound.lower)),
    ))
    return assertions


def nil_assertion(column: ColumnDescriptor) -> TestAssertion:
    if column.nullable:
        return TestAssertion(
            column_name=column.name,
            description="accepts nil",
            assigned_value=NIL_VALUE,
            expected_outcome="valid",
        )
    return TestAssertion(
        column_name=column.name,
        description="requires a value",
        assigned_value=NIL_VALUE,
        expected_outcome="invalid",
        expected_error_message=message_for("presence"),
    )


def column_test_group(column: ColumnDescriptor) -> ColumnTestGroup:
    """All checks for one supported column, in rendering order."""
    assertions: list[TestAssertion] = []
    if column.family == TEXT:
        assertions.extend(text_assertions(column))
    elif column.family == NUMERIC:
        assertions.extend(numeric_assertions(column))
    assertions.append(nil_assertion(column))

    return ColumnTestGroup(
        column_name=column.name,
        accessor=accessor_check(column),
        assertions=tuple(assertions),
    )


def derive_test_suite(
    columns: Sequence[ColumnDescriptor],
    primary_keys: "Sequence[str] | AnyPrimaryKey",
    class_name: str,
) -> TestSuite:
    """
    Derive the test suite for a model.

    Args:
        columns: Column descriptors in schema order
        primary_keys: Ordered key column names, or an already-built primary key variant
        class_name: Model class under test

    Returns:
        TestSuite with one group per supported column, in schema order
    """
    if isinstance(primary_keys, (NoPrimaryKey, SinglePrimaryKey, CompositePrimaryKey)):
        primary_key = primary_keys
    else:
        primary_key = primary_key_from(list(primary_keys))

    groups = tuple(column_test_group(column) for column in supported_columns(columns))
    return TestSuite(class_name=class_name, primary_key=primary_key, groups=groups)


class TestAssertionDeriver:
    """
    Produces the test file text for one model class.

    The class name is fixed at construction so one deriver can be reused for
    every schema revision of the same model.
    """

    __test__ = False

    def __init__(self, class_name: str):
        """
        Initialize the deriver.

        Args:
            class_name: Model class under test
        """
        self.class_name = class_name

    def derive_suite(
        self,
        columns: Sequence[ColumnDescriptor],
        primary_keys: "Sequence[str] | AnyPrimaryKey",
    ) -> TestSuite:
        return derive_test_suite(columns, primary_keys, self.class_name)

    def derive(
        self,
        columns: Sequence[ColumnDescriptor],
        primary_keys: "Sequence[str] | AnyPrimaryKey",
    ) -> str:
        """Derive and render the test file text."""
        return render_test_suite(self.derive_suite(columns, primary_keys))
