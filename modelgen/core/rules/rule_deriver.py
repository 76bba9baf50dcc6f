"""
Derivation of validation rules from column metadata.

Each dialect has its own deriver. They share the per-family building blocks and
differ in where presence is declared and in how rules are grouped:

    legacy:  text -> presence -> numeric -> temporal
    current: text (length + format, presence inline) -> numeric -> temporal

Within a group, columns keep the order the metadata source reported them in.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from modelgen.core.errors import UnsupportedDataType
from modelgen.core.models import (
    NUMERIC,
    SUPPORTED_FAMILIES,
    TEMPORAL,
    TEXT,
    ColumnDescriptor,
    Dialect,
    ValidationRule,
    resolve_dialect,
)
from modelgen.observability.logger import get_logger

from .messages import message_for
from .numeric_bound import compute_bound

logger = get_logger(__name__)

# Ruby regexp literal accepting letters and whitespace only
ALPHA_PATTERN = r"/\A[[:alpha:][:space:]]*\z/"


def check_supported(column: ColumnDescriptor) -> None:
    """
    Ensure a column belongs to a family that rules and assertions exist for.

    Raises:
        UnsupportedDataType: If the column's family is not supported
    """
    if column.family not in SUPPORTED_FAMILIES:
        raise UnsupportedDataType(column.name, column.family, column.data_type)


def supported_columns(columns: Sequence[ColumnDescriptor]) -> list[ColumnDescriptor]:
    """Filter out unsupported columns, logging each one that is skipped."""
    accepted = []
    for column in columns:
        try:
            check_supported(column)
        except UnsupportedDataType as e:
            logger.warning(
                f"Skipping column: {e}",
                extra={"column": column.name, "family": column.family, "data_type": column.data_type},
            )
            continue
        accepted.append(column)
    return accepted


def temporal_type_for(data_type: str) -> str:
    """
    Map a raw temporal SQL type to the validator sub-kind.

    Examples:
        >>> temporal_type_for("date")
        'date'
        >>> temporal_type_for("time without time zone")
        'time'
        >>> temporal_type_for("timestamp with time zone")
        'datetime'
    """
    t = (data_type or "").strip().lower()
    if t == "date":
        return "date"
    if t.startswith("time") and not t.startswith("timestamp"):
        return "time"
    return "datetime"


def range_parameters(column: ColumnDescriptor) -> dict[str, Any]:
    """Bound parameters for a numeric column (empty when it has no precision)."""
    params: dict[str, Any] = {}
    if column.precision is not None:
        bound = compute_bound(column.precision, column.scale or 0)
        params["upper"] = bound.upper
        params["lower"] = bound.lower
        params["only_integer"] = bound.only_integer
    if column.nullable:
        params["allow_nil"] = True
    return params


class RuleDeriver(ABC):
    """
    Base class for dialect-specific rule derivation.

    Subclasses decide the group order and the per-family rule shapes.
    """

    dialect: Dialect

    def derive(self, columns: Sequence[ColumnDescriptor]) -> list[ValidationRule]:
        """
        Derive the ordered rule sequence for a table.

        Args:
            columns: Column descriptors in schema order

        Returns:
            Rules ordered by group, columns in schema order within each group
        """
        accepted = supported_columns(columns)

        rules: list[ValidationRule] = []
        for group in self.groups(accepted):
            rules.extend(group)

        logger.debug(
            f"Derived {len(rules)} rules for {len(accepted)} columns",
            extra={"dialect": self.dialect.value, "skipped": len(columns) - len(accepted)},
        )
        return rules

    @abstractmethod
    def groups(self, columns: list[ColumnDescriptor]) -> list[list[ValidationRule]]:
        """Return the rule groups in rendering order."""
        pass

    @abstractmethod
    def text_rules(self, column: ColumnDescriptor) -> list[ValidationRule]:
        pass

    @abstractmethod
    def numeric_rule(self, column: ColumnDescriptor) -> ValidationRule:
        pass

    @abstractmethod
    def temporal_rule(self, column: ColumnDescriptor, first: bool) -> ValidationRule:
        pass

    def text_group(self, columns: list[ColumnDescriptor]) -> list[ValidationRule]:
        rules = []
        for column in columns:
            if column.family == TEXT:
                rules.extend(self.text_rules(column))
        return rules

    def numeric_group(self, columns: list[ColumnDescriptor]) -> list[ValidationRule]:
        return [self.numeric_rule(column) for column in columns if column.family == NUMERIC]

    def temporal_group(self, columns: list[ColumnDescriptor]) -> list[ValidationRule]:
        temporal_columns = [column for column in columns if column.family == TEMPORAL]
        return [
            self.temporal_rule(column, first=index == 0)
            for index, column in enumerate(temporal_columns)
        ]

    def _temporal_parameters(self, column: ColumnDescriptor, first: bool) -> dict[str, Any]:
        params: dict[str, Any] = {"temporal_type": temporal_type_for(column.data_type)}
        if column.nullable:
            params["allow_nil"] = True
        # Only the first temporal rule carries the plugin note
        if first:
            params["requires_plugin"] = True
        return params


class LegacyRuleDeriver(RuleDeriver):
    """Rules for the validates_*_of style: presence declared once per column in its own group."""

    dialect = Dialect.LEGACY

    def groups(self, columns: list[ColumnDescriptor]) -> list[list[ValidationRule]]:
        return [
            self.text_group(columns),
            self.presence_group(columns),
            self.numeric_group(columns),
            self.temporal_group(columns),
        ]

    def presence_group(self, columns: list[ColumnDescriptor]) -> list[ValidationRule]:
        return [
            ValidationRule(column_name=column.name, kind="presence")
            for column in columns
            if not column.nullable
        ]

    def text_rules(self, column: ColumnDescriptor) -> list[ValidationRule]:
        if column.data_size is None:
            return []
        params: dict[str, Any] = {"maximum": column.data_size}
        if column.nullable:
            params["allow_blank"] = True
        return [ValidationRule(column_name=column.name, kind="length_limit", parameters=params)]

    def numeric_rule(self, column: ColumnDescriptor) -> ValidationRule:
        return ValidationRule(
            column_name=column.name,
            kind="numeric_range",
            parameters=range_parameters(column),
        )

    def temporal_rule(self, column: ColumnDescriptor, first: bool) -> ValidationRule:
        return ValidationRule(
            column_name=column.name,
            kind="temporal",
            parameters=self._temporal_parameters(column, first),
        )


class CurrentRuleDeriver(RuleDeriver):
    """Rules for the validates macro: presence rides inline on each column's first rule."""

    dialect = Dialect.CURRENT

    def groups(self, columns: list[ColumnDescriptor]) -> list[list[ValidationRule]]:
        return [
            self.text_group(columns),
            self.numeric_group(columns),
            self.temporal_group(columns),
        ]

    def text_rules(self, column: ColumnDescriptor) -> list[ValidationRule]:
        rules = []
        presence_pending = not column.nullable

        if column.data_size is not None:
            params: dict[str, Any] = {"maximum": column.data_size}
            if presence_pending:
                params["presence"] = True
                presence_pending = False
            rules.append(ValidationRule(column_name=column.name, kind="length_limit", parameters=params))

        format_params: dict[str, Any] = {
            "pattern": ALPHA_PATTERN,
            "message": message_for("format"),
        }
        if column.nullable:
            format_params["if_present"] = True
        if presence_pending:
            format_params["presence"] = True
        rules.append(ValidationRule(column_name=column.name, kind="format", parameters=format_params))

        return rules

    def numeric_rule(self, column: ColumnDescriptor) -> ValidationRule:
        params = range_parameters(column)
        if not column.nullable:
            params["presence"] = True
        return ValidationRule(column_name=column.name, kind="numeric_range", parameters=params)

    def temporal_rule(self, column: ColumnDescriptor, first: bool) -> ValidationRule:
        params = self._temporal_parameters(column, first)
        if not column.nullable:
            params["presence"] = True
        return ValidationRule(column_name=column.name, kind="temporal", parameters=params)


RULE_DERIVERS: dict[Dialect, type[RuleDeriver]] = {
    Dialect.LEGACY: LegacyRuleDeriver,
    Dialect.CURRENT: CurrentRuleDeriver,
}


def get_rule_deriver(dialect: "str | Dialect | None" = None) -> RuleDeriver:
    """Return the rule deriver for a dialect (see resolve_dialect for defaults)."""
    return RULE_DERIVERS[resolve_dialect(dialect)]()


def derive_rules(
    columns: Sequence[ColumnDescriptor],
    dialect: "str | Dialect | None" = None,
) -> list[ValidationRule]:
    """
    Derive the ordered validation rules for a column list.

    Raises:
        ConfigurationError: If the dialect is unknown (before any derivation)
        PreconditionViolation: If a numeric column has an invalid precision/scale
    """
    return get_rule_deriver(dialect).derive(columns)
