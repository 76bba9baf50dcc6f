"""
Schema file management.

Loads table metadata from YAML files and provides a programmatic builder
producing the same TableSchema.
"""

from pathlib import Path
from typing import Any

import yaml

from modelgen.core.errors import ConfigurationError
from modelgen.core.models import ColumnDescriptor, TableSchema

from .types_map import classify_sql_type


class SchemaConfigLoader:
    """
    Loads table metadata from YAML schema files.

    Expected YAML format:
    ```yaml
    table: customers
    class_name: Customer          # optional
    primary_key: id               # or a list for composite keys
    relationships: [Regions, SalesReps]
    columns:
      - name: email
        type: character varying
        size: 50
        nullable: false
      - name: amount
        type: numeric(7,2)
      - name: born_on
        type: date
        nullable: false
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the schema loader.

        Args:
            config_path: Path to the YAML schema file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Schema file not found: {config_path}")

    def load_schema(self) -> TableSchema:
        """
        Load and parse the table schema from the YAML file.

        Returns:
            TableSchema with columns in file order

        Raises:
            ConfigurationError: If the YAML is invalid or required keys are missing
            PreconditionViolation: If a column has an invalid size, precision or scale
        """
        with open(self.config_path) as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        return parse_schema(config, source=str(self.config_path))


def parse_schema(config: Any, source: str = "<schema>") -> TableSchema:
    """
    Build a TableSchema from an already-parsed schema mapping.

    Raises:
        ConfigurationError: If required keys are missing or malformed
    """
    if not isinstance(config, dict):
        raise ConfigurationError(f"{source}: schema must be a mapping")
    if not config.get("table"):
        raise ConfigurationError(f"{source}: schema must contain 'table'")

    column_defs = config.get("columns")
    if not isinstance(column_defs, list) or not column_defs:
        raise ConfigurationError(f"{source}: 'columns' must be a non-empty list")

    columns = tuple(_parse_column(column_def, idx, source) for idx, column_def in enumerate(column_defs))

    primary_keys = config.get("primary_key", config.get("primary_keys")) or []
    if isinstance(primary_keys, str):
        primary_keys = [primary_keys]

    relationships = config.get("relationships") or []
    if not isinstance(relationships, list):
        raise ConfigurationError(f"{source}: 'relationships' must be a list")

    return TableSchema(
        table_name=config["table"],
        columns=columns,
        primary_keys=tuple(str(name) for name in primary_keys),
        relationships=tuple(str(name) for name in relationships),
        class_name=config.get("class_name"),
    )


def _parse_column(column_def: Any, idx: int, source: str) -> ColumnDescriptor:
    """
    Parse a single column definition.

    Explicit size/precision/scale keys win over parameters embedded in the type name.
    """
    if not isinstance(column_def, dict) or "name" not in column_def:
        raise ConfigurationError(f"{source}: column #{idx} is missing 'name'")

    raw_type = str(column_def.get("type", ""))
    info = classify_sql_type(raw_type)

    family = column_def.get("family", info.family)
    if family not in ("text", "numeric", "temporal", "other"):
        raise ConfigurationError(
            f"{source}: column '{column_def['name']}' has unknown family '{family}'"
        )

    nullable = column_def.get("nullable", True)
    if not isinstance(nullable, bool):
        raise ConfigurationError(
            f"{source}: column '{column_def['name']}' has non-boolean nullable {nullable!r}"
        )

    return ColumnDescriptor(
        name=str(column_def["name"]),
        data_type=raw_type,
        family=family,
        data_size=column_def.get("size", info.data_size),
        precision=column_def.get("precision", info.precision),
        scale=column_def.get("scale", info.scale),
        nullable=nullable,
    )


class SchemaBuilder:
    """
    Programmatically build table schemas (for testing or dynamic metadata).
    """

    def __init__(self, table_name: str):
        """Initialize an empty schema for a table."""
        self.table_name = table_name
        self.columns: list[ColumnDescriptor] = []
        self.primary_keys: list[str] = []
        self.relationships: list[str] = []
        self.class_name: str | None = None

    def add_text(self, name: str, size: int | None = None, nullable: bool = True,
                 data_type: str = "character varying") -> "SchemaBuilder":
        """Add a text column."""
        self.columns.append(ColumnDescriptor(
            name=name, data_type=data_type, family="text", data_size=size, nullable=nullable,
        ))
        return self

    def add_numeric(self, name: str, precision: int | None = None, scale: int | None = None,
                    nullable: bool = True, data_type: str = "numeric") -> "SchemaBuilder":
        """Add a numeric column."""
        if precision is not None and scale is None:
            scale = 0
        self.columns.append(ColumnDescriptor(
            name=name, data_type=data_type, family="numeric",
            precision=precision, scale=scale, nullable=nullable,
        ))
        return self

    def add_temporal(self, name: str, data_type: str = "timestamp without time zone",
                     nullable: bool = True) -> "SchemaBuilder":
        """Add a date, time or timestamp column."""
        self.columns.append(ColumnDescriptor(
            name=name, data_type=data_type, family="temporal", nullable=nullable,
        ))
        return self

    def add_other(self, name: str, data_type: str = "bytea", nullable: bool = True) -> "SchemaBuilder":
        """Add a column of a family no rule covers."""
        self.columns.append(ColumnDescriptor(
            name=name, data_type=data_type, family="other", nullable=nullable,
        ))
        return self

    def with_primary_key(self, *names: str) -> "SchemaBuilder":
        self.primary_keys = list(names)
        return self

    def with_relationships(self, *names: str) -> "SchemaBuilder":
        self.relationships = list(names)
        return self

    def with_class_name(self, class_name: str) -> "SchemaBuilder":
        self.class_name = class_name
        return self

    def build(self) -> TableSchema:
        """Build and return the table schema."""
        return TableSchema(
            table_name=self.table_name,
            columns=tuple(self.columns),
            primary_keys=tuple(self.primary_keys),
            relationships=tuple(self.relationships),
            class_name=self.class_name,
        )
