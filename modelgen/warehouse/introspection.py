"""
Schema introspection for PostgreSQL tables and views.

Reads information_schema and turns it into the TableSchema consumed by the
generation pipeline.
"""

from typing import Any

from modelgen.core.errors import ConfigurationError
from modelgen.core.models import NUMERIC, ColumnDescriptor, TableSchema
from modelgen.core.schema.types_map import classify_sql_type, decimal_digits_for_bits
from modelgen.observability.logger import get_logger
from modelgen.utils.naming import singularize
from modelgen.utils.validation import sanitize_sql_identifier

from .connection import DatabaseConnectionPool

logger = get_logger(__name__)

COLUMNS_QUERY = """
    SELECT column_name, data_type, character_maximum_length,
           numeric_precision, numeric_precision_radix, numeric_scale, is_nullable
    FROM information_schema.columns
    WHERE table_schema = %s AND table_name = %s
    ORDER BY ordinal_position
"""

PRIMARY_KEY_QUERY = """
    SELECT kcu.column_name
    FROM information_schema.table_constraints tc
    JOIN information_schema.key_column_usage kcu
      ON tc.constraint_name = kcu.constraint_name
     AND tc.table_schema = kcu.table_schema
     AND tc.table_name = kcu.table_name
    WHERE tc.constraint_type = 'PRIMARY KEY'
      AND tc.table_schema = %s AND tc.table_name = %s
    ORDER BY kcu.ordinal_position
"""

REFERENCED_TABLES_QUERY = """
    SELECT ccu.table_name AS referenced_table
    FROM information_schema.table_constraints tc
    JOIN information_schema.constraint_column_usage ccu
      ON tc.constraint_name = ccu.constraint_name
     AND tc.constraint_schema = ccu.constraint_schema
    WHERE tc.constraint_type = 'FOREIGN KEY'
      AND tc.table_schema = %s AND tc.table_name = %s
    ORDER BY tc.constraint_name
"""


def column_from_row(row: dict[str, Any]) -> ColumnDescriptor:
    """
    Build a ColumnDescriptor from one information_schema.columns row.

    Decimal types report precision in base 10 and are used as is. Integer
    types report bits (radix 2) and are converted to the digit count that
    always fits. Floating-point types get no precision and so no bounds.
    """
    data_type = row["data_type"]
    info = classify_sql_type(data_type)

    precision, scale = info.precision, info.scale
    if info.family == NUMERIC and row.get("numeric_precision") is not None:
        radix = row.get("numeric_precision_radix")
        if radix == 10:
            precision = row["numeric_precision"]
            scale = row.get("numeric_scale") or 0
        elif radix == 2 and info.scale == 0:
            precision = decimal_digits_for_bits(row["numeric_precision"])
            scale = 0

    return ColumnDescriptor(
        name=row["column_name"],
        data_type=data_type,
        family=info.family,
        data_size=row.get("character_maximum_length"),
        precision=precision,
        scale=scale,
        nullable=row.get("is_nullable", "YES") == "YES",
    )


class SchemaIntrospector:
    """
    Reads table metadata from a PostgreSQL database.

    Handles:
    - Columns in ordinal order with type, length, precision and nullability
    - Primary key columns in key order
    - Tables referenced by foreign keys
    """

    def __init__(self, pool: DatabaseConnectionPool, schema_name: str = "public"):
        """
        Initialize schema introspector.

        Args:
            pool: Open database connection pool
            schema_name: Database schema the tables live in
        """
        self.pool = pool
        self.schema_name = sanitize_sql_identifier(schema_name, "schema_name")

    def fetch_columns(self, table_name: str) -> list[ColumnDescriptor]:
        rows = self.pool.execute_query(COLUMNS_QUERY, (self.schema_name, table_name))
        return [column_from_row(row) for row in rows]

    def fetch_primary_keys(self, table_name: str) -> list[str]:
        rows = self.pool.execute_query(PRIMARY_KEY_QUERY, (self.schema_name, table_name))
        return [row["column_name"] for row in rows]

    def fetch_relationships(self, table_name: str) -> list[str]:
        """Referenced entity names (singular), one per foreign key, in constraint order."""
        rows = self.pool.execute_query(REFERENCED_TABLES_QUERY, (self.schema_name, table_name))
        return [singularize(row["referenced_table"]) for row in rows]

    def introspect(self, table_name: str, class_name: str | None = None) -> TableSchema:
        """
        Read the complete metadata of one table or view.

        Args:
            table_name: Table or view name
            class_name: Optional explicit model class name

        Returns:
            TableSchema for the table

        Raises:
            ConfigurationError: If the table does not exist or has no columns
        """
        table_name = sanitize_sql_identifier(table_name, "table_name")

        columns = self.fetch_columns(table_name)
        if not columns:
            raise ConfigurationError(
                f"Table '{self.schema_name}.{table_name}' not found or has no columns"
            )

        primary_keys = self.fetch_primary_keys(table_name)
        relationships = self.fetch_relationships(table_name)

        logger.info(
            f"Introspected {self.schema_name}.{table_name}",
            extra={
                "table": table_name,
                "column_count": len(columns),
                "primary_keys": primary_keys,
                "relationship_count": len(relationships),
            },
        )

        return TableSchema(
            table_name=table_name,
            columns=tuple(columns),
            primary_keys=tuple(primary_keys),
            relationships=tuple(relationships),
            class_name=class_name,
        )
