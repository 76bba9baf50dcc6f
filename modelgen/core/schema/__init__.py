"""
Schema files and SQL type classification.
"""

from .schema_config import SchemaBuilder, SchemaConfigLoader, parse_schema
from .types_map import SqlTypeInfo, classify_sql_type, decimal_digits_for_bits

__all__ = [
    "SchemaConfigLoader",
    "SchemaBuilder",
    "parse_schema",
    "SqlTypeInfo",
    "classify_sql_type",
    "decimal_digits_for_bits",
]
