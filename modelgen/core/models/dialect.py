"""
Output dialects and dialect resolution.
"""

import os
from enum import Enum

from modelgen.core.errors import ConfigurationError


class Dialect(str, Enum):
    """
    Output grammar for generated models.

    LEGACY uses the validates_*_of macros and set_table_name style declarations.
    CURRENT uses the validates macro with inline options and self.table_name.
    """

    LEGACY = "legacy"
    CURRENT = "current"


DEFAULT_DIALECT = Dialect.CURRENT


def resolve_dialect(name: "str | Dialect | None" = None) -> Dialect:
    """
    Resolve a dialect from (in order):

    1. explicit argument
    2. MODELGEN_DIALECT environment variable
    3. DEFAULT_DIALECT

    Raises:
        ConfigurationError: If the resolved name is not a known dialect
    """
    if isinstance(name, Dialect):
        return name

    dialect_name = name or os.getenv("MODELGEN_DIALECT")
    if not dialect_name:
        return DEFAULT_DIALECT

    try:
        return Dialect(dialect_name.strip().lower())
    except ValueError as exc:
        available = ", ".join(d.value for d in Dialect)
        raise ConfigurationError(
            f"Unknown dialect: {dialect_name!r}. Available dialects: {available}."
        ) from exc
