"""
Classification of raw SQL type names into data type families.

Returns a SqlTypeInfo with the family plus any length/precision/scale found in
the type string itself, e.g. "varchar(50)" or "numeric(7,2)".
"""

import math
import re
from typing import NamedTuple

from modelgen.core.models import NUMERIC, OTHER, TEMPORAL, TEXT

_PARAMS_RE = re.compile(r"\(([^)]+)\)")  # content inside parentheses, e.g. "(10,2)"

TEXT_TYPES = (
    "character varying",
    "varchar",
    "nvarchar",
    "character",
    "nchar",
    "char",
    "bpchar",
    "citext",
    "text",
    "string",
)

# Decimal digits that always fit in the binary integer types
INTEGER_DIGITS = {
    "smallint": 4,
    "int2": 4,
    "smallserial": 4,
    "integer": 9,
    "int": 9,
    "int4": 9,
    "serial": 9,
    "bigint": 18,
    "int8": 18,
    "bigserial": 18,
}

DECIMAL_TYPES = ("numeric", "decimal", "number")

FLOAT_TYPES = ("double precision", "real", "float", "float4", "float8", "double")


class SqlTypeInfo(NamedTuple):
    family: str
    data_size: int | None = None
    precision: int | None = None
    scale: int | None = None


def _extract_params(raw: str) -> tuple[int | None, int | None]:
    """Extract up to two integer parameters from a type string like NUMERIC(12,2)."""
    m = _PARAMS_RE.search(raw)
    if not m:
        return None, None
    parts = [p.strip() for p in m.group(1).split(",")]
    try:
        first = int(parts[0])
    except ValueError:
        return None, None
    second = None
    if len(parts) > 1:
        try:
            second = int(parts[1])
        except ValueError:
            second = None
    return first, second


def decimal_digits_for_bits(bits: int) -> int:
    """
    Largest digit count whose all-nines value fits in a signed integer of `bits` bits.

    Examples:
        >>> decimal_digits_for_bits(32)
        9
        >>> decimal_digits_for_bits(64)
        18
    """
    return int(math.floor((bits - 1) * math.log10(2)))


def classify_sql_type(raw_type: str) -> SqlTypeInfo:
    """
    Classify a raw SQL type name.

    Args:
        raw_type: Type name as reported by the database or written in a schema file

    Returns:
        SqlTypeInfo with the family and any parameters embedded in the type name

    Examples:
        >>> classify_sql_type("varchar(50)")
        SqlTypeInfo(family='text', data_size=50, precision=None, scale=None)
        >>> classify_sql_type("numeric(7,2)")
        SqlTypeInfo(family='numeric', data_size=None, precision=7, scale=2)
        >>> classify_sql_type("bytea").family
        'other'
    """
    t = (raw_type or "").strip().lower()
    base = _PARAMS_RE.sub("", t).strip()
    first, second = _extract_params(t)

    # "timestamp" and "time" come before text, "character varying" before "char"
    if base == "date":
        return SqlTypeInfo(TEMPORAL)
    if base.startswith("timestamp") or base.startswith("time") or base.startswith("datetime"):
        return SqlTypeInfo(TEMPORAL)

    if base in TEXT_TYPES or base.startswith("character varying") or base.startswith("varchar"):
        return SqlTypeInfo(TEXT, data_size=first)

    if base in INTEGER_DIGITS:
        return SqlTypeInfo(NUMERIC, precision=INTEGER_DIGITS[base], scale=0)

    if base in DECIMAL_TYPES:
        if first is None:
            return SqlTypeInfo(NUMERIC)
        return SqlTypeInfo(NUMERIC, precision=first, scale=second if second is not None else 0)

    if base in FLOAT_TYPES:
        return SqlTypeInfo(NUMERIC)

    return SqlTypeInfo(OTHER)
