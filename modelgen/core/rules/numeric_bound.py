"""
Exact decimal bounds for numeric columns.

Bounds are built as digit strings so that columns with more significant digits
than a float can hold keep every digit.
"""

from typing import NamedTuple

from modelgen.core.errors import PreconditionViolation


class NumericBound(NamedTuple):
    """Largest and smallest legal literal for a numeric(precision, scale) column."""

    upper: str
    lower: str
    only_integer: bool


def compute_bound(precision: int, scale: int = 0) -> NumericBound:
    """
    Compute the bound literals for a numeric column.

    Args:
        precision: Number of significant digits (> 0)
        scale: Digits after the decimal separator (0 <= scale <= precision)

    Returns:
        NumericBound with upper/lower literals and the only_integer flag

    Raises:
        PreconditionViolation: If precision or scale are out of range

    Examples:
        >>> compute_bound(5, 2)
        NumericBound(upper='999.99', lower='-999.99', only_integer=False)
        >>> compute_bound(2, 2).upper
        '.99'
    """
    if precision is None or precision <= 0:
        raise PreconditionViolation("precision", f"must be positive, got {precision}")
    if scale is None or scale < 0:
        raise PreconditionViolation("scale", f"must not be negative, got {scale}")
    if scale > precision:
        raise PreconditionViolation("scale", f"{scale} exceeds precision {precision}")

    digits = "9" * precision
    if scale > 0:
        split = precision - scale
        digits = f"{digits[:split]}.{digits[split:]}"

    return NumericBound(upper=digits, lower=f"-{digits}", only_integer=scale == 0)


def exceed_bound(literal: str) -> str:
    """
    Return the literal one unit past the last significant digit of a bound.

    Bounds are all nines, so stepping past them carries into a leading one and
    keeps the same number of fractional digits. Negative bounds step further
    below zero.

    Examples:
        >>> exceed_bound("99999")
        '100000'
        >>> exceed_bound("-99999.99")
        '-100000.00'
        >>> exceed_bound(".99")
        '1.00'
    """
    sign = ""
    if literal.startswith("-"):
        sign, literal = "-", literal[1:]

    integer_part, _, fraction = literal.partition(".")
    if set(integer_part + fraction) - {"9"}:
        raise PreconditionViolation("bound", f"not a bound literal: {literal!r}")

    stepped = "1" + "0" * len(integer_part)
    if fraction:
        stepped = f"{stepped}.{'0' * len(fraction)}"
    return sign + stepped
