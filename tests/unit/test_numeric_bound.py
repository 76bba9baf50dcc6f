"""
Unit tests for numeric bound computation.

Includes property-based testing with hypothesis.
"""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from modelgen.core.errors import PreconditionViolation
from modelgen.core.rules import compute_bound, exceed_bound


precision_and_scale = st.integers(min_value=1, max_value=25).flatmap(
    lambda p: st.tuples(st.just(p), st.integers(min_value=0, max_value=p))
)


class TestComputeBound:
    """Tests for compute_bound"""

    def test_integer_column(self):
        bound = compute_bound(5, 0)

        assert bound.upper == "99999"
        assert bound.lower == "-99999"
        assert bound.only_integer is True

    def test_decimal_column(self):
        bound = compute_bound(7, 2)

        assert bound.upper == "99999.99"
        assert bound.lower == "-99999.99"
        assert bound.only_integer is False

    def test_scale_equal_to_precision_keeps_bare_fraction(self):
        """All digits fractional: the literal starts with the separator"""
        bound = compute_bound(2, 2)

        assert bound.upper == ".99"
        assert bound.lower == "-.99"
        assert bound.only_integer is False

    def test_scale_defaults_to_zero(self):
        assert compute_bound(3).upper == "999"

    def test_wide_precision_keeps_every_digit(self):
        """More digits than a float can represent"""
        bound = compute_bound(38, 4)

        assert bound.upper == "9" * 34 + "." + "9" * 4
        assert len(bound.upper) == 39

    @pytest.mark.parametrize("precision,scale", [(0, 0), (-1, 0), (3, -1), (3, 4)])
    def test_invalid_input_raises(self, precision, scale):
        with pytest.raises(PreconditionViolation):
            compute_bound(precision, scale)

    @given(precision_and_scale)
    def test_upper_has_precision_digits_and_scale_fraction(self, ps):
        precision, scale = ps
        bound = compute_bound(precision, scale)

        digits = bound.upper.replace(".", "")
        assert digits == "9" * precision
        assert ("." in bound.upper) == (scale > 0)
        if scale:
            assert len(bound.upper.split(".")[1]) == scale

    @given(precision_and_scale)
    def test_lower_is_negated_upper(self, ps):
        bound = compute_bound(*ps)

        assert bound.lower == "-" + bound.upper
        assert Decimal(bound.lower) == -Decimal(bound.upper)

    @given(precision_and_scale)
    def test_upper_is_largest_representable_value(self, ps):
        precision, scale = ps
        bound = compute_bound(precision, scale)

        assert Decimal(bound.upper) == Decimal(10) ** (precision - scale) - Decimal(10) ** -scale


class TestExceedBound:
    """Tests for exceed_bound"""

    @pytest.mark.parametrize("literal,expected", [
        ("99999", "100000"),
        ("-99999", "-100000"),
        ("99999.99", "100000.00"),
        ("-99999.99", "-100000.00"),
        (".99", "1.00"),
        ("-.99", "-1.00"),
        ("9", "10"),
    ])
    def test_steps_one_unit_past_bound(self, literal, expected):
        assert exceed_bound(literal) == expected

    def test_rejects_non_bound_literal(self):
        with pytest.raises(PreconditionViolation):
            exceed_bound("123.45")

    @given(precision_and_scale)
    def test_exceeds_by_one_unit_in_last_place(self, ps):
        precision, scale = ps
        bound = compute_bound(precision, scale)
        unit = Decimal(10) ** -scale

        above = exceed_bound(bound.upper)
        below = exceed_bound(bound.lower)

        assert Decimal(above) - Decimal(bound.upper) == unit
        assert Decimal(bound.lower) - Decimal(below) == unit
        assert Decimal(above) == -Decimal(below)
