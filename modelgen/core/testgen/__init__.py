"""
Test assertion derivation and test file rendering.
"""

from .assertion_deriver import (
    FILLER_CHARACTER,
    TestAssertionDeriver,
    accessor_check,
    column_test_group,
    derive_test_suite,
)
from .test_renderer import render_test_suite

__all__ = [
    "FILLER_CHARACTER",
    "TestAssertionDeriver",
    "accessor_check",
    "column_test_group",
    "derive_test_suite",
    "render_test_suite",
]
