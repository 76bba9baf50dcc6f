"""
Validation rule derivation, numeric bounds and the shared message vocabulary.
"""

from .messages import MESSAGE_TEMPLATES, message_for
from .numeric_bound import NumericBound, compute_bound, exceed_bound
from .rule_deriver import (
    RULE_DERIVERS,
    CurrentRuleDeriver,
    LegacyRuleDeriver,
    RuleDeriver,
    check_supported,
    derive_rules,
    get_rule_deriver,
    supported_columns,
    temporal_type_for,
)

__all__ = [
    "MESSAGE_TEMPLATES",
    "message_for",
    "NumericBound",
    "compute_bound",
    "exceed_bound",
    "RuleDeriver",
    "LegacyRuleDeriver",
    "CurrentRuleDeriver",
    "RULE_DERIVERS",
    "check_supported",
    "derive_rules",
    "get_rule_deriver",
    "supported_columns",
    "temporal_type_for",
]
