"""
Legacy model dialect: set_table_name declarations and validates_*_of macros.
"""

from typing import Sequence

from modelgen.core.models import Dialect, ValidationRule
from modelgen.core.rules.messages import message_for

from .base_renderer import ModelRenderer
from .ruby import ruby_options, ruby_string, ruby_symbol


class LegacyModelRenderer(ModelRenderer):
    """
    Renders models in the validates_*_of style.

    Presence is declared by standalone validates_presence_of lines; nullable
    columns opt out of the other validators with :allow_blank / :allow_nil.
    """

    dialect = Dialect.LEGACY

    def table_binding(self, table_name: str) -> str:
        return f"set_table_name {ruby_string(table_name)}"

    def single_primary_key(self, name: str) -> str:
        return f"set_primary_key {ruby_string(name)}"

    def composite_primary_key(self, names: Sequence[str]) -> str:
        return "set_primary_keys " + ", ".join(ruby_symbol(name) for name in names)

    def _macro(self, macro: str, rule: ValidationRule, options: list[tuple[str, str]]) -> str:
        line = f"{macro} {ruby_symbol(rule.column_name)}"
        if options:
            line += ", " + ruby_options(options)
        return line

    def length_limit(self, rule: ValidationRule) -> str:
        options = [("maximum", str(rule.option("maximum")))]
        if rule.option("allow_blank"):
            options.append(("allow_blank", "true"))
        return self._macro("validates_length_of", rule, options)

    def presence(self, rule: ValidationRule) -> str:
        return self._macro("validates_presence_of", rule, [])

    def numeric_range(self, rule: ValidationRule) -> str:
        options = self.numericality_options(rule)
        if rule.option("allow_nil"):
            options.append(("allow_nil", "true"))
        return self._macro("validates_numericality_of", rule, options)

    def format(self, rule: ValidationRule) -> str:
        options = [
            ("with", rule.option("pattern")),
            ("message", ruby_string(rule.option("message") or message_for("format"))),
        ]
        if rule.option("if_present"):
            options.append(("if", ruby_symbol(f"{rule.column_name}?")))
        return self._macro("validates_format_of", rule, options)

    def temporal(self, rule: ValidationRule) -> str:
        options = []
        if rule.option("allow_nil"):
            options.append(("allow_nil", "true"))
        return self._macro(f"validates_{rule.option('temporal_type', 'datetime')}", rule, options)
