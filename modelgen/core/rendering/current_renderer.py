"""
Current model dialect: self.table_name assignments and the validates macro.
"""

from typing import Sequence

from modelgen.core.models import Dialect, ValidationRule
from modelgen.core.rules.messages import message_for

from .base_renderer import ModelRenderer
from .ruby import ruby_hash, ruby_options, ruby_string, ruby_symbol


class CurrentModelRenderer(ModelRenderer):
    """
    Renders models with one validates line per rule.

    Presence travels inline as :presence => true on the rule that carries it.
    """

    dialect = Dialect.CURRENT

    def table_binding(self, table_name: str) -> str:
        return f"self.table_name = {ruby_string(table_name)}"

    def single_primary_key(self, name: str) -> str:
        return f"self.primary_key = {ruby_string(name)}"

    def composite_primary_key(self, names: Sequence[str]) -> str:
        return "self.primary_keys = " + ", ".join(ruby_symbol(name) for name in names)

    def _validates(self, rule: ValidationRule, options: list[tuple[str, str]]) -> str:
        if rule.option("presence"):
            options.append(("presence", "true"))
        if rule.option("allow_nil"):
            options.append(("allow_nil", "true"))
        if rule.option("allow_blank"):
            options.append(("allow_blank", "true"))
        if rule.option("if_present"):
            options.append(("if", ruby_symbol(f"{rule.column_name}?")))
        return f"validates {ruby_symbol(rule.column_name)}, " + ruby_options(options)

    def length_limit(self, rule: ValidationRule) -> str:
        return self._validates(rule, [("length", ruby_hash([("maximum", str(rule.option("maximum")))]))])

    def presence(self, rule: ValidationRule) -> str:
        return f"validates {ruby_symbol(rule.column_name)}, " + ruby_options([("presence", "true")])

    def numeric_range(self, rule: ValidationRule) -> str:
        numericality = self.numericality_options(rule)
        value = ruby_hash(numericality) if numericality else "true"
        return self._validates(rule, [("numericality", value)])

    def format(self, rule: ValidationRule) -> str:
        value = ruby_hash([
            ("with", rule.option("pattern")),
            ("message", ruby_string(rule.option("message") or message_for("format"))),
        ])
        return self._validates(rule, [("format", value)])

    def temporal(self, rule: ValidationRule) -> str:
        value = ruby_hash([("type", ruby_symbol(rule.option("temporal_type", "datetime")))])
        return self._validates(rule, [("timeliness", value)])
