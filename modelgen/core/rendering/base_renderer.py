"""
Base interface for model renderers.

A renderer turns the dialect-neutral rule sequence into the source of one
ActiveRecord model. Subclasses supply the dialect-specific declarations; the
base class owns the layout:

    class Customer < ActiveRecord::Base
      <table binding>
      <primary key>

      <relationships>

      <one block per rule group>
    end
"""

from abc import ABC, abstractmethod
from typing import Sequence

from modelgen.core.models import (
    CompositePrimaryKey,
    Dialect,
    NoPrimaryKey,
    RelationshipSet,
    SinglePrimaryKey,
    ValidationRule,
)

from .ruby import ruby_number, ruby_symbol

INDENT = "  "

COMPOSITE_KEY_NOTE = "# Composite primary keys require the composite_primary_keys gem"
TEMPORAL_PLUGIN_NOTE = "# Date and time validations require the validates_timeliness gem"

BASE_CLASS = "ActiveRecord::Base"


class ModelRenderer(ABC):
    """
    Base interface for model source dialects.
    """

    dialect: Dialect

    def render(
        self,
        class_name: str,
        table_name: str,
        primary_key: NoPrimaryKey | SinglePrimaryKey | CompositePrimaryKey,
        relationships: RelationshipSet,
        rules: Sequence[ValidationRule],
    ) -> str:
        """
        Render the complete model source.

        Args:
            class_name: Model class name
            table_name: Table or view the model is bound to
            primary_key: Primary key variant (NoPrimaryKey renders nothing)
            relationships: Referenced entities, already deduplicated
            rules: Rules in derivation order

        Returns:
            Model source text ending with a newline
        """
        sections: list[list[str]] = []

        header = [self.table_binding(table_name)]
        header.extend(self.primary_key_lines(primary_key))
        sections.append(header)

        if relationships.names:
            sections.append([self.relationship(name) for name in relationships.names])

        sections.extend(self.rule_sections(rules))

        lines = [f"class {class_name} < {BASE_CLASS}"]
        for index, section in enumerate(sections):
            if index:
                lines.append("")
            lines.extend(INDENT + line for line in section)
        lines.append("end")

        return "\n".join(lines) + "\n"

    def primary_key_lines(
        self, primary_key: NoPrimaryKey | SinglePrimaryKey | CompositePrimaryKey
    ) -> list[str]:
        if isinstance(primary_key, SinglePrimaryKey):
            return [self.single_primary_key(primary_key.name)]
        if isinstance(primary_key, CompositePrimaryKey):
            return [COMPOSITE_KEY_NOTE, self.composite_primary_key(primary_key.names)]
        if isinstance(primary_key, NoPrimaryKey):
            return []
        raise TypeError(f"Unknown primary key variant: {primary_key!r}")

    def rule_sections(self, rules: Sequence[ValidationRule]) -> list[list[str]]:
        """Split rules into blocks, one per consecutive run of the same group."""
        sections: list[list[str]] = []
        current_group = None

        for rule in rules:
            if rule.group != current_group:
                sections.append([])
                current_group = rule.group
            if rule.option("requires_plugin"):
                sections[-1].append(TEMPORAL_PLUGIN_NOTE)
            sections[-1].append(self.render_rule(rule))

        return sections

    def relationship(self, name: str) -> str:
        return f"belongs_to {ruby_symbol(name)}"

    def render_rule(self, rule: ValidationRule) -> str:
        """Dispatch a rule to the renderer method for its kind."""
        renderers = {
            "length_limit": self.length_limit,
            "presence": self.presence,
            "numeric_range": self.numeric_range,
            "format": self.format,
            "temporal": self.temporal,
        }
        return renderers[rule.kind](rule)

    @staticmethod
    def numericality_options(rule: ValidationRule) -> list[tuple[str, str]]:
        options = []
        if rule.option("only_integer"):
            options.append(("only_integer", "true"))
        if rule.option("upper") is not None:
            options.append(("less_than_or_equal_to", ruby_number(rule.option("upper"))))
        if rule.option("lower") is not None:
            options.append(("greater_than_or_equal_to", ruby_number(rule.option("lower"))))
        return options

    @abstractmethod
    def table_binding(self, table_name: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def single_primary_key(self, name: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def composite_primary_key(self, names: Sequence[str]) -> str:
        raise NotImplementedError

    @abstractmethod
    def length_limit(self, rule: ValidationRule) -> str:
        raise NotImplementedError

    @abstractmethod
    def presence(self, rule: ValidationRule) -> str:
        raise NotImplementedError

    @abstractmethod
    def numeric_range(self, rule: ValidationRule) -> str:
        raise NotImplementedError

    @abstractmethod
    def format(self, rule: ValidationRule) -> str:
        raise NotImplementedError

    @abstractmethod
    def temporal(self, rule: ValidationRule) -> str:
        raise NotImplementedError
