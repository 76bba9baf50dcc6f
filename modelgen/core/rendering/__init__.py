"""
Model renderers.

Each dialect implements ModelRenderer and knows how to turn the shared rule
sequence into model source text.
"""

from typing import Sequence

from modelgen.core.models import (
    CompositePrimaryKey,
    Dialect,
    NoPrimaryKey,
    RelationshipSet,
    SinglePrimaryKey,
    ValidationRule,
    resolve_dialect,
)

from .base_renderer import ModelRenderer
from .current_renderer import CurrentModelRenderer
from .legacy_renderer import LegacyModelRenderer
from .ruby import ruby_number, ruby_string, ruby_symbol

_RENDERER_REGISTRY: dict[Dialect, type[ModelRenderer]] = {
    Dialect.LEGACY: LegacyModelRenderer,
    Dialect.CURRENT: CurrentModelRenderer,
}


def get_renderer(dialect: "str | Dialect | None" = None) -> ModelRenderer:
    """
    Return an instance of the renderer for a dialect.

    Raises:
        ConfigurationError: If the dialect is unknown
    """
    return _RENDERER_REGISTRY[resolve_dialect(dialect)]()


def render_model(
    class_name: str,
    table_name: str,
    primary_key: NoPrimaryKey | SinglePrimaryKey | CompositePrimaryKey,
    relationships: RelationshipSet,
    rules: Sequence[ValidationRule],
    dialect: "str | Dialect | None" = None,
) -> str:
    """Render model source with the renderer for `dialect`."""
    return get_renderer(dialect).render(class_name, table_name, primary_key, relationships, rules)


__all__ = [
    "ModelRenderer",
    "LegacyModelRenderer",
    "CurrentModelRenderer",
    "get_renderer",
    "render_model",
    "ruby_number",
    "ruby_string",
    "ruby_symbol",
]
