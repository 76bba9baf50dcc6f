"""
ValidationRule model representing one constraint derived from column metadata.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

# Rendering group for each rule kind. Renderers separate groups with blank lines.
RULE_GROUPS = {
    "length_limit": "text",
    "format": "text",
    "presence": "presence",
    "numeric_range": "numeric",
    "temporal": "temporal",
}


class ValidationRule(BaseModel):
    """
    A validation constraint to be declared on a generated model.

    Attributes:
        column_name: Which column this rule applies to
        kind: "length_limit", "presence", "numeric_range", "format" or "temporal"
        parameters: Kind-specific options (e.g., {"maximum": 50, "allow_blank": True})
    """

    column_name: str = Field(..., min_length=1)
    kind: Literal["length_limit", "presence", "numeric_range", "format", "temporal"]
    parameters: dict[str, Any] = Field(default_factory=dict)

    @property
    def group(self) -> str:
        return RULE_GROUPS[self.kind]

    def option(self, key: str, default: Any = None) -> Any:
        return self.parameters.get(key, default)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "column_name": "amount",
                "kind": "numeric_range",
                "parameters": {
                    "upper": "99999.99",
                    "lower": "-99999.99",
                    "only_integer": False,
                    "allow_nil": True
                }
            }
        }
