"""
TableSchema model bundling everything a collaborator supplies for one table.
"""

from pydantic import BaseModel, Field

from .column_descriptor import ColumnDescriptor
from .primary_key import CompositePrimaryKey, NoPrimaryKey, SinglePrimaryKey, primary_key_from
from .relationship_set import RelationshipSet


class TableSchema(BaseModel):
    """
    Column metadata for one table or view, as produced by a schema file or introspection.

    Attributes:
        table_name: Source table or view name
        columns: Column descriptors in schema (ordinal) order
        primary_keys: Primary key column names in key order (may be empty)
        relationships: Referenced entity names as reported by the source
        class_name: Optional explicit model class name
    """

    table_name: str = Field(..., min_length=1)
    columns: tuple[ColumnDescriptor, ...]
    primary_keys: tuple[str, ...] = ()
    relationships: tuple[str, ...] = ()
    class_name: str | None = None

    @property
    def primary_key(self) -> NoPrimaryKey | SinglePrimaryKey | CompositePrimaryKey:
        return primary_key_from(self.primary_keys)

    @property
    def relationship_set(self) -> RelationshipSet:
        return RelationshipSet.from_names(self.relationships)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "table_name": "customers",
                "columns": [
                    {"name": "id", "data_type": "integer", "family": "numeric",
                     "precision": 9, "scale": 0, "nullable": False},
                    {"name": "email", "data_type": "character varying", "family": "text",
                     "data_size": 50, "nullable": False}
                ],
                "primary_keys": ["id"],
                "relationships": ["Regions"]
            }
        }


class GeneratedArtifacts(BaseModel):
    """The two text documents produced for one table (ephemeral, never persisted here)."""

    class_name: str
    model_source: str
    test_source: str

    class Config:
        frozen = True
