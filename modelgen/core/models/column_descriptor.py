"""
ColumnDescriptor model representing the metadata of one table or view column.
"""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from modelgen.core.errors import PreconditionViolation

TEXT = "text"
NUMERIC = "numeric"
TEMPORAL = "temporal"
OTHER = "other"

SUPPORTED_FAMILIES = (TEXT, NUMERIC, TEMPORAL)


class ColumnDescriptor(BaseModel):
    """
    Immutable metadata record for one schema column.

    Attributes:
        name: Column name as declared in the schema
        data_type: Raw SQL type name ("character varying", "date", ...)
        family: Coarse classification driving rules: "text", "numeric", "temporal", "other"
        data_size: Maximum length (text columns only)
        precision: Number of significant decimal digits (numeric columns only)
        scale: Digits after the decimal separator (numeric columns only)
        nullable: Whether the column accepts NULL
    """

    name: str = Field(..., min_length=1)
    data_type: str = ""
    family: Literal["text", "numeric", "temporal", "other"]
    data_size: int | None = None
    precision: int | None = None
    scale: int | None = None
    nullable: bool = True

    @model_validator(mode="after")
    def check_structure(self) -> "ColumnDescriptor":
        """Reject descriptors whose size, precision or scale cannot describe a column."""
        if self.data_size is not None and self.data_size <= 0:
            raise PreconditionViolation(self.name, f"data_size must be positive, got {self.data_size}")

        if self.precision is not None and self.precision <= 0:
            raise PreconditionViolation(self.name, f"precision must be positive, got {self.precision}")

        if self.scale is not None:
            if self.precision is None:
                raise PreconditionViolation(self.name, "scale given without precision")
            if self.scale < 0:
                raise PreconditionViolation(self.name, f"scale must not be negative, got {self.scale}")
            if self.scale > self.precision:
                raise PreconditionViolation(
                    self.name,
                    f"scale {self.scale} exceeds precision {self.precision}"
                )

        return self

    @property
    def is_supported(self) -> bool:
        return self.family in SUPPORTED_FAMILIES

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "name": "amount",
                "data_type": "numeric",
                "family": "numeric",
                "data_size": None,
                "precision": 7,
                "scale": 2,
                "nullable": True
            }
        }
