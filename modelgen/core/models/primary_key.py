"""
PrimaryKey variants: no key, a single column, or a composite of several columns.
"""

from typing import Annotated, Literal, Sequence, Union

from pydantic import BaseModel, Field


class NoPrimaryKey(BaseModel):
    """The schema declares no primary key. Renderers emit nothing for it."""

    kind: Literal["none"] = "none"

    @property
    def names(self) -> tuple[str, ...]:
        return ()

    class Config:
        frozen = True


class SinglePrimaryKey(BaseModel):
    """Primary key made of exactly one column."""

    kind: Literal["single"] = "single"
    name: str = Field(..., min_length=1)

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name,)

    class Config:
        frozen = True


class CompositePrimaryKey(BaseModel):
    """Primary key spanning two or more columns, in key order."""

    kind: Literal["composite"] = "composite"
    names: tuple[str, ...] = Field(..., min_length=2)

    class Config:
        frozen = True


PrimaryKey = Annotated[
    Union[NoPrimaryKey, SinglePrimaryKey, CompositePrimaryKey],
    Field(discriminator="kind"),
]


def primary_key_from(names: Sequence[str]) -> NoPrimaryKey | SinglePrimaryKey | CompositePrimaryKey:
    """
    Build the primary key variant matching an ordered list of key columns.

    Args:
        names: Key column names in key order (may be empty)

    Returns:
        NoPrimaryKey, SinglePrimaryKey or CompositePrimaryKey
    """
    if not names:
        return NoPrimaryKey()
    if len(names) == 1:
        return SinglePrimaryKey(name=names[0])
    return CompositePrimaryKey(names=tuple(names))
