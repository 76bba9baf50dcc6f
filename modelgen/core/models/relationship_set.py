"""
RelationshipSet model holding the entities a table refers to.
"""

from typing import Iterable

from pydantic import BaseModel


class RelationshipSet(BaseModel):
    """
    Referenced entity names, lower-cased and deduplicated.

    The first occurrence of a name wins, so rendering order follows the order
    in which the metadata source reported the references.
    """

    names: tuple[str, ...] = ()

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "RelationshipSet":
        seen: list[str] = []
        for name in names:
            lowered = name.strip().lower()
            if lowered and lowered not in seen:
                seen.append(lowered)
        return cls(names=tuple(seen))

    class Config:
        frozen = True
