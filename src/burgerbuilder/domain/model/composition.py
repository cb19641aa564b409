"""Composition model — one customizable item while it is being built."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from burgerbuilder.domain.model.catalog import CatalogEntry, Category
from burgerbuilder.domain.model.value_objects import Money


class CompositionPhase(Enum):
    EMPTY = "EMPTY"
    COMPOSING = "COMPOSING"
    FINALIZED = "FINALIZED"


@dataclass(frozen=True)
class Selection:
    """One chosen instance of a catalog entry.

    ``selection_id`` is per instance, so the same entry can be selected
    several times and each copy removed individually.
    """

    selection_id: str
    entry: CatalogEntry

    @property
    def is_base(self) -> bool:
        return self.entry.category is Category.BASE


@dataclass
class CompositionState:
    """Ordered selections of one in-progress item.

    Invariants:
    - ``selections[0]`` is the only base selection
    - every other selection is an add-on
    """

    selections: list[Selection] = field(default_factory=list)

    @property
    def addons(self) -> list[Selection]:
        return self.selections[1:]

    @property
    def total(self) -> Money:
        return Money.sum(s.entry.price for s in self.selections)

    def count_of(self, entry_id: str) -> int:
        return sum(1 for s in self.selections if s.entry.id == entry_id)
