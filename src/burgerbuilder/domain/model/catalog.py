"""Catalog — static reference data for everything that can be ordered.

The catalog is loaded once at startup and shared read-only by the
composition engine and the cart.  It has no mutation operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from burgerbuilder.domain.exceptions import EntityNotFoundError, ValidationError
from burgerbuilder.domain.model.value_objects import Money


class Category(Enum):
    BASE = "base"
    ADDON = "addon"
    BEVERAGE = "beverage"


@dataclass(frozen=True)
class CatalogEntry:
    """A purchasable item.

    ``asset`` and ``stacking_order`` belong to the presentation layer and
    are carried through untouched.
    """

    id: str
    name: str
    price: Money
    category: Category
    asset: str = ""
    stacking_order: int = 0


class Catalog:

    def __init__(self, entries: Iterable[CatalogEntry]) -> None:
        self._entries: dict[str, CatalogEntry] = {}
        for entry in entries:
            if entry.id in self._entries:
                raise ValidationError(f"Duplicate catalog id '{entry.id}'")
            self._entries[entry.id] = entry

    def lookup(self, entry_id: str) -> CatalogEntry:
        """Return the entry with *entry_id*.

        A miss is a data error, not a user-facing condition, so it raises
        instead of returning None.
        """
        entry = self._entries.get(entry_id)
        if entry is None:
            raise EntityNotFoundError(f"Catalog entry '{entry_id}' not found")
        return entry

    def by_category(self, category: Category) -> tuple[CatalogEntry, ...]:
        return tuple(e for e in self._entries.values() if e.category is category)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._entries

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
