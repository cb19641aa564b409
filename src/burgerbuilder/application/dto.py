"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the presentation and application layers without
exposing domain internals.  Money is pre-formatted, e.g. "R$17.00".
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntryDTO:
    id: str
    name: str
    price: str
    category: str
    asset: str
    stacking_order: int


@dataclass(frozen=True)
class SelectionDTO:
    """Output: one chosen ingredient of the item being built."""

    selection_id: str
    entry_id: str
    name: str
    price: str


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the customer."""

    line_id: str
    kind: str
    name: str
    quantity: int
    unit_price: str
    line_total: str
    addons: tuple[str, ...] = ()
