"""Domain service: Cart Aggregator.

Coordinates catalog lookups with the Cart aggregate.  Composed lines
arrive already priced from the composition engine; simple lines are
built here from beverage entries and merged by catalog identity.
"""

from __future__ import annotations

import logging

from burgerbuilder.domain.exceptions import InvalidSimpleItem, ValidationError
from burgerbuilder.domain.model.cart import Cart, CartLine, LineKind
from burgerbuilder.domain.model.catalog import Catalog, Category
from burgerbuilder.domain.model.identity import IdFactory, new_id
from burgerbuilder.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


class CartAggregator:

    def __init__(
        self,
        catalog: Catalog,
        id_factory: IdFactory = new_id,
        cart: Cart | None = None,
    ) -> None:
        self._catalog = catalog
        self._new_id = id_factory
        self._cart = cart if cart is not None else Cart()

    # --- Mutations ------------------------------------------------------------

    def add_composed(self, line: CartLine) -> CartLine:
        """Append a finalized composed line as-is.

        Composed lines are never merged, even when their selections match
        another line exactly.
        """
        if line.kind is not LineKind.COMPOSED:
            raise ValidationError("add_composed expects a composed line")
        self._cart.append(line)
        logger.debug("Cart: added composed line %s (%s)", line.line_id, line.unit_price)
        return line

    def add_simple(self, entry_id: str, quantity: int = 1) -> CartLine:
        """Add a beverage, merging into its existing line if there is one."""
        entry = self._catalog.lookup(entry_id)
        if entry.category is not Category.BEVERAGE:
            raise InvalidSimpleItem(
                f"'{entry.name}' must be built through composition"
            )
        qty = Quantity(quantity)

        existing = self._cart.simple_line_for(entry.id)
        if existing is not None:
            merged = self._cart.add_units(existing.line_id, qty)
            logger.debug("Cart: %s now x%s", entry.id, merged.quantity)
            return merged

        line = CartLine(
            line_id=self._new_id(),
            kind=LineKind.SIMPLE,
            entry_id=entry.id,
            name=entry.name,
            unit_price=entry.price,
            quantity=qty,
        )
        self._cart.append(line)
        logger.debug("Cart: added %s x%s as line %s", entry.id, qty, line.line_id)
        return line

    def remove(self, line_id: str) -> CartLine:
        """Delete the whole line."""
        line = self._cart.remove(line_id)
        logger.debug("Cart: removed line %s", line_id)
        return line

    def decrement(self, line_id: str, quantity: int = 1) -> CartLine | None:
        """Take units off a line, dropping it once nothing is left.

        Returns the remaining line, or None if it was removed.
        """
        qty = Quantity(quantity)
        line = self._cart.find(line_id)
        if qty.value == line.quantity.value:
            self.remove(line_id)
            return None
        line = self._cart.remove_units(line_id, qty)
        logger.debug("Cart: line %s now x%s", line_id, line.quantity)
        return line

    # --- Queries --------------------------------------------------------------

    def total(self) -> Money:
        return self._cart.total

    def lines(self) -> tuple[CartLine, ...]:
        """Snapshot of the lines in insertion order."""
        return tuple(self._cart.lines)

    def snapshot(self) -> Cart:
        """Detached copy of the cart, safe to hand across a boundary."""
        return Cart(lines=list(self.lines()))

    @property
    def is_empty(self) -> bool:
        return not self._cart.lines
