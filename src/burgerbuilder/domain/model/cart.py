"""Cart aggregate — the finalized lines of the current session.

The Cart is an aggregate root that owns its lines.  Its total is always
recomputed from the lines; nothing else is trusted.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from burgerbuilder.domain.exceptions import EntityNotFoundError, ValidationError
from burgerbuilder.domain.model.composition import Selection
from burgerbuilder.domain.model.value_objects import Money, Quantity


class LineKind(Enum):
    COMPOSED = "composed"
    SIMPLE = "simple"


@dataclass(frozen=True)
class CartLine:
    """One priced entry in the cart.

    ``unit_price`` is a snapshot: for composed lines it is the sum of the
    frozen selections at finalization time and is never recomputed.  A
    quantity change on a simple line produces a new CartLine.
    """

    line_id: str
    kind: LineKind
    entry_id: str  # base entry for composed lines
    name: str
    unit_price: Money
    quantity: Quantity = field(default_factory=lambda: Quantity(1))
    selections: tuple[Selection, ...] = ()

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def addons(self) -> tuple[Selection, ...]:
        return tuple(s for s in self.selections if not s.is_base)

    def with_added_units(self, quantity: Quantity) -> CartLine:
        if self.kind is not LineKind.SIMPLE:
            raise ValidationError("Composed lines cannot change quantity")
        return replace(self, quantity=self.quantity + quantity)

    def with_removed_units(self, quantity: Quantity) -> CartLine:
        """Take *quantity* units off; the caller drops the line at zero."""
        if quantity.value >= self.quantity.value:
            raise ValidationError(
                f"Cannot remove {quantity} of {self.name} "
                f"— line holds {self.quantity}"
            )
        return replace(self, quantity=Quantity(self.quantity.value - quantity.value))


@dataclass
class Cart:
    """Aggregate root for the session's order.

    Invariants:
    - at most one simple line per catalog entry
    - line ids are unique
    """

    lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def append(self, line: CartLine) -> None:
        if any(existing.line_id == line.line_id for existing in self.lines):
            raise ValidationError(f"Cart line '{line.line_id}' already present")
        if line.kind is LineKind.SIMPLE and self.simple_line_for(line.entry_id):
            raise ValidationError(
                f"A line for '{line.entry_id}' already exists — increment it instead"
            )
        self.lines.append(line)

    def remove(self, line_id: str) -> CartLine:
        line = self.find(line_id)
        self.lines.remove(line)
        return line

    def add_units(self, line_id: str, quantity: Quantity) -> CartLine:
        return self._swap(self.find(line_id).with_added_units(quantity))

    def remove_units(self, line_id: str, quantity: Quantity) -> CartLine:
        return self._swap(self.find(line_id).with_removed_units(quantity))

    # --- Queries --------------------------------------------------------------

    @property
    def total(self) -> Money:
        return Money.sum(line.line_total for line in self.lines)

    def find(self, line_id: str) -> CartLine:
        for line in self.lines:
            if line.line_id == line_id:
                return line
        raise EntityNotFoundError(f"Cart line '{line_id}' not found")

    def simple_line_for(self, entry_id: str) -> CartLine | None:
        for line in self.lines:
            if line.kind is LineKind.SIMPLE and line.entry_id == entry_id:
                return line
        return None

    # --- Internal helpers -----------------------------------------------------

    def _swap(self, updated: CartLine) -> CartLine:
        for index, line in enumerate(self.lines):
            if line.line_id == updated.line_id:
                self.lines[index] = updated
                return updated
        raise EntityNotFoundError(f"Cart line '{updated.line_id}' not found")
