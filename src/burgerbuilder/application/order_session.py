"""Application service: one customer's ordering session.

This is the presentation boundary.  It owns exactly one composition
engine and one cart, both built over the same injected catalog, and
returns DTOs rather than domain objects.
"""

from __future__ import annotations

from burgerbuilder.application.dto import CartLineDTO, CatalogEntryDTO, SelectionDTO
from burgerbuilder.domain.exceptions import EntityNotFoundError
from burgerbuilder.domain.model.cart import CartLine
from burgerbuilder.domain.model.catalog import Catalog, CatalogEntry, Category
from burgerbuilder.domain.model.composition import Selection
from burgerbuilder.domain.model.identity import IdFactory, new_id
from burgerbuilder.domain.service.cart_aggregator import CartAggregator
from burgerbuilder.domain.service.composition_engine import CompositionEngine
from burgerbuilder.domain.service.order_formatter import OrderLabels, format_order


class OrderSession:

    def __init__(
        self,
        catalog: Catalog,
        id_factory: IdFactory = new_id,
        labels: OrderLabels = OrderLabels(),
    ) -> None:
        self._catalog = catalog
        self._engine = CompositionEngine(catalog, id_factory)
        self._cart = CartAggregator(catalog, id_factory)
        self._labels = labels

    # --- Catalog --------------------------------------------------------------

    def menu(self, category: Category | None = None) -> list[CatalogEntryDTO]:
        entries = self._catalog if category is None else self._catalog.by_category(category)
        return [self._entry_to_dto(e) for e in entries]

    # --- Composition ----------------------------------------------------------

    def start_composition(self, base_id: str) -> SelectionDTO:
        return self._selection_to_dto(self._engine.start(base_id))

    def add_to_composition(self, entry_id: str) -> SelectionDTO:
        return self._selection_to_dto(self._engine.add(entry_id))

    def remove_from_composition(self, ref: str) -> SelectionDTO | None:
        """Remove by selection instance id, or the latest copy of a catalog id.

        Removing by catalog id when no copy is present is a no-op and
        returns None.
        """
        selection_ids = {s.selection_id for s in self._engine.selections()}
        if ref in selection_ids:
            return self._selection_to_dto(self._engine.remove(ref))
        if ref not in self._catalog:
            raise EntityNotFoundError(f"Nothing to remove for '{ref}'")
        removed = self._engine.remove_last_of_kind(ref)
        return self._selection_to_dto(removed) if removed is not None else None

    def composition(self) -> list[SelectionDTO]:
        return [self._selection_to_dto(s) for s in self._engine.selections()]

    def composition_total(self) -> str:
        return str(self._engine.current_total())

    def composition_count(self, entry_id: str) -> int:
        return self._engine.count_of(entry_id)

    def finalize_composition(self) -> CartLineDTO:
        """Freeze the current item and put it in the cart."""
        line = self._engine.finalize()
        self._cart.add_composed(line)
        return self._line_to_dto(line)

    # --- Cart -----------------------------------------------------------------

    def add_simple_to_cart(self, entry_id: str, quantity: int = 1) -> CartLineDTO:
        return self._line_to_dto(self._cart.add_simple(entry_id, quantity))

    def remove_cart_line(self, line_id: str) -> None:
        self._cart.remove(line_id)

    def decrement_cart_line(self, line_id: str, quantity: int = 1) -> CartLineDTO | None:
        line = self._cart.decrement(line_id, quantity)
        return self._line_to_dto(line) if line is not None else None

    def cart_total(self) -> str:
        return str(self._cart.total())

    def cart_lines(self) -> list[CartLineDTO]:
        return [self._line_to_dto(line) for line in self._cart.lines()]

    @property
    def cart_is_empty(self) -> bool:
        return self._cart.is_empty

    # --- Checkout -------------------------------------------------------------

    def format_order(self, customer_name: str, payment_preference: str | None = None) -> str:
        return format_order(
            self._cart.snapshot(), customer_name, payment_preference, self._labels
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _entry_to_dto(entry: CatalogEntry) -> CatalogEntryDTO:
        return CatalogEntryDTO(
            id=entry.id,
            name=entry.name,
            price=str(entry.price),
            category=entry.category.value,
            asset=entry.asset,
            stacking_order=entry.stacking_order,
        )

    @staticmethod
    def _selection_to_dto(selection: Selection) -> SelectionDTO:
        return SelectionDTO(
            selection_id=selection.selection_id,
            entry_id=selection.entry.id,
            name=selection.entry.name,
            price=str(selection.entry.price),
        )

    @staticmethod
    def _line_to_dto(line: CartLine) -> CartLineDTO:
        return CartLineDTO(
            line_id=line.line_id,
            kind=line.kind.value,
            name=line.name,
            quantity=line.quantity.value,
            unit_price=str(line.unit_price),
            line_total=str(line.line_total),
            addons=tuple(s.entry.name for s in line.addons),
        )
