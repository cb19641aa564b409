"""Domain service: Composition Engine.

Manages exactly one CompositionState per customization session:

    EMPTY --start--> COMPOSING --finalize--> FINALIZED

``start`` may be called again from any phase and discards whatever was
being built.  Finalizing keeps the state: the queries keep answering
for the finalized item until the next ``start``.  Every mutation
validates first and only then touches the state, so a failed call
leaves the composition exactly as it was.
"""

from __future__ import annotations

import logging

from burgerbuilder.domain.exceptions import (
    BaseImmutable,
    EntityNotFoundError,
    InvalidAddon,
    InvalidBase,
    InvalidState,
)
from burgerbuilder.domain.model.cart import CartLine, LineKind
from burgerbuilder.domain.model.catalog import Catalog, Category
from burgerbuilder.domain.model.composition import (
    CompositionPhase,
    CompositionState,
    Selection,
)
from burgerbuilder.domain.model.identity import IdFactory, new_id
from burgerbuilder.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

CUSTOMIZED_SUFFIX = "customized"


class CompositionEngine:

    def __init__(self, catalog: Catalog, id_factory: IdFactory = new_id) -> None:
        self._catalog = catalog
        self._new_id = id_factory
        self._state = CompositionState()
        self._phase = CompositionPhase.EMPTY

    @property
    def phase(self) -> CompositionPhase:
        return self._phase

    # --- Transitions ----------------------------------------------------------

    def start(self, base_entry_id: str) -> Selection:
        """Begin a new item anchored on *base_entry_id*."""
        entry = self._catalog.lookup(base_entry_id)
        if entry.category is not Category.BASE:
            raise InvalidBase(f"'{entry.name}' is not a base item")

        base = Selection(selection_id=self._new_id(), entry=entry)
        self._state = CompositionState(selections=[base])
        self._phase = CompositionPhase.COMPOSING
        logger.debug("Composition started on %s (%s)", entry.id, base.selection_id)
        return base

    def finalize(self) -> CartLine:
        """Freeze the current selections into a composed cart line.

        The cart is not touched; the caller hands the line to the cart
        aggregator.  A new item needs a fresh ``start``.
        """
        self._require_composing("finalize")
        selections = tuple(self._state.selections)
        base = selections[0].entry
        name = base.name
        if len(selections) > 1:
            name = f"{base.name} {CUSTOMIZED_SUFFIX}"

        line = CartLine(
            line_id=self._new_id(),
            kind=LineKind.COMPOSED,
            entry_id=base.id,
            name=name,
            unit_price=self._state.total,  # <-- frozen here
            selections=selections,
        )
        self._phase = CompositionPhase.FINALIZED
        logger.info(
            "Composition finalized as line %s: %s add-on(s), %s",
            line.line_id, len(selections) - 1, line.unit_price,
        )
        return line

    # --- Mutations ------------------------------------------------------------

    def add(self, entry_id: str) -> Selection:
        self._require_composing("add")
        entry = self._catalog.lookup(entry_id)
        if entry.category is not Category.ADDON:
            raise InvalidAddon(f"'{entry.name}' cannot be added as an add-on")

        selection = Selection(selection_id=self._new_id(), entry=entry)
        self._state.selections.append(selection)
        logger.debug("Added %s (%s)", entry.id, selection.selection_id)
        return selection

    def remove(self, selection_id: str) -> Selection:
        self._require_composing("remove")
        for index, selection in enumerate(self._state.selections):
            if selection.selection_id == selection_id:
                break
        else:
            raise EntityNotFoundError(f"Selection '{selection_id}' not found")

        if selection.is_base:
            raise BaseImmutable(
                "The base cannot be removed — start a new composition instead"
            )
        del self._state.selections[index]
        logger.debug("Removed %s (%s)", selection.entry.id, selection_id)
        return selection

    def remove_last_of_kind(self, entry_id: str) -> Selection | None:
        """Remove the most recently added add-on for *entry_id*.

        Returns None when there is nothing to remove.  The base is never
        matched, so decrementing it is also a no-op.
        """
        self._require_composing("remove_last_of_kind")
        for selection in reversed(self._state.addons):
            if selection.entry.id == entry_id:
                return self.remove(selection.selection_id)
        return None

    # --- Queries --------------------------------------------------------------

    def current_total(self) -> Money:
        self._require_started("current_total")
        return self._state.total

    def selections(self) -> tuple[Selection, ...]:
        self._require_started("selections")
        return tuple(self._state.selections)

    def count_of(self, entry_id: str) -> int:
        self._require_started("count_of")
        return self._state.count_of(entry_id)

    # --- Internal helpers -----------------------------------------------------

    def _require_composing(self, operation: str) -> None:
        if self._phase is not CompositionPhase.COMPOSING:
            raise InvalidState(
                f"Cannot {operation} — composition is {self._phase.value}, "
                f"expected COMPOSING"
            )

    def _require_started(self, operation: str) -> None:
        if self._phase is CompositionPhase.EMPTY:
            raise InvalidState(
                f"Cannot {operation} — composition is EMPTY, call start first"
            )
