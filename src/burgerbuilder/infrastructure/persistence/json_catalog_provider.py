"""JSON-file-backed implementation of CatalogProvider."""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from burgerbuilder.domain.exceptions import ValidationError
from burgerbuilder.domain.model.catalog import Catalog, CatalogEntry, Category
from burgerbuilder.domain.model.value_objects import Money
from burgerbuilder.domain.port.catalog_provider import CatalogProvider

logger = logging.getLogger(__name__)


class JsonCatalogProvider(CatalogProvider):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CatalogProvider interface --------------------------------------------

    def load(self) -> Catalog:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"{self._file_path.name}: not valid JSON ({exc.msg}, line {exc.lineno})"
            ) from exc
        if not isinstance(raw, list):
            raise ValidationError(
                f"{self._file_path.name}: expected a list of catalog entries"
            )
        catalog = Catalog(self._to_domain(item) for item in raw)
        logger.debug("Loaded %d catalog entries from %s", len(catalog), self._file_path)
        return catalog

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> CatalogEntry:
        try:
            return CatalogEntry(
                id=raw["id"],
                name=raw["name"],
                price=Money(Decimal(raw["price"]), raw.get("currency", "BRL")),
                category=Category(raw["category"]),
                asset=raw.get("asset", ""),
                stacking_order=int(raw.get("stacking_order", 0)),
            )
        except KeyError as exc:
            raise ValidationError(f"Catalog entry missing field {exc}") from exc
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid catalog entry {raw!r}: {exc}") from exc
