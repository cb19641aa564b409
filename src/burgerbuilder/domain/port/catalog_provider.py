"""Abstract source of the static catalog.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete providers (JSON file, built-in menu) live in
the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from burgerbuilder.domain.model.catalog import Catalog


class CatalogProvider(ABC):

    @abstractmethod
    def load(self) -> Catalog:
        """Return the full catalog, in declaration order."""
