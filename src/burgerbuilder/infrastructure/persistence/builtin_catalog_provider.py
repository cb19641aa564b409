"""The storefront's built-in menu, for when no catalog file is present."""

from __future__ import annotations

from burgerbuilder.domain.model.catalog import Catalog, CatalogEntry, Category
from burgerbuilder.domain.model.value_objects import Money
from burgerbuilder.domain.port.catalog_provider import CatalogProvider

# Higher stacking_order is drawn on top of the burger.
DEFAULT_ENTRIES: tuple[CatalogEntry, ...] = (
    CatalogEntry("lettuce", "Alface", Money.of("1.00"), Category.ADDON, "/lettuce.png", 60),
    CatalogEntry("tomato", "Tomate", Money.of("1.50"), Category.ADDON, "/tomato.png", 50),
    CatalogEntry("pineapple", "Abacaxi Assado", Money.of("2.00"), Category.ADDON, "/pineapple.png", 45),
    CatalogEntry("sauce", "Molho Especial", Money.of("2.00"), Category.ADDON, "/sauce.png", 40),
    CatalogEntry("bacon", "Bacon", Money.of("3.50"), Category.ADDON, "/bacon.png", 30),
    CatalogEntry("cheese", "Queijo Cheddar", Money.of("2.50"), Category.ADDON, "/cheese.png", 20),
    CatalogEntry("base_burger", "Hambúrguer Clássico", Money.of("17.00"), Category.BASE, "/hamburgue.png", 10),
    CatalogEntry("coke", "Coca-Cola 350ml", Money.of("6.00"), Category.BEVERAGE, "/coke.png", 0),
    CatalogEntry("guarana", "Guaraná 350ml", Money.of("5.50"), Category.BEVERAGE, "/guarana.png", 0),
    CatalogEntry("orange_juice", "Suco de Laranja", Money.of("8.00"), Category.BEVERAGE, "/orange_juice.png", 0),
)


class BuiltinCatalogProvider(CatalogProvider):

    def load(self) -> Catalog:
        return Catalog(DEFAULT_ENTRIES)
