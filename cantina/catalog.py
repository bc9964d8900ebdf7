"""Product catalog of the canteen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional

from cantina.restock import RestockList

__all__ = [
    "LOW_STOCK",
    "Category",
    "Product",
    "Catalog",
    "CatalogError",
    "DuplicateProductError",
    "ProductNotFoundError",
    "category_name",
    "render_product",
]

LOW_STOCK = 10
"""Products with stock below this go on the restock list."""


class Category(IntEnum):
    FRUIT = 0
    SWEET = 1
    SAVORY = 2
    CHOCOLATE = 3


_CATEGORY_NAMES = {
    Category.FRUIT: "Fruta",
    Category.SWEET: "Doce",
    Category.SAVORY: "Salgado",
    Category.CHOCOLATE: "Chocolate",
}


class CatalogError(Exception):
    """Base class for catalog errors."""


class DuplicateProductError(CatalogError):
    """A product with this code is already registered."""

    def __init__(self, code: int) -> None:
        super().__init__("Esse codigo ja foi cadastrado no catalogo!")
        self.code = code


class ProductNotFoundError(CatalogError, LookupError):
    """No product with this code exists."""

    def __init__(self, code: int) -> None:
        super().__init__("Produto nao encontrado!")
        self.code = code


@dataclass
class Product:
    name: str
    category: Category
    code: int
    stock: int


def category_name(category: object) -> str:
    """Return the display name of a category, or "Desconhecido"."""
    try:
        return _CATEGORY_NAMES[Category(category)]
    except (ValueError, TypeError):
        return "Desconhecido"


def render_product(product: Product) -> str:
    """Return the one-line description of a product."""
    return (
        f"[{product.code}] {product.name} | {category_name(product.category)}"
        f" | {product.stock} EM ESTOQUE"
    )


class Catalog:
    """Products in registration order, looked up by code."""

    def __init__(self) -> None:
        self._products: dict[int, Product] = {}

    def register(
        self,
        name: str,
        category: Category,
        code: int,
        stock: int,
        restock: RestockList,
    ) -> Product:
        """Add a product; one with low stock also goes on the restock list."""
        if code in self._products:
            raise DuplicateProductError(code)
        if stock < LOW_STOCK:
            restock.add(code, name)
        product = Product(name, Category(category), code, stock)
        self._products[code] = product
        return product

    def find(self, code: int) -> Optional[Product]:
        """Return the product with this code, or None."""
        return self._products.get(code)

    def remove(self, code: int) -> Product:
        """Remove and return the product with this code."""
        try:
            return self._products.pop(code)
        except KeyError:
            raise ProductNotFoundError(code) from None

    def replenish(self, restock: RestockList, code: int, quantity: int) -> Product:
        """Add stock to a product, taking it off the restock list once it is no longer low."""
        product = self.find(code)
        if product is None:
            raise ProductNotFoundError(code)
        previous = product.stock
        product.stock += quantity
        if previous < LOW_STOCK <= product.stock:
            restock.remove(code)
        return product

    def render(self) -> str:
        """Return the catalog as the text shown to the operator."""
        header = "\n======== CATALOGO DE PRODUTOS ========\n"
        if not self._products:
            return (
                header
                + "catalogo invalido ou vazio"
                + "\n======================================\n"
            )
        body = "".join(render_product(p) + "\n" for p in self)
        return header + body + "======================================\n"

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products.values()))

    def __len__(self) -> int:
        return len(self._products)