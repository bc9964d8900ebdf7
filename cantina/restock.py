"""Restock list: products waiting to have their stock replenished."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

__all__ = ["RestockItem", "RestockList"]


@dataclass(frozen=True)
class RestockItem:
    """A product waiting for replenishment."""

    code: int
    name: str


class RestockList:
    """Products to restock, kept in the order they were added, without repeats."""

    def __init__(self) -> None:
        self._items: dict[int, RestockItem] = {}

    def add(self, code: int, name: str) -> bool:
        """Add a product; return False if its code is already listed."""
        if code in self._items:
            return False
        self._items[code] = RestockItem(code, name)
        return True

    def remove(self, code: int) -> bool:
        """Remove a product by code; return False if it was not listed."""
        return self._items.pop(code, None) is not None

    def clear(self) -> None:
        """Drop every product from the list."""
        self._items.clear()

    def render(self) -> str:
        """Return the list as the text shown to the operator."""
        lines = ["", "=== LISTA DE REPOSICAO ==="]
        if not self._items:
            lines.append("Nenhum produto na lista de reposicao.")
            return "\n".join(lines) + "\n"
        lines.extend(f"Código: {item.code} | Nome: {item.name}" for item in self)
        lines.append("===========================")
        return "\n".join(lines) + "\n"

    def __contains__(self, code: object) -> bool:
        return code in self._items

    def __iter__(self) -> Iterator[RestockItem]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)