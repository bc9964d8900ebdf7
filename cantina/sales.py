"""Sales ledger: records purchases and enforces the daily item limit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from cantina.catalog import LOW_STOCK, Catalog
from cantina.restock import RestockList
from cantina.students import StudentRegistry

__all__ = [
    "DAILY_LIMIT",
    "Sale",
    "SalesLedger",
    "SaleError",
    "UnknownStudentOrProductError",
    "DailyLimitError",
]

DAILY_LIMIT = 5
"""Most items a student may buy in one day."""

_ADDED_TO_RESTOCK = "Produto Adicionado a Lista de Reposicao."


class SaleError(Exception):
    """Base class for errors that prevent a sale."""


class UnknownStudentOrProductError(SaleError, LookupError):
    """The student or the product does not exist."""

    def __init__(self, enrollment: int, code: int) -> None:
        super().__init__("Erro: Aluno ou produto inexistente.")
        self.enrollment = enrollment
        self.code = code


class DailyLimitError(SaleError):
    """The sale would take the student past the daily item limit."""

    def __init__(self, enrollment: int, already_bought: int, quantity: int) -> None:
        super().__init__(f"Aviso: Limite diario de {DAILY_LIMIT} itens excedido!")
        self.enrollment = enrollment
        self.already_bought = already_bought
        self.quantity = quantity


@dataclass(frozen=True)
class Sale:
    enrollment: int
    code: int
    quantity: int


class SalesLedger:
    """History of the day's sales, in the order they were made."""

    def __init__(self) -> None:
        self._sales: list[Sale] = []

    def items_bought(self, enrollment: int) -> int:
        """Return how many items the student has bought so far."""
        return sum(s.quantity for s in self._sales if s.enrollment == enrollment)

    def record(
        self,
        students: StudentRegistry,
        catalog: Catalog,
        restock: RestockList,
        enrollment: int,
        code: int,
        quantity: int,
    ) -> tuple[Sale, list[str]]:
        """Record a sale and take its items out of stock.

        Returns the sale and the warnings raised while making it. A sale
        larger than the stock still goes through, leaving the stock negative;
        the product is then put on the restock list.
        """
        student = students.find(enrollment)
        product = catalog.find(code)
        if student is None or product is None:
            raise UnknownStudentOrProductError(enrollment, code)

        already = self.items_bought(enrollment)
        if already + quantity > DAILY_LIMIT:
            raise DailyLimitError(enrollment, already, quantity)

        notices: list[str] = []
        if product.stock < quantity:
            notices.append("Aviso: Estoque insuficiente.")
            if restock.add(code, product.name):
                notices.append(_ADDED_TO_RESTOCK)

        product.stock -= quantity

        if product.stock < LOW_STOCK:
            notices.append("Aviso: Estoque baixo.")
            if restock.add(code, product.name):
                notices.append(_ADDED_TO_RESTOCK)

        sale = Sale(enrollment, code, quantity)
        self._sales.append(sale)
        return sale, notices

    def sales_for(self, enrollment: int) -> list[Sale]:
        """Return the student's sales in the order they were made."""
        return [s for s in self._sales if s.enrollment == enrollment]

    def report(self, students: StudentRegistry, enrollment: int) -> str:
        """Return the sales report of one student as shown to the operator."""
        student = students.find(enrollment)
        if student is None:
            return "Aluno nao encontrado.\n"
        lines = [f"Relatorio de vendas do(a) aluno(a) {student.name}:\n"]
        lines.extend(
            f"Produto {s.code} - {s.quantity} unidades\n"
            for s in self.sales_for(enrollment)
        )
        return "".join(lines)

    def __iter__(self) -> Iterator[Sale]:
        return iter(list(self._sales))

    def __len__(self) -> int:
        return len(self._sales)