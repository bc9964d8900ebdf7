"""Interactive menu for running the canteen."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional, TextIO

from cantina.catalog import (
    LOW_STOCK,
    Catalog,
    Category,
    DuplicateProductError,
    ProductNotFoundError,
    render_product,
)
from cantina.restock import RestockList
from cantina.sales import SaleError, SalesLedger
from cantina.students import DuplicateStudentError, StudentRegistry

__all__ = ["run", "main"]

_INT = re.compile(r"[+-]?\d+")

_MENU = (
    "\n===== MENU PRINCIPAL =====\n"
    "1. Cadastrar Produto   ::: 5. Registrar Venda\n"
    "2. Visualizar Produtos ::: 6. Relatorio de Vendas por Aluno\n"
    "3. Cadastrar Aluno     ::: 7. Mostrar Lista de Reposicao\n"
    "4. Listar Alunos       ::: 8. Repor estoque de um Produto\n"
    "0. Sair\n"
    "Escolha uma opcao: "
)


class _InvalidNumber(ValueError):
    """The next input token is not an integer."""


class _Input:
    """Reads integers and whole lines from a text stream, the way a terminal form does."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._buffer += line
        return True

    def read_int(self) -> int:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                break
            self._buffer = ""
            if not self._fill():
                raise EOFError
        match = _INT.match(self._buffer)
        if match is None:
            token = self._buffer.split(None, 1)[0]
            self._buffer = self._buffer[len(token):]
            raise _InvalidNumber(token)
        self._buffer = self._buffer[match.end():]
        return int(match.group())

    def skip_char(self) -> None:
        if self._buffer or self._fill():
            self._buffer = self._buffer[1:]

    def read_line(self) -> str:
        if not self._buffer and not self._fill():
            raise EOFError
        line, newline, rest = self._buffer.partition("\n")
        self._buffer = rest if newline else ""
        return line


class _Session:
    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.input = _Input(stdin)
        self.out = stdout
        self.catalog = Catalog()
        self.students = StudentRegistry()
        self.ledger = SalesLedger()
        self.restock = RestockList()

    def write(self, text: str) -> None:
        self.out.write(text)

    def register_product(self) -> None:
        self.write("\n=== REGISTRAR PRODUTO ===\n")
        self.write("Nome do produto: ")
        name = self.input.read_line()
        self.write("Categoria (0=FRUTA, 1=DOCE, 2=SALGADO, 3=CHOCOLATE): ")
        try:
            category = Category(self.input.read_int())
        except ValueError:
            self.write("categoria invalida")
            return
        self.write("Codigo: ")
        code = self.input.read_int()
        self.write("Estoque inicial: ")
        stock = self.input.read_int()

        self.write("\n")
        try:
            self.catalog.register(name, category, code, stock, self.restock)
        except DuplicateProductError as exc:
            self.write(f"{exc}\n")
            self.write("Erro ao cadastrar o produto.")
        else:
            if stock < LOW_STOCK:
                self.write("Aviso: Produto com estoque baixo\n")
                self.write("Aviso: Produto adicionado a lista de reposicao\n")
            self.write("Produto cadastrado com sucesso.")
        self.write("\n=========================\n")

    def register_student(self) -> None:
        self.write("\n==== CADASTRAR NOVO ALUNO ====\n")
        self.write("Nome do aluno: ")
        name = self.input.read_line()
        self.write("Matricula: ")
        enrollment = self.input.read_int()
        try:
            self.students.register(name, enrollment)
        except DuplicateStudentError as exc:
            self.write(str(exc))
        else:
            self.write("\nAluno cadastrado com sucesso.")
        self.write("\n==============================\n")

    def record_sale(self) -> None:
        self.write("\n==== REGISTRAR VENDA ====\n")
        self.write("Matricula do aluno: ")
        enrollment = self.input.read_int()
        self.write("Codigo do produto: ")
        code = self.input.read_int()
        self.write("Quantidade: ")
        quantity = self.input.read_int()
        try:
            _, notices = self.ledger.record(
                self.students, self.catalog, self.restock, enrollment, code, quantity
            )
        except SaleError as exc:
            self.write(f"{exc}\n")
        else:
            self.write("".join(f"{notice}\n" for notice in notices))
            self.write("Venda registrada com sucesso.")
        self.write("\n=========================\n")

    def sales_report(self) -> None:
        self.write("\n==== RELATORIO DE VENDAS DE ALUNO ====\n")
        self.write("Matricula do aluno: ")
        enrollment = self.input.read_int()
        self.write(self.ledger.report(self.students, enrollment))
        self.write("\n======================================\n")

    def replenish(self) -> None:
        self.write("\n=========== REPOR ESTOQUE ===========\n")
        self.write(self.catalog.render())
        self.write("Codigo do Produto: ")
        code = self.input.read_int()
        self.write("Quantidade: ")
        quantity = self.input.read_int()
        try:
            product = self.catalog.replenish(self.restock, code, quantity)
        except ProductNotFoundError:
            self.write("produto invalido")
            self.write("Erro: produto nao encontrado ou catalogo invalido\n")
        else:
            self.write("Estoque do produto reposto:\n")
            self.write(render_product(product) + "\n")
        self.write("======================================\n")

    def loop(self) -> None:
        actions = {
            1: self.register_product,
            2: lambda: self.write(self.catalog.render()),
            3: self.register_student,
            4: lambda: self.write(self.students.render()),
            5: self.record_sale,
            6: self.sales_report,
            7: lambda: self.write(self.restock.render()),
            8: self.replenish,
        }
        while True:
            self.write(_MENU)
            try:
                option: Optional[int] = self.input.read_int()
            except _InvalidNumber:
                option = None
            self.input.skip_char()
            action = actions.get(option) if option is not None else None
            if action is None:
                self.write("opcao invalida!\n")
                if option == 0:
                    return
                continue
            try:
                action()
            except _InvalidNumber:
                self.write("entrada invalida\n")


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu, reading commands from stdin until the user leaves or input ends."""
    session = _Session(stdin, stdout)
    try:
        session.loop()
    except EOFError:
        pass
    stdout.write("Programa encerrado.\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive menu on the terminal."""
    parser = argparse.ArgumentParser(
        prog="cantina", description="Canteen sales and stock control."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())