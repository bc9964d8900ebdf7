# cantina

A small console point-of-sale for a school canteen. It keeps a catalog of
products, a registry of students, a sales ledger that caps each student at
five items, and a restock list of products that are running low. The menus
and messages are in Portuguese.

## Installing

```
pip install .
```

## Running

```
cantina
```

The program shows a menu and reads choices from standard input until option
`0` is chosen or the input ends:

```
1. Cadastrar Produto   ::: 5. Registrar Venda
2. Visualizar Produtos ::: 6. Relatorio de Vendas por Aluno
3. Cadastrar Aluno     ::: 7. Mostrar Lista de Reposicao
4. Listar Alunos       ::: 8. Repor estoque de um Produto
0. Sair
```

- A product gets a name, a category (0 fruit, 1 sweet, 2 savoury,
  3 chocolate), a code and an initial stock. Codes must be unique. A product
  that starts with fewer than 10 units is put on the restock list.
- A student gets a name and an enrollment number, which must be unique.
- A sale needs a registered student and an existing product. A student may buy
  at most 5 items in total across all of their sales. A sale larger than the
  stock still goes through and leaves the stock negative. Whenever the stock
  ends up below 10, the product is put on the restock list.
- The sales report lists each sale of one student: product code and quantity.
- Restocking a product adds units to its stock. A product whose stock goes
  from below 10 to 10 or more is taken off the restock list.

## Using it as a library

```python
from cantina.catalog import Catalog, Category
from cantina.restock import RestockList
from cantina.students import StudentRegistry
from cantina.sales import SalesLedger

catalog = Catalog()
restock = RestockList()
students = StudentRegistry()
ledger = SalesLedger()

catalog.register("Apple", Category.FRUIT, 1, 20, restock)
students.register("Ana", 123456)
sale, notices = ledger.record(students, catalog, restock, 123456, 1, 3)

print(ledger.items_bought(123456))   # 3
print(catalog.find(1).stock)         # 17
print(notices)                       # []
```

- `cantina.catalog`: `Category` (`FRUIT`, `SWEET`, `SAVORY`, `CHOCOLATE`),
  `Product`, `Catalog` with `register`, `find`, `remove`, `replenish` and
  `render`, plus `category_name` and `render_product`. `LOW_STOCK` is 10.
- `cantina.students`: `Student` and `StudentRegistry` with `register`, `find`
  and `render`.
- `cantina.sales`: `Sale` and `SalesLedger` with `record`, `items_bought`,
  `sales_for` and `report`. `record` returns the sale and a list of warning
  messages. `DAILY_LIMIT` is 5.
- `cantina.restock`: `RestockItem` and `RestockList` with `add`, `remove`,
  `clear` and `render`; it supports `in`, iteration and `len`.
- `cantina.cli`: `run(stdin, stdout)` runs the menu on any text streams;
  `main()` runs it on the terminal.

Failed operations raise exceptions: `DuplicateProductError` and
`ProductNotFoundError` (both `CatalogError`) from the catalog,
`DuplicateStudentError` from the registry, and `UnknownStudentOrProductError`
and `DailyLimitError` (both `SaleError`) from the ledger.

## What it does not do

Everything is kept in memory only: products, students, sales and the restock
list are lost when the program ends. There is no saving or loading, and the
item limit is not reset by date; it applies to everything recorded in one
`SalesLedger`. Removing a product is available through `Catalog.remove` but
not from the menu.

## Running the tests

```
pip install .[test]
pytest
```