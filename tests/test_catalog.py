import pytest

from cantina.catalog import (
    LOW_STOCK,
    Catalog,
    CatalogError,
    Category,
    DuplicateProductError,
    Product,
    ProductNotFoundError,
    category_name,
    render_product,
)
from cantina.restock import RestockList


@pytest.fixture
def restock():
    return RestockList()


@pytest.fixture
def catalog(restock):
    cat = Catalog()
    cat.register("HERSHEYS COM NOZES", Category.CHOCOLATE, 1, 10, restock)
    cat.register("BIS CHOCOLATE BRANCO", Category.CHOCOLATE, 2, 5, restock)
    return cat


@pytest.mark.parametrize(
    "category, name",
    [
        (Category.FRUIT, "Fruta"),
        (Category.SWEET, "Doce"),
        (Category.SAVORY, "Salgado"),
        (Category.CHOCOLATE, "Chocolate"),
        (0, "Fruta"),
        (42, "Desconhecido"),
    ],
)
def test_category_name(category, name):
    assert category_name(category) == name


def test_render_product():
    product = Product("Maca", Category.FRUIT, 7, 3)
    assert render_product(product) == "[7] Maca | Fruta | 3 EM ESTOQUE"


def test_register_and_find(catalog):
    product = catalog.find(1)
    assert product.name == "HERSHEYS COM NOZES"
    assert product.category is Category.CHOCOLATE
    assert product.stock == 10
    assert catalog.find(99) is None
    assert len(catalog) == 2


def test_register_low_stock_goes_to_restock(catalog, restock):
    assert 2 in restock
    assert 1 not in restock


def test_register_duplicate(catalog, restock):
    with pytest.raises(DuplicateProductError) as info:
        catalog.register("Outro", Category.FRUIT, 1, 3, restock)
    assert info.value.code == 1
    assert len(catalog) == 2
    assert 1 not in restock


def test_duplicate_is_catalog_error(catalog, restock):
    with pytest.raises(CatalogError):
        catalog.register("Outro", Category.FRUIT, 2, 50, restock)


def test_register_beyond_initial_capacity(restock):
    cat = Catalog()
    for code in range(250):
        cat.register(f"p{code}", Category.SWEET, code, LOW_STOCK, restock)
    assert len(cat) == 250
    assert [p.code for p in cat] == list(range(250))
    assert len(restock) == 0


def test_remove(catalog):
    removed = catalog.remove(1)
    assert removed.name == "HERSHEYS COM NOZES"
    assert catalog.find(1) is None
    assert [p.code for p in catalog] == [2]


def test_remove_missing(catalog):
    with pytest.raises(ProductNotFoundError):
        catalog.remove(99)


def test_remove_from_empty():
    with pytest.raises(ProductNotFoundError):
        Catalog().remove(1)


def test_replenish_leaves_restock(catalog, restock):
    product = catalog.replenish(restock, 2, 5)
    assert product.stock == LOW_STOCK
    assert 2 not in restock


def test_replenish_still_low_stays(catalog, restock):
    product = catalog.replenish(restock, 2, 1)
    assert product.stock < LOW_STOCK
    assert 2 in restock


def test_replenish_missing(catalog, restock):
    with pytest.raises(ProductNotFoundError):
        catalog.replenish(restock, 99, 5)


def test_render_empty():
    assert Catalog().render() == (
        "\n======== CATALOGO DE PRODUTOS ========\n"
        "catalogo invalido ou vazio"
        "\n======================================\n"
    )


def test_render_lists_products(catalog):
    text = catalog.render()
    assert text.startswith("\n======== CATALOGO DE PRODUTOS ========\n")
    lines = text.splitlines()
    assert lines[2:4] == [render_product(p) for p in catalog]
    assert text.endswith("======================================\n")