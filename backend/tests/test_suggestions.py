import pytest

from storefront.repositories.product_repo import ProductRepository
from storefront.services.catalog_service import CatalogService


@pytest.mark.parametrize("query", ["", "t", " t ", "   "])
def test_short_queries_skip_storage(db, monkeypatch, query):
    def _boom(self):
        raise AssertionError("storage should not be queried")

    monkeypatch.setattr(ProductRepository, "all", _boom)
    assert CatalogService(db).suggest(query, limit=5) == []


def test_limit_caps_results(db, make_product):
    for i in range(6):
        make_product(f"Alpine Tent {i}", subcategory="packs", colors=["Black"])
    got = CatalogService(db).suggest("te", limit=3)
    assert [p.name for p in got] == ["Alpine Tent 0", "Alpine Tent 1", "Alpine Tent 2"]


def test_name_match_ranks_first(db, make_product):
    make_product("Trail Cap", sku="COLOR", subcategory="hats", colors=["Teal"])
    make_product("Dome Canopy", sku="SUB", subcategory="tents", colors=["Olive"])
    make_product("Alpine Tent", sku="NAME", subcategory="packs", colors=["Black"])

    got = CatalogService(db).suggest("te", limit=10)
    assert [p.sku for p in got] == ["NAME", "COLOR", "SUB"]


def test_suggestions_ignore_no_match(db, make_product):
    make_product("Summit Rope", subcategory="ropes", colors=["Olive"])
    assert CatalogService(db).suggest("kayak", limit=10) == []


def test_default_limit(db, make_product):
    for i in range(15):
        make_product(f"Camp Mug {i}", subcategory="kitchen")
    assert len(CatalogService(db).suggest("mug")) == 10
