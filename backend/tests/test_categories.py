def test_list_categories(client):
    res = client.get("/api/categories")
    assert res.status_code == 200
    names = [c["name"] for c in res.json()]
    assert len(names) == 8
    assert names == sorted(names)


def test_get_category_by_slug(client):
    res = client.get("/api/categories/apparel")
    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Apparel"
    assert body["id"] == 3


def test_unknown_category(client):
    assert client.get("/api/categories/nope").status_code == 404
    res = client.get("/api/categories/nope/products")
    assert res.status_code == 404
    assert res.json()["detail"] == "Category not found"


def test_category_products(client, make_product):
    make_product("Shell Jacket", sku="IN", category_id=3)
    make_product("Trail Runner", sku="OUT", category_id=4)
    res = client.get("/api/categories/apparel/products")
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 1
    assert [it["sku"] for it in body["items"]] == ["IN"]


def test_init_db_seeding_is_idempotent(db):
    from storefront.db import init_db
    from storefront.models.category import Category

    init_db(reset=False)
    assert db.query(Category).count() == 8
