def test_list_products(client, make_product):
    make_product("Test Coffee Mug", sku="TEST-001", price_in_cents=499)
    res = client.get("/api/products")
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 1
    assert body["page"] == 1
    assert body["pageSize"] == 20
    assert body["totalPages"] == 1
    skus = [it["sku"] for it in body["items"]]
    assert skus == ["TEST-001"]
    assert body["items"][0]["priceInCents"] == 499


def test_list_products_filters_and_paginates(client, make_product):
    for i in range(12):
        make_product(f"Shell Jacket {i:02d}", category_id=3, price_in_cents=1000 + i * 300)
    make_product("Trail Runner", category_id=4, price_in_cents=2500)

    res = client.get(
        "/api/products",
        params={
            "categoryId": 3,
            "minPrice": 2000,
            "maxPrice": 4000,
            "pageSize": 3,
            "page": 2,
            "sortBy": "price",
            "sortOrder": "desc",
        },
    )
    assert res.status_code == 200
    body = res.json()
    # prices 2200..4000 -> 7 matches
    assert body["total"] == 7
    assert body["totalPages"] == 3
    assert [it["priceInCents"] for it in body["items"]] == [3100, 2800, 2500]
    assert all(it["categoryId"] == 3 for it in body["items"])


def test_search_param(client, make_product):
    make_product("Alpine Tent", colors=["Forest Green"])
    make_product("Summit Rope", colors=["Olive"])
    res = client.get("/api/products", params={"search": "tent"})
    assert res.status_code == 200
    assert [it["name"] for it in res.json()["items"]] == ["Alpine Tent"]


def test_page_size_is_capped(client):
    assert client.get("/api/products", params={"pageSize": 101}).status_code == 422
    assert client.get("/api/products", params={"page": 0}).status_code == 422
    assert client.get("/api/products", params={"sortBy": "stock"}).status_code == 422
    assert client.get("/api/products", params={"minPrice": -1}).status_code == 422


def test_get_product_by_id(client, make_product):
    p = make_product("Ridgeline Jacket", sizes=["S", "M"])
    res = client.get(f"/api/products/{p.id}")
    assert res.status_code == 200
    body = res.json()
    assert body["sku"] == p.sku
    assert body["sizes"] == ["S", "M"]
    assert "stockQuantity" in body and "weightOz" in body and "createdAt" in body


def test_get_product_not_found(client):
    res = client.get("/api/products/99999")
    assert res.status_code == 404
    assert res.json()["detail"] == "Product not found"


def test_get_product_by_sku(client, make_product):
    make_product("Ridgeline Jacket", sku="RJ-1")
    res = client.get("/api/products/sku/RJ-1")
    assert res.status_code == 200
    assert res.json()["name"] == "Ridgeline Jacket"
    assert client.get("/api/products/sku/NOPE").status_code == 404


def test_suggestions(client, make_product):
    make_product("Alpine Tent")
    make_product("Summit Rope", colors=["Olive"])
    res = client.get("/api/products/suggestions", params={"q": "tent", "limit": 5})
    assert res.status_code == 200
    assert [it["name"] for it in res.json()] == ["Alpine Tent"]

    res = client.get("/api/products/suggestions", params={"q": "t"})
    assert res.status_code == 200
    assert res.json() == []


def test_stats(client, make_product):
    make_product("Alpine Tent")
    res = client.get("/api/stats")
    assert res.status_code == 200
    assert res.json() == {"products": 1, "categories": 8}


def test_suggestion_limit_is_capped_by_settings(client, make_product):
    from storefront.config import settings

    make_product("Alpine Tent")
    ok = client.get(
        "/api/products/suggestions",
        params={"q": "tent", "limit": settings.MAX_SUGGESTION_LIMIT},
    )
    assert ok.status_code == 200
    too_many = client.get(
        "/api/products/suggestions",
        params={"q": "tent", "limit": settings.MAX_SUGGESTION_LIMIT + 1},
    )
    assert too_many.status_code == 422
    assert client.get("/api/products/suggestions", params={"q": "tent", "limit": 0}).status_code == 422
