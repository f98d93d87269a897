from tests.conftest import API


def _hierarchy(client, headers):
    dairy = client.post(
        f"{API}/categories", json={"name": "Dairy", "description": "desc"}, headers=headers
    ).json()
    cheese = client.post(
        f"{API}/subcategories",
        json={"name": "Cheese", "description": "desc", "category": dairy["id"]},
        headers=headers,
    ).json()
    return dairy, cheese


def _product_body(dairy, cheese, **overrides):
    body = {
        "name": "Cheddar",
        "description": "Aged cheddar",
        "price": 5,
        "stock": 10,
        "category": dairy["id"],
        "subcategory": cheese["id"],
        "images": ["https://cdn.example.com/cheddar-1.jpg", "https://cdn.example.com/cheddar-2.jpg"],
    }
    body.update(overrides)
    return body


def test_create_product_records_creator_and_references(client, coordinator_headers):
    dairy, cheese = _hierarchy(client, coordinator_headers)

    resp = client.post(f"{API}/products", json=_product_body(dairy, cheese), headers=coordinator_headers)
    assert resp.status_code == 201
    data = resp.json()
    assert data["price"] == 5
    assert data["stock"] == 10
    assert data["category"] == {"id": dairy["id"], "name": "Dairy"}
    assert data["subcategory"] == {"id": cheese["id"], "name": "Cheese"}
    assert data["created_by"]["username"] == "coord"
    assert data["images"] == [
        "https://cdn.example.com/cheddar-1.jpg",
        "https://cdn.example.com/cheddar-2.jpg",
    ]


def test_negative_price_or_stock_is_rejected(client, admin_headers):
    dairy, cheese = _hierarchy(client, admin_headers)

    resp = client.post(f"{API}/products", json=_product_body(dairy, cheese, price=-1), headers=admin_headers)
    assert resp.status_code == 400
    resp = client.post(f"{API}/products", json=_product_body(dairy, cheese, stock=-3), headers=admin_headers)
    assert resp.status_code == 400


def test_missing_references_return_404(client, admin_headers):
    dairy, cheese = _hierarchy(client, admin_headers)

    resp = client.post(f"{API}/products", json=_product_body(dairy, cheese, category=9999), headers=admin_headers)
    assert resp.status_code == 404
    resp = client.post(f"{API}/products", json=_product_body(dairy, cheese, subcategory=9999), headers=admin_headers)
    assert resp.status_code == 404


def test_duplicate_product_name_is_rejected(client, admin_headers):
    dairy, cheese = _hierarchy(client, admin_headers)

    assert client.post(f"{API}/products", json=_product_body(dairy, cheese), headers=admin_headers).status_code == 201
    resp = client.post(
        f"{API}/products", json=_product_body(dairy, cheese, name=" Cheddar "), headers=admin_headers
    )
    assert resp.status_code == 400


def test_partial_update_product(client, admin_headers):
    dairy, cheese = _hierarchy(client, admin_headers)
    created = client.post(f"{API}/products", json=_product_body(dairy, cheese), headers=admin_headers).json()

    resp = client.put(f"{API}/products/{created['id']}", json={"stock": 3}, headers=admin_headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["stock"] == 3
    assert data["name"] == "Cheddar"
    assert data["price"] == 5


def test_list_products_filters(client, admin_headers):
    dairy, cheese = _hierarchy(client, admin_headers)
    milk = client.post(
        f"{API}/subcategories",
        json={"name": "Milk", "description": "desc", "category": dairy["id"]},
        headers=admin_headers,
    ).json()
    client.post(f"{API}/products", json=_product_body(dairy, cheese), headers=admin_headers)
    client.post(
        f"{API}/products", json=_product_body(dairy, milk, name="Whole milk"), headers=admin_headers
    )

    assert len(client.get(f"{API}/products").json()) == 2
    only_milk = client.get(f"{API}/products", params={"subcategory": milk["id"]}).json()
    assert [p["name"] for p in only_milk] == ["Whole milk"]


def test_soft_and_hard_delete_product(client, admin_headers):
    dairy, cheese = _hierarchy(client, admin_headers)
    created = client.post(f"{API}/products", json=_product_body(dairy, cheese), headers=admin_headers).json()

    resp = client.delete(f"{API}/products/{created['id']}", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["product"]["active"] is False
    assert client.get(f"{API}/products").json() == []
    assert len(client.get(f"{API}/products", params={"includeInactive": "true"}).json()) == 1

    resp = client.delete(
        f"{API}/products/{created['id']}", params={"hardDelete": "true"}, headers=admin_headers
    )
    assert resp.status_code == 200
    assert client.get(f"{API}/products/{created['id']}").status_code == 404
