from tests.conftest import API


def _category(client, headers, name="Dairy"):
    return client.post(
        f"{API}/categories", json={"name": name, "description": "desc"}, headers=headers
    ).json()


def _subcategory(client, headers, name, category_id):
    return client.post(
        f"{API}/subcategories",
        json={"name": name, "description": "desc", "category": category_id},
        headers=headers,
    )


def test_create_subcategory_resolves_category_name(client, admin_headers):
    dairy = _category(client, admin_headers)

    resp = _subcategory(client, admin_headers, " Cheese ", dairy["id"])
    assert resp.status_code == 201
    data = resp.json()
    assert data["name"] == "Cheese"
    assert data["category_id"] == dairy["id"]
    assert data["category"] == {"id": dairy["id"], "name": "Dairy"}


def test_create_subcategory_with_missing_category_returns_404(client, admin_headers):
    resp = _subcategory(client, admin_headers, "Cheese", 9999)
    assert resp.status_code == 404
    assert "9999" in resp.json()["detail"]


def test_subcategory_names_are_unique_across_categories(client, admin_headers):
    dairy = _category(client, admin_headers, "Dairy")
    deli = _category(client, admin_headers, "Deli")

    assert _subcategory(client, admin_headers, "Cheese", dairy["id"]).status_code == 201
    assert _subcategory(client, admin_headers, "Cheese", deli["id"]).status_code == 400


def test_get_subcategory_by_id(client, admin_headers):
    dairy = _category(client, admin_headers)
    cheese = _subcategory(client, admin_headers, "Cheese", dairy["id"]).json()

    resp = client.get(f"{API}/subcategories/{cheese['id']}")
    assert resp.status_code == 200
    assert resp.json()["category"]["name"] == "Dairy"

    assert client.get(f"{API}/subcategories/9999").status_code == 404


def test_update_subcategory_changes_parent(client, admin_headers):
    dairy = _category(client, admin_headers, "Dairy")
    deli = _category(client, admin_headers, "Deli")
    cheese = _subcategory(client, admin_headers, "Cheese", dairy["id"]).json()

    resp = client.put(
        f"{API}/subcategories/{cheese['id']}", json={"category": deli["id"]}, headers=admin_headers
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["category"]["name"] == "Deli"
    assert data["name"] == "Cheese"


def test_update_subcategory_with_missing_parent_returns_404(client, admin_headers):
    dairy = _category(client, admin_headers)
    cheese = _subcategory(client, admin_headers, "Cheese", dairy["id"]).json()

    resp = client.put(
        f"{API}/subcategories/{cheese['id']}", json={"category": 9999}, headers=admin_headers
    )
    assert resp.status_code == 404

    unchanged = client.get(f"{API}/subcategories/{cheese['id']}").json()
    assert unchanged["category_id"] == dairy["id"]


def test_list_subcategories_respects_active_flag(client, admin_headers):
    dairy = _category(client, admin_headers)
    cheese = _subcategory(client, admin_headers, "Cheese", dairy["id"]).json()
    milk = _subcategory(client, admin_headers, "Milk", dairy["id"]).json()
    client.delete(f"{API}/subcategories/{milk['id']}", headers=admin_headers)

    default = client.get(f"{API}/subcategories").json()
    assert [s["id"] for s in default] == [cheese["id"]]

    everything = client.get(f"{API}/subcategories", params={"includeInactive": "true"}).json()
    assert [s["id"] for s in everything] == [cheese["id"], milk["id"]]


def test_soft_delete_subcategory_deactivates_its_products(client, admin_headers, catalog):
    cheese = catalog["subcategory"]
    resp = client.delete(f"{API}/subcategories/{cheese.id}", headers=admin_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["subcategory"]["active"] is False
    assert body["productsDeactivated"] == 1

    product = client.get(f"{API}/products/{catalog['product'].id}").json()
    assert product["active"] is False
    # La categoria padre no se toca
    assert client.get(f"{API}/categories/{catalog['category'].id}").json()["active"] is True


def test_hard_delete_subcategory_removes_products(client, admin_headers, catalog):
    cheese_id = catalog["subcategory"].id
    product_id = catalog["product"].id

    resp = client.delete(
        f"{API}/subcategories/{cheese_id}", params={"hardDelete": "true"}, headers=admin_headers
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["productsDeleted"] == 1
    assert body["subcategory"]["name"] == "Cheese"

    assert client.get(f"{API}/subcategories/{cheese_id}").status_code == 404
    assert client.get(f"{API}/products/{product_id}").status_code == 404
