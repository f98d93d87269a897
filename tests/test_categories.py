import pytest

from app.core.exceptions import DuplicateException
from app.crud.category import category as crud_category
from app.models import Category
from tests.conftest import API


def _create(client, headers, name, description="Descripcion"):
    return client.post(
        f"{API}/categories",
        json={"name": name, "description": description},
        headers=headers,
    )


def test_create_category_trims_fields(client, admin_headers):
    resp = _create(client, admin_headers, "  Dairy  ", "  Milk products ")
    assert resp.status_code == 201
    data = resp.json()
    assert data["name"] == "Dairy"
    assert data["description"] == "Milk products"
    assert data["active"] is True
    assert data["id"]
    assert data["created_at"]


def test_create_category_requires_name_and_description(client, admin_headers):
    resp = client.post(f"{API}/categories", json={"name": "   ", "description": "x"}, headers=admin_headers)
    assert resp.status_code == 400

    resp = client.post(f"{API}/categories", json={"name": "Dairy"}, headers=admin_headers)
    assert resp.status_code == 400


def test_duplicate_category_name_is_rejected(client, admin_headers):
    assert _create(client, admin_headers, "Dairy").status_code == 201
    resp = _create(client, admin_headers, " Dairy ")
    assert resp.status_code == 400
    assert "categoria" in resp.json()["detail"]


def test_coordinator_can_create_but_auxiliar_cannot(client, coordinator_headers, auxiliar_headers):
    assert _create(client, coordinator_headers, "Dairy").status_code == 201
    assert _create(client, auxiliar_headers, "Bakery").status_code == 403


def test_create_category_requires_token(client):
    resp = client.post(f"{API}/categories", json={"name": "Dairy", "description": "x"})
    assert resp.status_code == 401


def test_list_categories_newest_first(client, admin_headers):
    for name in ("First", "Second", "Third"):
        _create(client, admin_headers, name)

    resp = client.get(f"{API}/categories")
    assert resp.status_code == 200
    assert [c["name"] for c in resp.json()] == ["Third", "Second", "First"]


def test_list_categories_hides_inactive_unless_requested(client, admin_headers):
    keep = _create(client, admin_headers, "Keep").json()
    gone = _create(client, admin_headers, "Gone").json()
    client.delete(f"{API}/categories/{gone['id']}", headers=admin_headers)

    default = client.get(f"{API}/categories").json()
    assert [c["id"] for c in default] == [keep["id"]]
    assert all(c["active"] for c in default)

    everything = client.get(f"{API}/categories", params={"includeInactive": "true"}).json()
    assert {c["id"] for c in everything} == {keep["id"], gone["id"]}


def test_get_category_by_id_even_if_inactive(client, admin_headers):
    created = _create(client, admin_headers, "Dairy").json()
    client.delete(f"{API}/categories/{created['id']}", headers=admin_headers)

    resp = client.get(f"{API}/categories/{created['id']}")
    assert resp.status_code == 200
    assert resp.json()["active"] is False


def test_get_missing_category_returns_404(client):
    resp = client.get(f"{API}/categories/9999")
    assert resp.status_code == 404


def test_partial_update_keeps_name(client, admin_headers):
    created = _create(client, admin_headers, "Dairy", "Old").json()

    resp = client.put(
        f"{API}/categories/{created['id']}",
        json={"description": "  New description "},
        headers=admin_headers,
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Dairy"
    assert data["description"] == "New description"


def test_update_to_existing_name_is_rejected(client, admin_headers):
    _create(client, admin_headers, "Dairy")
    bakery = _create(client, admin_headers, "Bakery").json()

    resp = client.put(f"{API}/categories/{bakery['id']}", json={"name": "Dairy"}, headers=admin_headers)
    assert resp.status_code == 400


def test_update_keeping_own_name_is_allowed(client, admin_headers):
    dairy = _create(client, admin_headers, "Dairy").json()

    resp = client.put(f"{API}/categories/{dairy['id']}", json={"name": "Dairy"}, headers=admin_headers)
    assert resp.status_code == 200


def test_update_missing_category_returns_404(client, admin_headers):
    resp = client.put(f"{API}/categories/9999", json={"name": "X"}, headers=admin_headers)
    assert resp.status_code == 404


def test_delete_requires_admin(client, coordinator_headers, admin_headers):
    created = _create(client, admin_headers, "Dairy").json()
    resp = client.delete(f"{API}/categories/{created['id']}", headers=coordinator_headers)
    assert resp.status_code == 403


def test_delete_missing_category_returns_404(client, admin_headers):
    resp = client.delete(f"{API}/categories/9999", headers=admin_headers)
    assert resp.status_code == 404
    resp = client.delete(f"{API}/categories/9999", params={"hardDelete": "true"}, headers=admin_headers)
    assert resp.status_code == 404


def test_hard_delete_category_reports_removed_descendants(client, admin_headers, catalog):
    dairy_id = catalog["category"].id

    resp = client.delete(
        f"{API}/categories/{dairy_id}", params={"hardDelete": "true"}, headers=admin_headers
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["category"]["name"] == "Dairy"
    assert body["subcategoriesDeleted"] == 1
    assert body["productsDeleted"] == 1
    assert "subcategoriesDeactivated" not in body
    assert client.get(f"{API}/categories/{dairy_id}").status_code == 404


def test_unique_index_rejects_duplicate_without_precheck(db):
    crud_category.create(db, obj_in={"name": "Dairy", "description": "desc"})

    with pytest.raises(DuplicateException):
        crud_category.create(db, obj_in={"name": "Dairy", "description": "other"})

    # La sesión sigue utilizable tras el rollback
    crud_category.create(db, obj_in={"name": "Bakery", "description": "desc"})
    assert sorted(c.name for c in db.query(Category).all()) == ["Bakery", "Dairy"]
