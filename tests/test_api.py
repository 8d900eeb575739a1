"""
Тесты HTTP слоя: статусы, форма ошибок и сквозной сценарий каталога.
"""

API = "/api/v1"


def _create_category(client, name="Drinks"):
    response = client.post(f"{API}/categories", json={"name": name, "description": "Cold"})
    assert response.status_code == 201
    return response.json()


def _create_product(client, category_id, name="Cola", price=1.5):
    return client.post(
        f"{API}/products",
        json={"name": name, "description": "Soda", "price": price, "category_id": category_id},
    )


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_catalog_scenario(client):
    drinks = _create_category(client)

    response = _create_product(client, drinks["id"])
    assert response.status_code == 201
    cola = response.json()

    response = client.delete(f"{API}/categories/{drinks['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Category deleted successfully"}

    products = client.get(f"{API}/categories/deleted/{drinks['id']}").json()["products"]
    assert [(p["id"], p["deleted"]) for p in products] == [(cola["id"], True)]

    response = client.patch(f"{API}/categories/{drinks['id']}/reactivate")
    assert response.status_code == 200
    assert response.json()["deleted"] is False

    deleted = client.get(f"{API}/products/deleted").json()
    assert [p["id"] for p in deleted] == [cola["id"]]

    response = _create_product(client, drinks["id"])
    assert response.status_code == 409
    assert response.json() == {
        "reason": "A product with this name already exists in this category",
        "statusCode": 409,
    }


def test_category_detail_variants(client):
    drinks = _create_category(client)
    _create_product(client, drinks["id"], "Cola")
    water = _create_product(client, drinks["id"], "Water").json()
    client.delete(f"{API}/products/{water['id']}")

    def names(path):
        return [p["name"] for p in client.get(path).json()["products"]]

    assert names(f"{API}/categories/{drinks['id']}") == ["Cola", "Water"]
    assert names(f"{API}/categories/active/{drinks['id']}") == ["Cola"]
    assert names(f"{API}/categories/deleted/{drinks['id']}") == ["Water"]


def test_category_listings(client):
    drinks = _create_category(client, "Drinks")
    food = _create_category(client, "Food")
    client.delete(f"{API}/categories/{food['id']}")

    assert [c["name"] for c in client.get(f"{API}/categories").json()] == ["Drinks", "Food"]
    assert [c["id"] for c in client.get(f"{API}/categories/active").json()] == [drinks["id"]]
    assert [c["id"] for c in client.get(f"{API}/categories/deleted").json()] == [food["id"]]


def test_duplicate_category_is_409(client):
    _create_category(client)
    response = client.post(f"{API}/categories", json={"name": "Drinks", "description": "x"})
    assert response.status_code == 409
    assert response.json()["statusCode"] == 409


def test_missing_category_is_404(client):
    response = client.get(f"{API}/categories/123")
    assert response.status_code == 404
    assert response.json() == {"reason": "Category not found", "statusCode": 404}


def test_product_in_missing_category_is_404(client):
    response = _create_product(client, 999)
    assert response.status_code == 404
    assert response.json()["reason"] == "Category does not exist"


def test_product_in_deleted_category_is_409(client):
    drinks = _create_category(client)
    client.delete(f"{API}/categories/{drinks['id']}")
    assert _create_product(client, drinks["id"]).status_code == 409


def test_reactivate_active_category_is_409(client):
    drinks = _create_category(client)
    response = client.patch(f"{API}/categories/{drinks['id']}/reactivate")
    assert response.status_code == 409
    assert response.json()["reason"] == "Category is already active"


def test_update_category(client):
    drinks = _create_category(client)
    response = client.put(f"{API}/categories/{drinks['id']}", json={"description": "Fresh"})
    assert response.status_code == 200
    assert response.json()["name"] == "Drinks"
    assert response.json()["description"] == "Fresh"


def test_validation_errors_are_400(client):
    response = client.post(f"{API}/categories", json={"name": "   ", "description": "x"})
    assert response.status_code == 400
    body = response.json()
    assert body["statusCode"] == 400
    assert body["reason"].startswith("name")

    drinks = _create_category(client)
    response = client.post(
        f"{API}/products",
        json={"name": "Cola", "description": "Soda", "category_id": drinks["id"]},
    )
    assert response.status_code == 400

    response = _create_product(client, drinks["id"], price=-1)
    assert response.status_code == 400


def test_user_flow(client):
    response = client.post(
        f"{API}/users",
        json={"name": "Alice", "email": "alice@example.com", "password": "secret"},
    )
    assert response.status_code == 201
    alice = response.json()
    assert alice["role"] == "CLIENT"
    assert "password" not in alice

    response = client.post(
        f"{API}/users/login", json={"email": "alice@example.com", "password": "secret"}
    )
    assert response.status_code == 200
    assert response.json()["id"] == alice["id"]

    response = client.post(
        f"{API}/users/login", json={"email": "alice@example.com", "password": "nope"}
    )
    assert response.status_code == 401
    assert response.json() == {"reason": "Invalid credentials", "statusCode": 401}

    response = client.delete(f"{API}/users/{alice['id']}")
    assert response.json() == {"message": "User marked as deleted"}
    assert client.get(f"{API}/users/{alice['id']}").json()["deleted"] is True


def test_user_with_malformed_email_is_400(client):
    response = client.post(
        f"{API}/users", json={"name": "Bob", "email": "bob-at-example", "password": "p"}
    )
    assert response.status_code == 400


def test_duplicate_user_email_is_409(client):
    payload = {"name": "Alice", "email": "alice@example.com", "password": "secret"}
    assert client.post(f"{API}/users", json=payload).status_code == 201
    assert client.post(f"{API}/users", json=payload).status_code == 409
