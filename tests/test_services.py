def test_list_empty_catalog(client):
    response = client.get("/api/v1/services")
    assert response.status_code == 200
    assert response.json() == []


def test_list_newest_first(client, store):
    older = store.seed("services", title="Old", description="d", price=1, created_at="2024-01-01T00:00:00+00:00")
    newer = store.seed("services", title="New", description="d", price=2, created_at="2024-02-01T00:00:00+00:00")
    response = client.get("/api/v1/services")
    assert [row["id"] for row in response.json()] == [newer["id"], older["id"]]


def test_create_with_required_fields_only(client, store, auth_headers):
    response = client.post(
        "/api/v1/services",
        json={"title": "T", "description": "D", "price": 10},
        headers=auth_headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert body["title"] == "T"
    assert body["price"] == 10
    assert body["duration"] is None
    assert body["featured"] is False
    assert body["id"]
    assert body["created_at"]
    assert len(store.tables["services"]) == 1


def test_create_without_price_never_reaches_store(client, store, auth_headers):
    response = client.post(
        "/api/v1/services",
        json={"title": "T", "description": "D"},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: price"}
    assert store.calls == 0


def test_create_with_blank_title_is_rejected(client, store, auth_headers):
    response = client.post(
        "/api/v1/services",
        json={"title": "  ", "description": "D", "price": 5},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert store.calls == 0


def test_create_with_malformed_price_is_a_400(client, store, auth_headers):
    response = client.post(
        "/api/v1/services",
        json={"title": "T", "description": "D", "price": "cheap"},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert "price" in response.json()["error"]
    assert store.calls == 0


def test_get_existing_and_missing(client, store):
    row = store.seed("services", title="Tour", description="d", price=3)
    assert client.get(f"/api/v1/services/{row['id']}").json()["title"] == "Tour"

    response = client.get("/api/v1/services/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Service not found"}


def test_update_is_partial_and_stamps_updated_at(client, store, auth_headers):
    row = store.seed("services", title="Tour", description="d", price=3, featured=False)
    response = client.put(
        f"/api/v1/services/{row['id']}",
        json={"price": 4.5, "featured": True},
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Tour"
    assert body["price"] == 4.5
    assert body["featured"] is True
    assert body["updated_at"]


def test_update_unknown_id_is_an_upstream_failure(client, auth_headers):
    response = client.put("/api/v1/services/nope", json={"price": 1}, headers=auth_headers)
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to update service"}


def test_delete_reports_success_whether_or_not_the_row_exists(client, store, auth_headers):
    row = store.seed("services", title="Tour", description="d", price=3)
    existing = client.delete(f"/api/v1/services/{row['id']}", headers=auth_headers)
    missing = client.delete("/api/v1/services/never-existed", headers=auth_headers)
    assert existing.status_code == missing.status_code == 200
    assert existing.json() == missing.json() == {"message": "Service deleted successfully"}
    assert store.tables["services"] == []


def test_store_failure_is_generic(client, store):
    store.fail = True
    response = client.get("/api/v1/services")
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch services"}
    assert "connection refused" not in response.text
