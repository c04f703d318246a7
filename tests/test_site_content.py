def test_upsert_inserts_then_updates(client, store, auth_headers):
    first = client.put("/api/v1/site-content/hero", json={"data": {"headline": "Hello"}}, headers=auth_headers)
    assert first.status_code == 200
    created = first.json()
    assert created["section"] == "hero"
    assert created["data"] == {"headline": "Hello"}

    second = client.put("/api/v1/site-content/hero", json={"data": {"headline": "Welcome"}}, headers=auth_headers)
    assert second.status_code == 200
    updated = second.json()
    assert updated["id"] == created["id"]
    assert updated["data"] == {"headline": "Welcome"}
    assert updated["updated_at"]
    assert len(store.tables["site_content"]) == 1


def test_get_all_sections(client, store):
    store.seed("site_content", section="hero", data={"headline": "Hi"})
    store.seed("site_content", section="about", data={"text": "Us"})
    response = client.get("/api/v1/site-content")
    assert response.status_code == 200
    assert {row["section"] for row in response.json()} == {"hero", "about"}


def test_get_one_section(client, store):
    store.seed("site_content", section="hero", data={"headline": "Hi"})
    response = client.get("/api/v1/site-content", params={"section": "hero"})
    assert response.status_code == 200
    assert response.json()["data"] == {"headline": "Hi"}


def test_get_unknown_section_is_null(client):
    response = client.get("/api/v1/site-content", params={"section": "footer"})
    assert response.status_code == 200
    assert response.json() is None


def test_upsert_requires_payload(client, store, auth_headers):
    response = client.put("/api/v1/site-content/hero", json={}, headers=auth_headers)
    assert response.status_code == 400
    assert store.calls == 0


def test_upsert_store_failure(client, store, auth_headers):
    store.fail = True
    response = client.put("/api/v1/site-content/hero", json={"data": {}}, headers=auth_headers)
    assert response.status_code == 500
    assert response.json() == {"error": "Failed to update content"}
