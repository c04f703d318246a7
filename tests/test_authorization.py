import pytest

from .conftest import ADMIN_TOKEN

PROTECTED_ROUTES = [
    ("post", "/api/v1/services", {"title": "T", "description": "D", "price": 10}),
    ("put", "/api/v1/services/abc", {"title": "T"}),
    ("delete", "/api/v1/services/abc", None),
    ("get", "/api/v1/messages", None),
    ("put", "/api/v1/messages/abc", {"status": "read"}),
    ("delete", "/api/v1/messages/abc", None),
    ("put", "/api/v1/site-content/hero", {"data": {"headline": "Hi"}}),
    ("post", "/api/v1/ai/generate", {"prompt": "hello"}),
    ("post", "/api/v1/upload", None),
]


def _call(client, method, path, body, headers=None):
    kwargs = {"headers": headers or {}}
    if body is not None:
        kwargs["json"] = body
    return client.request(method.upper(), path, **kwargs)


@pytest.mark.parametrize("method,path,body", PROTECTED_ROUTES)
def test_missing_token_is_rejected(client, store, method, path, body):
    response = _call(client, method, path, body)
    assert response.status_code == 401
    assert response.json() == {"error": "Access token required"}
    assert store.calls == 0


@pytest.mark.parametrize("method,path,body", PROTECTED_ROUTES)
def test_invalid_token_is_rejected_differently(client, store, method, path, body):
    response = _call(client, method, path, body, {"Authorization": "Bearer not-a-real-token"})
    assert response.status_code == 403
    assert response.json() == {"error": "Invalid or expired token"}
    assert store.calls == 0


def test_non_bearer_scheme_counts_as_missing(client):
    response = client.get("/api/v1/messages", headers={"Authorization": f"Basic {ADMIN_TOKEN}"})
    assert response.status_code == 401


def test_unreachable_identity_provider_fails_without_detail(client, identity):
    identity.unavailable = True
    response = client.get("/api/v1/messages", headers={"Authorization": f"Bearer {ADMIN_TOKEN}"})
    assert response.status_code == 500
    assert response.json() == {"error": "Authentication failed"}


def test_valid_token_is_verified_once(client, identity, auth_headers):
    response = client.get("/api/v1/messages", headers=auth_headers)
    assert response.status_code == 200
    assert identity.verified_tokens == [ADMIN_TOKEN]


def test_public_routes_do_not_verify_tokens(client, identity):
    assert client.get("/api/v1/services").status_code == 200
    assert client.get("/api/v1/site-content").status_code == 200
    assert client.get("/api/v1/health").status_code == 200
    assert identity.verified_tokens == []
