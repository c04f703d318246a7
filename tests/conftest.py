import pytest
from fastapi.testclient import TestClient

from site_admin_api.app.core.config import Settings
from site_admin_api.app.main import create_app
from site_admin_api.app.services.ai_service import ContentGenerator

from .fakes import FakeDataStore, FakeIdentityProvider, FakeNotifier

ADMIN_TOKEN = "admin-token"
ALLOWED_ORIGIN = "http://localhost:5173"


@pytest.fixture
def settings():
    return Settings(
        supabase_url="https://project.supabase.co",
        supabase_service_key="service-key",
        allowed_origins=ALLOWED_ORIGIN,
        admin_init_email="admin@intravvel.com",
        admin_init_password="admin123",
        gemini_api_key="",
    )


@pytest.fixture
def store():
    return FakeDataStore()


@pytest.fixture
def identity():
    provider = FakeIdentityProvider()
    provider.add_user("owner@example.com", "s3cret", token=ADMIN_TOKEN)
    return provider


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def generator():
    return ContentGenerator(api_key="", model="gemini-test")


@pytest.fixture
def client(settings, store, identity, notifier, generator):
    app = create_app(
        settings,
        data_store=store,
        identity_provider=identity,
        notifier=notifier,
        content_generator=generator,
    )
    return TestClient(app)


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
