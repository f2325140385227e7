"""
Nainaland Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Every test gets its own seeded store and its own app, so records
       created by one test (and the rate limiter's memory) never leak into
       the next.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── storage:      MemStorage with the admin account and sample catalog
    ├── empty_storage: MemStorage with nothing in it
    ├── app:          FastAPI app built around `storage`
    ├── test_client:  HTTPX AsyncClient talking to `app`
    ├── admin_token:  Bearer token for the seeded admin
    └── auth_headers: {"Authorization": "Bearer <admin_token>"}
"""

import os

# Override settings for testing BEFORE any package imports
# Why: settings is a module-level singleton read at import time
os.environ["BCRYPT_ROUNDS"] = "4"  # bcrypt minimum; keeps hashing fast
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin123"
os.environ["SEED_SAMPLE_DATA"] = "true"
os.environ["RATE_LIMIT_REQUESTS"] = "30"
os.environ["RATE_LIMIT_WINDOW"] = "3600"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from nainaland.main import create_app
from nainaland.security import create_access_token
from nainaland.seed import seed_admin, seed_sample_data
from nainaland.storage import MemStorage

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def empty_storage():
    """A store with no records and fresh id counters."""
    storage = MemStorage()
    yield storage
    storage.clear()


@pytest.fixture
def storage(empty_storage):
    """
    A store seeded exactly the way create_app() seeds its own.

    Seed ids: properties 1-6, blog posts 1-3, testimonials 1-3, admin user 1.
    """
    seed_admin(empty_storage, ADMIN_USERNAME, ADMIN_PASSWORD)
    seed_sample_data(empty_storage)
    return empty_storage


@pytest.fixture
def app(storage):
    return create_app(storage=storage)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def admin_token(storage):
    admin = storage.get_user_by_username(ADMIN_USERNAME)
    return create_access_token(admin.id)


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def sample_property_payload():
    """A valid POST /api/properties body in wire (camelCase) format."""
    return {
        "title": "Riverside Farm Plot",
        "description": "Level farm plot with river frontage and a mango orchard.",
        "price": 4_200_000,
        "location": "Kanakapura, Bangalore",
        "size": 3,
        "sizeUnit": "Acres",
        "features": ["River Frontage", "Mango Orchard"],
        "images": ["https://example.com/riverside.jpg"],
        "isFeatured": False,
        "propertyType": "Agricultural",
    }


@pytest.fixture
def sample_message_payload():
    """A valid contact form submission."""
    return {
        "name": "Kavya Rao",
        "email": "kavya@example.com",
        "phone": "9876543210",
        "interest": "Agricultural",
        "message": "Interested in farmland near Mysore. Please call back.",
    }
