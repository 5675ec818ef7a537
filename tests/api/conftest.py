"""API test fixtures — FastAPI app over a tmp_path storage.

Invariants:
    - get_storage dependency overridden to the per-test JsonStorageService
    - The storage singleton is swapped too, so the readiness probe sees the same store
    - Lifespan is not run: logging and the real data directory stay untouched
"""

import pytest
from httpx import ASGITransport, AsyncClient

from customer_images.api.dependencies import get_storage
from customer_images.main import app


@pytest.fixture
async def client(storage_singleton):
    app.dependency_overrides[get_storage] = lambda: storage_singleton
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def customer_id(client) -> str:
    res = await client.post(
        "/api/v1/customers",
        json={"name": "Jane Doe", "email": "jane@example.com"},
    )
    assert res.status_code == 201
    return res.json()["id"]
