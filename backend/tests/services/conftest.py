"""Service test fixtures — FastAPI test client over ASGI.

Invariants:
    - Every test gets a fresh AsyncClient bound to the app (no network)
    - Accounts travel in the request body, so no state is shared between tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def payment_body():
    """Request body factory with the two default NGN accounts."""
    def _build(instruction: str, accounts: list[dict] | None = None) -> dict:
        return {
            "accounts": accounts or [
                {"id": "ACC-001", "balance": 5000, "currency": "NGN"},
                {"id": "ACC-002", "balance": 1500, "currency": "NGN"},
            ],
            "instruction": instruction,
        }
    return _build
