import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture(autouse=True)
def fresh_store():
    # Collections are process-wide; every test starts from empty ones.
    from app.dependencies import reset_store

    return reset_store()


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def moto(client):
    response = await client.post(
        "/motos",
        json={"placa": "ABC-1234", "cor": "Verde", "status": "Pronta", "tempoLimite": 30},
    )
    return response.json()
