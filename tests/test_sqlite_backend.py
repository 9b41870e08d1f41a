import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.dependencies import build_sql_store, get_store
from app.main import app


@pytest_asyncio.fixture
async def sql_client():
    store = await build_sql_store("sqlite+aiosqlite://")
    app.dependency_overrides[get_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
    await store.engine.dispose()


@pytest.mark.asyncio
async def test_crud_roundtrip_on_sqlite(sql_client):
    created = await sql_client.post("/motos", json={"placa": "ABC-1234", "cor": "Verde", "status": "Pronta"})
    assert created.status_code == 201
    moto_id = created.json()["id"]

    alerta = await sql_client.post("/alertas", json={"descricao": "Tempo excedido", "motoId": moto_id})
    assert alerta.status_code == 201

    updated = await sql_client.put(f"/motos/{moto_id}", json={"status": "Em uso"})
    assert updated.json()["status"] == "Em uso"
    assert updated.json()["dataEntrada"] == created.json()["dataEntrada"]

    listing = await sql_client.get("/motos")
    assert listing.json()["totalCount"] == 1

    assert (await sql_client.delete(f"/motos/{moto_id}")).status_code == 204
    assert (await sql_client.get(f"/motos/{moto_id}")).status_code == 404

    recreated = await sql_client.post("/motos", json={"placa": "XYZ-9999", "cor": "Azul", "status": "Pronta"})
    assert recreated.json()["id"] == moto_id + 1


@pytest.mark.asyncio
async def test_huge_paging_values_are_rejected_on_sqlite(sql_client):
    listing = await sql_client.get("/motos", params={"page": 10**19})
    lookup = await sql_client.get(f"/alertas/{10**19}")

    assert listing.status_code == 400
    assert listing.json() == "Dados inválidos"
    assert lookup.status_code == 400
