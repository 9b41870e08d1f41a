import asyncio

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.dependencies import build_memory_store, build_sql_store, get_store
from app.main import app

MOTO = {"placa": "ABC-1234", "cor": "Verde", "status": "Pronta"}


@pytest_asyncio.fixture(params=["memory", "sqlite"])
async def backend(request):
    if request.param == "memory":
        store = build_memory_store()
    else:
        store = await build_sql_store("sqlite+aiosqlite://")
    app.dependency_overrides[get_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield store, client
    app.dependency_overrides.clear()
    if store.engine is not None:
        await store.engine.dispose()


def slow_down(monkeypatch, store, method: str, moto_present: list[bool]):
    """Make alerta writes yield to the event loop and record whether their moto still exists."""
    original = getattr(store.alertas, method)

    async def slow(*args):
        for _ in range(5):
            await asyncio.sleep(0)
        moto_id = args[0].moto_id if method == "add" else args[1]["moto_id"]
        moto_present.append(await store.motos.exists(moto_id))
        return await original(*args)

    monkeypatch.setattr(store.alertas, method, slow)


async def delete_after(client, path: str, yields: int):
    for _ in range(yields):
        await asyncio.sleep(0)
    return await client.delete(path)


@pytest.mark.asyncio
@pytest.mark.parametrize("yields", [0, 2, 5, 9, 12, 20])
async def test_create_alerta_racing_moto_delete(backend, monkeypatch, yields):
    store, client = backend
    moto = (await client.post("/motos", json=MOTO)).json()
    moto_present: list[bool] = []
    slow_down(monkeypatch, store, "add", moto_present)

    created, deleted = await asyncio.gather(
        client.post("/alertas", json={"descricao": "Tempo excedido", "motoId": moto["id"]}),
        delete_after(client, f"/motos/{moto['id']}", yields),
    )

    assert deleted.status_code == 204
    if created.status_code == 201:
        assert moto_present == [True]
    else:
        assert created.status_code == 400
        assert moto_present == []


@pytest.mark.asyncio
@pytest.mark.parametrize("yields", [0, 2, 5, 9, 12, 20])
async def test_update_alerta_racing_moto_delete(backend, monkeypatch, yields):
    store, client = backend
    first = (await client.post("/motos", json=MOTO)).json()
    second = (await client.post("/motos", json={**MOTO, "placa": "DEF-5678"})).json()
    alerta = (await client.post("/alertas", json={"descricao": "Tempo excedido", "motoId": first["id"]})).json()
    moto_present: list[bool] = []
    slow_down(monkeypatch, store, "update", moto_present)

    updated, deleted = await asyncio.gather(
        client.put(f"/alertas/{alerta['id']}", json={"motoId": second["id"]}),
        delete_after(client, f"/motos/{second['id']}", yields),
    )

    assert deleted.status_code == 204
    if updated.status_code == 200:
        assert moto_present == [True]
    else:
        assert updated.status_code == 400
        assert moto_present == []
