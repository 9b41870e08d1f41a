import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query, Response

from app.dependencies import EntityId, Store, get_store
from app.models.moto import Moto
from app.schemas.common import INT32_MAX, INT32_MIN, PagedResponse
from app.schemas.moto import CreateMotoRequest, MotoResponse, UpdateMotoRequest
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)

RESOURCE = "motos"
NOT_FOUND = "Moto não encontrada"

router = APIRouter(prefix=f"/{RESOURCE}", tags=[RESOURCE])


@router.get("", response_model=PagedResponse[MotoResponse], summary="Lista motos paginadas")
async def list_motos(
    page: int = Query(default=1, ge=INT32_MIN, le=INT32_MAX),
    page_size: int | None = Query(default=None, alias="pageSize", ge=INT32_MIN, le=INT32_MAX),
    store: Store = Depends(get_store),
):
    return await paginate(store.motos, RESOURCE, MotoResponse, page, page_size)


@router.get("/{moto_id}", response_model=MotoResponse, summary="Obtém moto por ID")
async def get_moto(moto_id: EntityId, store: Store = Depends(get_store)):
    moto = await store.motos.get(moto_id)
    if moto is None:
        raise NotFoundError(NOT_FOUND)
    return MotoResponse.from_entity(moto, RESOURCE)


@router.post("", status_code=201, response_model=MotoResponse, summary="Cria uma nova moto")
async def create_moto(payload: CreateMotoRequest, response: Response, store: Store = Depends(get_store)):
    if not payload.is_valid():
        raise BadRequestError()
    moto = await store.motos.add(Moto(
        placa=payload.placa,
        cor=payload.cor,
        status=payload.status,
        data_entrada=datetime.now(),
        tempo_limite=payload.tempo_limite,
    ))
    logger.info("Moto %s created (placa=%s)", moto.id, moto.placa)
    response.headers["Location"] = f"/{RESOURCE}/{moto.id}"
    return MotoResponse.from_entity(moto, RESOURCE)


@router.put("/{moto_id}", response_model=MotoResponse, summary="Atualiza uma moto")
async def update_moto(moto_id: EntityId, payload: UpdateMotoRequest, store: Store = Depends(get_store)):
    moto = await store.motos.update(moto_id, payload.model_dump(exclude_none=True))
    if moto is None:
        raise NotFoundError(NOT_FOUND)
    logger.info("Moto %s updated", moto_id)
    return MotoResponse.from_entity(moto, RESOURCE)


@router.delete("/{moto_id}", status_code=204, summary="Deleta uma moto")
async def delete_moto(moto_id: EntityId, store: Store = Depends(get_store)):
    async with store.moto_refs_lock:
        deleted = await store.motos.delete(moto_id)
    if not deleted:
        raise NotFoundError(NOT_FOUND)
    logger.info("Moto %s deleted", moto_id)
