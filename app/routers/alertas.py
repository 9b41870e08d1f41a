import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query, Response

from app.dependencies import EntityId, Store, get_store
from app.models.alerta import Alerta
from app.schemas.alerta import AlertaResponse, CreateAlertaRequest, UpdateAlertaRequest
from app.schemas.common import INT32_MAX, INT32_MIN, PagedResponse
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)

RESOURCE = "alertas"
NOT_FOUND = "Alerta não encontrado"

router = APIRouter(prefix=f"/{RESOURCE}", tags=[RESOURCE])


@router.get("", response_model=PagedResponse[AlertaResponse], summary="Lista alertas paginados")
async def list_alertas(
    page: int = Query(default=1, ge=INT32_MIN, le=INT32_MAX),
    page_size: int | None = Query(default=None, alias="pageSize", ge=INT32_MIN, le=INT32_MAX),
    store: Store = Depends(get_store),
):
    return await paginate(store.alertas, RESOURCE, AlertaResponse, page, page_size)


@router.get("/{alerta_id}", response_model=AlertaResponse, summary="Obtém alerta por ID")
async def get_alerta(alerta_id: EntityId, store: Store = Depends(get_store)):
    alerta = await store.alertas.get(alerta_id)
    if alerta is None:
        raise NotFoundError(NOT_FOUND)
    return AlertaResponse.from_entity(alerta, RESOURCE)


@router.post("", status_code=201, response_model=AlertaResponse, summary="Cria um novo alerta")
async def create_alerta(payload: CreateAlertaRequest, response: Response, store: Store = Depends(get_store)):
    if not payload.is_valid():
        raise BadRequestError("Dados inválidos ou moto não encontrada")
    async with store.moto_refs_lock:
        if not await store.motos.exists(payload.moto_id):
            raise BadRequestError("Dados inválidos ou moto não encontrada")
        alerta = await store.alertas.add(Alerta(
            descricao=payload.descricao,
            moto_id=payload.moto_id,
            data_alerta=datetime.now(),
        ))
    logger.info("Alerta %s created for moto %s", alerta.id, alerta.moto_id)
    response.headers["Location"] = f"/{RESOURCE}/{alerta.id}"
    return AlertaResponse.from_entity(alerta, RESOURCE)


@router.put("/{alerta_id}", response_model=AlertaResponse, summary="Atualiza um alerta")
async def update_alerta(alerta_id: EntityId, payload: UpdateAlertaRequest, store: Store = Depends(get_store)):
    if not await store.alertas.exists(alerta_id):
        raise NotFoundError(NOT_FOUND)
    async with store.moto_refs_lock:
        if payload.moto_id is not None and not await store.motos.exists(payload.moto_id):
            raise BadRequestError("Moto não encontrada")
        alerta = await store.alertas.update(alerta_id, payload.model_dump(exclude_none=True))
    if alerta is None:
        raise NotFoundError(NOT_FOUND)
    logger.info("Alerta %s updated", alerta_id)
    return AlertaResponse.from_entity(alerta, RESOURCE)


@router.delete("/{alerta_id}", status_code=204, summary="Deleta um alerta")
async def delete_alerta(alerta_id: EntityId, store: Store = Depends(get_store)):
    if not await store.alertas.delete(alerta_id):
        raise NotFoundError(NOT_FOUND)
    logger.info("Alerta %s deleted", alerta_id)
