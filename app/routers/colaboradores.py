import logging

from fastapi import APIRouter, Depends, Query, Response

from app.dependencies import EntityId, Store, get_store
from app.models.colaborador import Colaborador
from app.schemas.colaborador import ColaboradorResponse, CreateColaboradorRequest, UpdateColaboradorRequest
from app.schemas.common import INT32_MAX, INT32_MIN, PagedResponse
from app.utils.exceptions import BadRequestError, NotFoundError
from app.utils.pagination import paginate

logger = logging.getLogger(__name__)

RESOURCE = "colaboradores"
NOT_FOUND = "Colaborador não encontrado"

router = APIRouter(prefix=f"/{RESOURCE}", tags=[RESOURCE])


@router.get("", response_model=PagedResponse[ColaboradorResponse], summary="Lista colaboradores paginados")
async def list_colaboradores(
    page: int = Query(default=1, ge=INT32_MIN, le=INT32_MAX),
    page_size: int | None = Query(default=None, alias="pageSize", ge=INT32_MIN, le=INT32_MAX),
    store: Store = Depends(get_store),
):
    return await paginate(store.colaboradores, RESOURCE, ColaboradorResponse, page, page_size)


@router.get("/{colaborador_id}", response_model=ColaboradorResponse, summary="Obtém colaborador por ID")
async def get_colaborador(colaborador_id: EntityId, store: Store = Depends(get_store)):
    colaborador = await store.colaboradores.get(colaborador_id)
    if colaborador is None:
        raise NotFoundError(NOT_FOUND)
    return ColaboradorResponse.from_entity(colaborador, RESOURCE)


@router.post("", status_code=201, response_model=ColaboradorResponse, summary="Cria um novo colaborador")
async def create_colaborador(
    payload: CreateColaboradorRequest,
    response: Response,
    store: Store = Depends(get_store),
):
    if not payload.is_valid():
        raise BadRequestError()
    colaborador = await store.colaboradores.add(Colaborador(nome=payload.nome, cargo=payload.cargo))
    logger.info("Colaborador %s created", colaborador.id)
    response.headers["Location"] = f"/{RESOURCE}/{colaborador.id}"
    return ColaboradorResponse.from_entity(colaborador, RESOURCE)


@router.put("/{colaborador_id}", response_model=ColaboradorResponse, summary="Atualiza um colaborador")
async def update_colaborador(
    colaborador_id: EntityId,
    payload: UpdateColaboradorRequest,
    store: Store = Depends(get_store),
):
    # Unlike create, empty strings are accepted here.
    colaborador = await store.colaboradores.update(colaborador_id, payload.model_dump(exclude_none=True))
    if colaborador is None:
        raise NotFoundError(NOT_FOUND)
    logger.info("Colaborador %s updated", colaborador_id)
    return ColaboradorResponse.from_entity(colaborador, RESOURCE)


@router.delete("/{colaborador_id}", status_code=204, summary="Deleta um colaborador")
async def delete_colaborador(colaborador_id: EntityId, store: Store = Depends(get_store)):
    if not await store.colaboradores.delete(colaborador_id):
        raise NotFoundError(NOT_FOUND)
    logger.info("Colaborador %s deleted", colaborador_id)
