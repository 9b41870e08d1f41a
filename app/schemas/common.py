from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from app.schemas.link import Link
from app.utils.links import generate_links

# JSON uses camelCase (tempoLimite, motoId, totalCount); Python uses snake_case.
CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Clients send 32-bit JSON numbers; numeric strings and out-of-range values are rejected.
Int32 = Annotated[int, Field(strict=True, ge=INT32_MIN, le=INT32_MAX)]

T = TypeVar("T")


class ResourceResponse(BaseModel):
    links: dict[str, Link] = {}

    model_config = CAMEL_CONFIG

    @classmethod
    def from_entity(cls, entity: Any, resource: str):
        fields = {name: getattr(entity, name) for name in cls.model_fields if name != "links"}
        return cls(**fields, links=generate_links(resource, entity.id))


class PagedResponse(BaseModel, Generic[T]):
    data: list[T]
    total_count: int
    page: int
    page_size: int

    model_config = CAMEL_CONFIG
