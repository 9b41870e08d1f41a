from pydantic import BaseModel

from app.schemas.common import CAMEL_CONFIG, ResourceResponse


class CreateColaboradorRequest(BaseModel):
    nome: str | None = None
    cargo: str | None = None

    model_config = CAMEL_CONFIG

    def is_valid(self) -> bool:
        return bool(self.nome) and bool(self.cargo)


class UpdateColaboradorRequest(BaseModel):
    nome: str | None = None
    cargo: str | None = None

    model_config = CAMEL_CONFIG


class ColaboradorResponse(ResourceResponse):
    id: int
    nome: str
    cargo: str
