from datetime import datetime

from pydantic import BaseModel

from app.schemas.common import CAMEL_CONFIG, Int32, ResourceResponse


class CreateMotoRequest(BaseModel):
    placa: str | None = None
    cor: str | None = None
    status: str | None = None
    tempo_limite: Int32 = 0

    model_config = CAMEL_CONFIG

    def is_valid(self) -> bool:
        return bool(self.placa) and bool(self.cor) and bool(self.status)


class UpdateMotoRequest(BaseModel):
    placa: str | None = None
    cor: str | None = None
    status: str | None = None
    tempo_limite: Int32 | None = None

    model_config = CAMEL_CONFIG


class MotoResponse(ResourceResponse):
    id: int
    placa: str
    cor: str
    status: str
    data_entrada: datetime
    tempo_limite: int
