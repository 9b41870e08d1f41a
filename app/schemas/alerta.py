from datetime import datetime

from pydantic import BaseModel

from app.schemas.common import CAMEL_CONFIG, Int32, ResourceResponse


class CreateAlertaRequest(BaseModel):
    descricao: str | None = None
    moto_id: Int32 = 0

    model_config = CAMEL_CONFIG

    def is_valid(self) -> bool:
        """Field checks only; the moto itself is looked up by the handler."""
        return bool(self.descricao) and self.moto_id > 0


class UpdateAlertaRequest(BaseModel):
    descricao: str | None = None
    moto_id: Int32 | None = None

    model_config = CAMEL_CONFIG


class AlertaResponse(ResourceResponse):
    id: int
    descricao: str
    moto_id: int
    data_alerta: datetime
