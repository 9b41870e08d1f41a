from app.models.moto import Moto
from app.models.colaborador import Colaborador
from app.models.alerta import Alerta

__all__ = ["Moto", "Colaborador", "Alerta"]
