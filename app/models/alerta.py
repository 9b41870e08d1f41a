from sqlalchemy import Column, DateTime, Integer, String

from app.database import Base


class Alerta(Base):
    __tablename__ = "alertas"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    descricao = Column(String, nullable=False)
    # Checked on write only; deleting a moto leaves its alerts in place.
    moto_id = Column(Integer, nullable=False, index=True)
    data_alerta = Column(DateTime, nullable=False)
