from sqlalchemy import Column, DateTime, Integer, String

from app.database import Base


class Moto(Base):
    __tablename__ = "motos"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    placa = Column(String, nullable=False)
    cor = Column(String, nullable=False)
    status = Column(String, nullable=False)
    data_entrada = Column(DateTime, nullable=False)
    tempo_limite = Column(Integer, nullable=False, default=0)
