from sqlalchemy import Column, Integer, String

from app.database import Base


class Colaborador(Base):
    __tablename__ = "colaboradores"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    nome = Column(String, nullable=False)
    cargo = Column(String, nullable=False)
