from app.repositories.base import Repository
from app.repositories.memory import MemoryRepository
from app.repositories.sql import SqlRepository

__all__ = ["Repository", "MemoryRepository", "SqlRepository"]
