from .json_file import JsonFileKeyRepository
from .memory import InMemoryKeyRepository

__all__ = ["JsonFileKeyRepository", "InMemoryKeyRepository"]
