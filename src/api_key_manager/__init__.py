from .models import APIKey, BaseUrl, KeyCollection, KeyName, KeyRepository
from .dto import KeyInfo
from .errors import KeyManagerError, RepositoryError, InvalidKeyCollectionError
from .masking import mask_key
from .list_keys import ListKeysOptions, ListKeysUseCase
from .backends import JsonFileKeyRepository, InMemoryKeyRepository
from .config import resolve_store_path, DEFAULT_STORE_PATH

__all__ = [
    "APIKey",
    "BaseUrl",
    "KeyCollection",
    "KeyName",
    "KeyRepository",
    "KeyInfo",
    "KeyManagerError",
    "RepositoryError",
    "InvalidKeyCollectionError",
    "mask_key",
    "ListKeysOptions",
    "ListKeysUseCase",
    "JsonFileKeyRepository",
    "InMemoryKeyRepository",
    "resolve_store_path",
    "DEFAULT_STORE_PATH",
]
