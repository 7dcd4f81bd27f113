"""JSON file key store backend (read-only)."""

import asyncio
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from ..errors import InvalidKeyCollectionError, RepositoryError
from ..models import APIKey, BaseUrl, KeyCollection, KeyName

logger = logging.getLogger(__name__)


class JsonFileKeyRepository:
    """KeyRepository reading a keys.json store.

    The file holds the ordered key records and the name of the default key::

        {
          "default": "openai",
          "keys": [
            {"name": "openai", "key": "sk-...", "baseUrl": "https://api.openai.com/v1",
             "note": "personal", "createdAt": "2024-05-01T12:00:00+00:00"}
          ]
        }
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    async def get_all(self) -> KeyCollection:
        return await asyncio.to_thread(self._load)

    def _load(self) -> KeyCollection:
        """Read and parse the store file."""
        if not self.path.exists():
            logger.debug("Key store %s does not exist", self.path)
            return KeyCollection()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise RepositoryError(f"Cannot read key store {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise RepositoryError(f"Key store {self.path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise RepositoryError(f"Key store {self.path} must contain a JSON object")

        try:
            keys = tuple(self._parse_key(item) for item in data.get("keys", []))
            default = data.get("default")
            collection = KeyCollection(
                keys=keys, default_name=KeyName(default) if default else None
            )
        except (
            AttributeError,
            KeyError,
            TypeError,
            ValueError,
            InvalidKeyCollectionError,
        ) as e:
            raise RepositoryError(f"Malformed key store {self.path}: {e}") from e

        logger.debug("Loaded %d keys from %s", len(collection), self.path)
        return collection

    @staticmethod
    def _parse_key(item: dict[str, Any]) -> APIKey:
        if not isinstance(item.get("key"), str):
            raise ValueError(f"Key {item.get('name')!r} has no string secret")
        note = item.get("note")
        if note is not None and not isinstance(note, str):
            raise ValueError(f"Key {item.get('name')!r} has a non-string note")
        base_url = item.get("baseUrl")
        return APIKey(
            name=KeyName(item["name"]),
            key=item["key"],
            base_url=BaseUrl(base_url) if base_url else None,
            note=note,
            created_at=_parse_timestamp(item["createdAt"]),
        )


def _parse_timestamp(value: str) -> datetime:
    # fromisoformat only accepts a trailing "Z" from Python 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
