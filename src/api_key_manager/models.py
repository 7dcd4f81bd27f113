from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from abc import abstractmethod

from .errors import InvalidKeyCollectionError
from .masking import mask_key


@dataclass(frozen=True)
class KeyName:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("Key name must not be empty")

    def equals(self, other: "KeyName | None") -> bool:
        """Compare by value; a missing comparand is never equal."""
        if other is None:
            return False
        return self.value == other.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BaseUrl:
    value: str

    def __post_init__(self):
        if not self.value.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must use http or https: {self.value}")


@dataclass(frozen=True)
class APIKey:
    name: KeyName
    key: str
    created_at: datetime
    base_url: BaseUrl | None = None
    note: str | None = None

    def masked_key(self) -> str:
        return mask_key(self.key)


@dataclass(frozen=True)
class KeyCollection:
    """Ordered snapshot of stored keys with an optional default."""

    keys: tuple[APIKey, ...] = ()
    default_name: KeyName | None = None
    _by_name: dict[str, APIKey] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        by_name: dict[str, APIKey] = {}
        for key in self.keys:
            if key.name.value in by_name:
                raise InvalidKeyCollectionError(f"Duplicate key name: {key.name}")
            by_name[key.name.value] = key
        if self.default_name is not None and self.default_name.value not in by_name:
            raise InvalidKeyCollectionError(
                f"Default key is not in the collection: {self.default_name}"
            )
        object.__setattr__(self, "_by_name", by_name)

    def get_all(self) -> list[APIKey]:
        return list(self.keys)

    def get_default(self) -> APIKey | None:
        if self.default_name is None:
            return None
        return self._by_name[self.default_name.value]

    def __len__(self) -> int:
        return len(self.keys)


class KeyRepository(Protocol):
    @abstractmethod
    async def get_all(self) -> KeyCollection: ...
