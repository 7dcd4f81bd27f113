from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class KeyInfo:
    """Display-safe view of a stored key."""

    name: str
    masked_key: str
    created_at: str
    is_default: bool
    full_key: str | None = None
    base_url: str | None = None
    note: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the camelCase wire shape, omitting absent fields."""
        data: dict[str, Any] = {"name": self.name, "maskedKey": self.masked_key}
        if self.full_key is not None:
            data["fullKey"] = self.full_key
        if self.base_url is not None:
            data["baseUrl"] = self.base_url
        if self.note is not None:
            data["note"] = self.note
        data["createdAt"] = self.created_at
        data["isDefault"] = self.is_default
        return data
