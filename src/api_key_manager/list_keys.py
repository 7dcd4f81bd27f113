import logging
from dataclasses import dataclass

from .dto import KeyInfo
from .models import APIKey, KeyName, KeyRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListKeysOptions:
    show_full: bool = False


class ListKeysUseCase:
    """List every stored key and flag the default one."""

    def __init__(self, repository: KeyRepository):
        self.repository = repository

    async def execute(self, options: ListKeysOptions | None = None) -> list[KeyInfo]:
        options = options or ListKeysOptions()

        # Repository errors propagate unchanged
        collection = await self.repository.get_all()
        default = collection.get_default()
        default_name = default.name if default else None

        logger.debug(
            "Listing %d keys (default=%s, show_full=%s)",
            len(collection),
            default_name,
            options.show_full,
        )
        return [
            self._to_info(key, default_name, options.show_full)
            for key in collection.get_all()
        ]

    @staticmethod
    def _to_info(key: APIKey, default_name: KeyName | None, show_full: bool) -> KeyInfo:
        return KeyInfo(
            name=key.name.value,
            masked_key=key.masked_key(),
            full_key=key.key if show_full else None,
            base_url=key.base_url.value if key.base_url else None,
            note=key.note,
            created_at=key.created_at.isoformat(),
            is_default=key.name.equals(default_name),
        )
