from ..models import KeyCollection


class InMemoryKeyRepository:
    """KeyRepository serving a fixed snapshot."""

    def __init__(self, collection: KeyCollection | None = None):
        self.collection = collection if collection is not None else KeyCollection()

    async def get_all(self) -> KeyCollection:
        return self.collection
