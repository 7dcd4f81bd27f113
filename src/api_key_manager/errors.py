class KeyManagerError(Exception):
    """Base class for api-key-manager errors."""


class RepositoryError(KeyManagerError):
    """Raised when stored keys cannot be retrieved."""


class InvalidKeyCollectionError(KeyManagerError):
    """Raised when a key collection breaks its invariants."""
