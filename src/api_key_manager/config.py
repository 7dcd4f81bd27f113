import os
from pathlib import Path

DEFAULT_STORE_PATH = Path.home() / ".config/api-key-manager/keys.json"

# Environment variable that overrides the default store location
STORE_PATH_ENV = "API_KEY_MANAGER_STORE"


def resolve_store_path(store_path: Path | None = None) -> Path:
    """Return the key store path: explicit path, then environment, then default."""
    if store_path:
        return store_path.expanduser()

    env_path = os.environ.get(STORE_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()

    return DEFAULT_STORE_PATH
