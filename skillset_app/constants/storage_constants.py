"""Key-value storage configuration for the identity store."""

from pathlib import Path

AUTH_STORAGE_KEY: str = "auth-storage"
AUTH_STORAGE_VERSION: int = 0
DEFAULT_STORAGE_DIR: Path = Path.home() / ".skillset"

SEED_PASSWORD: str = "password123"
