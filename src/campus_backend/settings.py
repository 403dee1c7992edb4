import os
import threading
from typing import Optional


def require_env(name: str) -> str:
    """Return a mandatory environment variable, failing loudly when it is unset."""
    value = os.environ.get(name)
    if not value:
        from campus_backend.exceptions import ConfigurationException
        raise ConfigurationException(
            detail=f"Missing environment variable: {name}",
            context={"variable": name},
        )
    return value


class BackendSettings:
    _instance = None
    _lock = threading.Lock()

    def __init__(self):
        self.DEBUG_MODE = os.environ.get("DEBUG_MODE", "development")

        # Document store backing the repositories
        self.DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./campus.db")
        self.DATABASE_ECHO = os.environ.get("DATABASE_ECHO", "false").lower() in ["true", "1", "yes", "on"]

        # Cache defaults; per-collection overrides are read on demand (CACHE_TTL_<KEY>)
        self.CACHE_DEFAULT_TTL = float(os.environ.get("CACHE_DEFAULT_TTL", "600"))

        # How deep relation fields are joined: 2 = own relations plus one nested level
        self.POPULATION_DEPTH = int(os.environ.get("POPULATION_DEPTH", "2"))

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(BackendSettings, cls).__new__(cls)
        return cls._instance

    @property
    def include_debug_info(self) -> bool:
        return self.DEBUG_MODE == "development"

    def cache_ttl_for(self, cache_key: str, default: Optional[float] = None) -> float:
        """
        Resolve the TTL (seconds) for a cache key.

        CACHE_TTL_USERS=60 overrides the TTL of the "users" entry.
        """
        override = os.environ.get(f"CACHE_TTL_{cache_key.upper()}")
        if override is not None:
            return float(override)
        return default if default is not None else self.CACHE_DEFAULT_TTL


settings = BackendSettings()
