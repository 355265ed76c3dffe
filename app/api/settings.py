import logging
import os
import socket
from functools import lru_cache

logger = logging.getLogger(__name__)

SLOW_HOSTNAMES = frozenset({"api3", "api6", "api9"})
SLOW_DELAY_SECONDS = 0.5

_TRUTHY = {"1", "true", "yes", "on"}


def resolve_hostname() -> str:
    """Return the machine name, or an empty string if it can't be read."""
    try:
        return socket.gethostname()
    except OSError as e:
        logger.warning("Could not resolve hostname: %s", e)
        return ""


class Settings:
    def __init__(self, **overrides) -> None:
        self.hostname = resolve_hostname()
        self.environment = os.environ.get("API_ENVIRONMENT", "Production")
        self.host = os.environ.get("API_HOST", "0.0.0.0")
        self.port = int(os.environ.get("API_PORT", "80"))
        self.https_redirect = os.environ.get("API_HTTPS_REDIRECT", "").lower() in _TRUTHY
        self.log_level = os.environ.get("API_LOG_LEVEL", "INFO").upper()
        self.slow_hostnames = SLOW_HOSTNAMES
        self.slow_delay = SLOW_DELAY_SECONDS

        for name, value in overrides.items():
            if not hasattr(self, name):
                raise TypeError(f"Unknown setting: {name}")
            setattr(self, name, value)

    @property
    def enable_schema_endpoint(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
