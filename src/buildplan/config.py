"""Server configuration from environment variables."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration loaded from environment variables."""

    host: str
    port: int
    debug: bool
    log_level: str

    @staticmethod
    def from_env() -> "ServerConfig":
        """Load configuration from environment variables."""
        debug = os.environ.get("BUILDPLAN_DEBUG", "false").lower() == "true"
        return ServerConfig(
            host=os.environ.get("BUILDPLAN_HOST", "127.0.0.1"),
            port=int(os.environ.get("BUILDPLAN_PORT", "8080")),
            debug=debug,
            log_level=os.environ.get("BUILDPLAN_LOG_LEVEL", "DEBUG" if debug else "INFO").upper(),
        )
