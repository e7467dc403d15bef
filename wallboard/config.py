"""
Service Configuration

Environment-based settings for the wallboard service.

Environment variables (a .env file in the working directory is honoured):
    WALLBOARD_HOST: Bind address (default "0.0.0.0")
    WALLBOARD_PORT: Listening port (default 3001)
    WALLBOARD_LOG_LEVEL: Logging level name (default "INFO")
    WALLBOARD_CORS_ORIGINS: Comma-separated allowed origins (default "*")
    WALLBOARD_SEED: "false" to start with no agents
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

DEFAULT_PORT = 3001


@dataclass
class ServiceSettings:
    """
    Configuration for the wallboard service.

    Attributes:
        host: Address uvicorn binds to
        port: Port uvicorn listens on
        log_level: Root logging level
        cors_origins: Origins allowed by the CORS middleware
        seed: Whether the registry starts with the seed agents
    """
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])
    seed: bool = True


def _parse_origins(value: str) -> list[str]:
    origins = [o.strip() for o in value.split(",") if o.strip()]
    return origins or ["*"]


def settings_from_env() -> ServiceSettings:
    """
    Create ServiceSettings from environment variables.

    Raises:
        ValueError: If WALLBOARD_PORT is not an integer
    """
    load_dotenv()

    return ServiceSettings(
        host=os.getenv("WALLBOARD_HOST", "0.0.0.0"),
        port=int(os.getenv("WALLBOARD_PORT", str(DEFAULT_PORT))),
        log_level=os.getenv("WALLBOARD_LOG_LEVEL", "INFO").upper(),
        cors_origins=_parse_origins(os.getenv("WALLBOARD_CORS_ORIGINS", "*")),
        seed=os.getenv("WALLBOARD_SEED", "true").lower() != "false",
    )
