from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8080

    # TLS (both paths required when enabled)
    ssl_enabled: bool = False
    ssl_cert: str = ""
    ssl_key: str = ""

    # Persistence file for registered checks
    repo_path: str = "endpoints.json"

    # Seconds in-flight requests get to finish on shutdown
    shutdown_grace_seconds: int = 10

    # Logging
    log_level: str = "INFO"


settings = Settings()
