"""Process configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    svgcss_log_level: str = "info"

    # Optimizer backend used when a transform does not name one
    svgcss_optimizer: str = "minify"
    svgcss_svgo_binary: str = "svgo"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging(config: Settings | None = None) -> None:
    """Install a root handler at the configured level. Hosts call this, never the library."""
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.svgcss_log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
