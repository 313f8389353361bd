"""Nested pydantic-settings configuration.

Only logging setup and ``StructlogObserver.from_config`` read settings. The
read, write and link functions are configured purely through their arguments.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic_settings import BaseSettings


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``JSONFS_OBSERVABILITY_`` prefix::

        export JSONFS_OBSERVABILITY_LOG_LEVEL=DEBUG
        export JSONFS_OBSERVABILITY_JSON_LOGS=true

    ``json_logs`` left unset means JSON lines when stderr is not a TTY.
    """

    model_config = {"env_prefix": "JSONFS_OBSERVABILITY_"}

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_logs: Optional[bool] = None
    timings: bool = True


class JsonFsSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    observability: ObservabilityConfig = ObservabilityConfig()
