"""Service settings read from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_VARS: dict[str, str] = {
    "database_url": "CASEWORK_DATABASE_URL",
    "echo_sql": "CASEWORK_ECHO_SQL",
    "cors_origins": "CASEWORK_CORS_ORIGINS",
    "host": "HOST",
    "port": "PORT",
    "log_level": "LOG_LEVEL",
    "log_format": "LOG_FORMAT",
}


class Settings(BaseModel):
    """Runtime settings for the task service."""

    database_url: str = "sqlite+aiosqlite:///tasks.db"
    echo_sql: bool = False
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = "INFO"
    log_format: str = "console"

    model_config = ConfigDict(extra="forbid")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: object) -> object:
        """Accept a comma-separated string of origins."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Build settings from environment variables; unset variables keep their defaults."""
        env = os.environ if environ is None else environ
        values = {name: env[var] for name, var in ENV_VARS.items() if env.get(var)}
        return cls.model_validate(values)
