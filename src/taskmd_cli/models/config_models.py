"""Configuration models for taskmd.

The configuration is persisted as JSON and loaded into these models by
``taskmd_cli.services.config_service``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Where task documents live."""

    root: str = Field(default="tasks", description="Task tree root directory")
    template: str | None = Field(
        default=None, description="Optional template file for new tasks"
    )

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("root cannot be empty")
        return v.strip()

    @field_validator("template")
    @classmethod
    def blank_template_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip() or v.strip().lower() == "none":
            return None
        return v.strip()


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["table", "json", "yaml"] = Field(default="table")


class UIConfig(BaseModel):
    """UI configuration."""

    language: Literal["en", "ja"] = Field(default="en")


class LogConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    dir: str | None = Field(
        default=None, description="Log directory (default: platformdirs user log dir)"
    )

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v

    @field_validator("dir")
    @classmethod
    def blank_dir_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class ServerConfig(BaseModel):
    """HTTP adapter configuration."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000, ge=1, le=65535)


class AppConfig(BaseModel):
    """Main taskmd configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    log: LogConfig = Field(default_factory=LogConfig)
