"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchPathConfig(BaseModel):
    module_dir: str
    extensions: list[str]
    include_cwd: bool
    extra: list[str] = Field(default_factory=list)


class PluginsConfig(BaseModel):
    enabled: bool


class LoggingConfig(BaseModel):
    level: str
    file: str | None = None


class AppConfig(BaseModel):
    search_path: SearchPathConfig
    plugins: PluginsConfig
    logging: LoggingConfig
