"""Pydantic models for edgeview configuration."""

import shlex
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class RendererConfig(BaseModel):
    """How the PlantUML renderer is invoked."""

    command: list[str] = Field(default_factory=lambda: ["plantuml"], min_length=1)
    format: Literal["png", "svg"] = "png"
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("command", mode="before")
    @classmethod
    def split_command(cls, value):
        """Accept a shell-style string as well as a list."""
        if isinstance(value, str):
            return shlex.split(value)
        return value


class PipelineConfig(BaseModel):
    """Background rendering settings."""

    max_workers: int = Field(default=2, ge=1)


class EdgeviewConfig(BaseModel):
    """Root configuration."""

    renderer: RendererConfig = Field(default_factory=RendererConfig)
    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value
