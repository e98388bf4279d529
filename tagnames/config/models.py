"""Typed configuration models for tagnames.

The config subsystem relies on pydantic to validate YAML files: extra tag
kinds registered at startup and the logging settings used by
:func:`tagnames.telemetry.configure_logging`.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class KindConfig(BaseModel):
    """Extra tag kind declared in config (identity id/suffix mapping)."""

    name: str = Field(..., pattern=r"^[a-z][a-z0-9]*$")
    id_pattern: str = Field(..., min_length=1)
    description: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("id_pattern")
    @classmethod
    def _check_pattern_compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"Invalid id_pattern {value!r}: {exc}") from exc
        return value


class LoggingConfig(BaseModel):
    """Log level and optional directory for the JSON log file."""

    level: str = Field("INFO")
    log_dir: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


class NamesConfig(BaseModel):
    """Top-level config: extra tag kinds plus logging."""

    kinds: List[KindConfig] = Field(default_factory=list)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def _check_unique_kinds(self) -> "NamesConfig":
        names = [kind.name for kind in self.kinds]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate kind names: {', '.join(duplicates)}")
        return self
