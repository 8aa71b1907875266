"""Pydantic models for candidate locations and load errors."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ConfigScope(str, Enum):
    """Where a configuration file was looked up."""

    RELATIVE = "relative"
    HOME = "home"
    SYSTEM = "system"
    EXPLICIT = "explicit"


@dataclass(frozen=True, slots=True)
class ConfigCandidate:
    """A location the loader is willing to check, in priority order."""

    path: str
    scope: ConfigScope


class ConfigIOError(BaseModel):
    """File could not be opened or read."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    scope: ConfigScope
    path: Path
    message: str
    cause: OSError | UnicodeDecodeError | LookupError | None = Field(default=None, exclude=True, repr=False)


class ConfigDeserializeError(BaseModel):
    """File content is not valid TOML or does not match the target type."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    scope: ConfigScope
    path: Path
    line: int | None = None
    column: int | None = None
    field: str | None = None
    message: str
    cause: tomllib.TOMLDecodeError | ValidationError | None = Field(default=None, exclude=True, repr=False)


type ConfigError = ConfigIOError | ConfigDeserializeError
