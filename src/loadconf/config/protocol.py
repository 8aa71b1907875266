"""Configuration loading protocol."""

from __future__ import annotations

from os import PathLike
from typing import Protocol

from result import Result

from .models import ConfigError

type StrPath = str | PathLike[str]


class ConfigLoader[T](Protocol):
    """Protocol for locating and loading one application's configuration."""

    def try_fallback_load(self, name: str, path: StrPath | None = None) -> Result[T, ConfigError]:
        """Load from ``path`` when given, otherwise search the candidates for ``name``.

        Returns:
            Ok(T) parsed from the explicit path or the first existing candidate.
            Ok(T()) when no path is given and no candidate exists.
            Err(ConfigError) when the selected file cannot be read or deserialized.
        """
        ...

    def fallback_load(self, name: str, path: StrPath | None = None) -> T:
        """Same as ``try_fallback_load`` but raises ``UnwrapError`` on failure."""
        ...

    def try_load(self, name: str) -> Result[T, ConfigError]:
        """Search the candidates for ``name``, falling back to ``T()``."""
        ...

    def load(self, name: str) -> T:
        """Same as ``try_load`` but raises ``UnwrapError`` on failure."""
        ...
