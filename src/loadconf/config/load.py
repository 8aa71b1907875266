"""``Load`` mixin giving a configuration type its own loading classmethods.

Example::

    class Config(Load, BaseModel):
        var: str = "Test configuration."

    config = Config.load("sample")
    config = Config.fallback_load("sample", args.config)
"""

from __future__ import annotations

from typing import Self

from result import Result

from .loader import FileConfigLoader
from .models import ConfigError
from .protocol import StrPath


class Load:
    @classmethod
    def load(cls, name: str) -> Self:
        """Find a configuration file and load it, falling back to ``cls()``.

        Raises:
            UnwrapError: the file found could not be read or deserialized.
                Use ``try_load`` to get the error as a value instead.
        """
        return FileConfigLoader(cls).load(name)

    @classmethod
    def try_load(cls, name: str) -> Result[Self, ConfigError]:
        """Find a configuration file and load it, falling back to ``cls()``."""
        return FileConfigLoader(cls).try_load(name)

    @classmethod
    def fallback_load(cls, name: str, path: StrPath | None = None) -> Self:
        """Load from ``path``, or search for a file when ``path`` is None.

        Raises:
            UnwrapError: the file could not be read or deserialized.
        """
        return FileConfigLoader(cls).fallback_load(name, path)

    @classmethod
    def try_fallback_load(cls, name: str, path: StrPath | None = None) -> Result[Self, ConfigError]:
        """Load from ``path``, or search for a file when ``path`` is None."""
        return FileConfigLoader(cls).try_fallback_load(name, path)
