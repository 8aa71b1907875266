"""loadconf - load an application's TOML configuration from conventional locations.

By default, loadconf's internal logging is disabled when used as a library.
Library users can enable logging by calling loadconf.enable_logging().
"""

from loadconf.common import disable_library_logging, enable_library_logging
from loadconf.config import (
    ConfigDeserializeError,
    ConfigError,
    ConfigIOError,
    ConfigScope,
    FileConfigLoader,
    Load,
    candidate_paths,
)

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "ConfigDeserializeError",
    "ConfigError",
    "ConfigIOError",
    "ConfigScope",
    "FileConfigLoader",
    "Load",
    "candidate_paths",
    "enable_logging",
]
