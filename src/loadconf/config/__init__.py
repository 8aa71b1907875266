"""Public configuration loading API for loadconf."""

from __future__ import annotations

from .load import Load
from .loader import LOAD_FAILED_MESSAGE, FileConfigLoader, find_config_candidate, read_config_file
from .models import ConfigCandidate, ConfigDeserializeError, ConfigError, ConfigIOError, ConfigScope
from .paths import candidate_paths, enumerate_candidates, home_directory
from .protocol import ConfigLoader, StrPath

__all__ = [
    "LOAD_FAILED_MESSAGE",
    "ConfigCandidate",
    "ConfigDeserializeError",
    "ConfigError",
    "ConfigIOError",
    "ConfigLoader",
    "ConfigScope",
    "FileConfigLoader",
    "Load",
    "StrPath",
    "candidate_paths",
    "enumerate_candidates",
    "find_config_candidate",
    "home_directory",
    "read_config_file",
]
