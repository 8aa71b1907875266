"""Candidate configuration path enumeration.

For an application named ``N`` the candidates are, in priority order::

    ./N  ./N.toml  ./.N  ./.N.toml
    ~/.N  ~/.N.toml  ~/.config/N  ~/.config/N.toml
    ~/.config/N/config  ~/.config/N/config.toml
    /etc/.config/N  /etc/.config/N.toml
    /etc/.config/N/config  /etc/.config/N/config.toml

The home entries are left out when the home directory cannot be resolved
(no passwd entry, or $HOME set but empty). The system entries always use
/etc/.config unless a ``Settings`` instance is passed in explicitly; the
process-wide settings never move them. Nothing here touches the filesystem.
"""

from __future__ import annotations

import os
from pathlib import Path

from loadconf.constants import CONFIG_FILE_SUFFIX, DEFAULT_SYSTEM_CONFIG_DIR
from loadconf.settings import Settings

from .models import ConfigCandidate, ConfigScope


def candidate_paths(name: str, settings: Settings | None = None) -> list[str]:
    """Return the candidate paths for ``name`` in priority order."""
    return [candidate.path for candidate in enumerate_candidates(name, settings)]


def enumerate_candidates(name: str, settings: Settings | None = None) -> list[ConfigCandidate]:
    system_dir = settings.system_config_dir if settings is not None else DEFAULT_SYSTEM_CONFIG_DIR

    candidates = _tagged(ConfigScope.RELATIVE, _relative_paths(name))

    home = home_directory()
    if home is not None:
        candidates += _tagged(ConfigScope.HOME, _home_paths(home, name))

    candidates += _tagged(ConfigScope.SYSTEM, _system_paths(system_dir, name))
    return candidates


def home_directory() -> str | None:
    """Return the invoking user's home directory, or None when it is unknown."""
    if os.environ.get("HOME") == "":
        return None
    try:
        return str(Path.home())
    except (RuntimeError, KeyError):
        return None


def _relative_paths(name: str) -> list[str]:
    return [
        f"./{name}",
        f"./{name}{CONFIG_FILE_SUFFIX}",
        f"./.{name}",
        f"./.{name}{CONFIG_FILE_SUFFIX}",
    ]


def _home_paths(home: str, name: str) -> list[str]:
    return [
        f"{home}/.{name}",
        f"{home}/.{name}{CONFIG_FILE_SUFFIX}",
        f"{home}/.config/{name}",
        f"{home}/.config/{name}{CONFIG_FILE_SUFFIX}",
        f"{home}/.config/{name}/config",
        f"{home}/.config/{name}/config{CONFIG_FILE_SUFFIX}",
    ]


def _system_paths(system_dir: str, name: str) -> list[str]:
    return [
        f"{system_dir}/{name}",
        f"{system_dir}/{name}{CONFIG_FILE_SUFFIX}",
        f"{system_dir}/{name}/config",
        f"{system_dir}/{name}/config{CONFIG_FILE_SUFFIX}",
    ]


def _tagged(scope: ConfigScope, paths: list[str]) -> list[ConfigCandidate]:
    return [ConfigCandidate(path=path, scope=scope) for path in paths]
