"""File-based configuration loader."""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import TypeAdapter, ValidationError
from result import Err, Ok, Result

from loadconf.common import create_logger
from loadconf.settings import Settings, get_settings

from .models import ConfigCandidate, ConfigDeserializeError, ConfigError, ConfigIOError, ConfigScope
from .paths import enumerate_candidates
from .protocol import ConfigLoader, StrPath

logger = create_logger("loader")

LOAD_FAILED_MESSAGE = "Error reading configuration from file"


class FileConfigLoader[T](ConfigLoader[T]):
    """Loads ``model_cls`` from the first TOML file found for an application.

    ``model_cls()`` must build the default configuration, and
    ``pydantic.TypeAdapter(model_cls)`` must be able to validate a mapping
    into it.
    """

    def __init__(self, model_cls: type[T], settings: Settings | None = None) -> None:
        self.model_cls = model_cls
        self.settings = settings

    def try_fallback_load(self, name: str, path: StrPath | None = None) -> Result[T, ConfigError]:
        if path is not None:
            return read_config_file(path, self.model_cls, ConfigScope.EXPLICIT, self.settings)

        candidate = find_config_candidate(name, self.settings)
        if candidate is None:
            logger.debug("No config file found, using defaults", name=name, model=self.model_cls.__name__)
            return Ok(self.model_cls())

        return read_config_file(candidate.path, self.model_cls, candidate.scope, self.settings)

    def fallback_load(self, name: str, path: StrPath | None = None) -> T:
        return self.try_fallback_load(name, path).expect(LOAD_FAILED_MESSAGE)

    def try_load(self, name: str) -> Result[T, ConfigError]:
        return self.try_fallback_load(name, None)

    def load(self, name: str) -> T:
        return self.fallback_load(name, None)


def find_config_candidate(name: str, settings: Settings | None = None) -> ConfigCandidate | None:
    """Return the first candidate for ``name`` that exists on disk."""
    for candidate in enumerate_candidates(name, settings):
        if Path(candidate.path).exists():
            logger.debug("Config file selected", name=name, scope=candidate.scope.value, path=candidate.path)
            return candidate
    return None


def read_config_file[T](
    path: StrPath,
    model_cls: type[T],
    scope: ConfigScope = ConfigScope.EXPLICIT,
    settings: Settings | None = None,
) -> Result[T, ConfigError]:
    """Read ``path`` as TOML and validate it into ``model_cls``."""
    settings = settings or get_settings()
    path = Path(path)
    logger.debug("Loading config file", scope=scope.value, path=str(path))

    try:
        raw_text = path.read_text(encoding=settings.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        logger.error("Config file read error", scope=scope.value, path=str(path), error=str(exc))
        return Err(
            ConfigIOError(
                scope=scope,
                path=path,
                message=str(exc),
                cause=exc,
            ),
        )

    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        # lineno/colno are only set on Python 3.14+
        line = getattr(exc, "lineno", None)
        column = getattr(exc, "colno", None)
        logger.error(
            "Config TOML parse error",
            scope=scope.value,
            path=str(path),
            line=line,
            column=column,
            error=str(exc),
        )
        return Err(
            ConfigDeserializeError(
                scope=scope,
                path=path,
                line=line,
                column=column,
                message=str(exc),
                cause=exc,
            ),
        )

    try:
        model = TypeAdapter(model_cls).validate_python(data)
    except ValidationError as exc:
        error_details = exc.errors()
        field = None
        message = str(exc)
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            field = ".".join(str(part) for part in loc) or None
            message = first.get("msg", message)
        logger.error("Config validation error", scope=scope.value, path=str(path), field=field, error=message)
        return Err(
            ConfigDeserializeError(
                scope=scope,
                path=path,
                field=field,
                message=message,
                cause=exc,
            ),
        )

    logger.debug("Config validated", scope=scope.value, path=str(path))
    return Ok(model)
