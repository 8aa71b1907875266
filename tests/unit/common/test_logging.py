from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger
from pydantic import BaseModel

import loadconf
from loadconf.common import create_logger, disable_library_logging, enable_library_logging
from loadconf.config.loader import FileConfigLoader
from loadconf.settings import Settings


class _Config(BaseModel):
    var: str = "default"


@pytest.fixture
def records(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(Path, "home", lambda: tmp_path, raising=False)
    monkeypatch.chdir(tmp_path)
    captured: list[dict] = []
    yield captured
    disable_library_logging()
    logger.remove()


def _loader(tmp_path: Path) -> FileConfigLoader[_Config]:
    return FileConfigLoader(_Config, Settings(system_config_dir=str(tmp_path / "etc")))


def test_library_logging_is_disabled_by_default(records: list[dict], tmp_path: Path) -> None:
    disable_library_logging()
    logger.add(lambda message: records.append(message.record), level="DEBUG")

    _loader(tmp_path).load("sample")

    assert records == []


def test_enable_logging_reports_default_fallback(records: list[dict], tmp_path: Path) -> None:
    loadconf.enable_logging("DEBUG")
    logger.add(lambda message: records.append(message.record), level="DEBUG")

    _loader(tmp_path).load("sample")

    messages = [record["message"] for record in records]
    assert "No config file found, using defaults" in messages
    assert all(record["extra"]["scope"] == "loader" for record in records)


def test_enable_library_logging_returns_handler_id(records: list[dict]) -> None:
    handler_id = enable_library_logging("INFO")

    assert isinstance(handler_id, int)
    logger.remove(handler_id)


def test_create_logger_binds_scope(records: list[dict]) -> None:
    logger.enable("loadconf")
    logger.remove()
    logger.add(lambda message: records.append(message.record), level="INFO")

    create_logger("custom").info("hello")

    assert records[-1]["extra"]["scope"] == "custom"
