"""Settings parsing and JSON log formatting."""

import json
import logging

import pytest
from pydantic import ValidationError

from app.config import Settings
from app.infrastructure.observability import JSONFormatter


def test_postgres_url_gets_asyncpg_driver():
    settings = Settings(database_url="postgresql://u:p@db:5432/jana")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/jana"


def test_passkeys_parsed_from_environment(monkeypatch):
    monkeypatch.setenv("PASSKEYS", '{"love2023": "couple"}')
    assert Settings().passkeys == {"love2023": "couple"}


def test_unknown_timezone_rejected():
    with pytest.raises(ValidationError):
        Settings(display_timezone="Mars/Olympus_Mons")


def test_json_formatter_includes_extras():
    record = logging.LogRecord("app.test", logging.INFO, __file__, 1, "hello", None, None)
    record.username = "couple"
    record.resource_id = 3
    payload = json.loads(JSONFormatter().format(record))
    assert payload["message"] == "hello"
    assert payload["username"] == "couple"
    assert payload["resource_id"] == 3
    assert "error_code" not in payload
