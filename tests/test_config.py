"""Configuration boundary tests."""

from __future__ import annotations

import dataclasses

import pytest

from promise_result.config import Config
from promise_result.constants import UNKNOWN_ERROR_MESSAGE
from promise_result.errors import ConfigurationError

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    cfg = Config()

    assert cfg.unknown_error_message == UNKNOWN_ERROR_MESSAGE
    assert cfg.log_foreign_failures is False
    assert cfg.max_concurrency == 8


def test_env_resolution(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROMISE_RESULT_UNKNOWN_MESSAGE", "unbekannter Fehler")
    monkeypatch.setenv("PROMISE_RESULT_LOG_FOREIGN", "1")

    cfg = Config()

    assert cfg.unknown_error_message == "unbekannter Fehler"
    assert cfg.log_foreign_failures is True


def test_log_flag_requires_exactly_one(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROMISE_RESULT_LOG_FOREIGN", "true")
    assert Config().log_foreign_failures is False


def test_explicit_values_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROMISE_RESULT_UNKNOWN_MESSAGE", "from env")
    monkeypatch.setenv("PROMISE_RESULT_LOG_FOREIGN", "1")

    cfg = Config(unknown_error_message="explicit", log_foreign_failures=False)

    assert cfg.unknown_error_message == "explicit"
    assert cfg.log_foreign_failures is False


def test_empty_env_message_uses_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROMISE_RESULT_UNKNOWN_MESSAGE", "")
    assert Config().unknown_error_message == UNKNOWN_ERROR_MESSAGE


def test_blank_unknown_message_raises_clear_error() -> None:
    with pytest.raises(ConfigurationError, match="non-empty") as exc:
        Config(unknown_error_message="   ")
    assert exc.value.hint is not None
    assert "PROMISE_RESULT_UNKNOWN_MESSAGE" in exc.value.hint


@pytest.mark.parametrize("value", [0, -3])
def test_invalid_concurrency_raises(value: int) -> None:
    with pytest.raises(ConfigurationError, match="max_concurrency"):
        Config(max_concurrency=value)


def test_config_is_frozen() -> None:
    cfg = Config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.max_concurrency = 1  # type: ignore[misc]
