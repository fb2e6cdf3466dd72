from __future__ import annotations

import pytest

from buffer_toggle.runtime import telemetry


def test_unknown_preset_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown preset"):
        telemetry.configure(preset="verbose")


def test_config_and_preset_are_exclusive() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_loggers_are_cached_by_name() -> None:
    assert telemetry.get_logger("buffer_toggle.tests") is telemetry.get_logger(
        "buffer_toggle.tests"
    )


def test_span_reraises_and_keeps_logger_usable() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("tests::boom", metadata={"window": 1}):
            raise KeyError("window")

    telemetry.record_event("tests.after_failure", level="debug", data={"ok": True})


def test_logging_flags_share_the_settings_parser(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("BUFFER_TOGGLE_LOG_JSON", "maybe")
    with pytest.raises(ValueError, match="BUFFER_TOGGLE_LOG_JSON"):
        telemetry.env_flag("LOG_JSON", False)

    monkeypatch.setenv("BUFFER_TOGGLE_LOG_JSON", " On ")
    assert telemetry.env_flag("LOG_JSON", False) is True
    monkeypatch.delenv("BUFFER_TOGGLE_LOG_JSON")
    assert telemetry.env_flag("LOG_JSON", True) is True
