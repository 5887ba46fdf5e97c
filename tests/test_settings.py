from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from tour_ranker.config.settings import DEFAULT_SETTINGS, EngineSettings
from tour_ranker.core.logging import configure_logging


def test_settings_defaults():
    settings = EngineSettings()

    assert settings.match_threshold == 0.7
    assert settings.max_images == 10
    assert settings.short_description_length == 200
    assert settings.budget_floor_ratio == 0.4
    assert settings.default_adults == 2
    assert settings.currency == "RUB"


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("TOURRANK_MATCH_THRESHOLD", "0.8")
    monkeypatch.setenv("TOURRANK_CURRENCY", "EUR")

    settings = EngineSettings()

    assert settings.match_threshold == 0.8
    assert settings.currency == "EUR"


@pytest.mark.parametrize(
    "field, value",
    [("match_threshold", 1.5), ("budget_floor_ratio", -0.1), ("max_images", 0), ("max_images", 11)],
)
def test_settings_reject_out_of_range_values(field, value):
    with pytest.raises(ValidationError):
        EngineSettings(**{field: value})


def test_settings_validate_assignment():
    settings = EngineSettings()

    with pytest.raises(ValidationError):
        settings.default_adults = 0


def test_settings_create_directories(tmp_path):
    settings = EngineSettings(log_dir=tmp_path / "logs", output_dir=tmp_path / "out" / "cards")

    settings.ensure_directories()

    assert settings.log_dir.is_dir()
    assert settings.output_dir.is_dir()


def test_configure_logging_sends_engine_debug_to_file(tmp_path):
    engine_logger = logging.getLogger("tour_ranker")
    previous = engine_logger.level
    log_dir = tmp_path / "nested" / "logs"

    try:
        log_path = configure_logging("warning", log_dir)

        assert log_dir.is_dir()
        assert log_path == log_dir / "ranker.log"
        assert engine_logger.level == logging.DEBUG
    finally:
        engine_logger.setLevel(previous)


def test_default_settings_do_not_read_environment(monkeypatch):
    monkeypatch.setenv("TOURRANK_MATCH_THRESHOLD", "0.95")
    monkeypatch.setenv("TOURRANK_MAX_IMAGES", "5")

    assert DEFAULT_SETTINGS.match_threshold == 0.7
    assert DEFAULT_SETTINGS.max_images == 10
    assert EngineSettings().match_threshold == 0.95
