from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from tour_ranker.config.run_config import RunConfig
from tour_ranker.config.settings import EngineSettings

CONFIG = """
profile = "family-summer"
title = "Турция, июнь"

[search]
budget = 250000
budget_type = "perPerson"
adults = 2
children = 1
destination = "Турция"
requirements = "all_inclusive, kids_club"

[priorities]
profile_name = "С детьми"
weights = { price = 6, familyFriendly = 9, beachLine = 7, roomQuality = 3 }

[output]
directory = "cards"
log_level = "DEBUG"
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "run.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_run_config_builds_search_request(tmp_path):
    config = RunConfig.load(_write(tmp_path, CONFIG))

    request = config.search_request()

    assert config.profile == "family-summer"
    assert request.budget == 250000
    assert request.is_per_person
    assert request.children == 1
    assert request.requirements == ("all_inclusive", "kids_club")
    assert config.priority_weights() == {"price": 6, "familyFriendly": 9, "beachLine": 7, "roomQuality": 3}


def test_run_config_applies_output_overrides(tmp_path):
    config = RunConfig.load(_write(tmp_path, CONFIG))
    settings = EngineSettings()

    config.apply_to(settings, base_dir=tmp_path)

    assert settings.output_dir == (tmp_path / "cards").resolve()
    assert settings.log_level == "DEBUG"


def test_run_config_defaults_without_sections(tmp_path):
    config = RunConfig.load(_write(tmp_path, 'profile = "bare"\n'))

    request = config.search_request()

    assert request.budget is None
    assert request.budget_type == "total"
    assert config.priority_weights() == {}


def test_run_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        RunConfig.load(tmp_path / "missing.toml")


@pytest.mark.parametrize(
    "snippet",
    [
        '[search]\nbudget_type = "perRoom"\n',
        "[search]\nbudget = -5\n",
        "[priorities]\nweights = { price = -1 }\n",
    ],
)
def test_run_config_rejects_invalid_values(tmp_path, snippet):
    with pytest.raises(ValidationError):
        RunConfig.load(_write(tmp_path, snippet))
