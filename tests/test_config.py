"""Tests for configuration loading."""

import calendar
import logging

import pytest

from bubbles.config import Config, load_config


def _write(tmp_path, text: str):
    path = tmp_path / "bubbles.conf"
    path.write_text(text)
    return path


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()
        assert config.first_weekday_index == calendar.SUNDAY

    def test_parses_values(self, tmp_path):
        path = _write(
            tmp_path,
            """
# profile
DISPLAY_NAME="Pink Bubble"  # inline comment
TAGLINE='Pop pop'
FIRST_WEEKDAY=monday
SEED_DATA=no
DAYS_ACTIVE=10 # days
CURRENT_STREAK=3
""",
        )
        config = load_config(path)

        assert config.display_name == "Pink Bubble"
        assert config.tagline == "Pop pop"
        assert config.first_weekday == "Monday"
        assert config.first_weekday_index == calendar.MONDAY
        assert config.seed_data is False
        assert config.days_active == 10
        assert config.current_streak == 3

    def test_profile_from_config(self, tmp_path):
        config = load_config(_write(tmp_path, "MEMBER_SINCE=March 2025\n"))
        profile = config.profile()
        assert profile.member_since == "March 2025"
        assert profile.display_name == "Bubble Explorer"

    def test_bad_values_keep_defaults(self, tmp_path, caplog):
        path = _write(tmp_path, "SEED_DATA=maybe\nFIRST_WEEKDAY=Funday\nDAYS_ACTIVE=lots\n")
        with caplog.at_level(logging.WARNING, logger="bubbles.config"):
            config = load_config(path)

        assert config.seed_data is True
        assert config.first_weekday == "Sunday"
        assert config.days_active == Config().days_active
        assert len(caplog.records) == 3

    def test_ignores_junk_lines(self, tmp_path):
        config = load_config(_write(tmp_path, "just some words\nUNKNOWN_KEY=1\n"))
        assert config == Config()


class TestFirstWeekdayIndex:
    def test_monday(self):
        assert Config(first_weekday="Monday").first_weekday_index == calendar.MONDAY

    def test_hand_built_unknown_day_raises(self):
        with pytest.raises(ValueError):
            Config(first_weekday="Funday").first_weekday_index
