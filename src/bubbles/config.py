"""Configuration management for Bubbles."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.calendar import weekday_index
from .core.entities import Profile

logger = logging.getLogger(__name__)

BUBBLES_HOME = Path(os.environ.get("BUBBLES_HOME", Path.home() / "bubbles"))
CONFIG_FILE = BUBBLES_HOME / "config" / "bubbles.conf"

_DEFAULT_PROFILE = Profile()


@dataclass
class Config:
    """Bubbles configuration."""

    seed_data: bool = True
    first_weekday: str = "Sunday"
    display_name: str = _DEFAULT_PROFILE.display_name
    tagline: str = _DEFAULT_PROFILE.tagline
    member_since: str = _DEFAULT_PROFILE.member_since
    days_active: int = _DEFAULT_PROFILE.days_active
    current_streak: int = _DEFAULT_PROFILE.current_streak

    @property
    def first_weekday_index(self) -> int:
        """calendar module weekday number (MONDAY=0 ... SUNDAY=6)."""
        return weekday_index(self.first_weekday)

    def profile(self) -> Profile:
        return Profile(
            display_name=self.display_name,
            tagline=self.tagline,
            member_since=self.member_since,
            days_active=self.days_active,
            current_streak=self.current_streak,
        )


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}, using {default}")
    return default


def _parse_int(key: str, value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid integer for {key.upper()}: {value!r}, using {default}")
        return default


def load_config(path: Path | None = None) -> Config:
    """Load configuration from bubbles.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "seed_data":
                config.seed_data = _parse_bool(key, value, config.seed_data)
            case "first_weekday":
                try:
                    weekday_index(value)
                    config.first_weekday = value.strip().capitalize()
                except ValueError:
                    logger.warning(f"Unknown FIRST_WEEKDAY {value!r}, keeping {config.first_weekday}")
            case "display_name":
                config.display_name = value
            case "tagline":
                config.tagline = value
            case "member_since":
                config.member_since = value
            case "days_active":
                config.days_active = _parse_int(key, value, config.days_active)
            case "current_streak":
                config.current_streak = _parse_int(key, value, config.current_streak)
            case _:
                logger.debug(f"Ignoring unknown config key {key.upper()}")

    return config
