"""
ClickClick Configuration

Centralized settings, paths, and constants for the application.
"""

import enum
import json
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Optional

import appdirs


# Application info
APP_NAME = "ClickClick"
APP_AUTHOR = "ClickClick"
APP_VERSION = "1.0.0"


class CountdownMode(enum.Enum):
    """How the pre-round countdown is advanced."""
    TICK = "tick"            # driven by the 1-second game clock
    SCHEDULED = "scheduled"  # independent single-shot steps


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Data directory (stores the high score database)
    data_dir: Path = Path(appdirs.user_data_dir(APP_NAME, APP_AUTHOR))

    # Config directory (stores user preferences)
    config_dir: Path = Path(appdirs.user_config_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def database(self) -> Path:
        return self.data_dir / "clickclick.db"

    @property
    def settings(self) -> Path:
        return self.config_dir / "settings.json"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "clickclick.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.data_dir, self.config_dir, self.log_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class GameSettings:
    """Round timing and board settings."""
    # Length of a round in seconds
    round_seconds: int = 30

    # First value shown by the pre-round countdown
    countdown_start: int = 3

    # Number of quadrants on the board
    area_count: int = 4

    # Clock tick interval in milliseconds
    tick_interval_ms: int = 1000

    # Seconds left at which the timer is flagged as running low
    low_time_threshold: int = 5

    # Countdown model
    countdown_mode: CountdownMode = CountdownMode.TICK


@dataclass(frozen=True)
class LogSettings:
    """Logging settings."""
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

    # Also write to PATHS.log_file
    log_to_file: bool = True


# Singleton instances
PATHS = Paths()
GAME_SETTINGS = GameSettings()
LOG_SETTINGS = LogSettings()


def load_game_settings(path: Optional[Path] = None) -> GameSettings:
    """
    Load user game settings, falling back to defaults.

    Args:
        path: JSON settings file (default: PATHS.settings)

    Returns:
        GameSettings built from the file, or GAME_SETTINGS if it is missing

    Raises:
        pydantic.ValidationError: if the file holds invalid values
    """
    from models.schemas import GameSettingsSchema

    path = path or PATHS.settings
    if not path.exists():
        return GAME_SETTINGS

    with open(path, "r") as f:
        raw = json.load(f)

    payload = raw.get("game", raw) if isinstance(raw, dict) else raw
    schema = GameSettingsSchema.model_validate(payload)
    return GameSettings(**schema.model_dump())


def configure_logging(settings: LogSettings = LOG_SETTINGS) -> None:
    """Configure the root logger for the application."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_to_file:
        PATHS.log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(PATHS.log_file))

    logging.basicConfig(
        level=getattr(logging, settings.level.upper(), logging.INFO),
        format=settings.format,
        handlers=handlers,
    )


def init_config() -> None:
    """Initialize configuration, create required directories and set up logging."""
    PATHS.ensure_directories()
    configure_logging()
