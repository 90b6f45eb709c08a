"""
Settings read from the environment (a `.env` file in the working directory is loaded first, if present).

* OTHELLO_LOG_LEVEL: level name for `configure_logging` (default WARNING)
* OTHELLO_DEFAULT_MODE: game mode used when a new game does not ask for one (default "player vs player")
* OTHELLO_ROBOT_SEED: optional integer, makes the robot's random choices reproducible
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Self

from dotenv import load_dotenv

from src.core.exceptions import ConfigError
from src.core.shared_types import GameMode

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    default_mode: GameMode = GameMode.PLAYER_VS_PLAYER
    robot_seed: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """Read the settings. Pass a mapping to bypass os.environ / .env (tests do)."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        log_level = environ.get("OTHELLO_LOG_LEVEL", cls.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"Unknown log level: {log_level!r}")

        raw_mode = environ.get("OTHELLO_DEFAULT_MODE", cls.default_mode.value)
        try:
            default_mode = GameMode(raw_mode.lower())
        except ValueError as e:
            raise ConfigError(
                f"Unknown game mode: {raw_mode!r}. Pick one from {', '.join(GameMode)}"
            ) from e

        raw_seed = environ.get("OTHELLO_ROBOT_SEED")
        try:
            robot_seed = int(raw_seed) if raw_seed else None
        except ValueError as e:
            raise ConfigError(f"Robot seed must be an integer, got {raw_seed!r}") from e

        return cls(log_level=log_level, default_mode=default_mode, robot_seed=robot_seed)


def configure_logging(settings: Settings) -> None:
    """Called once by the embedding application. Importing the package never configures logging."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
