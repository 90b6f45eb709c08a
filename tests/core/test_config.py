"""Unit tests for /src/core/config.py"""

import logging
from unittest.mock import patch

import pytest

from src.core.config import LOG_FORMAT, Settings, configure_logging
from src.core.exceptions import ConfigError
from src.core.shared_types import GameMode


def test_defaults() -> None:
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.log_level == "WARNING"
    assert settings.default_mode == GameMode.PLAYER_VS_PLAYER
    assert settings.robot_seed is None


def test_read_from_environment() -> None:
    settings = Settings.from_env(
        {
            "OTHELLO_LOG_LEVEL": "debug",
            "OTHELLO_DEFAULT_MODE": "Player vs Hard Robot",
            "OTHELLO_ROBOT_SEED": "42",
        }
    )
    assert settings.log_level == "DEBUG"
    assert settings.default_mode == GameMode.PLAYER_VS_HARD_ROBOT
    assert settings.robot_seed == 42


def test_empty_seed_means_no_seed() -> None:
    assert Settings.from_env({"OTHELLO_ROBOT_SEED": ""}).robot_seed is None


@pytest.mark.parametrize(
    "environ",
    [
        {"OTHELLO_LOG_LEVEL": "chatty"},
        {"OTHELLO_DEFAULT_MODE": "robot vs robot"},
        {"OTHELLO_ROBOT_SEED": "forty-two"},
    ],
)
def test_invalid_values(environ: dict[str, str]) -> None:
    with pytest.raises(ConfigError):
        Settings.from_env(environ)


def test_from_os_environ_loads_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OTHELLO_ROBOT_SEED", "7")
    with patch("src.core.config.load_dotenv") as load_dotenv:
        settings = Settings.from_env()
    load_dotenv.assert_called_once()
    assert settings.robot_seed == 7


def test_configure_logging() -> None:
    with patch("src.core.config.logging.basicConfig") as basic_config:
        configure_logging(Settings(log_level="INFO"))
    basic_config.assert_called_once_with(level="INFO", format=LOG_FORMAT)
    assert logging.getLevelName("INFO") == logging.INFO
