"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel


class GameConfig(BaseModel):
    """Game configuration."""

    seed: int | None = None  # None draws from system entropy
    opponent_delay: float = 1.5  # Seconds before the computer moves


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    show_opponent_hand: bool = False


class GameLogSettings(BaseModel):
    """Round log settings."""

    enabled: bool = False
    output_path: str = "logs"  # Directory; file names are generated


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogSettings = GameLogSettings()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
