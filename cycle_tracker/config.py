"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel


class CatalogConfig(BaseModel):
    """Card catalog configuration."""

    path: str | None = None  # None uses the bundled cards.json


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_cycles: bool = True  # Show "current/max" under evolution cards


class SessionLogConfig(BaseModel):
    """Configuration for the JSONL session event log."""

    enabled: bool = False
    output_path: str = "session_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    catalog: CatalogConfig = CatalogConfig()
    logging: LoggingConfig = LoggingConfig()
    session_log: SessionLogConfig = SessionLogConfig()


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
