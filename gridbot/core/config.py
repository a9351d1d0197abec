"""
Central configuration for gridbot.

Only presentation and logging are configurable. The grid size and the
robot's start state are fixed, and robot state is never saved.
"""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from gridbot.core.exceptions import ConfigError
from gridbot.ui.themes import list_themes

DEFAULT_CONFIG_PATH = "~/.gridbot/config.yaml"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


class UIConfig(BaseModel):
    """Terminal interface configuration."""

    theme: str = "classic"  # classic, matrix, minimal, retro
    show_banner: bool = True  # Welcome banner and command list at start

    @field_validator("theme")
    @classmethod
    def check_theme(cls, value: str) -> str:
        if value not in list_themes():
            raise ValueError(f"Unknown theme: {value}. Available: {list_themes()}")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}. Available: {LOG_LEVELS}")
        return value


class Config(BaseModel):
    """Main gridbot configuration."""

    ui: UIConfig = UIConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        """Load configuration from YAML file or use defaults."""

        if config_path is None:
            config_path = os.path.expanduser(DEFAULT_CONFIG_PATH)

        path = Path(config_path)

        if not path.exists():
            return cls()

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return cls(**data) if data else cls()
        except yaml.YAMLError as e:
            raise ConfigError(str(path), f"not valid YAML ({e})") from e
        except ValidationError as e:
            raise ConfigError(str(path), str(e)) from e
        except TypeError as e:
            raise ConfigError(str(path), "expected a mapping at the top level") from e
        except OSError as e:
            raise ConfigError(str(path), f"cannot be read ({e.strerror})") from e

    def save(self, config_path: Optional[str] = None) -> None:
        """Write the settings as YAML, creating the parent directory."""
        path = Path(os.path.expanduser(config_path or DEFAULT_CONFIG_PATH))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(self.model_dump(), default_flow_style=False, sort_keys=False))

    def as_rows(self) -> list[tuple[str, str]]:
        """Flatten to (key, value) pairs for display."""
        return [
            ("ui.theme", self.ui.theme),
            ("ui.show_banner", str(self.ui.show_banner)),
            ("logging.level", self.logging.level),
        ]


def get_default_config() -> Config:
    """Return default configuration."""
    return Config()
