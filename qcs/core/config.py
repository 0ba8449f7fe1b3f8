"""Application configuration management."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path


logger = logging.getLogger(__name__)


def _valid_value(default, value) -> bool:
    """A stored value must have the default's type; ints must be positive."""
    if type(default) is int:
        return type(value) is int and value > 0
    return type(value) is type(default)


@dataclass
class AppConfig:
    """Persistent application configuration."""
    theme: str = "light"
    language: str = "en"
    style: str = ""
    default_rows: int = 3
    default_columns: int = 5
    max_steps: int = 5
    window_width: int = 900
    window_height: int = 640

    _config_dir: Path = field(
        default_factory=lambda: Path.home() / ".qcs",
        repr=False)

    @property
    def config_path(self) -> Path:
        return self._config_dir / "config.json"

    @property
    def dark_mode(self) -> bool:
        return self.theme == "dark"

    def to_dict(self) -> dict:
        return {
            "theme": self.theme,
            "language": self.language,
            "style": self.style,
            "default_rows": self.default_rows,
            "default_columns": self.default_columns,
            "max_steps": self.max_steps,
            "window_width": self.window_width,
            "window_height": self.window_height,
        }

    def save(self):
        self._config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, config_dir: Path | str | None = None) -> AppConfig:
        config = cls() if config_dir is None else cls(_config_dir=Path(config_dir))
        if config.config_path.exists():
            try:
                with open(config.config_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                known = config.to_dict()
                for key, value in data.items():
                    if key not in known:
                        continue
                    if _valid_value(known[key], value):
                        setattr(config, key, value)
                    else:
                        logger.warning(
                            "Ignoring invalid value %r for %s in %s.",
                            value, key, config.config_path)
            except (json.JSONDecodeError, OSError, AttributeError):
                logger.warning(
                    "Could not read %s, using defaults.", config.config_path,
                    exc_info=True)
                return cls(_config_dir=config._config_dir)
        return config
