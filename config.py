"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse SOLITAIRE_SEED environment variable."""
    seed = os.getenv("SOLITAIRE_SEED", "").strip()
    if not seed:
        return None
    return int(seed)


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    # None deals from an unseeded generator
    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())

    game: GameConfig = field(default_factory=GameConfig)

    @property
    def effective_log_level(self) -> int:
        """Resolve the logging level, forcing DEBUG in debug mode."""
        if self.debug:
            return logging.DEBUG
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.WARNING


def configure_logging(app_config: AppConfig | None = None) -> None:
    """Apply the configured log level to the root logger."""
    app_config = app_config or config
    logging.basicConfig(
        level=app_config.effective_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Global configuration instance
config = AppConfig()
