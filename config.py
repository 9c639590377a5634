"""Configuration for the console blackjack game."""

from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True)
class GameConfig:
    """House rules. Fixed for every hand; not exposed as rule variants."""

    dealer_stand_threshold: int = 17
    initial_cards: int = 2


@dataclass(frozen=True)
class ConsoleConfig:
    """Console presentation settings."""

    locale: Literal["ja", "en"] = "ja"


@dataclass(frozen=True)
class LoggingConfig:
    """Diagnostic logging configuration (stderr, never mixed with narration)."""

    level: str = "WARNING"
    format: str = "%(log_color)s%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_colors: dict[str, str] = field(
        default_factory=lambda: {
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        }
    )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    console: ConsoleConfig = field(default_factory=ConsoleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
