"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from core.rules import TableRules

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or blank means an unseeded run."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class SimulationConfig:
    """How many rounds to play and how to seed them."""

    rounds: int = field(default_factory=lambda: int(os.getenv("BLACKJACK_ROUNDS", "1")))
    seed: int | None = field(default_factory=_parse_seed)
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())

    def __post_init__(self) -> None:
        if self.rounds < 1:
            raise ValueError("rounds must be at least 1")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    rules: TableRules = field(
        default_factory=lambda: TableRules(
            strict_blackjack=os.getenv("STRICT_BLACKJACK", "false").lower() == "true"
        )
    )
