"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

SHUFFLE_METHODS = ("random_key", "fisher_yates")
DECK_SIZE = 52


def _parse_seed() -> int | None:
    """Parse DECK_SIM_SEED environment variable."""
    seed = os.getenv("DECK_SIM_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class SimulationConfig:
    """Deal and discard simulation settings."""

    num_hands: int = 4
    hand_size: int = 13
    shuffle_method: str = field(
        default_factory=lambda: os.getenv("DECK_SIM_SHUFFLE", "random_key").lower()
    )
    seed: int | None = field(default_factory=_parse_seed)

    def __post_init__(self) -> None:
        if self.num_hands < 1:
            raise ValueError("num_hands must be positive")
        if self.hand_size < 1:
            raise ValueError("hand_size must be positive")
        if self.num_hands * self.hand_size > DECK_SIZE:
            raise ValueError(
                f"Cannot deal {self.num_hands} hands of {self.hand_size} from {DECK_SIZE} cards"
            )
        if self.shuffle_method not in SHUFFLE_METHODS:
            raise ValueError(f"Unknown shuffle method: {self.shuffle_method}")

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards dealt across all hands."""
        return self.num_hands * self.hand_size


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("DECK_SIM_LOG_LEVEL", "WARNING").upper()
    )
    format: str = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%H:%M:%S"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
