"""Configuration management for trotro-transit."""

import os

from .core.exceptions import ValidationError
from .core.search import parse_priority

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """Settings read from the environment."""

    def __init__(self) -> None:
        # Snapshot used by the CLI when --network is not given
        self.network_file: str = os.getenv("TROTRO_NETWORK_FILE", "data/network.json")

        # Default search priority: fare, distance or stops
        self.priority: str = os.getenv("TROTRO_PRIORITY", "fare")

        # Logging
        self.log_level: str = os.getenv("TROTRO_LOG_LEVEL", "WARNING").upper()

    def validate(self) -> None:
        """Validate configuration."""
        parse_priority(self.priority)

        if self.log_level not in LOG_LEVELS:
            raise ValidationError(f"Unknown log level: {self.log_level}")

    def as_dict(self) -> dict[str, str]:
        return {
            "network_file": self.network_file,
            "priority": self.priority,
            "log_level": self.log_level,
        }


# Global configuration instance
config = Config()
