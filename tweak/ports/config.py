"""Configuration provider port.

Defines the interface for loading and accessing application configuration.
"""

from pathlib import Path
from typing import Protocol

from tweak.domain.config import TweakConfig


class ConfigProvider(Protocol):
    """Protocol for loading and providing configuration."""

    def load(self, tweak_dir: Path) -> TweakConfig:
        """Load configuration from the tweak directory.

        Args:
            tweak_dir: Path to .tweak directory containing config.toml

        Returns:
            TweakConfig instance with loaded or default values

        Note:
            Implementations should gracefully fall back to defaults
            if config file is missing or invalid.
        """
        ...
