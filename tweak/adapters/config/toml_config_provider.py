"""TOML-based configuration provider.

Loads configuration from .tweak/config.toml with global config fallback.

Config loading priority (highest to lowest):
1. Local: .tweak/config.toml (repo-specific)
2. Global: ~/.config/tweak/config.toml (user defaults)
3. Built-in defaults
"""

import logging
from pathlib import Path

from tweak.domain.config import TweakConfig
from tweak.shared.config_io import get_global_config_path, load_config_data

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from TOML files.

    Implements config cascade:
    1. Load global config (~/.config/tweak/config.toml) if present
    2. Load local config (.tweak/config.toml) if present
    3. Local values override global values
    4. Missing values fall back to built-in defaults

    Gracefully handles missing or invalid configs with warnings.
    """

    def load(self, tweak_dir: Path) -> TweakConfig:
        """Load configuration with global fallback.

        Uses domain-level merging via TweakConfig.from_partial to ensure
        validation happens at each merge step.

        Args:
            tweak_dir: Path to .tweak directory containing config.toml

        Returns:
            TweakConfig instance with merged global/local values or defaults
        """
        local_path = tweak_dir / "config.toml"
        global_path = get_global_config_path()

        config = TweakConfig.default()

        if global_path.exists():
            try:
                global_data = load_config_data(global_path)
                config = TweakConfig.from_partial(config, global_data)
                logger.debug("Loaded global config from %s", global_path)
            except (FileNotFoundError, ValueError, TypeError) as e:
                logger.warning(
                    "Failed to parse global config at %s: %s. Ignoring global config.",
                    global_path,
                    e,
                )

        if local_path.exists():
            try:
                local_data = load_config_data(local_path)
                config = TweakConfig.from_partial(config, local_data)
                logger.debug("Loaded local config from %s", local_path)
            except (FileNotFoundError, ValueError, TypeError) as e:
                logger.warning(
                    "Failed to parse config.toml: %s. Using global/default configuration.",
                    e,
                )

        return config
