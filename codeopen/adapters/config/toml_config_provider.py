"""TOML-based configuration provider.

Loads configuration from .codeopen/config.toml with global config fallback.

Config loading priority (highest to lowest):
1. Local: <project>/.codeopen/config.toml (project-specific)
2. Global: ~/.config/codeopen/config.toml (user defaults)
3. Built-in defaults
"""

import logging
from pathlib import Path

from codeopen.domain.config import CodeOpenConfig
from codeopen.shared.config_io import (
    get_global_config_path,
    get_local_config_path,
    load_config_data,
)

logger = logging.getLogger(__name__)


class TomlConfigProvider:
    """Configuration provider that loads from TOML files.

    Implements config cascade:
    1. Load global config if present
    2. Load local config if present
    3. Local values override global values (key-level merge per section)
    4. Missing values fall back to built-in defaults

    Gracefully handles missing or invalid configs with warnings.
    """

    def load(self, project_dir: Path | None = None) -> CodeOpenConfig:
        """Load configuration with global fallback.

        Args:
            project_dir: Directory containing .codeopen/config.toml, or None
                to skip the local layer.

        Returns:
            CodeOpenConfig instance with merged global/local values or defaults
        """
        config = CodeOpenConfig.default()

        global_path = get_global_config_path()
        if global_path.exists():
            try:
                global_data = load_config_data(global_path)
                config = CodeOpenConfig.from_partial(config, global_data)
                logger.debug("Loaded global config from %s", global_path)
            except (FileNotFoundError, ValueError) as e:
                logger.warning(
                    "Failed to parse global config at %s: %s. Ignoring global config.",
                    global_path,
                    e,
                )

        if project_dir is None:
            return config

        local_path = get_local_config_path(project_dir)
        if local_path.exists():
            try:
                local_data = load_config_data(local_path)
                config = CodeOpenConfig.from_partial(config, local_data)
                logger.debug("Loaded local config from %s", local_path)
            except (FileNotFoundError, ValueError) as e:
                logger.warning(
                    "Failed to parse %s: %s. Using global/default configuration.",
                    local_path,
                    e,
                )

        return config
