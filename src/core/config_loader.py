"""
Configuration loader for the board rendering tools.
"""
import copy
from pathlib import Path
from typing import Any, Dict, Optional
import logging

import yaml

from .io_utils import load_yaml

logger = logging.getLogger(__name__)


class Config:
    """
    Configuration container: built-in defaults, optionally overlaid by YAML.

    The board itself (colors, ratios, numbers) is fixed; only output
    settings of the rendering tools are configurable here.
    """

    DEFAULTS = {
        "render": {
            "width": 600,
            "height": 600,
            "output": "dartboard.png",
        },

        # Raster backend
        "opencv": {
            "background": [0, 0, 0],  # RGB
            "arc_step_deg": 2.0,  # Max arc flattening step
        },

        # Vector backend
        "svg": {
            "background": None,  # RGB or None for transparent
            "font_family": "sans-serif",
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Load configuration from file or use defaults.

        Args:
            config_path: Path to config YAML (None = use defaults)
        """
        self.data = copy.deepcopy(self.DEFAULTS)

        if config_path and Path(config_path).exists():
            try:
                user_config = load_yaml(Path(config_path))
                self._merge_config(user_config)
                logger.info(f"Configuration loaded from {config_path}")
            except (OSError, yaml.YAMLError, AttributeError) as e:
                logger.warning(f"Failed to load config: {e}, using defaults")
        else:
            logger.info("Using default configuration")

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """Merge user config with defaults."""
        for section, values in user_config.items():
            if section in self.data:
                if isinstance(values, dict):
                    self.data[section].update(values)
                else:
                    logger.warning(
                        f"Config section '{section}' is not a mapping, keeping defaults"
                    )
            else:
                self.data[section] = values

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get config value."""
        return self.data.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Override a single value (e.g. from a CLI flag)."""
        self.data.setdefault(section, {})[key] = value

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section."""
        return self.data.get(section, {})

    def as_dict(self) -> Dict[str, Any]:
        """Deep copy of the effective settings, safe to serialize."""
        return copy.deepcopy(self.data)
