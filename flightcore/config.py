"""
Configuration manager for control loop tick parameters.
"""

import copy
import json
import numbers
import os
from typing import Dict, Any, List

from .math.constants import (DEFAULT_DT, DEFAULT_HISTORY_LENGTH,
                             DEFAULT_FILTER_K, DEFAULT_CONTROL_LIMIT,
                             DEFAULT_MEANSQR_WINDOW)


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class Config:
    """Configuration for a controller calling the primitives each tick."""

    DEFAULT_CONFIG = {
        # Simulation tick
        "tick": {
            "dt": DEFAULT_DT,
            "history_length": DEFAULT_HISTORY_LENGTH
        },

        # Low-pass smoothing of raw samples
        "filter": {
            "k": DEFAULT_FILTER_K
        },

        # Bound applied to pitch/yaw/roll outputs
        "control": {
            "limit": DEFAULT_CONTROL_LIMIT
        },

        # Windowed error statistics
        "statistics": {
            "window": DEFAULT_MEANSQR_WINDOW
        }
    }

    def __init__(self, config_file: str = "flightcore.json"):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file
        """
        self.config_file = config_file
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if os.path.exists(config_file):
            self.load_config()
        else:
            print(f"Config file {config_file} not found, using defaults")

    def load_config(self) -> bool:
        """
        Load configuration from file over the current values.

        A file that cannot be read, is not JSON, or does not match the
        section layout leaves the configuration untouched.

        Returns:
            True if loaded successfully
        """
        try:
            with open(self.config_file, 'r') as f:
                file_config = json.load(f)
            self.config = self._merged(self.config, file_config)
        except (OSError, ValueError) as e:
            print(f"Failed to load config: {e}")
            return False

        print(f"Configuration loaded from {self.config_file}")
        return True

    def save_config(self) -> bool:
        """
        Write current values to the config file.

        Returns:
            True if saved successfully
        """
        try:
            with open(self.config_file, 'w') as f:
                json.dump(self.config, f, indent=2)
        except OSError as e:
            print(f"Failed to save config: {e}")
            return False

        print(f"Configuration saved to {self.config_file}")
        return True

    @staticmethod
    def _merged(base: Dict[str, Dict[str, Any]],
                override: Any) -> Dict[str, Dict[str, Any]]:
        """
        Overlay file values on a copy of base.

        Every known section must stay an object; unknown sections are
        carried along as given.

        Raises:
            ValueError: If override does not match the section layout
        """
        if not isinstance(override, dict):
            raise ValueError("top level must be an object")

        result = copy.deepcopy(base)
        for section, values in override.items():
            if section not in result:
                result[section] = values
            elif not isinstance(values, dict):
                raise ValueError(f"section '{section}' must be an object")
            else:
                result[section].update(values)
        return result

    def get(self, key: str, default=None):
        """Get a value by 'section.name' key, e.g. 'tick.dt'."""
        section, _, name = key.partition('.')
        values = self.config.get(section)
        if not isinstance(values, dict):
            return default
        return values.get(name, default)

    def set(self, key: str, value: Any):
        """Set a value by 'section.name' key, creating the section if needed."""
        section, _, name = key.partition('.')
        if not name:
            raise KeyError(f"key '{key}' must be of the form 'section.name'")
        self.config.setdefault(section, {})[name] = value

    def validate(self) -> List[str]:
        """
        Check values the primitives rely on but never verify themselves.

        Returns:
            List of problem descriptions, empty if the configuration is usable
        """
        checks = [
            ("tick.dt", lambda v: v > 0, "must be positive"),
            ("tick.history_length", lambda v: v >= 4, "must be at least 4"),
            ("filter.k", lambda v: v >= 0, "must be non-negative"),
            ("control.limit", lambda v: True, ""),
            ("statistics.window", lambda v: v > 0, "must be positive"),
        ]

        problems = []
        for key, ok, message in checks:
            value = self.get(key)
            if not _is_number(value):
                problems.append(f"{key} must be a number, got {value!r}")
            elif not ok(value):
                problems.append(f"{key} {message}, got {value}")
        return problems

    # Property accessors for common configuration values
    @property
    def dt(self) -> float:
        return self.config["tick"]["dt"]

    @property
    def history_length(self) -> int:
        return self.config["tick"]["history_length"]

    @property
    def filter_k(self) -> float:
        return self.config["filter"]["k"]

    @property
    def control_limit(self) -> float:
        return self.config["control"]["limit"]

    @property
    def meansqr_window(self) -> int:
        return self.config["statistics"]["window"]

    def print_config(self):
        """Print current configuration."""
        print("=== Flight Control Primitives Configuration ===")
        print(json.dumps(self.config, indent=2))
        print("===============================================")
