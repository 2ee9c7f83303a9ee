"""
Configuration for the raster operators.

This module defines the defaults shared by every operator:
1. Execution settings for the row-parallel operators (thread pool size, chunking)
2. Operator settings (Sobel edge threshold and sampling mode, sample dtype)
3. Logging settings used by ``setup_logger``
"""

import os
import json
import logging
from typing import Dict, Optional

# Execution settings for row-parallel operators
EXECUTION_CONFIG = {
    'parallel': True,
    'max_workers': None,  # None -> os.cpu_count()
    'min_rows_per_chunk': 16,
}

# Operator settings
OPERATOR_CONFIG = {
    'dtype': 'float32',
    'sobel_edge_threshold': 1e-5,
    'sobel_legacy_sampling': False,  # read t01/t21 from row 0 (historical heightmap-library sampling)
}

LOGGING_CONFIG = {
    'level': 'INFO',
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}

_SECTIONS = {
    'execution': EXECUTION_CONFIG,
    'operators': OPERATOR_CONFIG,
    'logging': LOGGING_CONFIG,
}


class OpsConfigError(Exception):
    """Invalid configuration for the raster operators."""
    pass


class OpsConfig:
    """Operator configuration."""

    def __init__(self, config_dict: Dict = None, config_file: str = None):
        """
        Initialize a new configuration from the module defaults.

        Args:
            config_dict: Dictionary of sections, e.g. ``{'execution': {'max_workers': 2}}``
            config_file: Path to a JSON file with the same structure
        """
        self.config = {name: dict(section) for name, section in _SECTIONS.items()}

        if config_file and os.path.exists(config_file):
            with open(config_file, 'r') as f:
                self._merge(json.load(f))

        if config_dict:
            self._merge(config_dict)

    def _merge(self, overrides: Dict):
        for section, values in overrides.items():
            if section not in self.config:
                raise OpsConfigError(f"Unknown configuration section: {section}")
            if not isinstance(values, dict):
                raise OpsConfigError(f"Section '{section}' must be a mapping")
            self.config[section].update(values)

    def get(self, section: str, key: str, default=None):
        """
        Get a single configuration value.

        Args:
            section: Section name ('execution', 'operators' or 'logging')
            key: Key inside the section
            default: Value returned when the key is missing

        Returns:
            The configured value
        """
        return self.config.get(section, {}).get(key, default)

    def apply(self):
        """Push this configuration into the module-level dictionaries."""
        for name, section in _SECTIONS.items():
            section.update(self.config[name])


def resolve_max_workers(max_workers: Optional[int] = None) -> int:
    """Worker count for the thread pool; falls back to the CPU count."""
    if max_workers is None:
        max_workers = EXECUTION_CONFIG.get('max_workers')
    if max_workers is None:
        max_workers = os.cpu_count() or 1
    if max_workers < 1:
        raise OpsConfigError(f"max_workers must be positive, got {max_workers}")
    return max_workers


def setup_logger(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger with a console handler.

    Args:
        level: Logging level name; defaults to ``LOGGING_CONFIG['level']``

    Returns:
        The configured ``raster_ops`` logger
    """
    level = level or LOGGING_CONFIG['level']
    logger = logging.getLogger('raster_ops')
    logger.setLevel(level)

    # Only one console handler, even when called repeatedly
    for handler in logger.handlers:
        if getattr(handler, '_raster_ops_console', False):
            handler.setLevel(level)
            return logger

    console_handler = logging.StreamHandler()
    console_handler._raster_ops_console = True
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOGGING_CONFIG['format']))
    logger.addHandler(console_handler)

    return logger
