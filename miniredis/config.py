"""
MiniRedis Configuration Module

Provides configuration management for the MiniRedis shell.
Values come from DEFAULT_CONFIG, overridden by an optional dict
(normally built from command-line options).
"""

import logging

# Default configuration values
DEFAULT_CONFIG = {
    # Shell
    'prompt': '>> ',
    'banner': True,  # Print the command summary at start

    # Logging
    'loglevel': 'warning',  # debug, info, warning, error
}

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


class Config:
    """
    Configuration manager for MiniRedis.

    Provides get/set access to configuration values; unknown keys are ignored.
    """

    __slots__ = ('_config',)

    def __init__(self, initial_config=None):
        """
        Initialize configuration with defaults.

        Args:
            initial_config: dict - Optional initial configuration to merge with defaults
        """
        self._config = dict(DEFAULT_CONFIG)
        if initial_config:
            for key, value in initial_config.items():
                if key in DEFAULT_CONFIG and value is not None:
                    self._config[key] = value

    def get(self, key, default=None):
        """
        Get configuration value.

        Args:
            key: str - Configuration key
            default: Any - Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def set(self, key, value):
        """
        Set configuration value.

        Returns:
            bool: True if key exists and was set, False if unknown key
        """
        if key in DEFAULT_CONFIG:
            self._config[key] = value
            return True
        return False

    def get_all(self):
        """Get a copy of all configuration values."""
        return dict(self._config)

    def log_level(self):
        """
        Resolve the configured log level name.

        Returns:
            int: logging level, WARNING for unknown names
        """
        return LOG_LEVELS.get(str(self._config['loglevel']).lower(), logging.WARNING)
