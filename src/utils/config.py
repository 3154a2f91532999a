"""
Configuration management for the Bakery Manager application.

This module handles:
- Application settings
- Environment-specific configuration (development vs. production)
- Logging level
- UI appearance and color theme
"""

import logging
import os
from typing import Optional

from .constants import APP_NAME, APP_VERSION

logger = logging.getLogger(__name__)

VALID_ENVIRONMENTS = ("production", "development")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_APPEARANCE_MODES = ("system", "light", "dark")
VALID_COLOR_THEMES = ("blue", "dark-blue", "green")

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_APPEARANCE_MODE = "system"
DEFAULT_COLOR_THEME = "blue"


class Config:
    """
    Application configuration manager.

    Settings come from environment variables, falling back to defaults when
    a variable is unset or holds an unsupported value.
    """

    def __init__(self, environment: str = "production"):
        """
        Initialize configuration.

        Args:
            environment: Environment mode - 'production' or 'development'
        """
        self.environment = environment
        self._app_name = APP_NAME
        self._app_version = APP_VERSION

        default_level = "DEBUG" if environment == "development" else DEFAULT_LOG_LEVEL
        self._log_level = self._read_choice(
            "BAKERY_MANAGER_LOG_LEVEL", VALID_LOG_LEVELS, default_level, upper=True
        )
        self._ui_appearance = self._read_choice(
            "BAKERY_MANAGER_APPEARANCE", VALID_APPEARANCE_MODES, DEFAULT_APPEARANCE_MODE
        )
        self._ui_theme = self._read_choice(
            "BAKERY_MANAGER_THEME", VALID_COLOR_THEMES, DEFAULT_COLOR_THEME
        )

    @staticmethod
    def _read_choice(var_name: str, choices: tuple, default: str, upper: bool = False) -> str:
        """
        Read an environment variable restricted to a set of choices.

        Args:
            var_name: Environment variable name
            choices: Accepted values
            default: Value used when unset or invalid
            upper: Compare in upper case instead of lower case

        Returns:
            The configured value, or the default
        """
        raw = os.environ.get(var_name)
        if raw is None or raw.strip() == "":
            return default
        value = raw.strip().upper() if upper else raw.strip().lower()
        if value not in choices:
            logger.warning(
                f"Invalid {var_name}='{raw}', expected one of {', '.join(choices)}. "
                f"Using default '{default}'."
            )
            return default
        return value

    @property
    def app_name(self) -> str:
        """Application name."""
        return self._app_name

    @property
    def app_version(self) -> str:
        """Application version."""
        return self._app_version

    @property
    def log_level(self) -> str:
        """Logging level name."""
        return self._log_level

    @property
    def ui_appearance(self) -> str:
        """CustomTkinter appearance mode."""
        return self._ui_appearance

    @property
    def ui_theme(self) -> str:
        """CustomTkinter color theme."""
        return self._ui_theme

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(environment='{self.environment}', log_level='{self._log_level}')"


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config(environment: Optional[str] = None) -> Config:
    """
    Get the global configuration instance.

    Once created, the singleton's environment cannot be changed by passing
    a different environment argument.

    Args:
        environment: Optional environment for initial creation. If None, uses
                    BAKERY_MANAGER_ENV or defaults to production. Ignored if
                    singleton already exists.

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        if environment is None:
            environment = os.environ.get("BAKERY_MANAGER_ENV", "production").strip().lower()
        if environment not in VALID_ENVIRONMENTS:
            logger.warning(
                f"Unknown environment '{environment}'. Falling back to 'production'."
            )
            environment = "production"
        _config_instance = Config(environment)
    elif environment is not None and environment != _config_instance.environment:
        logger.warning(
            f"get_config() called with environment='{environment}' but singleton "
            f"already exists with environment='{_config_instance.environment}'. "
            f"Returning existing singleton."
        )

    return _config_instance


def reset_config():
    """
    Reset the global configuration instance.

    Useful for testing.
    """
    global _config_instance
    _config_instance = None
