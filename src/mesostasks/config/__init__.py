"""
Configuration management for the mesostasks package.

This module provides loading and validation of configuration data from an
optional TOML file combined with command-line overrides.
"""

from .loader import load_toml_file
from .manager import load_config
from .validators import validate_agent_config, validate_app_config

__all__ = [
    "load_config",
    "load_toml_file",
    "validate_agent_config",
    "validate_app_config",
]
