"""
Configuration assembly.

Merges built-in defaults, an optional TOML file and command-line overrides
into a single validated AppConfig. There is no module-level cache: callers
build the configuration once and pass it along.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..models.config import AppConfig
from ..validation import ErrorSeverity, handle_config_error
from .loader import load_toml_file
from .validators import validate_app_config

logger = logging.getLogger(__name__)


def _apply_overrides(
    config_data: Dict[str, Any],
    url: Optional[str],
    timeout: Optional[float],
    log_level: Optional[str],
) -> Dict[str, Any]:
    """Return a copy of config_data with the non-None overrides applied."""
    merged = {section: dict(values) if isinstance(values, dict) else values
              for section, values in config_data.items()}

    if url is not None or timeout is not None:
        agent = merged.setdefault("agent", {})
        if isinstance(agent, dict):
            if url is not None:
                agent["url"] = url
            if timeout is not None:
                agent["timeout"] = timeout

    if log_level is not None:
        logging_section = merged.setdefault("logging", {})
        if isinstance(logging_section, dict):
            logging_section["level"] = log_level

    return merged


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    url: Optional[str] = None,
    timeout: Optional[float] = None,
    log_level: Optional[str] = None,
) -> AppConfig:
    """
    Build the application configuration.

    Precedence, lowest first: built-in defaults, the TOML file at
    config_path (when given), then the explicit keyword overrides.

    Args:
        config_path: Optional path to a TOML configuration file
        url: Agent base URL override
        timeout: Request timeout override, in seconds
        log_level: Logging level name override

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ValidationError: If any setting is invalid
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    config_data: Dict[str, Any] = {}
    if config_path is not None:
        config_data = load_toml_file(Path(config_path), "main configuration file")

    merged = _apply_overrides(config_data, url, timeout, log_level)

    try:
        app_config = validate_app_config(merged)
    except Exception as e:
        handle_config_error(
            error=e,
            context="validating settings",
            severity=ErrorSeverity.ERROR,
            reraise=True,
            logger=logger
        )
        raise

    logger.debug(
        f"Configuration loaded: url={app_config.agent.url}, "
        f"timeout={app_config.agent.timeout}s, log_level={app_config.log_level}"
    )
    return app_config
