"""
Configuration validation utilities.

Turns raw settings (merged from the TOML file and the command line) into
validated, immutable configuration objects.
"""

import logging
from typing import Any, Dict

from ..models.config import (
    DEFAULT_AGENT_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    AgentConfig,
    AppConfig,
)
from ..validation import (
    ValidationError,
    validate_enum_choice,
    validate_positive_float,
    validate_url,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
MAX_TIMEOUT_SECONDS = 300.0


def validate_agent_config(agent_data: Dict[str, Any]) -> AgentConfig:
    """
    Validate and create an AgentConfig from raw configuration data.

    Args:
        agent_data: Raw `[agent]` settings

    Returns:
        Validated AgentConfig instance

    Raises:
        ValidationError: If validation fails
    """
    url = validate_url(
        agent_data.get("url", DEFAULT_AGENT_URL),
        field_name="agent.url",
    )

    timeout = validate_positive_float(
        agent_data.get("timeout", DEFAULT_TIMEOUT_SECONDS),
        min_value=0.001,
        max_value=MAX_TIMEOUT_SECONDS,
        field_name="agent.timeout",
    )

    unknown_keys = set(agent_data) - {"url", "timeout"}
    if unknown_keys:
        logger.warning(f"Ignoring unknown [agent] settings: {sorted(unknown_keys)}")

    return AgentConfig(url=url, timeout=timeout)


def validate_app_config(config_data: Dict[str, Any]) -> AppConfig:
    """
    Validate the complete configuration document.

    Raises:
        ValidationError: If a section is not a table or a value is invalid
    """
    agent_data = config_data.get("agent", {})
    if not isinstance(agent_data, dict):
        raise ValidationError("[agent] must be a table", field_name="agent", value=agent_data)

    logging_data = config_data.get("logging", {})
    if not isinstance(logging_data, dict):
        raise ValidationError("[logging] must be a table", field_name="logging", value=logging_data)

    log_level = validate_enum_choice(
        logging_data.get("level", DEFAULT_LOG_LEVEL),
        valid_choices=LOG_LEVELS,
        field_name="logging.level",
        case_sensitive=False,
    )

    return AppConfig(agent=validate_agent_config(agent_data), log_level=log_level)
