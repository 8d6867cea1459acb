"""
Configuration data models.

The configuration is assembled once at process start from built-in defaults,
an optional TOML file and command-line overrides, then passed explicitly to
the components that need it.
"""

from dataclasses import dataclass, field

DEFAULT_AGENT_URL = "http://localhost:5051"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class AgentConfig:
    """
    Connection settings for the cluster-node agent, loaded from `[agent]`.
    """

    # Base URL of the agent, without a trailing slash.
    url: str = DEFAULT_AGENT_URL
    # Timeout for the statistics request, in seconds.
    timeout: float = DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    agent: AgentConfig = field(default_factory=AgentConfig)
    # Logging level name, loaded from `[logging]`.
    log_level: str = DEFAULT_LOG_LEVEL
