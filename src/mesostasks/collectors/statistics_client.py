"""
HTTP client for the agent's task resource statistics endpoint.

A single GET per invocation; any transport failure or non-200 response is
reported as a FetchError. There is no retry.
"""

import logging

import requests

from ..models.config import AgentConfig
from ..validation import FetchError

logger = logging.getLogger(__name__)

STATISTICS_PATH = "/monitor/statistics.json"


def statistics_endpoint(base_url: str) -> str:
    """Return the statistics endpoint URL for an agent base URL."""
    return f"{base_url.rstrip('/')}{STATISTICS_PATH}"


def fetch_statistics(agent_config: AgentConfig) -> bytes:
    """
    Fetch the raw statistics document from the agent.

    Args:
        agent_config: Agent URL and request timeout

    Returns:
        The undecoded response body

    Raises:
        FetchError: On a transport failure or a status other than 200
    """
    url = statistics_endpoint(agent_config.url)
    logger.info(f"Fetching task statistics from {url} (timeout {agent_config.timeout}s)")

    try:
        response = requests.get(url, timeout=agent_config.timeout)
    except requests.RequestException as e:
        raise FetchError(str(e), url=url) from e

    if response.status_code != 200:
        raise FetchError(
            f"HTTP response code: {response.status_code} {response.reason}",
            url=url,
            status_code=response.status_code,
        )

    logger.debug(f"Received {len(response.content)} bytes from {url}")
    return response.content
