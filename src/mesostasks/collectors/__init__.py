"""
Data collection from the cluster-node agent.
"""

from .statistics_client import STATISTICS_PATH, fetch_statistics, statistics_endpoint

__all__ = [
    "STATISTICS_PATH",
    "fetch_statistics",
    "statistics_endpoint",
]
