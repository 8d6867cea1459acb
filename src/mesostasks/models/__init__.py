"""
Data models for the task statistics monitor.

Statistics Models:
- Decoded per-instance records with optional per-metric values
- Flat, grouped and averaged metric mappings used between pipeline stages

Configuration Models:
- Agent connection settings and application-wide configuration
"""

from .config import (
    DEFAULT_AGENT_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TIMEOUT_SECONDS,
    AgentConfig,
    AppConfig,
)
from .statistics import (
    DISK_PERC_FIELD,
    INSTANCES_FIELD,
    MEM_PERC_FIELD,
    RECOGNIZED_METRICS,
    AveragedTaskMetrics,
    FlatMetricMap,
    InstanceStatistics,
    RawInstanceRecord,
    TaskGroupAccumulator,
)

__all__ = [
    # Configuration
    "AgentConfig",
    "AppConfig",
    "DEFAULT_AGENT_URL",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_TIMEOUT_SECONDS",
    # Statistics
    "InstanceStatistics",
    "RawInstanceRecord",
    "RECOGNIZED_METRICS",
    "INSTANCES_FIELD",
    "MEM_PERC_FIELD",
    "DISK_PERC_FIELD",
    "FlatMetricMap",
    "TaskGroupAccumulator",
    "AveragedTaskMetrics",
]
