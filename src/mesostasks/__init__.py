"""
mesostasks: per-task resource statistics for Mesos agents.

Polls a Mesos agent's task statistics endpoint, averages the resource
metrics of all instances of each task, derives memory and disk utilization
percentages and renders the result as line protocol for a metrics collector.

The package is organized into specialized modules:
- config: Configuration loading and validation
- models: Data structures and type definitions
- validation: Error types, error handling and value validators
- collectors: Retrieval of the statistics document from the agent
- pipeline: Decoding, grouping, averaging and serialization
- cli: Command-line interface

Usage:
    From command line:
        mesostasks http://localhost:5051 --timeout 5

    Programmatically:
        from mesostasks import load_config, fetch_statistics, run_pipeline
        config = load_config()
        print(run_pipeline(fetch_statistics(config.agent)))
"""

from .cli import main_cli
from .collectors import fetch_statistics
from .config import load_config
from .models import (
    AgentConfig,
    AppConfig,
    InstanceStatistics,
    RawInstanceRecord,
    RECOGNIZED_METRICS,
)
from .pipeline import (
    average_metrics,
    decode_statistics,
    extract_task_name,
    group_by_task,
    run_pipeline,
    to_line_protocol,
)
from .validation import FetchError, MonitorError, ParseError, ValidationError

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "main_cli",
    "load_config",
    "fetch_statistics",
    "run_pipeline",
    # Pipeline stages
    "decode_statistics",
    "extract_task_name",
    "group_by_task",
    "average_metrics",
    "to_line_protocol",
    # Models
    "AgentConfig",
    "AppConfig",
    "InstanceStatistics",
    "RawInstanceRecord",
    "RECOGNIZED_METRICS",
    # Errors
    "MonitorError",
    "FetchError",
    "ParseError",
    "ValidationError",
]
