"""
Task resource statistics data models.

This module defines the shapes that flow through the statistics pipeline:
the decoded per-instance snapshot, the flat per-instance metric map, the
per-task accumulator and the final averaged metrics.
"""

from dataclasses import dataclass, field, fields
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class InstanceStatistics:
    """
    Resource statistics reported by the agent for a single task instance.

    Every attribute is optional: the agent omits fields it does not track
    for a given instance, and an omitted field stays None rather than 0.
    """

    mem_unevictable_bytes: Optional[float] = None
    mem_total_memsw_bytes: Optional[float] = None
    mem_critical_pressure_counter: Optional[float] = None
    mem_cache_bytes: Optional[float] = None
    mem_anon_bytes: Optional[float] = None
    disk_used_bytes: Optional[float] = None
    disk_limit_bytes: Optional[float] = None
    cpus_user_time_secs: Optional[float] = None
    cpus_system_time_secs: Optional[float] = None
    cpus_limit: Optional[float] = None
    mem_file_bytes: Optional[float] = None
    mem_limit_bytes: Optional[float] = None
    mem_low_pressure_counter: Optional[float] = None
    mem_mapped_file_bytes: Optional[float] = None
    mem_medium_pressure_counter: Optional[float] = None
    mem_rss_bytes: Optional[float] = None
    mem_swap_bytes: Optional[float] = None
    mem_total_bytes: Optional[float] = None

    def present(self) -> Dict[str, float]:
        """Return only the metrics that were reported, keyed by metric name."""
        result = {}
        for metric in RECOGNIZED_METRICS:
            value = getattr(self, metric)
            if value is not None:
                result[metric] = value
        return result


# Order follows the attribute declarations above.
RECOGNIZED_METRICS: Tuple[str, ...] = tuple(f.name for f in fields(InstanceStatistics))


@dataclass(frozen=True)
class RawInstanceRecord:
    """
    One polled instance's statistics snapshot.

    Attributes:
        executor_id: Identifier of the instance, "<task name>.<uuid>" for
                     instances that belong to a named task.
        statistics: The recognized metrics reported for the instance.
    """

    executor_id: str
    statistics: InstanceStatistics = field(default_factory=InstanceStatistics)


# Synthetic fields added during aggregation
INSTANCES_FIELD = "instances"
MEM_PERC_FIELD = "mem_perc"
DISK_PERC_FIELD = "disk_perc"

# Metric name -> value for one instance; only reported metrics are present.
FlatMetricMap = Dict[str, float]
# Task name -> flat maps of every instance of that task.
TaskGroupAccumulator = Dict[str, List[FlatMetricMap]]
# Task name -> averaged metrics plus derived fields.
AveragedTaskMetrics = Dict[str, Dict[str, float]]
