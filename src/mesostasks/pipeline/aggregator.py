"""
Averaging of grouped instance metrics.

Each metric is averaged over all instances of the task, counting instances
that did not report the metric as zero. Utilization percentages are derived
from the averaged values.
"""

import logging
from typing import Dict, List

from ..models.statistics import (
    DISK_PERC_FIELD,
    INSTANCES_FIELD,
    MEM_PERC_FIELD,
    AveragedTaskMetrics,
    FlatMetricMap,
    TaskGroupAccumulator,
)

logger = logging.getLogger(__name__)

# Derived field -> (numerator, denominator)
PERCENTAGE_FIELDS = {
    MEM_PERC_FIELD: ("mem_rss_bytes", "mem_limit_bytes"),
    DISK_PERC_FIELD: ("disk_used_bytes", "disk_limit_bytes"),
}


def _average_group(instances: List[FlatMetricMap]) -> Dict[str, float]:
    count = float(len(instances))

    sums: Dict[str, float] = {}
    for metrics in instances:
        for name, value in metrics.items():
            sums[name] = sums.get(name, 0.0) + value

    averaged = {name: total / count for name, total in sums.items()}
    averaged[INSTANCES_FIELD] = count

    for derived, (numerator, denominator) in PERCENTAGE_FIELDS.items():
        if numerator in averaged and denominator in averaged and averaged[denominator] != 0:
            averaged[derived] = averaged[numerator] / averaged[denominator] * 100

    return averaged


def average_metrics(groups: TaskGroupAccumulator) -> AveragedTaskMetrics:
    """
    Reduce every task group to a single averaged metric map.

    Args:
        groups: Flat metric maps per task name; every list is non-empty

    Returns:
        Averaged metrics per task name, including `instances` and, where
        computable, `mem_perc` and `disk_perc`
    """
    result: AveragedTaskMetrics = {}
    for task_name, instances in groups.items():
        if not instances:
            continue
        result[task_name] = _average_group(instances)
        logger.debug(f"Averaged {len(instances)} instance(s) of task '{task_name}'")
    return result
