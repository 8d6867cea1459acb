"""
Rendering of averaged task metrics as line protocol.

One line per task:

    mesos_tasks,task_name=<name> <field>=<value>,<field>=<value>,...

Values carry exactly three decimals. Task names are written verbatim; a
name containing a comma, space or equals sign produces a malformed line.
"""

from ..models.statistics import AveragedTaskMetrics

MEASUREMENT = "mesos_tasks"


def format_task_line(task_name: str, metrics: dict) -> str:
    """Render a single task's metrics, fields sorted by name."""
    fields = ",".join(f"{name}={metrics[name]:.3f}" for name in sorted(metrics))
    return f"{MEASUREMENT},task_name={task_name} {fields}"


def to_line_protocol(averaged: AveragedTaskMetrics) -> str:
    """
    Render all tasks, sorted by task name, as newline-joined lines.

    Returns an empty string when there are no tasks.
    """
    return "\n".join(
        format_task_line(task_name, averaged[task_name]) for task_name in sorted(averaged)
    )
