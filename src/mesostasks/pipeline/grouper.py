"""
Grouping of instance records by task name.

Executor identifiers of task instances look like "<task name>.<uuid>".
Instances whose identifier carries no such suffix are not part of any task
and are dropped without error.
"""

import logging
import re
from typing import Iterable, Optional

from ..models.statistics import RawInstanceRecord, TaskGroupAccumulator

logger = logging.getLogger(__name__)

# Name, a dot, then a 36 character UUID. Not anchored: the first match
# anywhere in the identifier wins. Only space, \t, \n, \f and \r end a name.
TASK_NAME_PATTERN = re.compile(r"([^\t\n\f\r ]+)\.[0-9A-Fa-f-]{36}")


def extract_task_name(executor_id: str) -> Optional[str]:
    """
    Return the task name encoded in an executor identifier.

    Examples:
        >>> extract_task_name("web.1a2b3c4d-0000-0000-0000-000000000000")
        'web'
        >>> extract_task_name("noiddashhere") is None
        True
    """
    match = TASK_NAME_PATTERN.search(executor_id)
    if match is None:
        return None
    return match.group(1)


def group_by_task(records: Iterable[RawInstanceRecord]) -> TaskGroupAccumulator:
    """
    Collect the reported metrics of every instance under its task name.

    Args:
        records: Decoded instance records

    Returns:
        Mapping of task name to one flat metric map per matched instance
    """
    groups: TaskGroupAccumulator = {}
    dropped = 0

    for record in records:
        task_name = extract_task_name(record.executor_id)
        if task_name is None:
            dropped += 1
            logger.debug(f"Skipping instance without task suffix: {record.executor_id!r}")
            continue
        groups.setdefault(task_name, []).append(record.statistics.present())

    if dropped:
        logger.debug(f"Dropped {dropped} instance(s) with unrecognized executor ids")
    logger.debug(f"Grouped instances into {len(groups)} task(s)")
    return groups
