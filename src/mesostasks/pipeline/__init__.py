"""
Statistics transformation pipeline.

Stages, applied in order:
- decoder: raw JSON document -> per-instance records
- grouper: records -> flat metric maps grouped by task name
- aggregator: grouped maps -> averaged metrics with derived percentages
- serializer: averaged metrics -> line protocol text
"""

import logging
from typing import Union

from .aggregator import PERCENTAGE_FIELDS, average_metrics
from .decoder import decode_statistics
from .grouper import TASK_NAME_PATTERN, extract_task_name, group_by_task
from .serializer import MEASUREMENT, format_task_line, to_line_protocol

logger = logging.getLogger(__name__)


def run_pipeline(raw: Union[str, bytes, bytearray]) -> str:
    """
    Transform a raw statistics document into line protocol output.

    Raises:
        ParseError: If the document cannot be decoded
    """
    records = decode_statistics(raw)
    averaged = average_metrics(group_by_task(records))
    logger.info(f"Processed {len(records)} instance(s) into {len(averaged)} task line(s)")
    return to_line_protocol(averaged)


__all__ = [
    "run_pipeline",
    "decode_statistics",
    "extract_task_name",
    "group_by_task",
    "average_metrics",
    "to_line_protocol",
    "format_task_line",
    "TASK_NAME_PATTERN",
    "PERCENTAGE_FIELDS",
    "MEASUREMENT",
]
