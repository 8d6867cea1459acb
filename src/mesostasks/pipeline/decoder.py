"""
Decoding of the agent's statistics document.

The document is a JSON array with one object per task instance:

    [{"executor_id": "web.<uuid>", "statistics": {"mem_rss_bytes": 1024, ...}}, ...]

Fields outside the recognized set are ignored. A recognized metric must be
a finite number or null; anything else makes the whole document invalid.
A null document or a null element carries no instances.
"""

import json
import logging
import math
from typing import Any, Dict, List, Optional, Union

from ..models.statistics import RECOGNIZED_METRICS, InstanceStatistics, RawInstanceRecord
from ..validation import ParseError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> float:
    raise ParseError(f"JSON parse failed: invalid number literal {name}")


def _decode_metric(value: Any, index: int, metric: str) -> Optional[float]:
    if value is None:
        return None
    # bool is an int subclass but never a valid metric value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(
            f"JSON parse failed: statistics.{metric} of element {index} "
            f"must be a number, got {type(value).__name__}",
            index=index,
            field_name=metric,
        )
    try:
        result = float(value)
    except OverflowError as e:
        raise ParseError(
            f"JSON parse failed: statistics.{metric} of element {index} is out of range",
            index=index,
            field_name=metric,
        ) from e
    if not math.isfinite(result):
        raise ParseError(
            f"JSON parse failed: statistics.{metric} of element {index} is out of range",
            index=index,
            field_name=metric,
        )
    return result


def _decode_statistics(raw_stats: Any, index: int) -> InstanceStatistics:
    if raw_stats is None:
        return InstanceStatistics()
    if not isinstance(raw_stats, dict):
        raise ParseError(
            f"JSON parse failed: statistics of element {index} must be an object",
            index=index,
            field_name="statistics",
        )

    values: Dict[str, Optional[float]] = {}
    for metric in RECOGNIZED_METRICS:
        if metric in raw_stats:
            values[metric] = _decode_metric(raw_stats[metric], index, metric)
    return InstanceStatistics(**values)


def _decode_record(element: Any, index: int) -> RawInstanceRecord:
    if element is None:
        return RawInstanceRecord("")
    if not isinstance(element, dict):
        raise ParseError(
            f"JSON parse failed: element {index} must be an object, got {type(element).__name__}",
            index=index,
        )

    executor_id = element.get("executor_id")
    if executor_id is None:
        executor_id = ""
    elif not isinstance(executor_id, str):
        raise ParseError(
            f"JSON parse failed: executor_id of element {index} must be a string",
            index=index,
            field_name="executor_id",
        )

    return RawInstanceRecord(
        executor_id=executor_id,
        statistics=_decode_statistics(element.get("statistics"), index),
    )


def decode_statistics(raw: Union[str, bytes, bytearray]) -> List[RawInstanceRecord]:
    """
    Parse the raw statistics document into per-instance records.

    Args:
        raw: JSON text or UTF-8 encoded bytes

    Returns:
        One RawInstanceRecord per array element, in document order

    Raises:
        ParseError: If the input is not valid JSON or not an array of
            instance objects with numeric statistics
    """
    try:
        document = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise ParseError(f"JSON parse failed: {e}") from e

    if document is None:
        logger.debug("Statistics document is null, no instances decoded")
        return []

    if not isinstance(document, list):
        raise ParseError(
            f"JSON parse failed: expected an array, got {type(document).__name__}"
        )

    records = [_decode_record(element, index) for index, element in enumerate(document)]
    logger.debug(f"Decoded {len(records)} instance records")
    return records
