"""
Text and JSON rendering of log records.
"""

import json
from typing import Iterable, List

from .log import LogRecord


def format_line(record: LogRecord) -> str:
    """Render a record as ``<timestamp> <source>[<process>]: <message>``."""
    return f"{record.timestamp.isoformat()} {record.source.value}[{record.process.value}]: {record.message}"


def format_lines(records: Iterable[LogRecord]) -> List[str]:
    return [format_line(record) for record in records]


def format_json_lines(records: Iterable[LogRecord]) -> List[str]:
    """Render each record as one JSON object per line."""
    return [json.dumps(record.to_dict()) for record in records]
