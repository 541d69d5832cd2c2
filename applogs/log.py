"""
Canonical log record and the selector used to filter it.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Source(Enum):
    """Where a log record originates."""
    APP = "app"


class Process(Enum):
    """Which subsystem produced a log record."""
    BUILDER = "builder"
    DEPLOYER = "deployer"


# Ordering used when two records share a timestamp
SOURCE_RANK = {source: rank for rank, source in enumerate(Source)}
PROCESS_RANK = {process: rank for rank, process in enumerate(Process)}


@dataclass(frozen=True)
class LogRecord:
    """A single normalized log line from one of the backend subsystems."""
    id: str
    timestamp: datetime  # always UTC
    source: Source
    process: Process
    message: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the record into a JSON-ready dict."""
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "source": self.source.value,
            "process": self.process.value,
            "message": self.message,
        }


def to_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to UTC.

    Naive datetimes are assumed to already be in UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def strip_line_terminators(message: str) -> str:
    return message.rstrip("\r\n")


@dataclass(frozen=True)
class Selector:
    """
    Caller supplied filter restricting which logs are collected.

    Empty or missing values mean "no filtering" for that field. Values are
    kept as raw strings so that unknown values coming from a CLI or query
    string can be resolved (and ignored) here rather than rejected upstream.
    """
    source: Optional[str] = None
    process: Optional[str] = None

    def resolve_source(self) -> Tuple[bool, Optional[Source]]:
        """
        Resolve the source filter.

        Returns:
            Tuple of (collect, source). ``collect`` is False when the source is
            not recognized; unknown sources yield nothing instead of an error.
        """
        if not self.source:
            return True, None
        for source in Source:
            if source.value == self.source:
                return True, source
        return False, None

    def resolve_processes(self) -> Tuple[Process, ...]:
        """
        Resolve the process filter into the processes to collect, in collection order.

        An unrecognized process value selects nothing.
        """
        if not self.process:
            return tuple(Process)
        for process in Process:
            if process.value == self.process:
                return (process,)
        return ()
