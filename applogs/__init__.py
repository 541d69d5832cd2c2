"""
applogs - Unified build and deployment log stream for AWS-hosted applications.

This package queries CodeBuild/CloudWatch Logs and ECS for a named application,
normalizes their events into one record type and merges them by timestamp.
"""

from .log import LogRecord, Source, Process, Selector
from .errors import AppLogsError, NotFoundError, BackendTimeoutError, UnexpectedBackendFault
from .aggregator import LogAggregator, describe_logs

__version__ = "0.1.0"

__all__ = [
    "LogRecord",
    "Source",
    "Process",
    "Selector",
    "AppLogsError",
    "NotFoundError",
    "BackendTimeoutError",
    "UnexpectedBackendFault",
    "LogAggregator",
    "describe_logs",
]
