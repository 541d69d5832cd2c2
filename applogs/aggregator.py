"""
Log aggregation across collectors.

The aggregator resolves a Selector into the processes to collect, runs the
matching collectors and merges their records into one time-ordered list.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional, Tuple
import logging

from .collectors.base import Collector
from .log import LogRecord, Process, Selector, PROCESS_RANK, SOURCE_RANK


def sort_key(record: LogRecord) -> Tuple:
    """Order by timestamp, then source, then process (builder first)."""
    return (record.timestamp, SOURCE_RANK[record.source], PROCESS_RANK[record.process])


def merge_records(batches: Iterable[List[LogRecord]]) -> List[LogRecord]:
    """
    Concatenate record batches and sort them.

    The sort is stable, so records that tie on the sort key keep the order in
    which their batches (and the records within each batch) were given.
    """
    records: List[LogRecord] = []
    for batch in batches:
        records.extend(batch)
    records.sort(key=sort_key)
    return records


class LogAggregator:
    """Runs the collectors picked by a Selector and merges their output."""

    def __init__(self, collectors: Iterable[Collector], parallel: bool = False,
                 logger: Optional[logging.Logger] = None):
        self.collectors: Dict[Process, Collector] = {}
        for collector in collectors:
            self.collectors[collector.process] = collector
        self.parallel = parallel
        self.logger = logger or logging.getLogger(__name__)

    def describe_logs(self, app_name: str, selector: Optional[Selector]) -> List[LogRecord]:
        """
        Return the logs of an application, sorted by timestamp ascending.

        Args:
            app_name: Application name (build project, ECS cluster and service name)
            selector: Source/process filter. ``None`` fetches nothing.

        Returns:
            Sorted log records

        Raises:
            NotFoundError: If the build project or ECS cluster does not exist
            BackendTimeoutError: If a backend call timed out
            UnexpectedBackendFault: On any other backend error
        """
        if selector is None:
            return []

        # Unknown sources are ignored rather than rejected
        collect, _ = selector.resolve_source()
        if not collect:
            self.logger.debug(f"Ignoring unrecognized log source {selector.source!r}")
            return []

        processes = selector.resolve_processes()
        if not processes:
            self.logger.debug(f"Ignoring unrecognized process {selector.process!r}")
            return []

        collectors = [self.collectors[process] for process in processes if process in self.collectors]
        if self.parallel and len(collectors) > 1:
            batches = self._collect_parallel(collectors, app_name)
        else:
            batches = [collector.collect(app_name) for collector in collectors]

        records = merge_records(batches)
        self.logger.info(f"Collected {len(records)} log records for {app_name}")
        return records

    def _collect_parallel(self, collectors: List[Collector], app_name: str) -> List[List[LogRecord]]:
        with ThreadPoolExecutor(max_workers=len(collectors)) as executor:
            futures = [executor.submit(collector.collect, app_name) for collector in collectors]
            # result() re-raises the first failure in selection order; the
            # other batches are dropped with it
            return [future.result() for future in futures]


def describe_logs(app_name: str, selector: Optional[Selector], collectors: Iterable[Collector],
                  parallel: bool = False) -> List[LogRecord]:
    """Aggregate the logs of an application with the given collectors."""
    return LogAggregator(collectors, parallel=parallel).describe_logs(app_name, selector)
