"""
Base collector interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import logging

from ..errors import AppLogsError, translate_backend_error
from ..log import LogRecord, Process


class Collector(ABC):
    """Abstract base class for log collectors."""

    @property
    @abstractmethod
    def process(self) -> Process:
        """The subsystem this collector reads from."""
        pass

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(type(self).__module__)

    @abstractmethod
    def collect(self, app_name: str) -> List[LogRecord]:
        """
        Return the log records of one application.

        Args:
            app_name: Application name

        Returns:
            Log records in backend order

        Raises:
            NotFoundError: If the backend resource for the application does not exist
            BackendTimeoutError: If a backend call timed out
            UnexpectedBackendFault: On any other backend error
        """
        pass

    def _fault(self, error: Exception, operation: str, context: Dict[str, Any]) -> AppLogsError:
        """Log a failed backend call and return the typed error to raise."""
        self.logger.error(f"{operation} failed: {error}", extra={"context": context})
        fault = translate_backend_error(error, operation, context)
        fault.__cause__ = error
        return fault
