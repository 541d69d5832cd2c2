"""
Error taxonomy for log collection.

``NotFoundError`` and ``BackendTimeoutError`` are recoverable: the caller may
present them and carry on. ``UnexpectedBackendFault`` means the backend call
failed for a reason the collectors cannot interpret.
"""

from typing import Any, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError, ConnectTimeoutError, ReadTimeoutError


class AppLogsError(Exception):
    """Base class for all log collection errors."""
    recoverable = False


class NotFoundError(AppLogsError):
    """The build project or the ECS cluster for an application does not exist."""
    recoverable = True

    def __init__(self, resource: str, name: str):
        self.resource = resource
        self.name = name
        super().__init__(f"{resource} not found: {name}")


class BackendTimeoutError(AppLogsError):
    """A backend call did not complete within the configured timeout."""
    recoverable = True

    def __init__(self, operation: str, context: Optional[Dict[str, Any]] = None):
        self.operation = operation
        self.context = dict(context or {})
        super().__init__(f"{operation} timed out ({_format_context(self.context)})")


class UnexpectedBackendFault(AppLogsError):
    """Any backend failure other than a missing resource or a timeout."""

    def __init__(self, operation: str, reason: str, context: Optional[Dict[str, Any]] = None):
        self.operation = operation
        self.reason = reason
        self.context = dict(context or {})
        super().__init__(f"{operation} failed: {reason} ({_format_context(self.context)})")


def _format_context(context: Dict[str, Any]) -> str:
    return ", ".join(f"{key}={value}" for key, value in context.items())


def error_code(error: ClientError) -> str:
    """Extract the AWS error code from a ClientError."""
    return error.response.get("Error", {}).get("Code", "")


def translate_backend_error(error: Exception, operation: str, context: Dict[str, Any]) -> AppLogsError:
    """
    Map a boto3/botocore exception to the matching AppLogsError.

    Not-found handling is operation specific, so callers check for it before
    falling back to this function.
    """
    if isinstance(error, (ConnectTimeoutError, ReadTimeoutError)):
        return BackendTimeoutError(operation, context)
    if isinstance(error, ClientError):
        return UnexpectedBackendFault(operation, f"{error_code(error)}: {error}", context)
    if isinstance(error, BotoCoreError):
        return UnexpectedBackendFault(operation, str(error), context)
    return UnexpectedBackendFault(operation, repr(error), context)
