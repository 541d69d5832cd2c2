"""
Build log collector backed by CodeBuild and CloudWatch Logs.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
import logging

from botocore.exceptions import BotoCoreError, ClientError

from ..errors import NotFoundError, error_code
from ..log import LogRecord, Process, Source, strip_line_terminators
from .base import Collector

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def millis_to_utc(timestamp_ms: int) -> datetime:
    """Convert epoch milliseconds to an aware UTC datetime."""
    return EPOCH + timedelta(milliseconds=timestamp_ms)


def build_record_id(build_id: str, timestamp_ms: int, message: str) -> str:
    """
    Synthesize a record ID for a build output event.

    CloudWatch Logs events have no native ID, so the build ID, the raw event
    timestamp and the raw message are combined.
    """
    return f"{build_id}-{timestamp_ms}-{message}"


class BuildLogCollector(Collector):
    """Collects the output of the most recent CodeBuild run of an application."""

    process = Process.BUILDER

    def __init__(self, codebuild_client, logs_client, logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self.codebuild = codebuild_client
        self.logs = logs_client

    def collect(self, app_name: str) -> List[LogRecord]:
        build_id = self._latest_build_id(app_name)
        if build_id is None:
            return []

        build = self._build_details(build_id)
        if build is None:
            return []

        logs_info = build.get("logs") or {}
        group = logs_info.get("groupName")
        stream = logs_info.get("streamName")
        if not group or not stream:
            # Build has not started writing to CloudWatch yet
            self.logger.debug(f"Build {build_id} has no log stream yet")
            return []

        events = self._log_events(group, stream)
        records = [self._to_record(build_id, event) for event in events]
        self.logger.debug(f"Collected {len(records)} builder log records for {app_name}")
        return records

    def _latest_build_id(self, project_name: str) -> Optional[str]:
        context = {"ProjectName": project_name}
        try:
            response = self.codebuild.list_builds_for_project(projectName=project_name)
        except ClientError as e:
            if error_code(e) == "ResourceNotFoundException":
                self.logger.info(f"Build project {project_name} not found")
                raise NotFoundError("build project", project_name) from e
            raise self._fault(e, "ListBuildsForProject", context)
        except BotoCoreError as e:
            raise self._fault(e, "ListBuildsForProject", context)

        ids = response.get("ids", [])
        if not ids:
            return None
        return ids[0]

    def _build_details(self, build_id: str) -> Optional[Dict[str, Any]]:
        context = {"Build ID": build_id}
        try:
            response = self.codebuild.batch_get_builds(ids=[build_id])
        except (ClientError, BotoCoreError) as e:
            raise self._fault(e, "BatchGetBuilds", context)

        builds = response.get("builds", [])
        if not builds:
            return None
        return builds[0]

    def _log_events(self, group: str, stream: str) -> List[Dict[str, Any]]:
        context = {"LogGroupName": group, "LogStreamName": stream}
        try:
            response = self.logs.get_log_events(logGroupName=group, logStreamName=stream)
        except (ClientError, BotoCoreError) as e:
            raise self._fault(e, "GetLogEvents", context)
        return response.get("events", [])

    def _to_record(self, build_id: str, event: Dict[str, Any]) -> LogRecord:
        timestamp_ms = event.get("timestamp", 0)
        message = event.get("message", "")
        return LogRecord(
            id=build_record_id(build_id, timestamp_ms, message),
            timestamp=millis_to_utc(timestamp_ms),
            source=Source.APP,
            process=Process.BUILDER,
            message=strip_line_terminators(message),
        )

