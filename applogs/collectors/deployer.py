"""
Deployment log collector backed by the ECS service event history.
"""

from typing import Any, Dict, List, Optional
import logging

from botocore.exceptions import BotoCoreError, ClientError

from ..errors import NotFoundError, error_code
from ..log import LogRecord, Process, Source, to_utc
from .base import Collector


class DeploymentLogCollector(Collector):
    """
    Collects the events of an application's ECS service.

    The application name is used as both the cluster name and the service
    name: every application runs as one service in its own cluster.
    """

    process = Process.DEPLOYER

    def __init__(self, ecs_client, logger: Optional[logging.Logger] = None):
        super().__init__(logger)
        self.ecs = ecs_client

    def collect(self, app_name: str) -> List[LogRecord]:
        context = {"appName": app_name}
        try:
            response = self.ecs.describe_services(cluster=app_name, services=[app_name])
        except ClientError as e:
            if error_code(e) == "ClusterNotFoundException":
                self.logger.info(f"ECS cluster {app_name} not found")
                raise NotFoundError("ECS cluster", app_name) from e
            raise self._fault(e, "DescribeServices", context)
        except BotoCoreError as e:
            raise self._fault(e, "DescribeServices", context)

        services = response.get("services", [])
        if not services:
            failures = response.get("failures", [])
            if failures:
                self.logger.debug(f"No ECS service {app_name}: {failures}")
            return []

        records = [self._to_record(event) for event in services[0].get("events", [])]
        self.logger.debug(f"Collected {len(records)} deployer log records for {app_name}")
        return records

    def _to_record(self, event: Dict[str, Any]) -> LogRecord:
        return LogRecord(
            id=event.get("id", ""),
            timestamp=to_utc(event["createdAt"]),
            source=Source.APP,
            process=Process.DEPLOYER,
            message=event.get("message", ""),
        )
