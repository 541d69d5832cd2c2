"""
AWS client wrapper that wires boto3 clients into the collectors.
"""

from dataclasses import dataclass
from typing import List, Optional

import boto3
from botocore.config import Config

from .aggregator import LogAggregator
from .collectors import BuildLogCollector, DeploymentLogCollector
from .config import Settings, load_settings
from .log import LogRecord, Selector


@dataclass
class ClientOption:
    """Options for the Client. An empty region falls back to the boto3 default chain."""
    region: Optional[str] = None


def botocore_config(settings: Settings) -> Config:
    """Per-call timeouts, with botocore's retries turned off."""
    return Config(
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )


class Client:
    """Log client for deployed applications, wrapping the CodeBuild, CloudWatch Logs and ECS APIs."""

    def __init__(self, option: Optional[ClientOption] = None, settings: Optional[Settings] = None):
        self.settings = settings or load_settings()
        region = (option.region if option else None) or self.settings.region
        config = botocore_config(self.settings)

        if region:
            session = boto3.Session(region_name=region)
        else:
            session = boto3.Session()

        self.codebuild = session.client("codebuild", config=config)
        self.cloudwatch_logs = session.client("logs", config=config)
        self.ecs = session.client("ecs", config=config)

        self.aggregator = LogAggregator(
            [
                BuildLogCollector(self.codebuild, self.cloudwatch_logs),
                DeploymentLogCollector(self.ecs),
            ],
            parallel=self.settings.parallel,
        )

    def describe_logs(self, app_name: str, selector: Optional[Selector]) -> List[LogRecord]:
        """Return the application logs from CodeBuild and ECS, sorted by timestamp."""
        return self.aggregator.describe_logs(app_name, selector)
