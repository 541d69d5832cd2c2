"""
Shared fixtures: boto3 client doubles for CodeBuild, CloudWatch Logs and ECS.
"""

from unittest.mock import Mock

import pytest

from helpers import T1, T2, T3, ms


@pytest.fixture
def codebuild():
    """CodeBuild client with one build of project myapp."""
    client = Mock()
    client.list_builds_for_project.return_value = {"ids": ["myapp:1234", "myapp:1233"]}
    client.batch_get_builds.return_value = {
        "builds": [{
            "id": "myapp:1234",
            "logs": {"groupName": "/aws/codebuild/myapp", "streamName": "1234"},
        }]
    }
    return client


@pytest.fixture
def cloudwatch_logs():
    """CloudWatch Logs client with two build output events at T1 and T2."""
    client = Mock()
    client.get_log_events.return_value = {
        "events": [
            {"timestamp": ms(T1), "message": "[Container] Entering phase INSTALL\n", "ingestionTime": ms(T1)},
            {"timestamp": ms(T2), "message": "[Container] Phase complete: BUILD State: SUCCEEDED\n", "ingestionTime": ms(T2)},
        ]
    }
    return client


@pytest.fixture
def ecs():
    """ECS client with one service event at T3."""
    client = Mock()
    client.describe_services.return_value = {
        "services": [{
            "serviceName": "myapp",
            "events": [
                {"id": "a1b2c3", "createdAt": T3, "message": "(service myapp) has reached a steady state."},
            ],
        }],
        "failures": [],
    }
    return client
