"""
Test helpers shared by the collector and aggregator tests.
"""

from datetime import datetime, timezone

from botocore.exceptions import ClientError


def client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised"}}, operation)


def ms(value: datetime) -> int:
    return int(value.timestamp() * 1000)


T1 = datetime(2018, 3, 1, 10, 0, 0, tzinfo=timezone.utc)
T2 = datetime(2018, 3, 1, 10, 0, 10, tzinfo=timezone.utc)
T3 = datetime(2018, 3, 1, 10, 0, 5, tzinfo=timezone.utc)
