"""
Configuration loaded from environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_CONNECT_TIMEOUT = 5.0
DEFAULT_READ_TIMEOUT = 30.0

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Runtime settings for the AWS clients and the aggregator."""
    region: Optional[str] = None
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT
    parallel: bool = False


def _read_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env: Mapping to read from; defaults to ``os.environ``

    Returns:
        Settings: Loaded settings

    Raises:
        ValueError: If a timeout is not a positive number
    """
    if env is None:
        env = os.environ

    region = env.get("APPLOGS_REGION") or env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION") or None

    return Settings(
        region=region,
        connect_timeout=_read_float(env, "APPLOGS_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT),
        read_timeout=_read_float(env, "APPLOGS_READ_TIMEOUT", DEFAULT_READ_TIMEOUT),
        parallel=env.get("APPLOGS_PARALLEL", "").strip().lower() in TRUTHY,
    )
