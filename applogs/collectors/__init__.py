"""
Collectors query one backend subsystem each and return canonical log records.
"""

from .base import Collector
from .builder import BuildLogCollector
from .deployer import DeploymentLogCollector

__all__ = [
    "Collector",
    "BuildLogCollector",
    "DeploymentLogCollector",
]
