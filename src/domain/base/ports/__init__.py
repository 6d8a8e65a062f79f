"""Domain ports for infrastructure concerns."""

from .logging_port import LoggingPort
from .readiness_probe_port import ReadinessProbePort
from .workflow_client_port import ExecutionTokenPort, WorkflowClientPort

__all__ = [
    "LoggingPort",
    "ExecutionTokenPort",
    "WorkflowClientPort",
    "ReadinessProbePort",
]
