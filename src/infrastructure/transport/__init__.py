"""Transport readiness probes."""

from .tcp_probe import TcpReadinessProbe

__all__ = ["TcpReadinessProbe"]
