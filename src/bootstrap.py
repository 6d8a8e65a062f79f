"""Application bootstrap - wires the lifecycle service to its collaborators."""

from __future__ import annotations

from typing import Optional

from src.application.lifecycle.service import ServerLifecycleService
from src.application.workflow.invoker import WorkflowInvoker
from src.application.workflow.poller import CompletionPoller
from src.config.schemas import AppConfig
from src.domain.base.ports import LoggingPort, ReadinessProbePort, WorkflowClientPort
from src.infrastructure.adapters.logging_adapter import LoggingAdapter
from src.infrastructure.transport.tcp_probe import TcpReadinessProbe
from src.providers.vro.client import VroClient


def create_workflow_client(config: AppConfig) -> VroClient:
    """Create the vRO client from driver configuration."""
    driver = config.driver
    return VroClient(
        base_url=driver.vro_base_url,
        username=driver.vro_username,
        password=driver.vro_password,
        verify_ssl=driver.verify_ssl,
    )


def create_lifecycle_service(
    config: AppConfig,
    logger: Optional[LoggingPort] = None,
    client: Optional[WorkflowClientPort] = None,
    readiness_probe: Optional[ReadinessProbePort] = None,
) -> ServerLifecycleService:
    """
    Build a lifecycle service for one lifecycle call.

    Collaborators are constructed explicitly from ``config`` unless supplied.
    """
    logger = logger or LoggingAdapter()
    client = client or create_workflow_client(config)
    readiness_probe = readiness_probe or TcpReadinessProbe(config.transport, logger)

    return ServerLifecycleService(
        config=config.driver,
        invoker=WorkflowInvoker(client, logger),
        poller=CompletionPoller(timeout=config.driver.request_timeout),
        readiness_probe=readiness_probe,
        logger=logger,
    )
