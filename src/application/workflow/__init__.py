"""Workflow invocation and completion tracking."""

from .invoker import WorkflowInvoker
from .outputs import (
    IP_ADDRESS_PARAMETER,
    REQUIRED_CREATE_OUTPUTS,
    SERVER_ID_PARAMETER,
    WorkflowOutputs,
)
from .parameter_binder import bind_parameters, build_invocation_spec
from .poller import POLL_INTERVAL_SECONDS, CompletionPoller

__all__ = [
    "WorkflowInvoker",
    "WorkflowOutputs",
    "CompletionPoller",
    "bind_parameters",
    "build_invocation_spec",
    "POLL_INTERVAL_SECONDS",
    "SERVER_ID_PARAMETER",
    "IP_ADDRESS_PARAMETER",
    "REQUIRED_CREATE_OUTPUTS",
]
