"""Workflow bounded context - invocation specs, states and outputs."""

from .value_objects import OutputParameter, WorkflowInvocationSpec, WorkflowState

__all__ = ["OutputParameter", "WorkflowInvocationSpec", "WorkflowState"]
