"""
Domain Layer

Organised by bounded context:
- base/: Shared kernel with the exception taxonomy and collaborator ports
- provisioning/: Provisioning state of a managed server
- workflow/: Workflow invocation specs, execution states and outputs
"""

from .base import DomainException
from .provisioning import ProvisioningState
from .workflow import OutputParameter, WorkflowInvocationSpec, WorkflowState

__all__ = [
    "DomainException",
    "ProvisioningState",
    "OutputParameter",
    "WorkflowInvocationSpec",
    "WorkflowState",
]
