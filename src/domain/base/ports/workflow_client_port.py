"""Domain ports for the remote workflow-execution service."""

from abc import ABC, abstractmethod
from typing import Dict, Optional

from src.domain.workflow.value_objects import OutputParameter, WorkflowInvocationSpec


class ExecutionTokenPort(ABC):
    """Live handle on one remote workflow execution."""

    @property
    @abstractmethod
    def state(self) -> Optional[str]:
        """Most recently observed execution state."""

    @abstractmethod
    def refresh_state(self) -> Optional[str]:
        """Re-read the execution state from the service and return it."""

    @abstractmethod
    def output_parameters(self) -> Dict[str, OutputParameter]:
        """Output parameters of the execution, keyed by name."""

    @property
    def failure_reason(self) -> Optional[str]:
        """Error the service recorded for a failed execution, if any."""
        return None


class WorkflowClientPort(ABC):
    """Port for submitting workflow executions."""

    @abstractmethod
    def submit(self, spec: WorkflowInvocationSpec) -> ExecutionTokenPort:
        """
        Start an execution of the workflow described by ``spec``.

        Raises:
            BadWorkflowRequestError: If the service rejects the request as malformed
            WorkflowSubmissionError: For other submission failures
        """
