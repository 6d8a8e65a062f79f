"""Reads and validates the outputs of a finished workflow execution."""

from typing import Dict, Optional

from src.domain.base.exceptions import (
    OutputParameterEmptyError,
    OutputParameterMissingError,
    WorkflowUnsuccessfulError,
)
from src.domain.base.ports import ExecutionTokenPort
from src.domain.workflow.value_objects import OutputParameter, WorkflowState

SERVER_ID_PARAMETER = "server_id"
IP_ADDRESS_PARAMETER = "ip_address"
REQUIRED_CREATE_OUTPUTS = (SERVER_ID_PARAMETER, IP_ADDRESS_PARAMETER)


class WorkflowOutputs:
    """Output view over a finished execution token."""

    def __init__(self, token: ExecutionTokenPort, workflow_name: str = ""):
        self._token = token
        self._workflow_name = workflow_name
        self._output_parameters: Optional[Dict[str, OutputParameter]] = None

    @property
    def output_parameters(self) -> Dict[str, OutputParameter]:
        """Output parameters, fetched once per token."""
        if self._output_parameters is None:
            self._output_parameters = self._token.output_parameters()
        return self._output_parameters

    def workflow_successful(self) -> bool:
        """True only when the execution ended in the completed state."""
        return WorkflowState.is_successful(self._token.state)

    def require_success(self) -> None:
        """Raise unless the execution completed successfully."""
        if not self.workflow_successful():
            raise WorkflowUnsuccessfulError(
                self._workflow_name, self._token.state, self._token.failure_reason
            )

    def output_value(self, key: str) -> str:
        """Stringified value of output ``key``."""
        return self.output_parameters[key].as_string()

    def output_empty(self, key: str) -> bool:
        return not self.output_value(key)

    def validate_create_outputs(self) -> None:
        """
        Require ``server_id`` and ``ip_address`` to be present and non-empty.

        Raises:
            OutputParameterMissingError: If either parameter is absent
            OutputParameterEmptyError: If a parameter stringifies to an empty value
        """
        missing = [key for key in REQUIRED_CREATE_OUTPUTS if key not in self.output_parameters]
        if missing:
            raise OutputParameterMissingError(missing)

        for key in REQUIRED_CREATE_OUTPUTS:
            if self.output_empty(key):
                raise OutputParameterEmptyError(key)
