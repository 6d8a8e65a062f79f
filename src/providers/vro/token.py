"""Execution token for a vRO workflow run."""

from typing import Any, Dict, List, Optional

from src.domain.base.ports import ExecutionTokenPort
from src.domain.workflow.value_objects import OutputParameter


def unwrap_parameter_value(value: Optional[Dict[str, Any]]) -> Any:
    """
    Extract the plain value from a vRO typed value wrapper.

    vRO encodes values as ``{"<type>": {"value": ...}}``; arrays use
    ``{"array": {"elements": [...]}}`` with wrapped elements.
    """
    if not value:
        return None

    inner = next(iter(value.values()))
    if not isinstance(inner, dict):
        return inner
    if "elements" in inner:
        return [unwrap_parameter_value(element) for element in inner["elements"]]
    return inner.get("value")


def parse_output_parameters(parameters: List[Dict[str, Any]]) -> Dict[str, OutputParameter]:
    """Convert the ``output-parameters`` list of an execution into OutputParameters."""
    result = {}
    for parameter in parameters or []:
        name = parameter.get("name")
        if not name:
            continue
        result[name] = OutputParameter(
            name=name,
            type=parameter.get("type", "string"),
            value=unwrap_parameter_value(parameter.get("value")),
        )
    return result


class VroWorkflowToken(ExecutionTokenPort):
    """Live handle on one execution of a vRO workflow."""

    def __init__(self, client: Any, workflow_id: str, execution_id: str):
        self._client = client
        self.workflow_id = workflow_id
        self.execution_id = execution_id
        self._data: Dict[str, Any] = {}

    @property
    def state(self) -> Optional[str]:
        if not self._data:
            self.refresh_state()
        return self._data.get("state")

    def refresh_state(self) -> Optional[str]:
        self._data = self._client.get_execution(self.workflow_id, self.execution_id)
        return self._data.get("state")

    def output_parameters(self) -> Dict[str, OutputParameter]:
        if not self._data:
            self.refresh_state()
        return parse_output_parameters(self._data.get("output-parameters", []))

    @property
    def failure_reason(self) -> Optional[str]:
        """The ``content-exception`` vRO recorded for a failed execution."""
        return self._data.get("content-exception")

    def __repr__(self) -> str:
        return f"VroWorkflowToken(workflow_id={self.workflow_id!r}, execution_id={self.execution_id!r})"
