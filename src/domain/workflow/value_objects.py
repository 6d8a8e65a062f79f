"""Workflow value objects."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WorkflowState(str, Enum):
    """Execution states reported by the workflow service."""

    RUNNING = "running"
    WAITING = "waiting"
    WAITING_SIGNAL = "waiting-signal"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELED = "canceled"

    @classmethod
    def is_active(cls, state: Optional[str]) -> bool:
        """Whether an execution in this state may still change."""
        return state in _ACTIVE_STATES

    @classmethod
    def is_successful(cls, state: Optional[str]) -> bool:
        """Only an exact ``completed`` counts as success."""
        return state == cls.COMPLETED.value


_ACTIVE_STATES = frozenset(
    {WorkflowState.RUNNING.value, WorkflowState.WAITING.value, WorkflowState.WAITING_SIGNAL.value}
)


class WorkflowInvocationSpec(BaseModel):
    """Identifies a remote workflow and the input parameters to run it with."""

    model_config = ConfigDict(frozen=True)

    workflow_name: str
    workflow_id: Optional[str] = None
    parameters: Dict[str, str] = Field(default_factory=dict)

    @field_validator("workflow_name")
    @classmethod
    def validate_workflow_name(cls, v: str) -> str:
        """Workflow name is always required."""
        if not v or not v.strip():
            raise ValueError("Workflow name must not be empty")
        return v

    @property
    def addressed_by_id(self) -> bool:
        """Whether the workflow is looked up by its identifier rather than its name."""
        return bool(self.workflow_id)

    def describe(self) -> str:
        """Human-readable workflow reference for log messages."""
        if self.addressed_by_id:
            return f"{self.workflow_name} ({self.workflow_id})"
        return self.workflow_name


class OutputParameter(BaseModel):
    """Named output value of a finished workflow execution."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = "string"
    value: Any = None

    def as_string(self) -> str:
        """Stringified value; a missing value is the empty string."""
        if self.value is None:
            return ""
        return str(self.value)
