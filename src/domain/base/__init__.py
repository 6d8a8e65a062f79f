"""Base domain layer - shared kernel for the driver."""

from .exceptions import (
    BadWorkflowRequestError,
    ConfigurationError,
    DomainException,
    OutputParameterEmptyError,
    OutputParameterMissingError,
    ServerNotReadyError,
    WorkflowSubmissionError,
    WorkflowTimeoutError,
    WorkflowUnsuccessfulError,
)

__all__ = [
    "DomainException",
    "ConfigurationError",
    "WorkflowSubmissionError",
    "BadWorkflowRequestError",
    "WorkflowTimeoutError",
    "WorkflowUnsuccessfulError",
    "OutputParameterMissingError",
    "OutputParameterEmptyError",
    "ServerNotReadyError",
]
