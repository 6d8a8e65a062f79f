"""Base domain exceptions - shared error taxonomy for the driver."""

from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a serialisable dictionary."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(DomainException):
    """Raised when driver configuration is missing or invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", details)


class WorkflowSubmissionError(DomainException):
    """Raised when the workflow service rejects or cannot accept an execution request."""

    def __init__(
        self,
        message: str,
        error_code: str = "WORKFLOW_SUBMISSION_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code, details)


class BadWorkflowRequestError(WorkflowSubmissionError):
    """Raised when the workflow service reports a malformed execution request."""

    def __init__(self, message: str, response_body: str = "", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "WORKFLOW_BAD_REQUEST", details)
        self.response_body = response_body


class WorkflowTimeoutError(DomainException):
    """Raised when a workflow execution does not finish before the deadline."""

    def __init__(self, timeout: float):
        super().__init__(
            f"Workflow did not complete in {timeout} seconds. "
            "Please check the vRO UI for more information.",
            "WORKFLOW_TIMEOUT",
            {"timeout": timeout},
        )
        self.timeout = timeout


class WorkflowUnsuccessfulError(DomainException):
    """Raised when a workflow finished in a state other than completed."""

    def __init__(self, workflow_name: str, state: Optional[str], reason: Optional[str] = None):
        details = {"workflow_name": workflow_name, "state": state}
        if reason:
            details["reason"] = reason
        super().__init__(
            "The workflow did not complete successfully. Check the vRO UI for more info.",
            "WORKFLOW_UNSUCCESSFUL",
            details,
        )
        self.workflow_name = workflow_name
        self.state = state
        self.reason = reason


class OutputParameterMissingError(DomainException):
    """Raised when required output parameters are absent from a finished workflow."""

    def __init__(self, missing: list):
        super().__init__(
            "The workflow output did not contain a server_id and ip_address parameter.",
            "OUTPUT_PARAMETER_MISSING",
            {"missing": missing},
        )
        self.missing = missing


class OutputParameterEmptyError(DomainException):
    """Raised when a required output parameter is present but empty."""

    def __init__(self, parameter_name: str):
        super().__init__(
            f"The {parameter_name} parameter was empty.",
            "OUTPUT_PARAMETER_EMPTY",
            {"parameter": parameter_name},
        )
        self.parameter_name = parameter_name


class ServerNotReadyError(DomainException):
    """Raised when a provisioned server never becomes reachable."""

    def __init__(self, hostname: Optional[str], server_id: Optional[str], reason: str = ""):
        message = f"Server {hostname} ({server_id}) not reachable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message,
            "SERVER_NOT_READY",
            {"hostname": hostname, "server_id": server_id},
        )
        self.hostname = hostname
        self.server_id = server_id
