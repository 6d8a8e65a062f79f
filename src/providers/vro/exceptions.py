"""vRO provider exceptions."""

from typing import Any, Dict, Optional

from src.domain.base.exceptions import BadWorkflowRequestError, WorkflowSubmissionError


class VroClientError(WorkflowSubmissionError):
    """Base exception for vRO API errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, "VRO_CLIENT_ERROR", details)
        self.status_code = status_code


class VroAuthError(VroClientError):
    """The vRO server rejected the configured credentials."""


class VroConnectionError(VroClientError):
    """The vRO server could not be reached."""


class WorkflowNotFoundError(VroClientError):
    """No workflow matches the configured name or identifier."""


class VroBadRequestError(BadWorkflowRequestError):
    """The vRO server rejected a request as malformed (HTTP 400)."""

    def __init__(self, message: str, response_body: str = ""):
        super().__init__(message, response_body, {"status_code": 400})
        self.status_code = 400
