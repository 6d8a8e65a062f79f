"""vRealize Orchestrator provider implementation."""

from src.providers.vro.client import VroClient, render_parameter
from src.providers.vro.exceptions import (
    VroAuthError,
    VroBadRequestError,
    VroClientError,
    VroConnectionError,
    WorkflowNotFoundError,
)
from src.providers.vro.token import VroWorkflowToken, parse_output_parameters

__all__ = [
    "VroClient",
    "VroWorkflowToken",
    "render_parameter",
    "parse_output_parameters",
    "VroClientError",
    "VroBadRequestError",
    "VroAuthError",
    "VroConnectionError",
    "WorkflowNotFoundError",
]
