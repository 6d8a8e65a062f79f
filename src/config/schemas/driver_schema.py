"""vRO driver configuration schema."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DriverConfig(BaseModel):
    """Workflow service addressing and lifecycle workflow configuration."""

    model_config = ConfigDict(extra="forbid")

    vro_base_url: str = Field(..., description="Base URL of the vRO server, e.g. https://vro.local:8281")
    vro_username: str = Field(..., description="vRO API username")
    vro_password: str = Field(..., description="vRO API password")
    vro_disable_ssl_verify: bool = Field(False, description="Skip TLS certificate verification")

    create_workflow_name: str = Field(..., description="Name of the create-server workflow")
    create_workflow_id: Optional[str] = Field(None, description="Identifier of the create-server workflow")
    create_workflow_parameters: Dict[str, Any] = Field(
        default_factory=dict, description="Parameters bound on every create invocation"
    )

    destroy_workflow_name: str = Field(..., description="Name of the destroy-server workflow")
    destroy_workflow_id: Optional[str] = Field(None, description="Identifier of the destroy-server workflow")
    destroy_workflow_parameters: Dict[str, Any] = Field(
        default_factory=dict, description="Parameters bound on every destroy invocation"
    )

    request_timeout: int = Field(300, description="Seconds to wait for a workflow to finish")

    @property
    def verify_ssl(self) -> bool:
        """Whether the client verifies the server certificate."""
        return not self.vro_disable_ssl_verify

    @field_validator("vro_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("vro_base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("create_workflow_name", "destroy_workflow_name")
    @classmethod
    def validate_workflow_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Workflow name must not be empty")
        return v

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: int) -> int:
        """Validate request timeout."""
        if v <= 0:
            raise ValueError("Request timeout must be positive")
        return v
