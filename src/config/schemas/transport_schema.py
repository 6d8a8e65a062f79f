"""Readiness probe configuration schema."""
from pydantic import BaseModel, Field, field_validator


class TransportConfig(BaseModel):
    """How to confirm a freshly created server is reachable."""

    port: int = Field(22, description="TCP port that must accept connections")
    connect_timeout: float = Field(5.0, description="Seconds allowed for a single connection attempt")
    ready_timeout: float = Field(600.0, description="Seconds to keep trying before giving up")
    retry_interval: float = Field(5.0, description="Seconds between connection attempts")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("Port must be between 1 and 65535")
        return v

    @field_validator("connect_timeout", "ready_timeout", "retry_interval")
    @classmethod
    def validate_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeouts and intervals must be positive")
        return v
