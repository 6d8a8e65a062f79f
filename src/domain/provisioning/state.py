"""Provisioning state of a single driver-managed server."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ProvisioningState(BaseModel):
    """
    Durable record of one provisioned server across the lifecycle.

    Both fields stay unset until the create workflow succeeds. The lifecycle
    controller mutates the record in place; callers serialise lifecycle
    operations per server.
    """

    model_config = ConfigDict(validate_assignment=True)

    server_id: Optional[str] = None
    hostname: Optional[str] = None

    @property
    def is_provisioned(self) -> bool:
        """A state with a server id is provisioned."""
        return bool(self.server_id)

    def record_server(self, server_id: str, hostname: str) -> None:
        """Store the identifiers of a freshly created server."""
        self.server_id = server_id
        self.hostname = hostname

    def clear(self) -> None:
        """Forget the server after it has been destroyed."""
        self.server_id = None
        self.hostname = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialise, omitting unset fields."""
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProvisioningState":
        """Build from a state file mapping, ignoring unknown keys."""
        return cls(server_id=data.get("server_id"), hostname=data.get("hostname"))
