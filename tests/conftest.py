import pytest
from typing import Dict, Iterable, List, Optional
from unittest.mock import Mock

from src.config.schemas import AppConfig, DriverConfig, TransportConfig
from src.domain.base.ports import ExecutionTokenPort, LoggingPort, ReadinessProbePort, WorkflowClientPort
from src.domain.provisioning.state import ProvisioningState
from src.domain.workflow.value_objects import OutputParameter


class FakeExecutionToken(ExecutionTokenPort):
    """Token that replays a fixed sequence of states."""

    def __init__(
        self,
        states: Iterable[str] = ("completed",),
        outputs: Optional[Dict[str, object]] = None,
        failure_reason: Optional[str] = None,
    ):
        self._states = list(states)
        self._failure_reason = failure_reason
        self._state: Optional[str] = None
        self.refresh_count = 0
        self.output_calls = 0
        self._outputs = {
            name: OutputParameter(name=name, value=value)
            for name, value in (outputs or {}).items()
        }

    @property
    def state(self) -> Optional[str]:
        if self._state is None and self._states:
            return self._states[-1]
        return self._state

    def refresh_state(self) -> Optional[str]:
        index = min(self.refresh_count, len(self._states) - 1)
        self.refresh_count += 1
        self._state = self._states[index]
        return self._state

    def output_parameters(self) -> Dict[str, OutputParameter]:
        self.output_calls += 1
        return dict(self._outputs)

    @property
    def failure_reason(self) -> Optional[str]:
        return self._failure_reason


@pytest.fixture
def make_token():
    """Factory for fake execution tokens."""
    return FakeExecutionToken


@pytest.fixture
def driver_config_data() -> dict:
    return {
        "vro_username": "myuser",
        "vro_password": "mypassword",
        "vro_base_url": "https://vra.corp.local:8281",
        "create_workflow_name": "Create Workflow",
        "create_workflow_id": "workflow-1",
        "destroy_workflow_name": "Destroy Workflow",
        "destroy_workflow_id": "workflow-2",
    }


@pytest.fixture
def driver_config(driver_config_data) -> DriverConfig:
    return DriverConfig(**driver_config_data)


@pytest.fixture
def app_config(driver_config_data) -> AppConfig:
    return AppConfig(driver=driver_config_data, transport=TransportConfig(port=22))


@pytest.fixture
def mock_logger():
    return Mock(spec=LoggingPort)


@pytest.fixture
def mock_client():
    return Mock(spec=WorkflowClientPort)


@pytest.fixture
def mock_probe():
    return Mock(spec=ReadinessProbePort)


@pytest.fixture
def empty_state() -> ProvisioningState:
    return ProvisioningState()


@pytest.fixture
def provisioned_state() -> ProvisioningState:
    return ProvisioningState(server_id="server-12345", hostname="1.2.3.4")


@pytest.fixture
def logged_messages():
    """Collects the messages passed to ``logger.<level>``."""

    def collect(logger: Mock, level: str) -> List[str]:
        return [call.args[0] for call in getattr(logger, level).call_args_list]

    return collect
