"""Tests for the TCP readiness probe."""

from unittest.mock import Mock

import pytest

from src.config.schemas import TransportConfig
from src.domain.base.exceptions import ServerNotReadyError
from src.domain.provisioning.state import ProvisioningState
from src.infrastructure.transport.tcp_probe import TcpReadinessProbe


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def transport_config():
    return TransportConfig(port=22, connect_timeout=5, ready_timeout=20, retry_interval=5)


@pytest.fixture
def clock():
    return FakeClock()


def make_probe(config, logger, clock, connect):
    return TcpReadinessProbe(config, logger, connect=connect, clock=clock, sleep=clock.sleep)


class TestTcpReadinessProbe:
    """Test the readiness retry loop."""

    def test_ready_on_first_attempt(self, transport_config, mock_logger, clock, provisioned_state):
        conn = Mock()
        connect = Mock(return_value=conn)

        make_probe(transport_config, mock_logger, clock, connect).wait_until_ready(provisioned_state)

        connect.assert_called_once_with(("1.2.3.4", 22), timeout=5)
        conn.close.assert_called_once()
        assert clock.sleeps == []

    def test_ready_after_retries(self, transport_config, mock_logger, clock, provisioned_state):
        conn = Mock()
        connect = Mock(side_effect=[ConnectionRefusedError("refused"), OSError("unreachable"), conn])

        make_probe(transport_config, mock_logger, clock, connect).wait_until_ready(provisioned_state)

        assert connect.call_count == 3
        assert clock.sleeps == [5, 5]
        assert mock_logger.info.call_count == 2

    def test_never_ready(self, transport_config, mock_logger, clock, provisioned_state):
        connect = Mock(side_effect=ConnectionRefusedError("refused"))

        with pytest.raises(ServerNotReadyError) as exc_info:
            make_probe(transport_config, mock_logger, clock, connect).wait_until_ready(provisioned_state)

        assert "1.2.3.4" in str(exc_info.value)
        assert "port 22 still closed after 4 attempts" in str(exc_info.value)
        assert clock.now <= transport_config.ready_timeout

    def test_missing_hostname(self, transport_config, mock_logger, clock):
        connect = Mock()
        state = ProvisioningState(server_id="server-12345")

        with pytest.raises(ServerNotReadyError, match="no hostname"):
            make_probe(transport_config, mock_logger, clock, connect).wait_until_ready(state)

        connect.assert_not_called()
