"""TCP readiness probe for freshly provisioned servers."""

import socket
import time
from typing import Callable

from src.config.schemas.transport_schema import TransportConfig
from src.domain.base.exceptions import ServerNotReadyError
from src.domain.base.ports import LoggingPort, ReadinessProbePort
from src.domain.provisioning.state import ProvisioningState


class TcpReadinessProbe(ReadinessProbePort):
    """Waits until the server's hostname accepts TCP connections on the configured port."""

    def __init__(
        self,
        config: TransportConfig,
        logger: LoggingPort,
        connect: Callable[..., socket.socket] = socket.create_connection,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._config = config
        self._logger = logger
        self._connect = connect
        self._clock = clock
        self._sleep = sleep

    def wait_until_ready(self, state: ProvisioningState) -> None:
        """
        Retry connecting until it succeeds or ``ready_timeout`` elapses.

        Raises:
            ServerNotReadyError: If the server has no hostname or never accepts a connection
        """
        if not state.hostname:
            raise ServerNotReadyError(state.hostname, state.server_id, "no hostname recorded")

        port = self._config.port
        deadline = self._clock() + self._config.ready_timeout
        attempt = 0
        while True:
            attempt += 1
            try:
                conn = self._connect((state.hostname, port), timeout=self._config.connect_timeout)
            except OSError as e:
                if self._clock() + self._config.retry_interval >= deadline:
                    raise ServerNotReadyError(
                        state.hostname,
                        state.server_id,
                        f"port {port} still closed after {attempt} attempts: {e}",
                    ) from e
                self._logger.info(
                    f"Waiting for {state.hostname}:{port} to accept connections (attempt {attempt}): {e}"
                )
                self._sleep(self._config.retry_interval)
                continue

            conn.close()
            self._logger.debug(f"{state.hostname}:{port} accepted a connection")
            return
