"""Polls workflow executions until they finish."""

import logging
import time
from typing import Callable

from src.domain.base.exceptions import WorkflowTimeoutError
from src.domain.base.ports import ExecutionTokenPort
from src.domain.workflow.value_objects import WorkflowState

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 2


class CompletionPoller:
    """
    Blocks until an execution token leaves its active states.

    The terminal state is not returned; callers read it off the token
    afterwards. Errors raised while querying the token propagate unchanged.
    """

    def __init__(
        self,
        timeout: float,
        interval: float = POLL_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the poller.

        Args:
            timeout: Deadline in seconds for the execution to finish
            interval: Fixed wait between state queries
            clock: Monotonic time source
            sleep: Blocking wait function
        """
        self.timeout = timeout
        self.interval = interval
        self._clock = clock
        self._sleep = sleep

    def wait(self, token: ExecutionTokenPort) -> None:
        """
        Wait for ``token`` to reach a terminal state.

        Raises:
            WorkflowTimeoutError: If the deadline passes before a terminal state is observed
        """
        deadline = self._clock() + self.timeout
        while True:
            self._check_deadline(deadline)
            state = token.refresh_state()
            # a slow query can itself outlast the deadline
            self._check_deadline(deadline)
            if not WorkflowState.is_active(state):
                logger.debug(f"Workflow execution finished with state {state}")
                return

            logger.debug(f"Workflow execution still {state}, checking again in {self.interval}s")
            self._remaining_sleep(deadline)

    def _check_deadline(self, deadline: float) -> None:
        if self._clock() >= deadline:
            raise WorkflowTimeoutError(self.timeout)

    def _remaining_sleep(self, deadline: float) -> None:
        # never sleep past the deadline
        remaining = deadline - self._clock()
        self._sleep(max(0, min(self.interval, remaining)))
