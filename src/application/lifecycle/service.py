"""Server lifecycle service - creates and destroys servers through vRO workflows."""

from src.application.workflow.invoker import WorkflowInvoker
from src.application.workflow.outputs import (
    IP_ADDRESS_PARAMETER,
    SERVER_ID_PARAMETER,
    WorkflowOutputs,
)
from src.application.workflow.parameter_binder import build_invocation_spec
from src.application.workflow.poller import CompletionPoller
from src.config.schemas.driver_schema import DriverConfig
from src.domain.base.ports import LoggingPort, ReadinessProbePort
from src.domain.provisioning.state import ProvisioningState
from src.domain.workflow.value_objects import WorkflowInvocationSpec


class ServerLifecycleService:
    """
    Lifecycle controller for a single workflow-provisioned server.

    ``create`` and ``destroy`` mutate the given ``ProvisioningState`` in place
    and are both idempotent: creating a provisioned server and destroying an
    unprovisioned one do nothing.

    If a created server never becomes ready it is destroyed again before the
    readiness failure is re-raised. A failure of that compensating destroy is
    logged and leaves the state provisioned; the caller still receives the
    original readiness failure.
    """

    name = "vRO"

    def __init__(
        self,
        config: DriverConfig,
        invoker: WorkflowInvoker,
        poller: CompletionPoller,
        readiness_probe: ReadinessProbePort,
        logger: LoggingPort,
    ):
        self._config = config
        self._invoker = invoker
        self._poller = poller
        self._readiness_probe = readiness_probe
        self._logger = logger

    def create(self, state: ProvisioningState) -> None:
        """Create the server unless ``state`` already records one."""
        if state.is_provisioned:
            return

        self._logger.info("Executing the create-server workflow...")
        self.execute_create_workflow(state)

        self._logger.info(
            f"Server {state.hostname} ({state.server_id}) created.  Waiting for it to be ready..."
        )
        self.wait_for_server(state)
        self._logger.info(f"Server {state.hostname} ({state.server_id}) ready.")

    def destroy(self, state: ProvisioningState) -> None:
        """Destroy the server recorded in ``state``, if any."""
        if not state.is_provisioned:
            return

        self._logger.info(
            f"Executing the destroy-server workflow for {state.hostname} ({state.server_id})..."
        )
        self.execute_destroy_workflow(state)
        self._logger.info(f"Server {state.hostname} ({state.server_id}) destroyed.")
        state.clear()

    def create_workflow_spec(self) -> WorkflowInvocationSpec:
        return build_invocation_spec(
            self._config.create_workflow_name,
            self._config.create_workflow_id,
            self._config.create_workflow_parameters,
        )

    def destroy_workflow_spec(self, state: ProvisioningState) -> WorkflowInvocationSpec:
        return build_invocation_spec(
            self._config.destroy_workflow_name,
            self._config.destroy_workflow_id,
            self._config.destroy_workflow_parameters,
            {SERVER_ID_PARAMETER: state.server_id},
        )

    def execute_create_workflow(self, state: ProvisioningState) -> None:
        """
        Run the create workflow and record the new server in ``state``.

        ``state`` is only written once the workflow completed and both
        required outputs validated.
        """
        spec = self.create_workflow_spec()
        outputs = self._run_workflow(spec)
        outputs.validate_create_outputs()

        state.record_server(
            server_id=outputs.output_value(SERVER_ID_PARAMETER),
            hostname=outputs.output_value(IP_ADDRESS_PARAMETER),
        )

    def execute_destroy_workflow(self, state: ProvisioningState) -> None:
        """Run the destroy workflow for the server in ``state``."""
        self._run_workflow(self.destroy_workflow_spec(state))

    def wait_for_server(self, state: ProvisioningState) -> None:
        """Block until the server is ready; destroy it if it never is."""
        try:
            self._readiness_probe.wait_until_ready(state)
        except Exception as readiness_error:
            self._logger.error(
                f"Server {state.hostname} ({state.server_id}) not reachable. Destroying server..."
            )
            self._compensate(state, readiness_error)
            raise

    def _compensate(self, state: ProvisioningState, readiness_error: Exception) -> None:
        try:
            self.destroy(state)
        except Exception as destroy_error:
            self._logger.error(
                f"Failed to destroy server {state.hostname} ({state.server_id}) after "
                f"readiness failure ({readiness_error}): {destroy_error}. "
                "The server may need to be removed manually."
            )

    def _run_workflow(self, spec: WorkflowInvocationSpec) -> WorkflowOutputs:
        token = self._invoker.invoke(spec)
        self._poller.wait(token)

        outputs = WorkflowOutputs(token, spec.workflow_name)
        outputs.require_success()
        return outputs
