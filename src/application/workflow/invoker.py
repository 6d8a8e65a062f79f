"""Submits workflow executions to the workflow service."""

from src.domain.base.exceptions import BadWorkflowRequestError
from src.domain.base.ports import ExecutionTokenPort, LoggingPort, WorkflowClientPort
from src.domain.workflow.value_objects import WorkflowInvocationSpec


class WorkflowInvoker:
    """Resolves a workflow and starts an execution of it."""

    def __init__(self, client: WorkflowClientPort, logger: LoggingPort):
        self._client = client
        self._logger = logger

    def invoke(self, spec: WorkflowInvocationSpec) -> ExecutionTokenPort:
        """
        Submit ``spec`` for execution.

        The workflow is addressed by id when the spec carries one, else by
        name. Failures are logged and re-raised unchanged; nothing is retried.

        Returns:
            Live token for the started execution
        """
        self._logger.debug(
            f"Submitting workflow {spec.describe()} with parameters {sorted(spec.parameters)}"
        )
        try:
            token = self._client.submit(spec)
        except BadWorkflowRequestError as e:
            detail = e.response_body or e.message
            self._logger.error(f"The workflow execution request failed: {detail}")
            raise
        except Exception as e:
            self._logger.error(f"The workflow execution request failed: {str(e)}")
            raise

        self._logger.debug(f"Workflow {spec.describe()} submitted")
        return token
