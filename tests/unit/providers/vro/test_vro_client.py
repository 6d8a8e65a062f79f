"""
Unit tests for the vRO REST API client.

Tests use mocked responses - no actual vRO server required.
"""

import json

import pytest
import requests
import responses

from src.application.workflow.invoker import WorkflowInvoker
from src.domain.base.exceptions import BadWorkflowRequestError, WorkflowSubmissionError
from src.domain.workflow.value_objects import WorkflowInvocationSpec
from src.providers.vro.client import VroClient, render_parameter
from src.providers.vro.exceptions import (
    VroAuthError,
    VroBadRequestError,
    VroClientError,
    VroConnectionError,
    WorkflowNotFoundError,
)
from src.providers.vro.token import VroWorkflowToken, parse_output_parameters

BASE_URL = "https://vra.corp.local:8281"
API = f"{BASE_URL}/vco/api"

WORKFLOW = {
    "id": "workflow-1",
    "name": "Create Workflow",
    "input-parameters": [
        {"name": "template", "type": "string"},
        {"name": "cpu_count", "type": "number"},
        {"name": "power_on", "type": "boolean"},
        {"name": "admin_password", "type": "SecureString"},
    ],
}


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def client():
    """Create vRO client with test credentials."""
    return VroClient(base_url=BASE_URL, username="myuser", password="mypassword")


@pytest.fixture
def mock_responses():
    """Enable responses mock for HTTP requests."""
    with responses.RequestsMock() as rsps:
        yield rsps


def add_execution(mock_responses, state, outputs=None, execution_id="exec-1"):
    mock_responses.add(
        responses.GET,
        f"{API}/workflows/workflow-1/executions/{execution_id}",
        json={"id": execution_id, "state": state, "output-parameters": outputs or []},
        status=200,
    )


# =============================================================================
# Construction
# =============================================================================


class TestClientConstruction:
    """Tests for session configuration."""

    def test_session_uses_basic_auth_and_verification(self, client):
        assert client.session.auth == ("myuser", "mypassword")
        assert client.session.verify is True
        assert client.session.headers["Accept"] == "application/json"

    def test_disabled_verification(self):
        client = VroClient(BASE_URL + "/", "myuser", "mypassword", verify_ssl=False)

        assert client.session.verify is False
        assert client.base_url == BASE_URL


# =============================================================================
# Workflow Lookup
# =============================================================================


class TestFindWorkflow:
    """Tests for resolving workflows by id or name."""

    def test_lookup_by_id(self, client, mock_responses):
        mock_responses.add(responses.GET, f"{API}/workflows/workflow-1", json=WORKFLOW, status=200)

        workflow = client.find_workflow("Create Workflow", "workflow-1")

        assert workflow["id"] == "workflow-1"
        assert len(mock_responses.calls) == 1

    def test_lookup_by_unknown_id(self, client, mock_responses):
        mock_responses.add(responses.GET, f"{API}/workflows/workflow-404", status=404)

        with pytest.raises(WorkflowNotFoundError, match="workflow-404") as exc_info:
            client.find_workflow("Create Workflow", "workflow-404")

        assert exc_info.value.status_code == 404

    def test_lookup_by_name(self, client, mock_responses):
        mock_responses.add(
            responses.GET,
            f"{API}/workflows",
            json={
                "link": [
                    {"attributes": [{"name": "id", "value": "workflow-9"}, {"name": "name", "value": "Create Workflow 2"}]},
                    {"attributes": [{"name": "id", "value": "workflow-1"}, {"name": "name", "value": "Create Workflow"}]},
                ],
                "total": 2,
            },
            status=200,
        )
        mock_responses.add(responses.GET, f"{API}/workflows/workflow-1", json=WORKFLOW, status=200)

        workflow = client.find_workflow("Create Workflow")

        assert workflow["id"] == "workflow-1"
        assert "conditions=name%3DCreate+Workflow" in mock_responses.calls[0].request.url

    def test_lookup_by_name_not_found(self, client, mock_responses):
        mock_responses.add(responses.GET, f"{API}/workflows", json={"link": [], "total": 0}, status=200)

        with pytest.raises(WorkflowNotFoundError):
            client.find_workflow("Missing Workflow")

    def test_lookup_by_ambiguous_name(self, client, mock_responses):
        link = {"attributes": [{"name": "id", "value": "workflow-1"}, {"name": "name", "value": "Create Workflow"}]}
        other = {"attributes": [{"name": "id", "value": "workflow-3"}, {"name": "name", "value": "Create Workflow"}]}
        mock_responses.add(responses.GET, f"{API}/workflows", json={"link": [link, other]}, status=200)

        with pytest.raises(VroClientError, match="ambiguous"):
            client.find_workflow("Create Workflow")


# =============================================================================
# Submission
# =============================================================================


class TestSubmit:
    """Tests for starting workflow executions."""

    def test_submit_returns_token_from_location_header(self, client, mock_responses):
        mock_responses.add(responses.GET, f"{API}/workflows/workflow-1", json=WORKFLOW, status=200)
        mock_responses.add(
            responses.POST,
            f"{API}/workflows/workflow-1/executions",
            status=202,
            headers={"Location": f"{API}/workflows/workflow-1/executions/exec-1/"},
        )
        spec = WorkflowInvocationSpec(
            workflow_name="Create Workflow",
            workflow_id="workflow-1",
            parameters={"template": "centos7", "cpu_count": "2", "power_on": "True", "extra": "x"},
        )

        token = client.submit(spec)

        assert isinstance(token, VroWorkflowToken)
        assert token.workflow_id == "workflow-1"
        assert token.execution_id == "exec-1"

        body = json.loads(mock_responses.calls[1].request.body)
        parameters = {p["name"]: p for p in body["parameters"]}
        assert parameters["template"]["value"] == {"string": {"value": "centos7"}}
        assert parameters["cpu_count"]["value"] == {"number": {"value": 2}}
        assert parameters["power_on"]["value"] == {"boolean": {"value": True}}
        assert parameters["extra"]["type"] == "string"

    def test_bad_request_carries_response_body(self, client, mock_responses):
        mock_responses.add(responses.GET, f"{API}/workflows/workflow-1", json=WORKFLOW, status=200)
        mock_responses.add(
            responses.POST,
            f"{API}/workflows/workflow-1/executions",
            body='{"status": 400, "message": "Invalid parameter template"}',
            status=400,
        )
        spec = WorkflowInvocationSpec(workflow_name="Create Workflow", workflow_id="workflow-1")

        with pytest.raises(VroBadRequestError) as exc_info:
            client.submit(spec)

        assert isinstance(exc_info.value, BadWorkflowRequestError)
        assert "Invalid parameter template" in exc_info.value.response_body

    def test_auth_failure(self, client, mock_responses):
        mock_responses.add(responses.GET, f"{API}/workflows/workflow-1", status=401)
        spec = WorkflowInvocationSpec(workflow_name="Create Workflow", workflow_id="workflow-1")

        with pytest.raises(VroAuthError) as exc_info:
            client.submit(spec)

        assert isinstance(exc_info.value, WorkflowSubmissionError)
        assert exc_info.value.status_code == 401

    def test_server_error_uses_message(self, client, mock_responses):
        mock_responses.add(
            responses.GET,
            f"{API}/workflows/workflow-1",
            json={"message": "Internal failure"},
            status=500,
        )

        with pytest.raises(VroClientError, match="Internal failure"):
            client.get_workflow("workflow-1")

    def test_connection_error(self, client, mock_responses):
        mock_responses.add(
            responses.GET,
            f"{API}/workflows/workflow-1",
            body=requests.exceptions.ConnectionError("refused"),
        )

        with pytest.raises(VroConnectionError, match="Cannot connect"):
            client.get_workflow("workflow-1")

    def test_invalid_number_parameter_is_logged_by_invoker(
        self, client, mock_responses, mock_logger, logged_messages
    ):
        mock_responses.add(responses.GET, f"{API}/workflows/workflow-1", json=WORKFLOW, status=200)
        spec = WorkflowInvocationSpec(
            workflow_name="Create Workflow",
            workflow_id="workflow-1",
            parameters={"cpu_count": "two"},
        )

        with pytest.raises(VroBadRequestError):
            WorkflowInvoker(client, mock_logger).invoke(spec)

        assert logged_messages(mock_logger, "error") == [
            "The workflow execution request failed: "
            "Parameter cpu_count is declared as number but got 'two'"
        ]

    def test_missing_execution_id(self, client, mock_responses):
        mock_responses.add(responses.GET, f"{API}/workflows/workflow-1", json=WORKFLOW, status=200)
        mock_responses.add(responses.POST, f"{API}/workflows/workflow-1/executions", status=202)
        spec = WorkflowInvocationSpec(workflow_name="Create Workflow", workflow_id="workflow-1")

        with pytest.raises(VroClientError, match="execution id"):
            client.submit(spec)


class TestRenderParameter:
    """Tests for execution parameter rendering."""

    def test_secure_string(self):
        rendered = render_parameter("admin_password", "s3cret", "SecureString")

        assert rendered == {
            "name": "admin_password",
            "type": "SecureString",
            "scope": "local",
            "value": {"secure-string": {"value": "s3cret"}},
        }

    def test_decimal_number(self):
        assert render_parameter("ratio", "0.5", "number")["value"] == {"number": {"value": 0.5}}

    def test_invalid_number(self):
        with pytest.raises(VroBadRequestError, match="declared as number"):
            render_parameter("cpu_count", "two", "number")

    def test_unknown_type_is_sent_as_string(self):
        rendered = render_parameter("vm", "vm-42", "VC:VirtualMachine")

        assert rendered["type"] == "VC:VirtualMachine"
        assert rendered["value"] == {"string": {"value": "vm-42"}}


# =============================================================================
# Execution Tokens
# =============================================================================


class TestWorkflowToken:
    """Tests for polling execution state and outputs."""

    def test_refresh_state_reads_execution(self, client, mock_responses):
        add_execution(mock_responses, "running")
        add_execution(mock_responses, "completed")
        token = VroWorkflowToken(client, "workflow-1", "exec-1")

        assert token.refresh_state() == "running"
        assert token.refresh_state() == "completed"
        assert token.state == "completed"

    def test_output_parameters(self, client, mock_responses):
        add_execution(
            mock_responses,
            "completed",
            outputs=[
                {"name": "server_id", "type": "string", "scope": "local", "value": {"string": {"value": "server-12345"}}},
                {"name": "ip_address", "type": "string", "scope": "local", "value": {"string": {"value": "1.2.3.4"}}},
            ],
        )
        token = VroWorkflowToken(client, "workflow-1", "exec-1")
        token.refresh_state()

        outputs = token.output_parameters()

        assert outputs["server_id"].as_string() == "server-12345"
        assert outputs["ip_address"].as_string() == "1.2.3.4"

    def test_failure_reason_from_content_exception(self, client, mock_responses):
        mock_responses.add(
            responses.GET,
            f"{API}/workflows/workflow-1/executions/exec-1",
            json={"id": "exec-1", "state": "failed", "content-exception": "Clone failed: datastore full"},
            status=200,
        )
        token = VroWorkflowToken(client, "workflow-1", "exec-1")
        token.refresh_state()

        assert token.failure_reason == "Clone failed: datastore full"

    def test_missing_execution_is_not_reported_as_missing_workflow(self, client, mock_responses):
        mock_responses.add(
            responses.GET,
            f"{API}/workflows/workflow-1/executions/exec-1",
            status=404,
        )
        token = VroWorkflowToken(client, "workflow-1", "exec-1")

        with pytest.raises(VroClientError, match="Execution exec-1 of workflow workflow-1") as exc_info:
            token.refresh_state()

        assert not isinstance(exc_info.value, WorkflowNotFoundError)
        assert exc_info.value.status_code == 404


class TestParseOutputParameters:
    """Tests for unwrapping vRO typed values."""

    def test_value_without_content_is_none(self):
        outputs = parse_output_parameters([{"name": "ip_address", "type": "string"}])

        assert outputs["ip_address"].value is None
        assert outputs["ip_address"].as_string() == ""

    def test_numbers_and_arrays(self):
        outputs = parse_output_parameters([
            {"name": "count", "type": "number", "value": {"number": {"value": 3}}},
            {
                "name": "disks",
                "type": "Array/string",
                "value": {"array": {"elements": [{"string": {"value": "a"}}, {"string": {"value": "b"}}]}},
            },
        ])

        assert outputs["count"].as_string() == "3"
        assert outputs["disks"].value == ["a", "b"]
