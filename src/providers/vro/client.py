"""
vRealize Orchestrator REST API client.

Submits workflow executions and reads their state through the vRO REST API
(``/vco/api``) using HTTP basic authentication.

Usage:
    from src.providers.vro.client import VroClient

    client = VroClient(
        base_url="https://vro.corp.local:8281",
        username="user",
        password="secret",
    )
    token = client.submit(WorkflowInvocationSpec(workflow_name="Create Server"))
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from requests.exceptions import ConnectionError, RequestException, Timeout

from src.domain.base.ports import WorkflowClientPort
from src.domain.workflow.value_objects import WorkflowInvocationSpec
from src.providers.vro.exceptions import (
    VroAuthError,
    VroBadRequestError,
    VroClientError,
    VroConnectionError,
    WorkflowNotFoundError,
)
from src.providers.vro.token import VroWorkflowToken

logger = logging.getLogger(__name__)

API_PATH = "/vco/api"

# Declared vRO parameter type -> key of the JSON value wrapper
VALUE_TYPE_KEYS = {
    "string": "string",
    "SecureString": "secure-string",
    "number": "number",
    "boolean": "boolean",
}


def render_parameter(name: str, value: str, declared_type: str = "string") -> Dict[str, Any]:
    """
    Render one bound parameter in the vRO execution request format.

    Values arrive as strings; ``number`` and ``boolean`` parameters are
    converted back to their JSON types. Types without a scalar wrapper are
    sent as strings under their declared type.
    """
    value_key = VALUE_TYPE_KEYS.get(declared_type, "string")
    rendered: Any = value
    if value_key == "number":
        try:
            number = float(value)
        except ValueError as e:
            raise VroBadRequestError(
                f"Parameter {name} is declared as number but got {value!r}",
                response_body="",
            ) from e
        rendered = int(number) if number.is_integer() else number
    elif value_key == "boolean":
        rendered = value.strip().lower() in ("true", "1", "yes")

    return {
        "name": name,
        "type": declared_type,
        "scope": "local",
        "value": {value_key: {"value": rendered}},
    }


def _attribute(link: Dict[str, Any], name: str) -> Optional[str]:
    for attribute in link.get("attributes", []):
        if attribute.get("name") == name:
            return attribute.get("value")
    return None


class VroClient(WorkflowClientPort):
    """
    vRO REST API client.

    Attributes:
        base_url: Server URL without the API path
        verify_ssl: Whether the server certificate is verified
    """

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        verify_ssl: bool = True,
        timeout: int = 30,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize vRO client.

        Args:
            base_url: Server URL, e.g. https://vro.corp.local:8281
            username: API username
            password: API password
            verify_ssl: Verify the server certificate
            timeout: Per-request HTTP timeout in seconds
            session: Optional preconfigured session
        """
        self.base_url = base_url.rstrip("/")
        self.verify_ssl = verify_ssl
        self.timeout = timeout

        self.session = session or requests.Session()
        self.session.auth = (username, password)
        self.session.verify = verify_ssl
        self.session.headers.update({
            "Accept": "application/json",
            "Content-Type": "application/json",
        })

        if not verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}{API_PATH}{endpoint}"

    def _request(
        self,
        method: str,
        endpoint: str,
        data: Optional[Dict] = None,
        params: Optional[Dict] = None,
    ) -> requests.Response:
        """
        Make an authenticated API request.

        Raises:
            VroBadRequestError: HTTP 400, carrying the response body
            VroAuthError: HTTP 401
            VroClientError: HTTP 404 and any other API error
            VroConnectionError: Server unreachable or timed out
        """
        url = self._url(endpoint)
        logger.debug(f"vRO {method} {endpoint}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=data,
                params=params,
                timeout=self.timeout,
            )
        except ConnectionError as e:
            raise VroConnectionError(f"Cannot connect to vRO at {self.base_url}: {e}")
        except Timeout:
            raise VroConnectionError(
                f"Connection to vRO at {self.base_url} timed out after {self.timeout}s"
            )
        except RequestException as e:
            raise VroClientError(f"Request failed: {e}")

        if response.status_code == 400:
            raise VroBadRequestError(
                f"vRO rejected {method} {endpoint} as a bad request",
                response_body=response.text,
            )
        if response.status_code == 401:
            raise VroAuthError("Authentication failed - check the vRO username and password", 401)
        if response.status_code == 404:
            raise VroClientError(f"vRO resource not found: {endpoint}", 404)
        if response.status_code >= 400:
            error_msg = f"API error {response.status_code}"
            try:
                error_data = response.json()
                if "message" in error_data:
                    error_msg = error_data["message"]
            except ValueError:
                error_msg = response.text or error_msg
            raise VroClientError(error_msg, response.status_code)

        return response

    def _json(self, response: requests.Response) -> Dict[str, Any]:
        try:
            return response.json()
        except ValueError as e:
            raise VroClientError(f"vRO returned a non-JSON response: {e}", response.status_code)

    def get_workflow(self, workflow_id: str) -> Dict[str, Any]:
        """
        Fetch a workflow definition by identifier.

        Raises:
            WorkflowNotFoundError: If no workflow has this identifier
        """
        try:
            response = self._request("GET", f"/workflows/{workflow_id}")
        except VroClientError as e:
            if e.status_code == 404:
                raise WorkflowNotFoundError(
                    f"No workflow with id '{workflow_id}' found on the vRO server", 404
                ) from e
            raise
        return self._json(response)

    def find_workflow(self, name: str, workflow_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Resolve a workflow by identifier when given, else by exact name.

        Raises:
            WorkflowNotFoundError: If no workflow matches
            VroClientError: If the name matches more than one workflow
        """
        if workflow_id:
            return self.get_workflow(workflow_id)

        result = self._json(
            self._request("GET", "/workflows", params={"conditions": f"name={name}"})
        )
        matches = [
            link for link in result.get("link", [])
            if _attribute(link, "name") == name
        ]

        if not matches:
            raise WorkflowNotFoundError(f"No workflow named '{name}' found on the vRO server")
        if len(matches) > 1:
            ids = [_attribute(link, "id") for link in matches]
            raise VroClientError(
                f"Workflow name '{name}' is ambiguous ({len(matches)} matches: {ids}); "
                "configure the workflow id instead"
            )

        return self.get_workflow(_attribute(matches[0], "id"))

    def build_execution_request(
        self, workflow: Dict[str, Any], parameters: Dict[str, str]
    ) -> Dict[str, List[Dict[str, Any]]]:
        """Render bound parameters using the types the workflow declares."""
        declared = {
            parameter.get("name"): parameter.get("type", "string")
            for parameter in workflow.get("input-parameters", [])
        }
        return {
            "parameters": [
                render_parameter(name, value, declared.get(name, "string"))
                for name, value in parameters.items()
            ]
        }

    def submit(self, spec: WorkflowInvocationSpec) -> VroWorkflowToken:
        """Start an execution of the workflow described by ``spec``."""
        workflow = self.find_workflow(spec.workflow_name, spec.workflow_id)
        workflow_id = workflow.get("id") or spec.workflow_id

        body = self.build_execution_request(workflow, spec.parameters)
        response = self._request("POST", f"/workflows/{workflow_id}/executions", data=body)

        location = response.headers.get("Location", "")
        execution_id = location.rstrip("/").rsplit("/", 1)[-1] if location else ""
        if not execution_id:
            try:
                execution_id = response.json().get("id", "")
            except ValueError:
                execution_id = ""
        if not execution_id:
            raise VroClientError(
                f"vRO did not return an execution id for workflow {spec.describe()}",
                response.status_code,
            )

        logger.info(f"Started execution {execution_id} of workflow {spec.describe()}")
        return VroWorkflowToken(self, workflow_id, execution_id)

    def get_execution(self, workflow_id: str, execution_id: str) -> Dict[str, Any]:
        """Fetch the current record of a workflow execution."""
        endpoint = f"/workflows/{workflow_id}/executions/{execution_id}"
        try:
            response = self._request("GET", endpoint)
        except VroClientError as e:
            if e.status_code == 404:
                raise VroClientError(
                    f"Execution {execution_id} of workflow {workflow_id} no longer exists on the vRO server",
                    404,
                ) from e
            raise
        return self._json(response)
