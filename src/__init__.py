"""vRO Workflow Driver - Root Package.

Creates and destroys test servers by running workflows on a VMware vRealize
Orchestrator (vRO) server and polling the executions until they finish.

Key Components:
    - application: Lifecycle service and workflow invocation / polling
    - config: Configuration schemas, loading and management
    - domain: Provisioning state, workflow value objects, ports and errors
    - infrastructure: Logging adapter, state persistence and readiness probe
    - providers: vRO REST client implementation
"""

__version__ = "1.0.0"
__author__ = "vRO Driver Maintainers"
