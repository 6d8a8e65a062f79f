"""Binds lifecycle parameters onto workflow invocation specs."""

from typing import Any, Mapping, Optional

from src.domain.workflow.value_objects import WorkflowInvocationSpec


def bind_parameters(
    spec: WorkflowInvocationSpec, parameters: Optional[Mapping[Any, Any]]
) -> WorkflowInvocationSpec:
    """
    Bind named parameters onto a workflow invocation spec.

    Keys and values are coerced to strings; unknown keys pass through to the
    workflow service untouched. Later bindings replace earlier ones with the
    same name.

    Args:
        spec: Spec to bind onto
        parameters: Mapping of parameter name to value

    Returns:
        A new spec carrying the merged parameter set

    Raises:
        Exception: Whatever a key or value raises while being stringified;
            ``spec`` is left untouched
    """
    if not parameters:
        return spec

    bound = dict(spec.parameters)
    for key, value in parameters.items():
        bound[str(key)] = str(value)

    return spec.model_copy(update={"parameters": bound})


def build_invocation_spec(
    workflow_name: str,
    workflow_id: Optional[str] = None,
    *parameter_sets: Optional[Mapping[Any, Any]],
) -> WorkflowInvocationSpec:
    """Create a spec and bind each parameter set onto it in order."""
    spec = WorkflowInvocationSpec(workflow_name=workflow_name, workflow_id=workflow_id)
    for parameters in parameter_sets:
        spec = bind_parameters(spec, parameters)
    return spec
