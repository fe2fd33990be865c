"""Single step execution with outcome normalization."""

from __future__ import annotations

import logging

from repo_governance.provisioning_steps.step_definitions import ProvisioningStep
from repo_governance.remote_api.request_models import RemoteApiClient, RemoteRequestError

from .run_contracts import StepResult

_LOGGER = logging.getLogger("repo_governance.run_execution")


def execute_step(step: ProvisioningStep, client: RemoteApiClient) -> StepResult:
    """Issue the step's request once and turn the response into a StepResult.

    Rejections and transport failures are reported the same way, carrying the
    client's error text verbatim as the cause.
    """
    _LOGGER.info(step.description)
    try:
        client.send(step.request)
    except RemoteRequestError as exc:
        _LOGGER.error("%s %s", step.failure_message, exc)
        return StepResult.failure(step.name, exc)
    return StepResult.succeeded(step.name)
