"""Fail-fast orchestration of the provisioning steps."""

from __future__ import annotations

import logging

from repo_governance.configuration.runtime_settings import DEFAULT_API_VERSION, RunConfiguration
from repo_governance.provisioning_steps.step_definitions import build_provisioning_steps
from repo_governance.remote_api.request_models import RemoteApiClient

from .run_contracts import WorkflowOutcome
from .step_executor import execute_step

_LOGGER = logging.getLogger("repo_governance.run_execution")


class IncompleteConfigurationError(Exception):
    """Raised when a run configuration has empty fields, before any remote call."""


def run_provisioning_workflow(
    configuration: RunConfiguration,
    client: RemoteApiClient,
    *,
    api_version: str = DEFAULT_API_VERSION,
) -> WorkflowOutcome:
    """Run every provisioning step in order and stop at the first failure.

    Steps that already succeeded are left in place when a later one fails. Each
    remote operation tolerates being reissued, so the whole run can be repeated.

    Raises:
      IncompleteConfigurationError: If the configuration has empty fields.
    """
    missing = configuration.missing_fields()
    if missing:
        raise IncompleteConfigurationError(
            f"Run configuration is incomplete, missing: {', '.join(missing)}"
        )

    completed: list[str] = []
    for step in build_provisioning_steps(configuration, api_version=api_version):
        result = execute_step(step, client)
        if result.failed:
            return WorkflowOutcome.aborted_at(result.step_name, result.cause, tuple(completed))
        completed.append(result.step_name)

    _LOGGER.info("Automation complete!")
    return WorkflowOutcome.completed(tuple(completed))
