"""Provisioning run use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import closing

from repo_governance.configuration import ConfigurationError, load_configuration
from repo_governance.configuration.runtime_settings import ClientSettings
from repo_governance.remote_api import (
    ClientSetupError,
    RecordingClient,
    create_remote_client,
)
from repo_governance.remote_api.request_models import RemoteApiClient

from .provisioning_workflow import IncompleteConfigurationError, run_provisioning_workflow
from .run_contracts import RunRequest, WorkflowOutcome

_LOGGER = logging.getLogger("repo_governance.run_execution")

ClientFactory = Callable[..., RemoteApiClient]


class RunExecutionError(Exception):
    """Raised when a provisioning run cannot be started."""


def execute_provisioning_run(
    request: RunRequest,
    *,
    client_factory: ClientFactory | None = None,
) -> WorkflowOutcome:
    """Load the configuration, build the remote client and run the workflow once."""
    try:
        settings = load_configuration(request.config_path)
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc

    client = _build_client(
        settings.client,
        debug=request.debug,
        dry_run=request.dry_run,
        client_factory=client_factory or create_remote_client,
    )
    if request.dry_run:
        _LOGGER.info("Dry run: requests are recorded and not sent.")

    with closing(client):
        try:
            return run_provisioning_workflow(
                settings.run,
                client,
                api_version=settings.client.api_version,
            )
        except IncompleteConfigurationError as exc:
            raise RunExecutionError(str(exc)) from exc


def _build_client(
    client_settings: ClientSettings,
    *,
    debug: bool,
    dry_run: bool,
    client_factory: ClientFactory,
) -> RemoteApiClient:
    if dry_run:
        return RecordingClient()
    try:
        return client_factory(client_settings, debug=debug)
    except ClientSetupError as exc:
        raise RunExecutionError(str(exc)) from exc
