"""Remote API client construction from client settings."""

from __future__ import annotations

import os
import shutil
from collections.abc import Mapping

from repo_governance.configuration.runtime_settings import ClientSettings

from .gh_cli_client import GhCliClient
from .request_models import ClientSetupError
from .rest_client import GitHubRestClient

GH_EXECUTABLE = "gh"


def create_remote_client(
    settings: ClientSettings,
    *,
    debug: bool = False,
    environ: Mapping[str, str] | None = None,
) -> GitHubRestClient | GhCliClient:
    """Build the client for the configured transport.

    Raises:
      ClientSetupError: If the access token or the `gh` executable is unavailable.
    """
    if settings.transport == "gh_cli":
        gh_executable = shutil.which(GH_EXECUTABLE)
        if gh_executable is None:
            raise ClientSetupError("The gh_cli transport requires the `gh` executable on PATH.")
        return GhCliClient(
            gh_executable=gh_executable,
            timeout_seconds=settings.timeout_seconds,
            debug=debug,
        )

    resolved_environ = os.environ if environ is None else environ
    token = (resolved_environ.get(settings.token_env) or "").strip()
    if not token:
        raise ClientSetupError(
            f"Environment variable {settings.token_env} must hold a GitHub access token."
        )
    return GitHubRestClient(
        token=token,
        api_url=settings.api_url,
        timeout_seconds=settings.timeout_seconds,
    )
