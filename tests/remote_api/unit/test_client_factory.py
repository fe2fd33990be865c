"""Remote client factory tests."""

from __future__ import annotations

import subprocess

import pytest
from repo_governance.configuration.runtime_settings import ClientSettings
from repo_governance.remote_api import client_factory
from repo_governance.remote_api.client_factory import create_remote_client
from repo_governance.remote_api.gh_cli_client import GhCliClient
from repo_governance.remote_api.request_models import ClientSetupError, RemoteRequest
from repo_governance.remote_api.rest_client import GitHubRestClient


def test_rest_transport_reads_token_from_configured_variable() -> None:
    client = create_remote_client(
        ClientSettings(token_env="GHE_TOKEN"), environ={"GHE_TOKEN": "abc123"}
    )

    assert isinstance(client, GitHubRestClient)
    client.close()


@pytest.mark.parametrize("environ", [{}, {"GITHUB_TOKEN": "  "}])
def test_rest_transport_requires_token(environ: dict[str, str]) -> None:
    with pytest.raises(ClientSetupError, match="GITHUB_TOKEN"):
        create_remote_client(ClientSettings(), environ=environ)


def test_gh_cli_transport_requires_gh_on_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(client_factory.shutil, "which", lambda name: None)

    with pytest.raises(ClientSetupError, match="gh"):
        create_remote_client(ClientSettings(transport="gh_cli"), environ={})


def test_gh_cli_transport_does_not_need_token(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(client_factory.shutil, "which", lambda name: "/usr/bin/gh")

    client = create_remote_client(ClientSettings(transport="gh_cli"), environ={}, debug=True)

    assert isinstance(client, GhCliClient)


def test_gh_cli_transport_receives_configured_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(client_factory.shutil, "which", lambda name: "/usr/bin/gh")
    timeouts: list[float | None] = []

    def _runner(command, env, timeout):
        timeouts.append(timeout)
        return subprocess.CompletedProcess(args=list(command), returncode=0, stdout="", stderr="")

    client = create_remote_client(ClientSettings(transport="gh_cli", timeout_seconds=1), environ={})
    assert isinstance(client, GhCliClient)
    client._run_command = _runner  # pylint: disable=protected-access

    client.send(RemoteRequest(method="PUT", path="x"))

    assert timeouts == [1]
