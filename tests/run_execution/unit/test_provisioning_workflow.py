"""Workflow orchestration tests."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

import pytest
from repo_governance.configuration.runtime_settings import (
    BranchProtectionPolicy,
    RunConfiguration,
)
from repo_governance.provisioning_steps import STEP_ORDER
from repo_governance.remote_api.request_models import RemoteRequest, RemoteRequestError
from repo_governance.run_execution.provisioning_workflow import (
    IncompleteConfigurationError,
    run_provisioning_workflow,
)
from repo_governance.run_execution.run_contracts import OutcomeStatus

_EXPECTED_CALLS = [
    ("POST", "orgs/acme/teams"),
    ("PUT", "orgs/acme/teams/web-team/memberships/alice"),
    ("PUT", "orgs/acme/teams/web-team/repos/acme/site"),
    ("PUT", "repos/acme/site/branches/main/protection"),
    ("PATCH", "repos/acme/site"),
]


class _ScriptedClient:
    """Succeeds on every call except the one at ``fail_at`` (zero-based)."""

    def __init__(self, fail_at: int | None = None, error: Exception | None = None) -> None:
        self.requests: list[RemoteRequest] = []
        self._fail_at = fail_at
        self._error = error or RemoteRequestError("boom", 500)

    def send(self, request: RemoteRequest) -> Any:
        self.requests.append(request)
        if self._fail_at is not None and len(self.requests) - 1 == self._fail_at:
            raise self._error
        return None

    def close(self) -> None:
        """Nothing to release."""

    @property
    def calls(self) -> list[tuple[str, str]]:
        return [(request.method, request.path) for request in self.requests]


def _configuration(**overrides) -> RunConfiguration:
    configuration = RunConfiguration(
        organization="acme",
        team_name="web-team",
        team_description="Website maintainers",
        team_privacy="closed",
        repository="acme/site",
        username="alice",
        permission="maintain",
        branch="main",
        protection=BranchProtectionPolicy(
            required_approving_review_count=1,
            strict_status_checks=True,
            restriction_teams=("web-team",),
        ),
    )
    return replace(configuration, **overrides)


def test_all_steps_succeed_in_fixed_order() -> None:
    client = _ScriptedClient()

    outcome = run_provisioning_workflow(_configuration(), client)

    assert outcome.status is OutcomeStatus.COMPLETED
    assert outcome.exit_code == 0
    assert outcome.completed_steps == STEP_ORDER
    assert outcome.failed_step is None
    assert client.calls == _EXPECTED_CALLS


@pytest.mark.parametrize("failing_index", range(len(STEP_ORDER)))
def test_first_failure_stops_every_later_step(failing_index: int) -> None:
    client = _ScriptedClient(fail_at=failing_index)

    outcome = run_provisioning_workflow(_configuration(), client)

    assert outcome.status is OutcomeStatus.ABORTED
    assert outcome.exit_code == 1
    assert outcome.failed_step == STEP_ORDER[failing_index]
    assert outcome.completed_steps == STEP_ORDER[:failing_index]
    assert client.calls == _EXPECTED_CALLS[: failing_index + 1]


def test_failure_cause_is_the_verbatim_client_error() -> None:
    error = RemoteRequestError(
        "PUT orgs/acme/teams/web-team/memberships/alice failed: 404 Not Found", 404
    )
    client = _ScriptedClient(fail_at=1, error=error)

    outcome = run_provisioning_workflow(_configuration(), client)

    assert outcome.failed_step == "add_user_to_team"
    assert outcome.cause == str(error)


def test_rerun_reissues_the_same_calls() -> None:
    first_client = _ScriptedClient()
    second_client = _ScriptedClient()

    first = run_provisioning_workflow(_configuration(), first_client)
    second = run_provisioning_workflow(_configuration(), second_client)

    assert first == second
    assert first_client.requests == second_client.requests


@pytest.mark.parametrize(
    "overrides",
    [
        {"organization": ""},
        {"team_name": " "},
        {"username": ""},
        {
            "protection": BranchProtectionPolicy(
                required_approving_review_count=1,
                strict_status_checks=True,
                restriction_teams=(),
            )
        },
    ],
)
def test_incomplete_configuration_issues_no_calls(overrides: dict) -> None:
    client = _ScriptedClient()

    with pytest.raises(IncompleteConfigurationError, match="missing"):
        run_provisioning_workflow(_configuration(**overrides), client)

    assert client.requests == []


def test_api_version_is_applied_to_branch_protection_request() -> None:
    client = _ScriptedClient()

    run_provisioning_workflow(_configuration(), client, api_version="2026-03-10")

    assert client.requests[3].headers["X-GitHub-Api-Version"] == "2026-03-10"


def test_completion_is_logged_after_last_step(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="repo_governance"):
        run_provisioning_workflow(_configuration(), _ScriptedClient())

    messages = [record.getMessage() for record in caplog.records]
    assert messages[-1] == "Automation complete!"
    assert len(messages) == len(STEP_ORDER) + 1
