"""The five provisioning steps, in execution order."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

from repo_governance.configuration.runtime_settings import RunConfiguration
from repo_governance.remote_api.request_models import (
    API_VERSION_HEADER,
    GITHUB_JSON_MEDIA_TYPE,
    RemoteRequest,
)

from .request_bodies import (
    BranchProtectionBody,
    DefaultBranchBody,
    TeamCreationBody,
    TeamRepositoryPermissionBody,
)

CREATE_TEAM = "create_team"
ADD_USER_TO_TEAM = "add_user_to_team"
SET_TEAM_REPO_PERMISSIONS = "set_team_repo_permissions"
SET_BRANCH_PROTECTION = "set_branch_protection"
SET_DEFAULT_BRANCH = "set_default_branch"

STEP_ORDER = (
    CREATE_TEAM,
    ADD_USER_TO_TEAM,
    SET_TEAM_REPO_PERMISSIONS,
    SET_BRANCH_PROTECTION,
    SET_DEFAULT_BRANCH,
)

_SLUG_SEPARATORS = re.compile(r"[^a-z0-9_]+")


@dataclass(frozen=True)
class ProvisioningStep:
    """One named remote mutation together with its log messages."""

    name: str
    description: str
    failure_message: str
    request: RemoteRequest


def team_slug(team_name: str) -> str:
    """Return the URL slug GitHub derives from a team name ("Web Team" -> "web-team")."""
    return _SLUG_SEPARATORS.sub("-", team_name.strip().lower()).strip("-")


def build_provisioning_steps(
    configuration: RunConfiguration, *, api_version: str
) -> tuple[ProvisioningStep, ...]:
    """Build every step for one run, ordered by dependency.

    The team must exist before membership, permission and the protection rule's
    restriction list can reference it. The default branch switch comes last so it
    only happens once everything else is in place.
    """
    return (
        create_team_step(configuration),
        add_user_to_team_step(configuration),
        set_team_repo_permissions_step(configuration),
        set_branch_protection_step(configuration, api_version=api_version),
        set_default_branch_step(configuration),
    )


def create_team_step(configuration: RunConfiguration) -> ProvisioningStep:
    body = TeamCreationBody(
        name=configuration.team_name,
        description=configuration.team_description,
        privacy=configuration.team_privacy,
    )
    return ProvisioningStep(
        name=CREATE_TEAM,
        description=(
            f"Creating team {configuration.team_name} in the "
            f"{configuration.organization} organization..."
        ),
        failure_message=f"Failed to create team {configuration.team_name}.",
        request=RemoteRequest(
            method="POST",
            path=f"orgs/{_segment(configuration.organization)}/teams",
            headers=_default_headers(),
            body=body.to_payload(),
        ),
    )


def add_user_to_team_step(configuration: RunConfiguration) -> ProvisioningStep:
    return ProvisioningStep(
        name=ADD_USER_TO_TEAM,
        description=f"Adding {configuration.username} to the {configuration.team_name} team...",
        failure_message=(
            f"Failed to add user {configuration.username} to team {configuration.team_name}."
        ),
        request=RemoteRequest(
            method="PUT",
            path=(
                f"{_team_path(configuration)}/memberships/{_segment(configuration.username)}"
            ),
            headers=_default_headers(),
        ),
    )


def set_team_repo_permissions_step(configuration: RunConfiguration) -> ProvisioningStep:
    body = TeamRepositoryPermissionBody(permission=configuration.permission)
    return ProvisioningStep(
        name=SET_TEAM_REPO_PERMISSIONS,
        description=(
            f"Setting {configuration.team_name} team permissions to {configuration.permission} "
            f"for the {configuration.repository} repository..."
        ),
        failure_message=(
            f"Failed to set permissions for {configuration.team_name} "
            f"on {configuration.repository}."
        ),
        request=RemoteRequest(
            method="PUT",
            path=f"{_team_path(configuration)}/repos/{configuration.repository}",
            headers=_default_headers(),
            body=body.to_payload(),
        ),
    )


def set_branch_protection_step(
    configuration: RunConfiguration, *, api_version: str
) -> ProvisioningStep:
    policy = configuration.protection
    body = BranchProtectionBody(
        strict_status_checks=policy.strict_status_checks,
        required_approving_review_count=policy.required_approving_review_count,
        restriction_teams=tuple(team_slug(team) for team in policy.restriction_teams),
    )
    headers = _default_headers()
    headers[API_VERSION_HEADER] = api_version
    return ProvisioningStep(
        name=SET_BRANCH_PROTECTION,
        description=(
            f"Setting branch protection rules for {configuration.branch} branch "
            f"of {configuration.repository}..."
        ),
        failure_message=f"Failed to set branch protection for {configuration.branch}.",
        request=RemoteRequest(
            method="PUT",
            path=(
                f"repos/{configuration.repository}/branches/"
                f"{_segment(configuration.branch)}/protection"
            ),
            headers=headers,
            body=body.to_payload(),
        ),
    )


def set_default_branch_step(configuration: RunConfiguration) -> ProvisioningStep:
    body = DefaultBranchBody(default_branch=configuration.branch)
    return ProvisioningStep(
        name=SET_DEFAULT_BRANCH,
        description=(
            f"Setting default branch to {configuration.branch} "
            f"for repository {configuration.repository}..."
        ),
        failure_message=(
            f"Failed to set default branch to {configuration.branch} "
            f"for {configuration.repository}."
        ),
        request=RemoteRequest(
            method="PATCH",
            path=f"repos/{configuration.repository}",
            headers=_default_headers(),
            body=body.to_payload(),
        ),
    )


def _team_path(configuration: RunConfiguration) -> str:
    return (
        f"orgs/{_segment(configuration.organization)}"
        f"/teams/{_segment(team_slug(configuration.team_name))}"
    )


def _default_headers() -> dict[str, str]:
    return {"Accept": GITHUB_JSON_MEDIA_TYPE}


def _segment(value: str) -> str:
    return quote(value, safe="")
