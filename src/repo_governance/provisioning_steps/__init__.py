"""Provisioning step exports."""

from .request_bodies import (
    BranchProtectionBody,
    DefaultBranchBody,
    TeamCreationBody,
    TeamRepositoryPermissionBody,
)
from .step_definitions import (
    ADD_USER_TO_TEAM,
    CREATE_TEAM,
    SET_BRANCH_PROTECTION,
    SET_DEFAULT_BRANCH,
    SET_TEAM_REPO_PERMISSIONS,
    STEP_ORDER,
    ProvisioningStep,
    build_provisioning_steps,
    team_slug,
)

__all__ = [
    "ADD_USER_TO_TEAM",
    "CREATE_TEAM",
    "SET_BRANCH_PROTECTION",
    "SET_DEFAULT_BRANCH",
    "SET_TEAM_REPO_PERMISSIONS",
    "STEP_ORDER",
    "BranchProtectionBody",
    "DefaultBranchBody",
    "ProvisioningStep",
    "TeamCreationBody",
    "TeamRepositoryPermissionBody",
    "build_provisioning_steps",
    "team_slug",
]
