"""Typed request bodies for the provisioning calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TeamCreationBody:
    """Body of the team creation call."""

    name: str
    description: str
    privacy: str

    def to_payload(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description, "privacy": self.privacy}


@dataclass(frozen=True)
class TeamRepositoryPermissionBody:
    """Body of the team repository permission call."""

    permission: str

    def to_payload(self) -> dict[str, Any]:
        return {"permission": self.permission}


@dataclass(frozen=True)
class BranchProtectionBody:
    """Body of the branch protection call.

    Admin enforcement is always on; branch deletions and force pushes are always
    disallowed. Neither can be switched through configuration.
    """

    strict_status_checks: bool
    required_approving_review_count: int
    restriction_teams: tuple[str, ...]

    enforce_admins = True
    allow_deletions = False
    allow_force_pushes = False

    def to_payload(self) -> dict[str, Any]:
        return {
            "required_status_checks": {
                "strict": self.strict_status_checks,
                "contexts": [],
            },
            "enforce_admins": self.enforce_admins,
            "required_pull_request_reviews": {
                "required_approving_review_count": self.required_approving_review_count,
            },
            "restrictions": {
                "users": [],
                "teams": list(self.restriction_teams),
                "apps": [],
            },
            "allow_deletions": self.allow_deletions,
            "allow_force_pushes": self.allow_force_pushes,
        }


@dataclass(frozen=True)
class DefaultBranchBody:
    """Body of the repository update that switches the default branch."""

    default_branch: str

    def to_payload(self) -> dict[str, Any]:
        return {"default_branch": self.default_branch}
