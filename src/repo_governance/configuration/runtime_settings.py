"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_API_VERSION = "2022-11-28"
DEFAULT_TOKEN_ENV = "GITHUB_TOKEN"


@dataclass(frozen=True)
class BranchProtectionPolicy:
    """Configurable part of the branch protection rule.

    Deletions and force pushes are always disallowed and therefore not represented here.
    """

    required_approving_review_count: int
    strict_status_checks: bool
    restriction_teams: tuple[str, ...]


@dataclass(frozen=True)
class RunConfiguration:  # pylint: disable=too-many-instance-attributes
    """Read-only parameter set consumed by every provisioning step."""

    organization: str
    team_name: str
    team_description: str
    team_privacy: str
    repository: str
    username: str
    permission: str
    branch: str
    protection: BranchProtectionPolicy

    def missing_fields(self) -> tuple[str, ...]:
        """Return the names of fields that are empty and would block a run."""
        missing = [
            name
            for name in (
                "organization",
                "team_name",
                "team_description",
                "team_privacy",
                "repository",
                "username",
                "permission",
                "branch",
            )
            if not str(getattr(self, name) or "").strip()
        ]
        if not self.protection.restriction_teams:
            missing.append("protection.restriction_teams")
        return tuple(missing)


@dataclass(frozen=True)
class ClientSettings:
    """Remote API client connectivity configuration."""

    transport: str = "rest"
    api_url: str = DEFAULT_API_URL
    timeout_seconds: int = 30
    api_version: str = DEFAULT_API_VERSION
    token_env: str = DEFAULT_TOKEN_ENV


@dataclass(frozen=True)
class ProvisioningSettings:
    """Top-level configuration aggregate."""

    path: Path
    run: RunConfiguration
    client: ClientSettings
