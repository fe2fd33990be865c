"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_API_URL,
    DEFAULT_API_VERSION,
    DEFAULT_TOKEN_ENV,
    BranchProtectionPolicy,
    ClientSettings,
    ProvisioningSettings,
    RunConfiguration,
)

TEAM_PRIVACY_VALUES = ("closed", "secret")
PERMISSION_VALUES = ("pull", "triage", "push", "maintain", "admin")
TRANSPORT_VALUES = ("rest", "gh_cli")
PLACEHOLDER_VALUE = "<REQUIRED>"

_REPOSITORY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> ProvisioningSettings:
    """Load and validate the provisioning configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return ProvisioningSettings(
        path=path,
        run=parse_run_configuration(parsed),
        client=_parse_client_section(parsed.get("client")),
    )


def parse_run_configuration(parsed: Mapping[str, Any]) -> RunConfiguration:
    """Build a RunConfiguration from an already parsed configuration mapping."""
    organization = _require_non_empty_string(parsed.get("organization"), "organization")

    team = _require_mapping(parsed.get("team"), "team")
    team_name = _require_non_empty_string(team.get("name"), "team.name")
    team_description = _require_non_empty_string(team.get("description"), "team.description")
    team_privacy = _require_choice(
        team.get("privacy", "closed"), "team.privacy", TEAM_PRIVACY_VALUES
    )

    repository_section = _require_mapping(parsed.get("repository"), "repository")
    repository = _require_non_empty_string(repository_section.get("name"), "repository.name")
    if not _REPOSITORY_PATTERN.match(repository):
        raise ConfigurationError(
            f"repository.name '{repository}' must use the owner/name form."
        )
    branch = _require_non_empty_string(
        repository_section.get("default_branch"), "repository.default_branch"
    )

    member = _require_mapping(parsed.get("member"), "member")
    username = _require_non_empty_string(member.get("username"), "member.username")

    permission = _require_choice(
        parsed.get("permission", "maintain"), "permission", PERMISSION_VALUES
    )

    protection = _parse_branch_protection_section(
        parsed.get("branch_protection"), team_name=team_name
    )

    return RunConfiguration(
        organization=organization,
        team_name=team_name,
        team_description=team_description,
        team_privacy=team_privacy,
        repository=repository,
        username=username,
        permission=permission,
        branch=branch,
        protection=protection,
    )


def _parse_branch_protection_section(value: Any, *, team_name: str) -> BranchProtectionPolicy:
    section = {} if value is None else _require_mapping(value, "branch_protection")
    review_count = _require_non_negative_int(
        section.get("required_approving_review_count", 1),
        "branch_protection.required_approving_review_count",
    )
    strict = _require_bool(
        section.get("strict_status_checks", True), "branch_protection.strict_status_checks"
    )
    restriction_teams = _normalize_string_sequence(
        section.get("restriction_teams"), "branch_protection.restriction_teams"
    )
    return BranchProtectionPolicy(
        required_approving_review_count=review_count,
        strict_status_checks=strict,
        restriction_teams=restriction_teams or (team_name,),
    )


def _parse_client_section(value: Any) -> ClientSettings:
    section = {} if value is None else _require_mapping(value, "client")
    transport = _require_choice(
        section.get("transport", "rest"), "client.transport", TRANSPORT_VALUES
    )
    api_url = _require_non_empty_string(
        section.get("api_url", DEFAULT_API_URL), "client.api_url"
    ).rstrip("/")
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 30), "client.timeout_seconds"
    )
    api_version = _require_non_empty_string(
        section.get("api_version", DEFAULT_API_VERSION), "client.api_version"
    )
    token_env = _require_non_empty_string(
        section.get("token_env", DEFAULT_TOKEN_ENV), "client.token_env"
    )
    return ClientSettings(
        transport=transport,
        api_url=api_url,
        timeout_seconds=timeout_seconds,
        api_version=api_version,
        token_env=token_env,
    )


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if stripped == PLACEHOLDER_VALUE:
        raise ConfigurationError(f"{field_name} still holds the {PLACEHOLDER_VALUE} placeholder.")
    return stripped


def _require_choice(value: Any, field_name: str, choices: Sequence[str]) -> str:
    normalized = _require_non_empty_string(value, field_name).lower()
    if normalized not in choices:
        allowed = ", ".join(choices)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.")
    return normalized


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
