"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "governance.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Provisioning configuration for repo-governance.
# Replace every <REQUIRED> placeholder before running provision.
# Entries marked <OPTIONAL> fall back to the documented default when removed.

organization: "<REQUIRED>"

team:
  name: "<REQUIRED>"
  description: "<REQUIRED>"
  # closed (default) or secret.
  privacy: "closed"

repository:
  # owner/name of the target repository.
  name: "<REQUIRED>"
  # Branch that is protected and made the default branch.
  default_branch: "main"

member:
  username: "<REQUIRED>"

# pull, triage, push, maintain (default) or admin.
permission: "maintain"

branch_protection:
  required_approving_review_count: 1
  strict_status_checks: true
  # Defaults to the team above when empty.
  restriction_teams: []

client:
  # rest (default) talks HTTPS directly; gh_cli shells out to the gh binary.
  transport: "rest"
  api_url: "https://api.github.com"
  timeout_seconds: 30
  # Environment variable holding the access token for the rest transport.
  token_env: "GITHUB_TOKEN"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML provisioning configuration template with placeholders."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
