"""Command line interface entry point."""

from __future__ import annotations

import os
import sys

import click

from repo_governance.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from repo_governance.run_execution import (
    RunExecutionError,
    RunRequest,
    execute_provisioning_run,
)
from repo_governance.run_logging import configure_run_logging


class CliError(Exception):
    """Custom CLI error."""


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
)
@click.version_option(package_name="repo-governance")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Provision GitHub team, permissions and branch protection for a repository.

    Without a command, runs `provision` with its defaults.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(provision)


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML provisioning configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML provisioning configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="provision")
@click.option(
    "--config",
    "config_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON provisioning configuration file",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Trace every remote call. Also enabled by DEBUG=true.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Log and record every step without contacting GitHub.",
)
@click.pass_context
def provision(ctx: click.Context, config_path: str, debug: bool, dry_run: bool) -> None:
    """Create the team, grant access, protect the branch and set it as default."""
    debug = debug or os.environ.get("DEBUG") == "true"
    configure_run_logging(debug=debug)
    try:
        outcome = execute_provisioning_run(
            RunRequest(config_path=config_path, debug=debug, dry_run=dry_run)
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    if outcome.exit_code != 0:
        ctx.exit(outcome.exit_code)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        result = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
