"""Run log formatting tests."""

from __future__ import annotations

import io
import logging
import re

from repo_governance.run_logging import configure_run_logging

_LINE_PATTERN = re.compile(r"^\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\] \[(INFO|ERROR|DEBUG)\] .+$")


def test_lines_are_timestamped_with_level() -> None:
    stream = io.StringIO()
    configure_run_logging(stream=stream)

    logging.getLogger("repo_governance.run_execution").info("Creating team web-team...")
    logging.getLogger("repo_governance.run_execution").error("Failed to create team web-team.")

    lines = stream.getvalue().splitlines()
    assert len(lines) == 2
    assert all(_LINE_PATTERN.match(line) for line in lines)
    assert lines[0].endswith("[INFO] Creating team web-team...")
    assert lines[1].endswith("[ERROR] Failed to create team web-team.")


def test_debug_records_only_emitted_in_debug_mode() -> None:
    quiet = io.StringIO()
    configure_run_logging(stream=quiet)
    logging.getLogger("repo_governance.remote_api.rest").debug("Running request: PUT x")

    verbose = io.StringIO()
    configure_run_logging(debug=True, stream=verbose)
    logging.getLogger("repo_governance.remote_api.rest").debug("Running request: PUT x")

    assert quiet.getvalue() == ""
    assert "[DEBUG] Running request: PUT x" in verbose.getvalue()


def test_repeated_configuration_replaces_previous_handler() -> None:
    first = io.StringIO()
    second = io.StringIO()
    configure_run_logging(stream=first)
    logger = configure_run_logging(stream=second)

    logger.info("only once")

    assert first.getvalue() == ""
    assert second.getvalue().count("only once") == 1
