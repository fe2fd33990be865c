"""GitHub client that shells out to the `gh api` command."""

from __future__ import annotations

import json
import logging
import os
import shlex
import subprocess
import tempfile
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from .request_models import RemoteRequest, RemoteRequestError

_LOGGER = logging.getLogger("repo_governance.remote_api.gh_cli")

CommandRunner = Callable[
    [Sequence[str], Mapping[str, str], float | None], subprocess.CompletedProcess
]


class GhCliClient:
    """Issue remote requests through the authenticated `gh` command line tool."""

    def __init__(
        self,
        *,
        gh_executable: str = "gh",
        timeout_seconds: float | None = None,
        debug: bool = False,
        run_command: CommandRunner | None = None,
    ) -> None:
        self._gh_executable = gh_executable
        self._timeout_seconds = timeout_seconds
        self._debug = debug
        self._run_command = run_command or _run_gh_command

    def send(self, request: RemoteRequest) -> Any:
        """Issue one request and return the decoded JSON output, if any.

        A request body is handed to `gh` through a scratch file that only lives for
        the duration of the call.

        Raises:
          RemoteRequestError: When the scratch file cannot be written, `gh` cannot be
            started, times out or exits non-zero.
        """
        command = [self._gh_executable, "api", "-X", request.method, request.path]
        for name, value in request.headers.items():
            command.extend(["-H", f"{name}: {value}"])

        if request.body is None:
            return self._run(request, command)
        try:
            with _scratch_payload(request.body) as payload_path:
                return self._run(request, [*command, "--input", str(payload_path)])
        except OSError as exc:
            raise RemoteRequestError(f"{request.method} {request.path} failed: {exc}") from exc

    def close(self) -> None:
        """Nothing to release; present for parity with the REST client."""

    def __enter__(self) -> GhCliClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _run(self, request: RemoteRequest, command: list[str]) -> Any:
        env = dict(os.environ)
        if self._debug:
            env["GH_DEBUG"] = "api"
        _LOGGER.debug("Running command: %s", shlex.join(command))
        try:
            process = self._run_command(command, env, self._timeout_seconds)
        except subprocess.TimeoutExpired as exc:
            raise RemoteRequestError(
                f"{request.method} {request.path} failed: "
                f"gh did not finish within {exc.timeout} seconds"
            ) from exc
        except OSError as exc:
            raise RemoteRequestError(f"{request.method} {request.path} failed: {exc}") from exc

        _LOGGER.debug("  Return code: %s", process.returncode)
        if process.returncode != 0:
            if self._debug and process.stderr:
                _LOGGER.debug("  Error output:\n%s", process.stderr.rstrip())
            detail = _failure_detail(process, self._debug)
            raise RemoteRequestError(
                f"{request.method} {request.path} failed: {detail}", process.returncode
            )
        output = (process.stdout or "").strip()
        if not output:
            return None
        try:
            return json.loads(output)
        except ValueError:
            return output


def _failure_detail(process: subprocess.CompletedProcess, debug: bool) -> str:
    detail = (process.stderr or process.stdout or "").strip()
    if not detail:
        return "No error output available"
    if debug:
        # GH_DEBUG=api puts the HTTP trace ahead of gh's own error line.
        return detail.splitlines()[-1].strip()
    return detail


@contextmanager
def _scratch_payload(body: Mapping[str, Any]) -> Iterator[Path]:
    handle = tempfile.NamedTemporaryFile(  # pylint: disable=consider-using-with
        mode="w", encoding="utf-8", suffix=".json", delete=False
    )
    payload_path = Path(handle.name)
    try:
        with handle:
            json.dump(body, handle)
        yield payload_path
    finally:
        payload_path.unlink(missing_ok=True)


def _run_gh_command(
    command: Sequence[str], env: Mapping[str, str], timeout: float | None
) -> subprocess.CompletedProcess:
    return subprocess.run(
        list(command),
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        check=False,
        env=dict(env),
        timeout=timeout,
    )
