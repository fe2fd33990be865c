"""GitHub REST client built on requests."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests

from repo_governance.configuration.runtime_settings import DEFAULT_API_URL

from .request_models import RemoteRequest, RemoteRequestError

_LOGGER = logging.getLogger("repo_governance.remote_api.rest")

_MAX_TRACE_CHARS = 1000
USER_AGENT = "repo-governance"


class GitHubRestClient:
    """Issue remote requests against the GitHub REST API over HTTPS."""

    def __init__(
        self,
        *,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: int = 30,
        session: requests.Session | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "User-Agent": USER_AGENT,
            }
        )

    def send(self, request: RemoteRequest) -> Any:
        """Issue one request and return the decoded JSON response body, if any.

        Raises:
          RemoteRequestError: On transport errors and on any non-2xx status.
        """
        url = f"{self._api_url}/{request.path.lstrip('/')}"
        _LOGGER.debug("Running request: %s %s", request.method, url)
        if request.body is not None:
            _LOGGER.debug("  Request body: %s", json.dumps(request.body, sort_keys=True))
        try:
            response = self._session.request(
                request.method,
                url,
                headers=dict(request.headers),
                json=request.body,
                timeout=self._timeout_seconds,
            )
        except requests.exceptions.RequestException as exc:
            raise RemoteRequestError(f"{request.method} {request.path} failed: {exc}") from exc

        _LOGGER.debug("  Return status: %s", response.status_code)
        if response.text:
            _LOGGER.debug("  Response body: %s", _truncate(response.text))
        if not 200 <= response.status_code < 300:
            raise RemoteRequestError(
                f"{request.method} {request.path} failed: "
                f"{response.status_code} {_error_detail(response)}",
                response.status_code,
            )
        return _decode_body(response)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> GitHubRestClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _error_detail(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text.strip() or response.reason or ""
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return json.dumps(payload)


def _decode_body(response: requests.Response) -> Any:
    if not response.text:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _truncate(text: str) -> str:
    stripped = text.strip()
    if len(stripped) <= _MAX_TRACE_CHARS:
        return stripped
    half = _MAX_TRACE_CHARS // 2
    return f"{stripped[:half]}...{stripped[-half:]}"
