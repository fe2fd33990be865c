"""Remote API request entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

GITHUB_JSON_MEDIA_TYPE = "application/vnd.github+json"
API_VERSION_HEADER = "X-GitHub-Api-Version"


class RemoteRequestError(Exception):
    """Raised when a remote call fails, whether rejected by the remote or never delivered.

    ``status`` holds the HTTP status (or the ``gh`` exit code) when one is known and
    ``None`` for transport failures.
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class ClientSetupError(Exception):
    """Raised when a remote API client cannot be constructed."""


@dataclass(frozen=True)
class RemoteRequest:
    """Descriptor for one remote mutation."""

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Mapping[str, Any] | None = None


class RemoteApiClient(Protocol):
    """Protocol for clients able to issue remote requests."""

    def send(self, request: RemoteRequest) -> Any: ...

    def close(self) -> None: ...
