"""Client that records requests instead of sending them."""

from __future__ import annotations

import logging
from typing import Any

from .request_models import RemoteRequest

_LOGGER = logging.getLogger("repo_governance.remote_api.recording")


class RecordingClient:
    """Accept every request without contacting the remote, keeping them for inspection."""

    def __init__(self) -> None:
        self.requests: list[RemoteRequest] = []

    def send(self, request: RemoteRequest) -> Any:
        _LOGGER.debug("Dry run, not sending: %s %s", request.method, request.path)
        self.requests.append(request)
        return None

    def close(self) -> None:
        """Nothing to release."""
