"""Remote API exports."""

from .client_factory import create_remote_client
from .gh_cli_client import GhCliClient
from .recording_client import RecordingClient
from .request_models import (
    API_VERSION_HEADER,
    GITHUB_JSON_MEDIA_TYPE,
    ClientSetupError,
    RemoteApiClient,
    RemoteRequest,
    RemoteRequestError,
)
from .rest_client import GitHubRestClient

__all__ = [
    "API_VERSION_HEADER",
    "GITHUB_JSON_MEDIA_TYPE",
    "ClientSetupError",
    "GhCliClient",
    "GitHubRestClient",
    "RecordingClient",
    "RemoteApiClient",
    "RemoteRequest",
    "RemoteRequestError",
    "create_remote_client",
]
