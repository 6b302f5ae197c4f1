"""Upload client for parsed log data.

The parsing core hands payloads to a Publisher. HttpPublisher posts them to
the gathering API with the configured token and timeout.
"""

import json
from pathlib import Path
from typing import Any, Protocol

import httpx

from gathering import __version__
from gathering.config import Settings
from gathering.models.payload import UploadPayload

JSON_UPLOAD_PATH = "/upload/json"
RAW_UPLOAD_PATH = "/upload/raw"
RAW_UPLOAD_FIELD = "file"


class PublishError(Exception):
    """Raised when an upload fails."""


class Publisher(Protocol):
    """Destination for assembled payloads and raw log files."""

    async def publish(self, payload: UploadPayload) -> Any: ...

    async def upload_log(self, path: Path) -> Any: ...


class HttpPublisher:
    """
    Publisher backed by the gathering HTTP API.

    Args:
        settings: Provides api_url, api_token and client_timeout
        client: Optional client for connection reuse (and tests). When
            omitted a client is created per request.
    """

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None) -> None:
        self._settings = settings
        self._client = client

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": f"gathering/{__version__}",
            "Authorization": f"token {self._settings.api_token}",
        }

    def _url(self, path: str) -> str:
        return self._settings.api_url.rstrip("/") + path

    async def publish(self, payload: UploadPayload) -> Any:
        """
        Upload an assembled payload as JSON.

        Returns:
            Decoded response body, or None if the body is empty

        Raises:
            PublishError: On network errors or non-success responses
        """
        return await self._post(JSON_UPLOAD_PATH, json=payload.to_wire())

    async def upload_log(self, path: Path) -> Any:
        """
        Upload the raw log file as multipart form data.

        Raises:
            PublishError: If the file cannot be read or the upload fails
        """
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise PublishError(f"Failed to read log file '{path}': {exc}") from exc

        files = {RAW_UPLOAD_FIELD: (RAW_UPLOAD_FIELD, content, "application/octet-stream")}
        return await self._post(RAW_UPLOAD_PATH, files=files)

    async def _post(self, path: str, **kwargs: Any) -> Any:
        url = self._url(path)

        try:
            if self._client is not None:
                response = await self._client.post(url, headers=self.headers, **kwargs)
            else:
                async with httpx.AsyncClient(timeout=self._settings.client_timeout) as client:
                    response = await client.post(url, headers=self.headers, **kwargs)
        except httpx.RequestError as exc:
            raise PublishError(f"Network error posting to {path}: {exc}") from exc

        if not response.is_success:
            raise PublishError(
                f"Failed to post to {path}: HTTP {response.status_code} - {response.text}"
            )

        if not response.content:
            return None

        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise PublishError(f"Invalid JSON response: {response.text}") from exc
