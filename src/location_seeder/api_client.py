"""Async HTTP client for the location registry service."""

from __future__ import annotations

from typing import Optional

import httpx

from . import __version__
from .config import Settings
from .logging_utils import get_logger
from .models import LocationPayload

logger = get_logger(__name__)

PARENT_CODE_PARAM = "parentCode"


class ApiError(Exception):
    """Raised when the location registry cannot fulfill a request."""


class PublishError(ApiError):
    """Raised when a single location could not be saved."""


class ServerRejectedError(PublishError):
    """The registry answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Status {status_code} - {body}")


class NoResponseError(PublishError):
    """The request went out but no response came back."""


class RequestSetupError(PublishError):
    """The request could not be built or sent."""


class LocationRegistryClient:
    """Posts locations to the registry, one request per call."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._headers = {
            "Accept": "application/json",
            "User-Agent": f"location-seeder/{__version__}",
        }

    async def __aenter__(self) -> LocationRegistryClient:
        self._client = httpx.AsyncClient(
            timeout=self._settings.http_timeout,
            headers=self._headers,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def save_location(
        self, payload: LocationPayload, parent_code: Optional[str] = None
    ) -> httpx.Response:
        if self._client is None:
            raise RuntimeError("HTTP client is not ready")

        url = self._settings.save_url
        params = {PARENT_CODE_PARAM: parent_code} if parent_code else None

        try:
            logger.debug("POST %s params=%s body=%s", url, params, payload.to_json())
            response = await self._client.post(
                url, json=payload.to_json(), params=params
            )
        except (
            httpx.InvalidURL,
            httpx.UnsupportedProtocol,
            httpx.LocalProtocolError,
        ) as exc:
            raise RequestSetupError(f"{type(exc).__name__}: {exc}") from exc
        except httpx.RequestError as exc:
            raise NoResponseError(f"{type(exc).__name__}: {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise RequestSetupError(f"{type(exc).__name__}: {exc}") from exc

        if not response.is_success:
            raise ServerRejectedError(response.status_code, response.text[:500])
        return response
