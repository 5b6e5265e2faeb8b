"""Request building, sending and the uniform error policy of every API class."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx
from loguru import logger

from .exceptions import ServiceApiException
from .marshalling import build_request_uri, deserialize, serialize
from .sdk_manager import SdkManager
from .version import __version__

T = TypeVar("T")

JSON_API_CONTENT_TYPE = "application/vnd.api+json"


@dataclass(slots=True)
class ApiResponse(Generic[T]):
    """Raw HTTP response paired with its deserialized body.

    ``content`` is ``None`` when the call failed and the caller asked not to
    raise, or when the service returned no body.
    """

    response: httpx.Response
    content: T | None = None

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers

    @property
    def is_success(self) -> bool:
        return self.response.is_success


class BaseApi:
    """Common plumbing for the per-endpoint API classes of a service."""

    service_name = "CORE"
    exception_type: type[ServiceApiException] = ServiceApiException

    def __init__(self, sdk_manager: SdkManager) -> None:
        self._sdk_manager = sdk_manager

    @property
    def client(self) -> httpx.AsyncClient:
        return self._sdk_manager.client

    @property
    def user_agent(self) -> str:
        return f"APS SDK/{self.service_name}/Python/{__version__}"

    def _url(self, template: str, route: dict[str, Any] | None = None) -> str:
        path = build_request_uri(template, route)
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._sdk_manager.base_address}{path}"

    def _headers(
        self, access_token: str | None, accept: str | None, extra: dict[str, str] | None
    ) -> dict[str, str]:
        headers: dict[str, str] = {"User-Agent": self.user_agent}
        if accept:
            headers["Accept"] = accept
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        if extra:
            headers.update(extra)
        return headers

    async def _send(
        self,
        operation: str,
        method: str,
        template: str,
        *,
        route: dict[str, Any] | None = None,
        query: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        body: Any = None,
        form: dict[str, str] | None = None,
        content: bytes | None = None,
        access_token: str | None = None,
        accept: str | None = "application/json",
        throw_on_error: bool = True,
    ) -> httpx.Response:
        """Send one request and apply the error policy.

        Raises ``exception_type`` on a non-success status when ``throw_on_error``
        is set; otherwise logs the failure and hands the response back.
        """
        logger.info(f"Entered into {operation}")

        request_kwargs: dict[str, Any] = {
            "headers": self._headers(access_token, accept, headers),
        }
        if query:
            request_kwargs["params"] = query
        if body is not None:
            request_kwargs["json"] = serialize(body)
        elif form is not None:
            request_kwargs["data"] = form
        elif content is not None:
            request_kwargs["content"] = content

        url = self._url(template, route)
        response = await self.client.request(method, url, **request_kwargs)

        if not response.is_success:
            if throw_on_error:
                try:
                    response.raise_for_status()
                except httpx.HTTPStatusError as exc:
                    raise self.exception_type(str(exc), response) from exc
            logger.error(f"response unsuccess with status code: {response.status_code}")
            return response

        logger.info(f"Exited from {operation} with response statusCode: {response.status_code}")
        return response

    async def _send_for(
        self, response_type: Any, operation: str, method: str, template: str, **kwargs: Any
    ) -> ApiResponse[Any]:
        """Send a request and deserialize a successful body into ``response_type``."""
        response = await self._send(operation, method, template, **kwargs)
        if not response.is_success:
            return ApiResponse(response, None)
        return ApiResponse(response, deserialize(response, response_type))
