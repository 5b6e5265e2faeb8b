"""Shared base of the per-service client facades."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from types import TracebackType
from typing import Any, TypeVar

from .auth_provider import (
    AuthenticationProvider,
    TwoLeggedAuthenticationProvider,
    resolve_access_token,
)
from .authentication.models import Scopes
from .http import ApiResponse
from .sdk_manager import SdkManager

_ClientT = TypeVar("_ClientT", bound="ServiceClient")


class ServiceClient:
    """Own the API objects of a service and resolve tokens for them.

    Subclasses build their API objects in ``__init__`` and expose one method
    per operation that forwards to :meth:`_call`. A two-legged provider without
    its own transport is bound to this client's ``sdk_manager``.
    """

    def __init__(
        self,
        sdk_manager: SdkManager | None = None,
        authentication_provider: AuthenticationProvider | None = None,
    ) -> None:
        self.sdk_manager = sdk_manager or SdkManager()
        self.authentication_provider = authentication_provider
        if isinstance(authentication_provider, TwoLeggedAuthenticationProvider):
            authentication_provider.bind(self.sdk_manager)

    async def aclose(self) -> None:
        await self.sdk_manager.aclose()

    async def __aenter__(self: _ClientT) -> _ClientT:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _token(
        self, access_token: str | None, scopes: Sequence[Scopes | str] | None = None
    ) -> str:
        return await resolve_access_token(access_token, self.authentication_provider, scopes)

    async def _call(
        self,
        operation: Callable[..., Awaitable[Any]],
        *args: Any,
        access_token: str | None = None,
        throw_on_error: bool = True,
        **kwargs: Any,
    ) -> Any:
        """Invoke an API method with a resolved token and unwrap its content.

        No-content operations return their raw ``httpx.Response`` unchanged.
        """
        token = await self._token(access_token)
        result = await operation(
            *args, access_token=token, throw_on_error=throw_on_error, **kwargs
        )
        if isinstance(result, ApiResponse):
            return result.content
        return result
