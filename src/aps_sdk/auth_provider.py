"""Sources of access tokens for the service client facades."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from loguru import logger

from .authentication.client import AuthenticationClient
from .authentication.models import Scopes
from .sdk_manager import SdkManager


@runtime_checkable
class AuthenticationProvider(Protocol):
    """Anything that can hand a facade a bearer token."""

    async def get_access_token(self, scopes: Sequence[Scopes | str] | None = None) -> str: ...


class StaticAuthenticationProvider:
    """Return the same caller-supplied token on every call."""

    def __init__(self, access_token: str) -> None:
        if not access_token:
            raise ValueError("StaticAuthenticationProvider requires a non-empty access token")
        self._access_token = access_token

    async def get_access_token(self, scopes: Sequence[Scopes | str] | None = None) -> str:
        return self._access_token


class TwoLeggedAuthenticationProvider:
    """Acquire a fresh 2-legged token through the client credentials grant on each call.

    Without an explicit ``authentication_client`` the token requests go through
    ``sdk_manager``; a facade given this provider binds it to its own manager so
    both share one configured ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        scopes: Sequence[Scopes | str],
        authentication_client: AuthenticationClient | None = None,
        sdk_manager: SdkManager | None = None,
    ) -> None:
        self._client_id = client_id
        self._client_secret = client_secret
        self._scopes = list(scopes)
        self._authentication_client = authentication_client
        self._sdk_manager = sdk_manager

    def bind(self, sdk_manager: SdkManager) -> None:
        """Send token requests through ``sdk_manager`` unless a client or manager was given."""
        if self._authentication_client is None and self._sdk_manager is None:
            self._sdk_manager = sdk_manager

    @property
    def authentication_client(self) -> AuthenticationClient:
        if self._authentication_client is None:
            self._authentication_client = AuthenticationClient(self._sdk_manager)
        return self._authentication_client

    async def get_access_token(self, scopes: Sequence[Scopes | str] | None = None) -> str:
        requested = list(scopes) if scopes else self._scopes
        token = await self.authentication_client.get_two_legged_token(
            self._client_id, self._client_secret, requested
        )
        if token is None or not token.access_token:
            raise RuntimeError("Authentication service returned no access token")
        logger.debug(f"Fetched 2-legged token for client {self._client_id}")
        return token.access_token


async def resolve_access_token(
    access_token: str | None,
    provider: AuthenticationProvider | None,
    scopes: Sequence[Scopes | str] | None = None,
) -> str:
    """Prefer an explicit token; otherwise ask the provider for one."""
    if access_token:
        return access_token
    if provider is None:
        raise ValueError(
            "An access token is required. Pass access_token or configure an "
            "authentication provider on the client."
        )
    return await provider.get_access_token(scopes)
