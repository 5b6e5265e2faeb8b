"""Convenience facade over the Authentication API classes."""

from __future__ import annotations

import base64
from collections.abc import Sequence
from types import TracebackType
from typing import Any

import httpx
from loguru import logger

from ..http import ApiResponse
from ..sdk_manager import SdkManager
from .api import TokenApi, UsersApi
from .models import (
    GrantType,
    IntrospectToken,
    Jwks,
    OidcSpec,
    ResponseType,
    Scopes,
    ThreeLeggedToken,
    TokenTypeHint,
    TwoLeggedToken,
    UserInfo,
)


def encode_client_credentials(client_id: str, client_secret: str) -> str:
    """Return base64(``client_id:client_secret``) for HTTP Basic authentication."""
    return base64.b64encode(f"{client_id}:{client_secret}".encode()).decode("ascii")


class AuthenticationClient:
    """Acquire, inspect and revoke OAuth2 tokens.

    Methods that accept an optional ``client_secret`` treat the caller as a
    private client when it is given (HTTP Basic credentials) and as a public
    client otherwise (``client_id`` sent in the form body).
    """

    def __init__(self, sdk_manager: SdkManager | None = None) -> None:
        self.sdk_manager = sdk_manager or SdkManager()
        self.token_api = TokenApi(self.sdk_manager)
        self.users_api = UsersApi(self.sdk_manager)

    async def aclose(self) -> None:
        await self.sdk_manager.aclose()

    async def __aenter__(self) -> AuthenticationClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def get_user_info(
        self, authorization: str, *, throw_on_error: bool = True
    ) -> UserInfo | None:
        response = await self.users_api.get_user_info(authorization, throw_on_error=throw_on_error)
        return response.content

    async def get_two_legged_token(
        self,
        client_id: str,
        client_secret: str,
        scopes: Sequence[Scopes | str],
        *,
        throw_on_error: bool = True,
    ) -> TwoLeggedToken | None:
        """Acquire a 2-legged token through the client credentials grant."""
        response = await self.token_api.fetch_token(
            grant_type=GrantType.CLIENT_CREDENTIALS,
            authorization=encode_client_credentials(client_id, client_secret),
            scopes=scopes,
            throw_on_error=throw_on_error,
        )
        return self._token_from(response, TwoLeggedToken)

    def authorize(
        self,
        client_id: str,
        response_type: ResponseType | str,
        redirect_uri: str,
        scopes: Sequence[Scopes | str] | None = None,
        nonce: str | None = None,
        state: str | None = None,
        response_mode: str | None = None,
        prompt: str | None = None,
        authoptions: str | None = None,
        code_challenge: str | None = None,
        code_challenge_method: str | None = None,
    ) -> str:
        return self.token_api.authorize(
            client_id,
            response_type,
            redirect_uri,
            scopes=scopes,
            nonce=nonce,
            state=state,
            response_mode=response_mode,
            prompt=prompt,
            authoptions=authoptions,
            code_challenge=code_challenge,
            code_challenge_method=code_challenge_method,
        )

    async def get_three_legged_token(
        self,
        client_id: str,
        code: str,
        redirect_uri: str,
        client_secret: str | None = None,
        code_verifier: str | None = None,
        *,
        throw_on_error: bool = True,
    ) -> ThreeLeggedToken | None:
        """Exchange an authorization code for a 3-legged token."""
        if client_secret:
            response = await self.token_api.fetch_token(
                grant_type=GrantType.AUTHORIZATION_CODE,
                authorization=encode_client_credentials(client_id, client_secret),
                code=code,
                redirect_uri=redirect_uri,
                code_verifier=code_verifier,
                throw_on_error=throw_on_error,
            )
        else:
            response = await self.token_api.fetch_token(
                grant_type=GrantType.AUTHORIZATION_CODE,
                client_id=client_id,
                code=code,
                redirect_uri=redirect_uri,
                code_verifier=code_verifier,
                throw_on_error=throw_on_error,
            )
        return self._token_from(response, ThreeLeggedToken)

    async def refresh_token(
        self,
        refresh_token: str,
        client_id: str,
        client_secret: str | None = None,
        scopes: Sequence[Scopes | str] | None = None,
        *,
        throw_on_error: bool = True,
    ) -> ThreeLeggedToken | None:
        """Trade a refresh token for a new access token and refresh token.

        ``scopes`` must be the same as, or a subset of, the original grant.
        """
        if client_secret:
            response = await self.token_api.fetch_token(
                grant_type=GrantType.REFRESH_TOKEN,
                authorization=encode_client_credentials(client_id, client_secret),
                refresh_token=refresh_token,
                scopes=scopes,
                throw_on_error=throw_on_error,
            )
        else:
            response = await self.token_api.fetch_token(
                grant_type=GrantType.REFRESH_TOKEN,
                client_id=client_id,
                refresh_token=refresh_token,
                scopes=scopes,
                throw_on_error=throw_on_error,
            )
        return self._token_from(response, ThreeLeggedToken)

    async def get_keys(self, *, throw_on_error: bool = True) -> Jwks | None:
        response = await self.token_api.get_keys(throw_on_error=throw_on_error)
        return response.content

    async def get_oidc_spec(self, *, throw_on_error: bool = True) -> OidcSpec | None:
        response = await self.token_api.get_oidc_spec(throw_on_error=throw_on_error)
        return response.content

    async def introspect_token(
        self,
        token: str,
        client_id: str,
        client_secret: str | None = None,
        *,
        throw_on_error: bool = True,
    ) -> IntrospectToken | None:
        if client_secret:
            response = await self.token_api.introspect_token(
                token,
                authorization=encode_client_credentials(client_id, client_secret),
                throw_on_error=throw_on_error,
            )
        else:
            response = await self.token_api.introspect_token(
                token, client_id=client_id, throw_on_error=throw_on_error
            )
        return response.content

    def logout(self, post_logout_redirect_uri: str | None = None) -> str:
        return self.token_api.logout(post_logout_redirect_uri)

    async def revoke(
        self,
        token: str,
        client_id: str,
        client_secret: str | None = None,
        token_type_hint: TokenTypeHint | str | None = None,
        *,
        throw_on_error: bool = True,
    ) -> httpx.Response:
        if client_secret:
            return await self.token_api.revoke(
                token,
                token_type_hint=token_type_hint,
                authorization=encode_client_credentials(client_id, client_secret),
                throw_on_error=throw_on_error,
            )
        return await self.token_api.revoke(
            token,
            token_type_hint=token_type_hint,
            client_id=client_id,
            throw_on_error=throw_on_error,
        )

    @staticmethod
    def _token_from(
        response: ApiResponse[dict[str, Any]],
        token_type: type[TwoLeggedToken] | type[ThreeLeggedToken],
    ) -> TwoLeggedToken | ThreeLeggedToken | None:
        if response.content is None:
            return None
        token = token_type.model_validate(response.content)
        logger.debug(f"Acquired {token_type.__name__} expiring at {token.expires_at}")
        return token
