"""Per-endpoint wrappers for the Authentication (OAuth2) service."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx

from ..exceptions import AuthenticationApiException
from ..http import ApiResponse, BaseApi
from ..marshalling import parameter_to_string, set_header, set_query_parameter
from .models import (
    GrantType,
    IntrospectToken,
    Jwks,
    OidcSpec,
    ResponseType,
    Scopes,
    TokenTypeHint,
    UserInfo,
)

BASE_PATH = "/authentication/v2"


def _scope_string(scopes: Sequence[Scopes | str] | None) -> str | None:
    if not scopes:
        return None
    return " ".join(parameter_to_string(scope) for scope in scopes)


def _basic_header(authorization: str | None, headers: dict[str, str]) -> None:
    if authorization:
        headers["Authorization"] = f"Basic {authorization}"


class TokenApi(BaseApi):
    """OAuth2 token endpoints: authorize, token, keys, introspect, logout, revoke."""

    service_name = "AUTHENTICATION"
    exception_type = AuthenticationApiException

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
        """Return the browser URL that asks the end user to grant consent.

        No request is sent; the caller redirects the user to the returned URL.
        """
        query: dict[str, str] = {}
        set_query_parameter("response_type", response_type, query)
        set_query_parameter("client_id", client_id, query)
        set_query_parameter("redirect_uri", redirect_uri, query)
        set_query_parameter("nonce", nonce, query)
        set_query_parameter("state", state, query)
        set_query_parameter("scope", _scope_string(scopes), query)
        set_query_parameter("response_mode", response_mode, query)
        set_query_parameter("prompt", prompt, query)
        set_query_parameter("authoptions", authoptions, query)
        set_query_parameter("code_challenge", code_challenge, query)
        set_query_parameter("code_challenge_method", code_challenge_method, query)
        return str(httpx.URL(self._url(f"{BASE_PATH}/authorize"), params=query))

    async def fetch_token(
        self,
        *,
        grant_type: GrantType | str,
        authorization: str | None = None,
        client_id: str | None = None,
        code: str | None = None,
        redirect_uri: str | None = None,
        code_verifier: str | None = None,
        refresh_token: str | None = None,
        scopes: Sequence[Scopes | str] | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[dict[str, Any]]:
        """POST the token endpoint for any grant type.

        ``authorization`` is the base64 ``client_id:client_secret`` pair of a
        private client; public clients pass ``client_id`` instead.
        """
        headers: dict[str, str] = {}
        _basic_header(authorization, headers)

        form: dict[str, str] = {}
        set_query_parameter("grant_type", grant_type, form)
        set_query_parameter("code", code, form)
        set_query_parameter("redirect_uri", redirect_uri, form)
        set_query_parameter("code_verifier", code_verifier, form)
        set_query_parameter("refresh_token", refresh_token, form)
        set_query_parameter("scope", _scope_string(scopes), form)
        set_query_parameter("client_id", client_id, form)

        return await self._send_for(
            dict,
            "fetch_token",
            "POST",
            f"{BASE_PATH}/token",
            headers=headers,
            form=form,
            throw_on_error=throw_on_error,
        )

    async def get_keys(self, *, throw_on_error: bool = True) -> ApiResponse[Jwks]:
        return await self._send_for(
            Jwks, "get_keys", "GET", f"{BASE_PATH}/keys", throw_on_error=throw_on_error
        )

    async def get_oidc_spec(self, *, throw_on_error: bool = True) -> ApiResponse[OidcSpec]:
        return await self._send_for(
            OidcSpec,
            "get_oidc_spec",
            "GET",
            "/.well-known/openid-configuration",
            throw_on_error=throw_on_error,
        )

    async def introspect_token(
        self,
        token: str,
        *,
        authorization: str | None = None,
        client_id: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[IntrospectToken]:
        headers: dict[str, str] = {}
        _basic_header(authorization, headers)
        form: dict[str, str] = {}
        set_query_parameter("token", token, form)
        set_query_parameter("client_id", client_id, form)
        return await self._send_for(
            IntrospectToken,
            "introspect_token",
            "POST",
            f"{BASE_PATH}/introspect",
            headers=headers,
            form=form,
            throw_on_error=throw_on_error,
        )

    def logout(self, post_logout_redirect_uri: str | None = None) -> str:
        """Return the URL that signs the current user out of the authorization server."""
        query: dict[str, str] = {}
        set_query_parameter("post_logout_redirect_uri", post_logout_redirect_uri, query)
        return str(httpx.URL(self._url(f"{BASE_PATH}/logout"), params=query))

    async def revoke(
        self,
        token: str,
        *,
        token_type_hint: TokenTypeHint | str | None = None,
        authorization: str | None = None,
        client_id: str | None = None,
        throw_on_error: bool = True,
    ) -> httpx.Response:
        headers: dict[str, str] = {}
        _basic_header(authorization, headers)
        form: dict[str, str] = {}
        set_query_parameter("token", token, form)
        set_query_parameter("token_type_hint", token_type_hint, form)
        set_query_parameter("client_id", client_id, form)
        return await self._send(
            "revoke",
            "POST",
            f"{BASE_PATH}/revoke",
            headers=headers,
            form=form,
            throw_on_error=throw_on_error,
        )


class UsersApi(BaseApi):
    """User profile endpoint, served from its own host."""

    service_name = "AUTHENTICATION"
    exception_type = AuthenticationApiException

    USER_INFO_URL = "https://api.userprofile.autodesk.com/userinfo"

    async def get_user_info(
        self, authorization: str, *, throw_on_error: bool = True
    ) -> ApiResponse[UserInfo]:
        """Return the profile of the user behind a three-legged ``authorization`` token."""
        headers: dict[str, Any] = {}
        set_header("Authorization", f"Bearer {authorization}", headers)
        return await self._send_for(
            UserInfo,
            "get_user_info",
            "GET",
            self.USER_INFO_URL,
            headers=headers,
            throw_on_error=throw_on_error,
        )
