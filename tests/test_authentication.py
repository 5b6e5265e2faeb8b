"""Tests for the Authentication (OAuth2) client and token models."""

from __future__ import annotations

import asyncio
import base64
import json
from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
from conftest import json_response

from aps_sdk.authentication import (
    AuthenticationClient,
    ResponseType,
    Scopes,
    ThreeLeggedToken,
    TokenTypeHint,
    TwoLeggedToken,
    encode_client_credentials,
)

NOW = 1_700_000_000


def _form(request: httpx.Request) -> dict[str, str]:
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


@pytest.fixture
def frozen_time(monkeypatch: pytest.MonkeyPatch) -> int:
    monkeypatch.setattr("aps_sdk.authentication.models.time.time", lambda: NOW)
    return NOW


def test_encode_client_credentials_is_base64_pair() -> None:
    """Given an id and secret, when encoded, then the result decodes to `id:secret`."""
    encoded = encode_client_credentials("my-id", "my-secret")
    assert base64.b64decode(encoded).decode() == "my-id:my-secret"


def test_two_legged_token_computes_expiry(make_sdk, frozen_time: int) -> None:
    """Given a client credentials grant, when the token is issued, then `expires_at`
    is now plus `expires_in` and the request uses Basic auth with space-joined scopes."""
    sdk, transport = make_sdk(
        lambda request: json_response(
            200, {"access_token": "abc", "token_type": "Bearer", "expires_in": 3599}
        )
    )
    client = AuthenticationClient(sdk)

    token = asyncio.run(
        client.get_two_legged_token("cid", "secret", [Scopes.DATA_READ, Scopes.BUCKET_CREATE])
    )

    assert isinstance(token, TwoLeggedToken)
    assert token.access_token == "abc"
    assert token.expires_at == frozen_time + 3599
    assert token.to_dict()["expires_at"] == frozen_time + 3599

    request = transport.last
    assert request.method == "POST"
    assert request.url.path == "/authentication/v2/token"
    assert request.headers["Authorization"] == f"Basic {encode_client_credentials('cid', 'secret')}"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert _form(request) == {
        "grant_type": "client_credentials",
        "scope": "data:read bucket:create",
    }


def test_expiry_follows_expires_in_updates(frozen_time: int) -> None:
    """Given a token, when `expires_in` is reassigned, then `expires_at` is recomputed."""
    token = TwoLeggedToken(access_token="abc", expires_in=60)
    assert token.expires_at == frozen_time + 60

    token.expires_in = 120
    assert token.expires_at == frozen_time + 120


def test_expiry_is_part_of_every_serialization(frozen_time: int) -> None:
    """Given a token, when rendered with `str()` or `to_dict()`, then both carry `expires_at`."""
    token = TwoLeggedToken(access_token="abc", token_type="Bearer", expires_in=60)

    rendered = json.loads(str(token))

    assert rendered["expires_at"] == frozen_time + 60
    assert rendered == token.to_dict()


def test_incoming_expiry_is_recomputed(frozen_time: int) -> None:
    """Given a payload that already holds a stale `expires_at`, when validated, then the
    value is derived from `expires_in` and no copy is kept among the extras."""
    token = ThreeLeggedToken.model_validate(
        {"access_token": "abc", "expires_in": 60, "expires_at": 1, "refresh_token": "r"}
    )

    assert token.expires_at == frozen_time + 60
    assert not token.model_extra
    assert token.to_dict()["expires_at"] == frozen_time + 60


def test_three_legged_token_for_private_client_uses_basic_auth(make_sdk) -> None:
    """Given a client secret, when exchanging a code, then credentials go in the Basic header."""
    sdk, transport = make_sdk(
        lambda request: json_response(
            200,
            {
                "access_token": "user-token",
                "refresh_token": "refresh-1",
                "token_type": "Bearer",
                "expires_in": 3600,
            },
        )
    )

    token = asyncio.run(
        AuthenticationClient(sdk).get_three_legged_token(
            "cid", "code-1", "https://app/callback", client_secret="secret"
        )
    )

    assert isinstance(token, ThreeLeggedToken)
    assert token.refresh_token == "refresh-1"
    form = _form(transport.last)
    assert form["grant_type"] == "authorization_code"
    assert form["code"] == "code-1"
    assert "client_id" not in form
    assert transport.last.headers["Authorization"].startswith("Basic ")


def test_refresh_token_for_public_client_sends_client_id(make_sdk) -> None:
    """Given no client secret, when refreshing, then `client_id` is sent in the form instead."""
    sdk, transport = make_sdk(
        lambda request: json_response(200, {"access_token": "new", "expires_in": 3600})
    )

    token = asyncio.run(
        AuthenticationClient(sdk).refresh_token("refresh-1", "public-id", scopes=["data:read"])
    )

    assert token.access_token == "new"
    form = _form(transport.last)
    assert form == {
        "grant_type": "refresh_token",
        "refresh_token": "refresh-1",
        "scope": "data:read",
        "client_id": "public-id",
    }
    assert "Authorization" not in transport.last.headers


def test_failed_token_request_without_throw_returns_none(make_sdk) -> None:
    """Given a 400 from the token endpoint and `throw_on_error=False`, then no token is returned."""
    sdk, _ = make_sdk(lambda request: json_response(400, {"error": "invalid_client"}))

    token = asyncio.run(
        AuthenticationClient(sdk).get_two_legged_token(
            "cid", "bad", [Scopes.DATA_READ], throw_on_error=False
        )
    )

    assert token is None


def test_authorize_builds_consent_url_without_request(make_sdk) -> None:
    """Given authorize parameters, when building the URL, then no request is sent."""
    sdk, transport = make_sdk(lambda request: pytest.fail("authorize must not send requests"))

    url = AuthenticationClient(sdk).authorize(
        "cid",
        ResponseType.CODE,
        "https://app/callback",
        scopes=[Scopes.DATA_READ, Scopes.DATA_WRITE],
        state="xyz",
    )

    parts = urlsplit(url)
    assert parts.path == "/authentication/v2/authorize"
    query = {key: values[0] for key, values in parse_qs(parts.query).items()}
    assert query == {
        "response_type": "code",
        "client_id": "cid",
        "redirect_uri": "https://app/callback",
        "state": "xyz",
        "scope": "data:read data:write",
    }
    assert not transport.requests


def test_logout_url_and_revoke(make_sdk) -> None:
    """Given a logout redirect and a token to revoke, then the URL and form are built correctly."""
    sdk, transport = make_sdk(lambda request: httpx.Response(200))
    client = AuthenticationClient(sdk)

    logout = urlsplit(client.logout("https://app/bye"))
    assert logout.netloc == "developer.api.autodesk.com"
    assert logout.path == "/authentication/v2/logout"
    assert parse_qs(logout.query) == {"post_logout_redirect_uri": ["https://app/bye"]}

    response = asyncio.run(
        client.revoke("tok", "cid", "secret", token_type_hint=TokenTypeHint.ACCESS_TOKEN)
    )

    assert response.status_code == 200
    assert transport.last.url.path == "/authentication/v2/revoke"
    assert _form(transport.last) == {"token": "tok", "token_type_hint": "access_token"}


def test_get_keys_and_introspect(make_sdk) -> None:
    """Given key and introspection responses, when fetched, then typed models are returned."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/keys"):
            return json_response(200, {"keys": [{"kid": "k1", "kty": "RSA"}]})
        return json_response(200, {"active": True, "scope": "data:read", "exp": NOW})

    sdk, transport = make_sdk(handler)
    client = AuthenticationClient(sdk)

    keys = asyncio.run(client.get_keys())
    introspection = asyncio.run(client.introspect_token("tok", "public-id"))

    assert keys.keys[0].kid == "k1"
    assert introspection.active is True
    assert _form(transport.last) == {"token": "tok", "client_id": "public-id"}
