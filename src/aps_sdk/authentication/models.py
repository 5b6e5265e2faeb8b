"""Wire models for the Authentication (OAuth2) service."""

from __future__ import annotations

import time
from enum import Enum
from typing import Any

from pydantic import Field, PrivateAttr, computed_field, model_validator

from ..model import ApsModel


class Scopes(str, Enum):
    """OAuth scopes that can be requested for an access token."""

    USER_PROFILE_READ = "user-profile:read"
    USER_READ = "user:read"
    USER_WRITE = "user:write"
    VIEWABLES_READ = "viewables:read"
    DATA_READ = "data:read"
    DATA_WRITE = "data:write"
    DATA_CREATE = "data:create"
    DATA_SEARCH = "data:search"
    BUCKET_CREATE = "bucket:create"
    BUCKET_READ = "bucket:read"
    BUCKET_UPDATE = "bucket:update"
    BUCKET_DELETE = "bucket:delete"
    CODE_ALL = "code:all"
    ACCOUNT_READ = "account:read"
    ACCOUNT_WRITE = "account:write"
    OPENID = "openid"


class GrantType(str, Enum):
    CLIENT_CREDENTIALS = "client_credentials"
    AUTHORIZATION_CODE = "authorization_code"
    REFRESH_TOKEN = "refresh_token"


class ResponseType(str, Enum):
    CODE = "code"
    ID_TOKEN = "id_token"


class TokenTypeHint(str, Enum):
    ACCESS_TOKEN = "access_token"
    REFRESH_TOKEN = "refresh_token"


class _ExpiringToken(ApsModel):
    """Token payload whose absolute expiry is derived from ``expires_in``.

    ``expires_at`` (Unix seconds) is recomputed whenever ``expires_in`` is set
    and is part of every dump. An ``expires_at`` value in incoming data is
    ignored.
    """

    access_token: str | None = Field(None, description="The access token")
    token_type: str | None = Field(None, description="Will always be Bearer")
    expires_in: int | None = Field(None, description="Access token lifetime in seconds")

    _expires_at: int | None = PrivateAttr(default=None)

    @model_validator(mode="before")
    @classmethod
    def _drop_incoming_expiry(cls, data: Any) -> Any:
        if isinstance(data, dict) and "expires_at" in data:
            return {key: value for key, value in data.items() if key != "expires_at"}
        return data

    def model_post_init(self, __context: Any) -> None:
        self._refresh_expiry()

    def _refresh_expiry(self) -> None:
        if self.expires_in is None:
            self._expires_at = None
        else:
            self._expires_at = int(time.time()) + self.expires_in

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name == "expires_in":
            self._refresh_expiry()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def expires_at(self) -> int | None:
        """Access token expiration time, in Unix seconds."""
        return self._expires_at


class TwoLeggedToken(_ExpiringToken):
    """Payload returned in response to a client credentials grant request."""


class ThreeLeggedToken(_ExpiringToken):
    """Payload returned for authorization code and refresh token grants."""

    refresh_token: str | None = Field(
        None, description="Token used to acquire a new access token (valid 15 days)"
    )
    id_token: str | None = Field(None, description="OpenID Connect ID token (JWT)")


class JwksKey(ApsModel):
    """A public key in JSON Web Key format."""

    kid: str | None = None
    kty: str | None = None
    use: str | None = None
    n: str | None = None
    e: str | None = None


class Jwks(ApsModel):
    """Set of public keys used to verify asymmetric token signatures."""

    keys: list[JwksKey] = Field(default_factory=list)


class OidcSpec(ApsModel):
    """OpenID Connect discovery document."""

    issuer: str | None = None
    authorization_endpoint: str | None = None
    token_endpoint: str | None = None
    userinfo_endpoint: str | None = None
    jwks_uri: str | None = None
    revocation_endpoint: str | None = None
    introspection_endpoint: str | None = None
    end_session_endpoint: str | None = None
    scopes_supported: list[str] | None = None
    claims_supported: list[str] | None = None
    response_types_supported: list[str] | None = None
    response_modes_supported: list[str] | None = None
    grant_types_supported: list[str] | None = None
    subject_types_supported: list[str] | None = None
    id_token_signing_alg_values_supported: list[str] | None = None
    token_endpoint_auth_methods_supported: list[str] | None = None
    code_challenge_methods_supported: list[str] | None = None


class IntrospectToken(ApsModel):
    """Metadata about an access or reference token."""

    active: bool | None = Field(None, description="True if the token is still valid")
    scope: str | None = None
    client_id: str | None = None
    exp: int | None = Field(None, description="Expiry in Unix seconds")
    userid: str | None = None


class UserInfo(ApsModel):
    """Profile of the user that authorized a three-legged token."""

    sub: str | None = Field(None, description="Autodesk ID (oxygen id) of the user")
    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    preferred_username: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    profile: str | None = None
    picture: str | None = None
    locale: str | None = None
    updated_at: int | None = None
    is_2fa_enabled: bool | None = None
    country_code: str | None = None
    address: dict[str, Any] | None = None
    phone_number: str | None = None
    phone_number_verified: bool | None = None
    ldap_enabled: bool | None = None
    ldap_domain: str | None = None
    job_title: str | None = None
    industry: str | None = None
    industry_code: str | None = None
    about_me: str | None = None
    language: str | None = None
    company: str | None = None
    created_date: str | None = None
    last_login_date: str | None = None
    eidm_guid: str | None = None
    opt_in: bool | None = None
    social_userinfo_list: list[dict[str, Any]] | None = None
    thumbnails: dict[str, Any] | None = None
