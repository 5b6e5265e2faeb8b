"""Authentication (OAuth2) service: token models, token/user APIs and client facade."""

from ..exceptions import AuthenticationApiException
from .api import TokenApi, UsersApi
from .client import AuthenticationClient, encode_client_credentials
from .models import (
    GrantType,
    IntrospectToken,
    Jwks,
    JwksKey,
    OidcSpec,
    ResponseType,
    Scopes,
    ThreeLeggedToken,
    TokenTypeHint,
    TwoLeggedToken,
    UserInfo,
)

__all__ = [
    "AuthenticationApiException",
    "AuthenticationClient",
    "GrantType",
    "IntrospectToken",
    "Jwks",
    "JwksKey",
    "OidcSpec",
    "ResponseType",
    "Scopes",
    "ThreeLeggedToken",
    "TokenApi",
    "TokenTypeHint",
    "TwoLeggedToken",
    "UserInfo",
    "UsersApi",
    "encode_client_credentials",
]
