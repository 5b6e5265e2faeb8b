"""Async Python client for the Autodesk Platform Services (APS) REST APIs.

Each service lives in its own subpackage (``authentication``,
``datamanagement``, ``modelderivative``, ``oss``) with wire models, one API
class per endpoint group and a client facade. All of them share the
``httpx.AsyncClient`` owned by an :class:`SdkManager`.
"""

from .auth_provider import (
    AuthenticationProvider,
    StaticAuthenticationProvider,
    TwoLeggedAuthenticationProvider,
)
from .authentication import AuthenticationClient, Scopes
from .datamanagement import DataManagementClient
from .exceptions import (
    AuthenticationApiException,
    DataManagementApiException,
    ModelDerivativeApiException,
    OssApiException,
    ServiceApiException,
)
from .http import ApiResponse
from .modelderivative import ModelDerivativeClient
from .oss import OssClient
from .sdk_manager import ApsSettings, SdkManager, configure_logging
from .version import __version__

__all__ = [
    "ApiResponse",
    "ApsSettings",
    "AuthenticationApiException",
    "AuthenticationClient",
    "AuthenticationProvider",
    "DataManagementApiException",
    "DataManagementClient",
    "ModelDerivativeApiException",
    "ModelDerivativeClient",
    "OssApiException",
    "OssClient",
    "Scopes",
    "SdkManager",
    "ServiceApiException",
    "StaticAuthenticationProvider",
    "TwoLeggedAuthenticationProvider",
    "__version__",
    "configure_logging",
]
