"""Exception types raised when an APS API call fails."""

from __future__ import annotations

import httpx


class ServiceApiException(Exception):
    """Base exception for a failed APS API call.

    Carries the raw ``httpx.Response`` so callers can inspect the status code,
    headers and error body returned by the service.
    """

    def __init__(self, message: str, response: httpx.Response | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None

    def __str__(self) -> str:
        if self.response is None:
            return self.message
        return f"{self.message} (status {self.response.status_code}): {self.response.text}"


class AuthenticationApiException(ServiceApiException):
    """Raised when an Authentication API call fails."""


class DataManagementApiException(ServiceApiException):
    """Raised when a Data Management API call fails."""


class ModelDerivativeApiException(ServiceApiException):
    """Raised when a Model Derivative API call fails."""


class OssApiException(ServiceApiException):
    """Raised when an OSS API call fails."""
