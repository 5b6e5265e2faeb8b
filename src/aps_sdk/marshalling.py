"""Route, query, header and body marshalling shared by the API classes."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from email.utils import format_datetime
from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter

_ROUTE_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def _http_date(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


def parameter_to_string(value: Any) -> str:
    """Render a parameter the way the service expects it on the wire."""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return _http_date(value)
    if isinstance(value, (list, tuple)):
        return ",".join(parameter_to_string(item) for item in value)
    return str(value)


def build_request_uri(template: str, route_parameters: dict[str, Any] | None = None) -> str:
    """Substitute ``{name}`` placeholders with percent-encoded route values."""
    route_parameters = route_parameters or {}

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        value = route_parameters.get(name)
        if value is None or value == "":
            raise ValueError(f"Missing required route parameter '{name}' for {template}")
        return quote(parameter_to_string(value), safe="")

    return _ROUTE_PLACEHOLDER.sub(_replace, template)


def set_query_parameter(name: str, value: Any, params: dict[str, str]) -> None:
    """Add ``value`` to ``params`` unless it is unset.

    Integers are only sent when positive and empty lists are dropped.
    """
    if value is None:
        return
    if isinstance(value, int) and not isinstance(value, bool) and value <= 0:
        return
    if isinstance(value, (list, tuple)) and not value:
        return
    params[name] = parameter_to_string(value)


def set_header(name: str, value: Any, headers: dict[str, str]) -> None:
    """Add ``value`` to ``headers`` unless it is unset."""
    if value is None:
        return
    if isinstance(value, datetime) and value.replace(tzinfo=None) == datetime.min:
        return
    headers[name] = parameter_to_string(value)


def serialize(body: Any) -> Any:
    """Return a JSON-ready structure using wire field names and omitting unset fields."""
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, (list, tuple)):
        return [serialize(item) for item in body]
    if isinstance(body, dict):
        return {key: serialize(value) for key, value in body.items()}
    if isinstance(body, Enum):
        return body.value
    return body


def deserialize(response: httpx.Response, response_type: Any) -> Any:
    """Convert a response body into ``response_type``; empty bodies yield ``None``."""
    if response_type is None or not response.content:
        return None
    if response_type is bytes:
        return response.content
    if response_type is str:
        return response.text
    return TypeAdapter(response_type).validate_python(response.json())
