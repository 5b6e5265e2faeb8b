"""Tests for route, query, header and body marshalling."""

from __future__ import annotations

from datetime import datetime

import httpx
import pytest

from aps_sdk.datamanagement.models import (
    AttributesExtensionWithoutSchemaLink,
    FolderPayload,
    FolderPayloadAttributes,
    FolderPayloadData,
    FolderPayloadRelationships,
    ResourceIdentifier,
    RelationshipToOne,
)
from aps_sdk.marshalling import (
    build_request_uri,
    deserialize,
    parameter_to_string,
    serialize,
    set_header,
    set_query_parameter,
)
from aps_sdk.oss.models import Bucket, PolicyKey


def test_parameter_to_string_wire_forms() -> None:
    """Given enums, booleans, lists and dates, when rendered, then the service's wire forms result."""
    assert parameter_to_string(PolicyKey.TRANSIENT) == "transient"
    assert parameter_to_string(True) == "true"
    assert parameter_to_string(False) == "false"
    assert parameter_to_string(["items:autodesk.core:File", "folders"]) == (
        "items:autodesk.core:File,folders"
    )
    assert parameter_to_string(datetime(2024, 1, 2, 3, 4, 5)) == "Tue, 02 Jan 2024 03:04:05 GMT"


def test_build_request_uri_percent_encodes_route_values() -> None:
    """Given a URN with reserved characters, when substituted, then it is fully escaped."""
    uri = build_request_uri(
        "/data/v1/projects/{project_id}/items/{item_id}",
        {"project_id": "b.project", "item_id": "urn:adsk.wipprod:dm.lineage:a/b"},
    )
    assert uri == "/data/v1/projects/b.project/items/urn%3Aadsk.wipprod%3Adm.lineage%3Aa%2Fb"


def test_build_request_uri_requires_every_placeholder() -> None:
    """Given a missing route value, when building the URI, then a `ValueError` names it."""
    with pytest.raises(ValueError, match="hub_id"):
        build_request_uri("/project/v1/hubs/{hub_id}", {"hub_id": ""})


def test_set_query_parameter_skips_unset_values() -> None:
    """Given None, non-positive ints and empty lists, when set, then nothing is sent."""
    params: dict[str, str] = {}
    set_query_parameter("a", None, params)
    set_query_parameter("page[number]", 0, params)
    set_query_parameter("filter[id]", [], params)
    set_query_parameter("limit", 10, params)
    set_query_parameter("includeHidden", False, params)

    assert params == {"limit": "10", "includeHidden": "false"}


def test_set_header_skips_minimum_datetime() -> None:
    """Given `datetime.min`, when set as a header, then the header is omitted."""
    headers: dict[str, str] = {}
    set_header("If-Modified-Since", datetime.min, headers)
    set_header("x-user-id", "user-1", headers)
    assert headers == {"x-user-id": "user-1"}


def test_serialize_uses_wire_names_and_drops_unset_fields() -> None:
    """Given a JSON-API payload model, when serialized, then aliases are used and None dropped."""
    payload = FolderPayload(
        data=FolderPayloadData(
            attributes=FolderPayloadAttributes(
                name="Drawings",
                extension=AttributesExtensionWithoutSchemaLink(
                    type="folders:autodesk.core:Folder", version="1.0"
                ),
            ),
            relationships=FolderPayloadRelationships(
                parent=RelationshipToOne(
                    data=ResourceIdentifier(type="folders", id="urn:parent")
                )
            ),
        )
    )

    body = serialize(payload)

    assert body["jsonapi"] == {"version": "1.0"}
    assert body["data"]["type"] == "folders"
    assert body["data"]["attributes"]["extension"] == {
        "type": "folders:autodesk.core:Folder",
        "version": "1.0",
    }
    assert body["data"]["relationships"]["parent"]["data"]["id"] == "urn:parent"


def test_deserialize_handles_empty_raw_and_model_bodies() -> None:
    """Given empty, binary and JSON bodies, when deserialized, then None, bytes and models result."""
    assert deserialize(httpx.Response(204), Bucket) is None
    assert deserialize(httpx.Response(200, content=b"\x89PNG"), bytes) == b"\x89PNG"

    bucket = deserialize(
        httpx.Response(200, json={"bucketKey": "models", "policyKey": "transient"}), Bucket
    )
    assert bucket.bucket_key == "models"
    assert bucket.policy_key == "transient"
