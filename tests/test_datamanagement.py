"""Tests for the Data Management API classes, JSON-API models and facade."""

from __future__ import annotations

import asyncio

import httpx
from conftest import json_response, request_json

from aps_sdk.auth_provider import StaticAuthenticationProvider
from aps_sdk.datamanagement import (
    AttributesExtensionWithoutSchemaLink,
    CommandPayload,
    CommandPayloadAttributes,
    CommandPayloadData,
    DataManagementClient,
    FolderData,
    FoldersApi,
    HubsApi,
    ItemData,
    ItemPayload,
    ItemPayloadAttributes,
    ItemPayloadData,
    ItemPayloadIncluded,
    ItemPayloadIncludedAttributes,
    ItemPayloadIncludedAttributesExtension,
    ItemPayloadRelationships,
    ItemsApi,
    ProjectsApi,
    RelationshipRefsPayload,
    RelationshipRefsPayloadData,
    RelationshipRefsPayloadMeta,
    RelationshipToOne,
    ResourceIdentifier,
    VersionData,
    VersionsApi,
)

JSON_API = "application/vnd.api+json"

FOLDER_CONTENTS = {
    "jsonapi": {"version": "1.0"},
    "links": {"self": {"href": "https://developer.api.autodesk.com/data/v1/..."}},
    "data": [
        {
            "type": "folders",
            "id": "urn:folder:1",
            "attributes": {"name": "Drawings", "displayName": "Drawings", "objectCount": 3},
        },
        {
            "type": "items",
            "id": "urn:item:1",
            "attributes": {"displayName": "model.rvt", "hidden": False},
            "relationships": {
                "tip": {"data": {"type": "versions", "id": "urn:version:1?version=2"}}
            },
        },
    ],
    "included": [
        {
            "type": "versions",
            "id": "urn:version:1?version=2",
            "attributes": {"name": "model.rvt", "versionNumber": 2, "storageSize": 1024},
        }
    ],
}


def test_get_hubs_sends_filters_and_user_header(make_sdk) -> None:
    """Given list filters and a user id, when listing hubs, then filters are comma-joined."""
    sdk, transport = make_sdk(
        lambda request: json_response(
            200, {"data": [{"type": "hubs", "id": "b.hub", "attributes": {"name": "ACME"}}]}
        )
    )

    result = asyncio.run(
        HubsApi(sdk).get_hubs(
            filter_id=["b.1", "b.2"],
            filter_extension_type=["hubs:autodesk.bim360:Account"],
            x_user_id="user-7",
            access_token="tok",
        )
    )

    request = transport.last
    assert request.url.path == "/project/v1/hubs"
    assert request.url.params["filter[id]"] == "b.1,b.2"
    assert request.url.params["filter[extension.type]"] == "hubs:autodesk.bim360:Account"
    assert request.headers["x-user-id"] == "user-7"
    assert result.content.data[0].attributes.name == "ACME"


def test_folder_contents_deserialize_per_resource_type(make_sdk) -> None:
    """Given a mixed folder listing, when deserialized, then each entry gets the model of its type."""
    sdk, transport = make_sdk(lambda request: json_response(200, FOLDER_CONTENTS))

    result = asyncio.run(
        FoldersApi(sdk).get_folder_contents(
            "b.project",
            "urn:adsk.wipprod:fs.folder:co.abc",
            filter_type=["items"],
            page_number=0,
            page_limit=50,
            include_hidden=True,
            access_token="tok",
        )
    )

    request = transport.last
    assert request.url.raw_path.startswith(
        b"/data/v1/projects/b.project/folders/urn%3Aadsk.wipprod%3Afs.folder%3Aco.abc/contents"
    )
    assert request.url.params["filter[type]"] == "items"
    assert request.url.params["page[limit]"] == "50"
    assert "page[number]" not in request.url.params
    assert request.url.params["includeHidden"] == "true"

    contents = result.content
    folder, item = contents.data
    assert isinstance(folder, FolderData)
    assert folder.attributes.object_count == 3
    assert isinstance(item, ItemData)
    assert item.relationships["tip"].data.id == "urn:version:1?version=2"
    assert isinstance(contents.included[0], VersionData)
    assert contents.included[0].attributes.version_number == 2
    assert contents.links.self_link.href.endswith("/data/v1/...")


def test_top_folders_and_download_job(make_sdk) -> None:
    """Given project endpoints, when called, then boolean query flags and paths are correct."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/topFolders"):
            return json_response(200, {"data": [{"type": "folders", "id": "urn:f"}]})
        return json_response(200, {"data": {"type": "jobs", "id": "job-1", "attributes": {"status": "processing"}}})

    sdk, transport = make_sdk(handler)
    api = ProjectsApi(sdk)

    folders = asyncio.run(
        api.get_project_top_folders(
            "b.hub", "b.project", exclude_deleted=True, project_files_only=False, access_token="tok"
        )
    )
    assert transport.last.url.path == "/project/v1/hubs/b.hub/projects/b.project/topFolders"
    assert transport.last.url.params["excludeDeleted"] == "true"
    assert transport.last.url.params["projectFilesOnly"] == "false"
    assert folders.content.data[0].id == "urn:f"

    job = asyncio.run(api.get_download_job("b.project", "job-1", access_token="tok"))
    assert transport.last.url.path == "/data/v1/projects/b.project/jobs/job-1"
    assert job.content.data.attributes.status == "processing"


def test_create_item_posts_json_api_document(make_sdk) -> None:
    """Given an item payload, when created, then the body is JSON-API with the included version."""
    sdk, transport = make_sdk(
        lambda request: json_response(
            201,
            {
                "data": {"type": "items", "id": "urn:item:new"},
                "included": [{"type": "versions", "id": "urn:version:new?version=1"}],
            },
        )
    )
    payload = ItemPayload(
        data=ItemPayloadData(
            attributes=ItemPayloadAttributes(
                display_name="model.rvt",
                extension=AttributesExtensionWithoutSchemaLink(
                    type="items:autodesk.bim360:File", version="1.0"
                ),
            ),
            relationships=ItemPayloadRelationships(
                tip=RelationshipToOne(data=ResourceIdentifier(type="versions", id="1")),
                parent=RelationshipToOne(data=ResourceIdentifier(type="folders", id="urn:f")),
            ),
        ),
        included=[
            ItemPayloadIncluded(
                attributes=ItemPayloadIncludedAttributes(
                    name="model.rvt",
                    extension=ItemPayloadIncludedAttributesExtension(
                        type="versions:autodesk.bim360:File", version="1.0"
                    ),
                )
            )
        ],
    )

    result = asyncio.run(
        ItemsApi(sdk).create_item("b.project", payload, copy_from="urn:src", access_token="tok")
    )

    request = transport.last
    assert request.method == "POST"
    assert request.url.path == "/data/v1/projects/b.project/items"
    assert request.url.params["copyFrom"] == "urn:src"
    assert request.headers["Content-Type"] == JSON_API
    body = request_json(request)
    assert body["jsonapi"] == {"version": "1.0"}
    assert body["data"]["attributes"]["displayName"] == "model.rvt"
    assert body["included"][0] == {
        "type": "versions",
        "id": "1",
        "attributes": {
            "name": "model.rvt",
            "extension": {"type": "versions:autodesk.bim360:File", "version": "1.0"},
        },
    }
    assert result.content.data.id == "urn:item:new"


def test_create_relationships_ref_returns_raw_response(make_sdk) -> None:
    """Given a ref payload, when the ref is created, then the no-content response is returned."""
    sdk, transport = make_sdk(lambda request: httpx.Response(204))
    payload = RelationshipRefsPayload(
        data=RelationshipRefsPayloadData(
            type="versions",
            id="urn:version:2",
            meta=RelationshipRefsPayloadMeta(
                extension=AttributesExtensionWithoutSchemaLink(
                    type="auxiliary:autodesk.core:Attachment", version="1.0"
                )
            ),
        )
    )

    response = asyncio.run(
        VersionsApi(sdk).create_version_relationships_ref(
            "b.project", "urn:version:1", payload, access_token="tok"
        )
    )

    assert isinstance(response, httpx.Response)
    assert response.status_code == 204
    assert transport.last.url.raw_path == (
        b"/data/v1/projects/b.project/versions/urn%3Aversion%3A1/relationships/refs"
    )


def test_version_downloads_filter(make_sdk) -> None:
    sdk, transport = make_sdk(lambda request: json_response(200, {"data": []}))

    asyncio.run(
        VersionsApi(sdk).get_version_downloads(
            "b.project", "urn:v", filter_format_file_type=["dwg", "pdf"], access_token="tok"
        )
    )

    assert transport.last.url.params["filter[format.fileType]"] == "dwg,pdf"


def test_facade_execute_command_resolves_token(make_sdk) -> None:
    """Given a facade with a provider, when executing a command, then content is returned."""
    sdk, transport = make_sdk(
        lambda request: json_response(
            200,
            {"data": {"type": "commands", "id": "cmd-1", "attributes": {"status": "committed"}}},
        )
    )
    client = DataManagementClient(sdk, StaticAuthenticationProvider("provided"))
    payload = CommandPayload(
        data=CommandPayloadData(
            attributes=CommandPayloadAttributes(
                extension=AttributesExtensionWithoutSchemaLink(
                    type="commands:autodesk.core:CheckPermission", version="1.0.0"
                )
            )
        )
    )

    command = asyncio.run(client.execute_command("b.project", payload))

    assert command.data.attributes.status == "committed"
    assert transport.last.url.path == "/data/v1/projects/b.project/commands"
    assert transport.last.headers["Authorization"] == "Bearer provided"
    assert request_json(transport.last)["data"]["type"] == "commands"


def test_facade_failure_without_throw_returns_none(make_sdk) -> None:
    sdk, _ = make_sdk(lambda request: json_response(404, {"errors": []}))
    client = DataManagementClient(sdk)

    assert asyncio.run(client.get_hub("b.missing", access_token="tok", throw_on_error=False)) is None
