"""Resource objects (the ``data`` members) returned by the Data Management service."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field

from ...model import CamelModel
from .jsonapi import AttributesExtension, JsonApiLinks, Relationship


class _Resource(CamelModel):
    id: str | None = None
    links: JsonApiLinks | None = None
    relationships: dict[str, Relationship] | None = None


class _Timestamps(CamelModel):
    create_time: str | None = None
    create_user_id: str | None = None
    create_user_name: str | None = None
    last_modified_time: str | None = None
    last_modified_user_id: str | None = None
    last_modified_user_name: str | None = None


class HubAttributes(CamelModel):
    name: str | None = None
    region: str | None = Field(None, description="US, EMEA or another data region")
    extension: AttributesExtension | None = None


class HubData(_Resource):
    type: Literal["hubs"] = "hubs"
    attributes: HubAttributes | None = None


class ProjectAttributes(CamelModel):
    name: str | None = None
    scopes: list[str] | None = None
    extension: AttributesExtension | None = None


class ProjectData(_Resource):
    type: Literal["projects"] = "projects"
    attributes: ProjectAttributes | None = None


class FolderAttributes(_Timestamps):
    name: str | None = None
    display_name: str | None = None
    object_count: int | None = None
    last_modified_time_rollup: str | None = None
    hidden: bool | None = None
    path: str | None = None
    extension: AttributesExtension | None = None


class FolderData(_Resource):
    type: Literal["folders"] = "folders"
    attributes: FolderAttributes | None = None


class ItemAttributes(_Timestamps):
    display_name: str | None = None
    hidden: bool | None = None
    reserved: bool | None = None
    reserved_time: str | None = None
    reserved_user_id: str | None = None
    reserved_user_name: str | None = None
    path_in_project: str | None = None
    extension: AttributesExtension | None = None


class ItemData(_Resource):
    type: Literal["items"] = "items"
    attributes: ItemAttributes | None = None


class VersionAttributes(_Timestamps):
    name: str | None = None
    display_name: str | None = None
    version_number: int | None = None
    mime_type: str | None = None
    file_type: str | None = None
    storage_size: int | None = None
    extension: AttributesExtension | None = None


class VersionData(_Resource):
    type: Literal["versions"] = "versions"
    attributes: VersionAttributes | None = None


class DownloadFormat(CamelModel):
    file_type: str | None = None


class DownloadAttributes(CamelModel):
    format: DownloadFormat | None = None


class DownloadData(_Resource):
    type: Literal["downloads"] = "downloads"
    attributes: DownloadAttributes | None = None


class DownloadFormatsAttributes(CamelModel):
    formats: list[DownloadFormat] | None = None


class DownloadFormatsData(_Resource):
    type: Literal["downloadFormats"] = "downloadFormats"
    attributes: DownloadFormatsAttributes | None = None


class JobAttributes(CamelModel):
    status: str | None = Field(None, description="queued, processing, success or failed")


class JobData(_Resource):
    type: Literal["jobs"] = "jobs"
    attributes: JobAttributes | None = None


class StorageData(_Resource):
    type: Literal["objects"] = "objects"


class RelationshipLinksAttributes(CamelModel):
    display_name: str | None = None
    mime_type: str | None = None
    extension: AttributesExtension | None = None


class RelationshipLinksData(_Resource):
    type: Literal["links"] = "links"
    attributes: RelationshipLinksAttributes | None = None
    meta: dict[str, Any] | None = None


class RelationshipRefsMeta(CamelModel):
    ref_type: str | None = None
    direction: str | None = None
    from_id: str | None = None
    from_type: str | None = None
    to_id: str | None = None
    to_type: str | None = None
    extension: AttributesExtension | None = None


class RelationshipRefsData(CamelModel):
    """Reference record; ``type`` names the entity at the other end of the ref."""

    type: str | None = None
    id: str | None = None
    meta: RelationshipRefsMeta | None = None


class CommandAttributes(CamelModel):
    status: str | None = None
    extension: AttributesExtension | None = None


class CommandData(_Resource):
    type: Literal["commands"] = "commands"
    attributes: CommandAttributes | None = None


FolderContentsData = Annotated[FolderData | ItemData, Field(discriminator="type")]
"""Entry of a folder listing: a sub-folder or an item."""

EntityData = Annotated[FolderData | ItemData | VersionData, Field(discriminator="type")]
"""Any entity that can sit at the end of a ref."""
