"""Request bodies accepted by the Data Management create/modify endpoints."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from ...model import CamelModel
from .jsonapi import (
    AttributesExtensionWithoutSchemaLink,
    ItemPayloadIncludedAttributesExtension,
    JsonApiVersion,
    RelationshipToOne,
)


class _Payload(CamelModel):
    jsonapi: JsonApiVersion = Field(default_factory=JsonApiVersion)


class FolderPayloadAttributes(CamelModel):
    name: str
    extension: AttributesExtensionWithoutSchemaLink


class FolderPayloadRelationships(CamelModel):
    parent: RelationshipToOne


class FolderPayloadData(CamelModel):
    type: Literal["folders"] = "folders"
    attributes: FolderPayloadAttributes
    relationships: FolderPayloadRelationships


class FolderPayload(_Payload):
    """Create a folder under ``relationships.parent``."""

    data: FolderPayloadData


class ModifyFolderPayloadAttributes(CamelModel):
    name: str | None = None
    hidden: bool | None = None


class ModifyFolderPayloadData(CamelModel):
    type: Literal["folders"] = "folders"
    id: str
    attributes: ModifyFolderPayloadAttributes


class ModifyFolderPayload(_Payload):
    data: ModifyFolderPayloadData


class ItemPayloadAttributes(CamelModel):
    display_name: str
    extension: AttributesExtensionWithoutSchemaLink


class ItemPayloadRelationships(CamelModel):
    tip: RelationshipToOne
    parent: RelationshipToOne


class ItemPayloadData(CamelModel):
    type: Literal["items"] = "items"
    attributes: ItemPayloadAttributes
    relationships: ItemPayloadRelationships


class ItemPayloadIncludedAttributes(CamelModel):
    name: str
    extension: ItemPayloadIncludedAttributesExtension


class ItemPayloadIncludedRelationships(CamelModel):
    storage: RelationshipToOne | None = None


class ItemPayloadIncluded(CamelModel):
    """First version of the item, referenced by ``tip`` through its temporary id."""

    type: Literal["versions"] = "versions"
    id: str = "1"
    attributes: ItemPayloadIncludedAttributes
    relationships: ItemPayloadIncludedRelationships | None = None


class ItemPayload(_Payload):
    data: ItemPayloadData
    included: list[ItemPayloadIncluded] = Field(default_factory=list)


class ModifyItemPayloadAttributes(CamelModel):
    display_name: str | None = None


class ModifyItemPayloadData(CamelModel):
    type: Literal["items"] = "items"
    id: str
    attributes: ModifyItemPayloadAttributes


class ModifyItemPayload(_Payload):
    data: ModifyItemPayloadData


class VersionPayloadAttributes(CamelModel):
    name: str
    extension: AttributesExtensionWithoutSchemaLink | None = None


class VersionPayloadRelationships(CamelModel):
    item: RelationshipToOne
    storage: RelationshipToOne | None = None


class VersionPayloadData(CamelModel):
    type: Literal["versions"] = "versions"
    attributes: VersionPayloadAttributes
    relationships: VersionPayloadRelationships


class VersionPayload(_Payload):
    data: VersionPayloadData


class ModifyVersionPayloadAttributes(CamelModel):
    name: str | None = None
    display_name: str | None = None


class ModifyVersionPayloadData(CamelModel):
    type: Literal["versions"] = "versions"
    id: str
    attributes: ModifyVersionPayloadAttributes


class ModifyVersionPayload(_Payload):
    data: ModifyVersionPayloadData


class RelationshipRefsPayloadMeta(CamelModel):
    extension: AttributesExtensionWithoutSchemaLink


class RelationshipRefsPayloadData(CamelModel):
    type: Literal["folders", "items", "versions"]
    id: str
    meta: RelationshipRefsPayloadMeta


class RelationshipRefsPayload(_Payload):
    data: RelationshipRefsPayloadData


class DownloadPayloadFormat(CamelModel):
    file_type: str


class DownloadPayloadAttributes(CamelModel):
    format: DownloadPayloadFormat


class DownloadPayloadRelationships(CamelModel):
    source: RelationshipToOne


class DownloadPayloadData(CamelModel):
    type: Literal["downloads"] = "downloads"
    attributes: DownloadPayloadAttributes
    relationships: DownloadPayloadRelationships


class DownloadPayload(_Payload):
    data: DownloadPayloadData


class StoragePayloadAttributes(CamelModel):
    name: str


class StoragePayloadRelationships(CamelModel):
    target: RelationshipToOne


class StoragePayloadData(CamelModel):
    type: Literal["objects"] = "objects"
    attributes: StoragePayloadAttributes
    relationships: StoragePayloadRelationships


class StoragePayload(_Payload):
    """Reserve an OSS object in the storage location of ``relationships.target``."""

    data: StoragePayloadData


class CommandPayloadAttributes(CamelModel):
    extension: AttributesExtensionWithoutSchemaLink


class CommandPayloadData(CamelModel):
    type: Literal["commands"] = "commands"
    attributes: CommandPayloadAttributes
    relationships: dict[str, Any] | None = None


class CommandPayload(_Payload):
    """Run a command such as ``commands:autodesk.core:CheckPermission``."""

    data: CommandPayloadData
