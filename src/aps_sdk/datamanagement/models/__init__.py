"""Data Management wire models (JSON-API documents, resources and payloads)."""

from .documents import (
    Command,
    CreatedDownload,
    CreatedItem,
    CreatedVersion,
    Download,
    DownloadFormats,
    Downloads,
    Folder,
    FolderContents,
    FolderRefs,
    Hub,
    Hubs,
    Item,
    ItemTip,
    Job,
    ModelVersion,
    Project,
    Projects,
    Refs,
    RelationshipLinks,
    RelationshipRefs,
    Search,
    Storage,
    TopFolders,
    Versions,
)
from .jsonapi import (
    AttributesExtension,
    AttributesExtensionWithoutSchemaLink,
    ItemPayloadIncludedAttributesExtension,
    JsonApiLink,
    JsonApiLinks,
    JsonApiVersion,
    Relationship,
    RelationshipToOne,
    ResourceIdentifier,
)
from .payloads import (
    CommandPayload,
    CommandPayloadAttributes,
    CommandPayloadData,
    DownloadPayload,
    DownloadPayloadAttributes,
    DownloadPayloadData,
    DownloadPayloadFormat,
    DownloadPayloadRelationships,
    FolderPayload,
    FolderPayloadAttributes,
    FolderPayloadData,
    FolderPayloadRelationships,
    ItemPayload,
    ItemPayloadAttributes,
    ItemPayloadData,
    ItemPayloadIncluded,
    ItemPayloadIncludedAttributes,
    ItemPayloadIncludedRelationships,
    ItemPayloadRelationships,
    ModifyFolderPayload,
    ModifyFolderPayloadAttributes,
    ModifyFolderPayloadData,
    ModifyItemPayload,
    ModifyItemPayloadAttributes,
    ModifyItemPayloadData,
    ModifyVersionPayload,
    ModifyVersionPayloadAttributes,
    ModifyVersionPayloadData,
    RelationshipRefsPayload,
    RelationshipRefsPayloadData,
    RelationshipRefsPayloadMeta,
    StoragePayload,
    StoragePayloadAttributes,
    StoragePayloadData,
    StoragePayloadRelationships,
    VersionPayload,
    VersionPayloadAttributes,
    VersionPayloadData,
    VersionPayloadRelationships,
)
from .resources import (
    DownloadData,
    FolderData,
    HubData,
    ItemData,
    JobData,
    ProjectData,
    RelationshipLinksData,
    RelationshipRefsData,
    StorageData,
    VersionData,
)

__all__ = [
    "AttributesExtension",
    "AttributesExtensionWithoutSchemaLink",
    "Command",
    "CommandPayload",
    "CommandPayloadAttributes",
    "CommandPayloadData",
    "CreatedDownload",
    "CreatedItem",
    "CreatedVersion",
    "Download",
    "DownloadData",
    "DownloadFormats",
    "DownloadPayload",
    "DownloadPayloadAttributes",
    "DownloadPayloadData",
    "DownloadPayloadFormat",
    "DownloadPayloadRelationships",
    "Downloads",
    "Folder",
    "FolderContents",
    "FolderData",
    "FolderPayload",
    "FolderPayloadAttributes",
    "FolderPayloadData",
    "FolderPayloadRelationships",
    "FolderRefs",
    "Hub",
    "HubData",
    "Hubs",
    "Item",
    "ItemData",
    "ItemPayload",
    "ItemPayloadAttributes",
    "ItemPayloadData",
    "ItemPayloadIncluded",
    "ItemPayloadIncludedAttributes",
    "ItemPayloadIncludedAttributesExtension",
    "ItemPayloadIncludedRelationships",
    "ItemPayloadRelationships",
    "ItemTip",
    "Job",
    "JobData",
    "JsonApiLink",
    "JsonApiLinks",
    "JsonApiVersion",
    "ModelVersion",
    "ModifyFolderPayload",
    "ModifyFolderPayloadAttributes",
    "ModifyFolderPayloadData",
    "ModifyItemPayload",
    "ModifyItemPayloadAttributes",
    "ModifyItemPayloadData",
    "ModifyVersionPayload",
    "ModifyVersionPayloadAttributes",
    "ModifyVersionPayloadData",
    "Project",
    "ProjectData",
    "Projects",
    "Refs",
    "Relationship",
    "RelationshipLinks",
    "RelationshipLinksData",
    "RelationshipRefs",
    "RelationshipRefsData",
    "RelationshipRefsPayload",
    "RelationshipRefsPayloadData",
    "RelationshipRefsPayloadMeta",
    "RelationshipToOne",
    "ResourceIdentifier",
    "Search",
    "Storage",
    "StorageData",
    "StoragePayload",
    "StoragePayloadAttributes",
    "StoragePayloadData",
    "StoragePayloadRelationships",
    "TopFolders",
    "VersionData",
    "VersionPayload",
    "VersionPayloadAttributes",
    "VersionPayloadData",
    "VersionPayloadRelationships",
    "Versions",
]
