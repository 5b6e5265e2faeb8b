"""Top-level JSON-API documents returned by the Data Management endpoints."""

from __future__ import annotations

from pydantic import Field

from ...model import CamelModel
from .jsonapi import JsonApiLinks, JsonApiMeta, JsonApiVersion
from .resources import (
    CommandData,
    DownloadData,
    DownloadFormatsData,
    EntityData,
    FolderContentsData,
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


class _Document(CamelModel):
    jsonapi: JsonApiVersion | None = None
    links: JsonApiLinks | None = None
    meta: JsonApiMeta | None = None


class Hubs(_Document):
    data: list[HubData] = Field(default_factory=list)


class Hub(_Document):
    data: HubData | None = None


class Projects(_Document):
    data: list[ProjectData] = Field(default_factory=list)


class Project(_Document):
    data: ProjectData | None = None


class TopFolders(_Document):
    data: list[FolderData] = Field(default_factory=list)


class Folder(_Document):
    data: FolderData | None = None


class FolderContents(_Document):
    """Folders and items directly under a folder, with the tip versions of the items."""

    data: list[FolderContentsData] = Field(default_factory=list)
    included: list[VersionData] | None = None


class Refs(_Document):
    """Resources referenced by a folder, item or version."""

    data: list[EntityData] = Field(default_factory=list)
    included: list[EntityData] | None = None


FolderRefs = Refs


class RelationshipLinks(_Document):
    data: list[RelationshipLinksData] = Field(default_factory=list)


class RelationshipRefs(_Document):
    data: list[RelationshipRefsData] = Field(default_factory=list)
    included: list[EntityData] | None = None


class Search(_Document):
    """Versions matching a folder search, with their items included."""

    data: list[VersionData] = Field(default_factory=list)
    included: list[ItemData] | None = None


class Item(_Document):
    data: ItemData | None = None
    included: list[VersionData] | None = None


CreatedItem = Item


class ItemTip(_Document):
    data: VersionData | None = None


class Versions(_Document):
    data: list[VersionData] = Field(default_factory=list)


class ModelVersion(_Document):
    data: VersionData | None = None


class CreatedVersion(_Document):
    data: VersionData | None = None
    included: list[ItemData] | None = None


class DownloadFormats(_Document):
    data: DownloadFormatsData | None = None


class Downloads(_Document):
    data: list[DownloadData] = Field(default_factory=list)


class Download(_Document):
    data: DownloadData | None = None


class CreatedDownload(_Document):
    data: list[JobData] = Field(default_factory=list)


class Job(_Document):
    data: JobData | None = None


class Storage(_Document):
    data: StorageData | None = None


class Command(_Document):
    data: CommandData | None = None
