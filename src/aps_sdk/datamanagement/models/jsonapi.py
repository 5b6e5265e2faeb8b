"""JSON-API building blocks shared by every Data Management document."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from ...model import CamelModel


class JsonApiVersion(CamelModel):
    version: str = Field("1.0", description="JSON-API version of the document")


class JsonApiLink(CamelModel):
    href: str | None = None


class JsonApiLinks(CamelModel):
    """Hypermedia links of a document or resource; ``self`` is exposed as ``self_link``."""

    self_link: JsonApiLink | None = Field(None, alias="self")
    first: JsonApiLink | None = None
    prev: JsonApiLink | None = None
    next: JsonApiLink | None = None
    related: JsonApiLink | None = None
    web_view: JsonApiLink | None = None


class JsonApiMeta(CamelModel):
    warnings: list[dict[str, Any]] | None = None


class ResourceIdentifier(CamelModel):
    """``{"type": ..., "id": ...}`` pointer to another resource."""

    type: str
    id: str


class RelationshipToOne(CamelModel):
    data: ResourceIdentifier | None = None


class Relationship(CamelModel):
    """Relationship of a resource; ``data`` may be one identifier or a list."""

    data: ResourceIdentifier | list[ResourceIdentifier] | None = None
    links: JsonApiLinks | None = None
    meta: dict[str, Any] | None = None


class SchemaLink(CamelModel):
    href: str | None = None


class AttributesExtension(CamelModel):
    """Extension block describing the domain-specific type of a resource."""

    type: str | None = None
    version: str | None = None
    schema_link: SchemaLink | None = Field(None, alias="schema")
    data: dict[str, Any] | None = None


class AttributesExtensionWithoutSchemaLink(CamelModel):
    type: str | None = None
    version: str | None = None
    data: dict[str, Any] | None = None


class ItemPayloadIncludedAttributesExtension(CamelModel):
    """Extension block of the version included in an item creation payload."""

    type: str | None = Field(None, description="Extension type, e.g. versions:autodesk.core:File")
    version: str | None = Field(None, description="Version of the extension schema")
    data: dict[str, Any] | None = None
