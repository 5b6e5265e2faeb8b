"""Base classes for the wire-format models of every service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApsModel(BaseModel):
    """Mirror of a JSON schema published by an APS service.

    Fields are populated by attribute name or JSON name, unknown JSON fields
    are kept, and unset fields are left out when serialized.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        protected_namespaces=(),
    )

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def __str__(self) -> str:
        return self.model_dump_json(indent=4, by_alias=True, exclude_none=True)


class CamelModel(ApsModel):
    """Model whose JSON names are the camelCase form of the attribute names."""

    model_config = ConfigDict(alias_generator=to_camel)
