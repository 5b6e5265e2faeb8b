"""Wire models for the Object Storage Service (OSS)."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from ..model import CamelModel


class Region(str, Enum):
    US = "US"
    EMEA = "EMEA"
    AUS = "AUS"
    CAN = "CAN"
    DEU = "DEU"
    IND = "IND"
    JPN = "JPN"
    GBR = "GBR"


class PolicyKey(str, Enum):
    """Retention policy of a bucket: 24 hours, 30 days or until deleted."""

    TRANSIENT = "transient"
    TEMPORARY = "temporary"
    PERSISTENT = "persistent"


class Access(str, Enum):
    READ = "read"
    WRITE = "write"
    READWRITE = "readwrite"


class With(str, Enum):
    """Optional timestamps and metadata to include in object details."""

    CREATED_DATE = "createdDate"
    LAST_ACCESSED_DATE = "lastAccessedDate"
    LAST_MODIFIED_DATE = "lastModifiedDate"
    USER_DEFINED_METADATA = "userDefinedMetadata"


# Buckets


class Permission(CamelModel):
    auth_id: str | None = None
    access: str | None = None


class CreateBucketsPayloadAllow(CamelModel):
    auth_id: str
    access: Access


class CreateBucketsPayload(CamelModel):
    bucket_key: str
    policy_key: PolicyKey
    allow: list[CreateBucketsPayloadAllow] | None = None


class Bucket(CamelModel):
    bucket_key: str | None = None
    bucket_owner: str | None = None
    created_date: int | None = None
    permissions: list[Permission] | None = None
    policy_key: str | None = None


class BucketsItems(CamelModel):
    bucket_key: str | None = None
    created_date: int | None = None
    policy_key: str | None = None


class Buckets(CamelModel):
    items: list[BucketsItems] = Field(default_factory=list)
    next: str | None = None


# Objects


class ObjectDetails(CamelModel):
    bucket_key: str | None = None
    object_id: str | None = None
    object_key: str | None = None
    sha1: str | None = None
    size: int | None = None
    content_type: str | None = None
    location: str | None = None


class ObjectFullDetails(ObjectDetails):
    created_date: int | None = None
    last_accessed_date: int | None = None
    last_modified_date: int | None = None
    user_defined_metadata: str | None = None


class BucketObjects(CamelModel):
    items: list[ObjectDetails] = Field(default_factory=list)
    next: str | None = None


class Signeds3uploadResponse(CamelModel):
    """Pre-signed S3 part URLs plus the key that ties the parts together."""

    upload_key: str | None = None
    upload_expiration: str | None = None
    url_expiration: str | None = None
    urls: list[str] = Field(default_factory=list)


class Signeds3downloadResponse(CamelModel):
    """Pre-signed S3 download URL; ``status`` must be ``complete`` before it is usable."""

    status: str | None = None
    url: str | None = None
    urls: dict[str, str] | None = None
    params: dict[str, Any] | None = None
    size: int | None = None
    sha1: str | None = None


class Completes3uploadBody(CamelModel):
    upload_key: str
    size: int | None = None
    e_tags: list[str] | None = Field(None, alias="eTags")


class CreateSignedResource(CamelModel):
    minutes_expiration: int | None = None
    single_use: bool | None = None


class CreateObjectSigned(CamelModel):
    signed_url: str | None = None
    expiration: int | None = None
    single_use: bool | None = None


# Batch operations


class Batchsigneds3uploadObjectRequests(CamelModel):
    object_key: str
    first_part: int | None = None
    parts: int | None = None
    upload_key: str | None = None


class Batchsigneds3uploadObject(CamelModel):
    requests: list[Batchsigneds3uploadObjectRequests]


class Batchsigneds3uploadResponseResults(Signeds3uploadResponse):
    status: str | None = None
    reason: str | None = None


class Batchsigneds3uploadResponse(CamelModel):
    results: dict[str, Batchsigneds3uploadResponseResults] = Field(default_factory=dict)


class Batchsigneds3downloadObjectRequests(CamelModel):
    object_key: str
    response_content_type: str | None = None
    response_content_disposition: str | None = None
    response_cache_control: str | None = None
    if_none_match: str | None = None
    if_modified_since: str | None = None


class Batchsigneds3downloadObject(CamelModel):
    requests: list[Batchsigneds3downloadObjectRequests]


class Batchsigneds3downloadResponseResults(Signeds3downloadResponse):
    reason: str | None = None


class Batchsigneds3downloadResponse(CamelModel):
    results: dict[str, Batchsigneds3downloadResponseResults] = Field(default_factory=dict)


class BatchcompleteuploadObjectRequests(CamelModel):
    object_key: str
    upload_key: str
    size: int | None = None
    e_tags: list[str] | None = Field(None, alias="eTags")
    x_ads_meta_content_type: str | None = Field(None, alias="x-ads-meta-Content-Type")
    x_ads_meta_content_disposition: str | None = Field(
        None, alias="x-ads-meta-Content-Disposition"
    )
    x_ads_meta_content_encoding: str | None = Field(None, alias="x-ads-meta-Content-Encoding")
    x_ads_meta_cache_control: str | None = Field(None, alias="x-ads-meta-Cache-Control")
    x_ads_user_defined_metadata: str | None = Field(None, alias="x-ads-user-defined-metadata")


class BatchcompleteuploadObject(CamelModel):
    requests: list[BatchcompleteuploadObjectRequests]


class BatchcompleteuploadResponseResults(ObjectDetails):
    status: str | None = None
    reason: str | None = None
    parts: list[dict[str, Any]] | None = None


class BatchcompleteuploadResponse(CamelModel):
    results: dict[str, BatchcompleteuploadResponseResults] = Field(default_factory=dict)
