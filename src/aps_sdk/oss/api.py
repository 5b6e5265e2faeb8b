"""Per-endpoint wrappers for the Object Storage Service (OSS)."""

from __future__ import annotations

from datetime import datetime

import httpx

from ..exceptions import OssApiException
from ..http import ApiResponse, BaseApi
from ..marshalling import deserialize, set_header, set_query_parameter
from .models import (
    Access,
    BatchcompleteuploadObject,
    BatchcompleteuploadResponse,
    Batchsigneds3downloadObject,
    Batchsigneds3downloadResponse,
    Batchsigneds3uploadObject,
    Batchsigneds3uploadResponse,
    Bucket,
    BucketObjects,
    Buckets,
    Completes3uploadBody,
    CreateBucketsPayload,
    CreateObjectSigned,
    CreateSignedResource,
    ObjectDetails,
    ObjectFullDetails,
    Region,
    Signeds3downloadResponse,
    Signeds3uploadResponse,
    With,
)

BASE_PATH = "/oss/v2"
BUCKET_PATH = f"{BASE_PATH}/buckets/{{bucket_key}}"
OBJECT_PATH = f"{BUCKET_PATH}/objects/{{object_key}}"
SIGNED_RESOURCE_PATH = f"{BASE_PATH}/signedresources/{{hash}}"


class _OssApi(BaseApi):
    service_name = "OSS"
    exception_type = OssApiException


class BucketsApi(_OssApi):
    async def create_bucket(
        self,
        x_ads_region: Region,
        create_buckets_payload: CreateBucketsPayload,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Bucket]:
        headers: dict[str, str] = {}
        set_header("x-ads-region", x_ads_region, headers)
        return await self._send_for(
            Bucket,
            "create_bucket",
            "POST",
            f"{BASE_PATH}/buckets",
            headers=headers,
            body=create_buckets_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_buckets(
        self,
        region: Region | None = None,
        limit: int | None = None,
        start_at: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Buckets]:
        """List buckets owned by the application, one page of up to ``limit`` at a time."""
        query: dict[str, str] = {}
        set_query_parameter("region", region, query)
        set_query_parameter("limit", limit, query)
        set_query_parameter("startAt", start_at, query)
        return await self._send_for(
            Buckets,
            "get_buckets",
            "GET",
            f"{BASE_PATH}/buckets",
            query=query,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_bucket_details(
        self,
        bucket_key: str,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Bucket]:
        return await self._send_for(
            Bucket,
            "get_bucket_details",
            "GET",
            f"{BUCKET_PATH}/details",
            route={"bucket_key": bucket_key},
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def delete_bucket(
        self,
        bucket_key: str,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> httpx.Response:
        return await self._send(
            "delete_bucket",
            "DELETE",
            BUCKET_PATH,
            route={"bucket_key": bucket_key},
            access_token=access_token,
            throw_on_error=throw_on_error,
        )


class ObjectsApi(_OssApi):
    async def batch_complete_upload(
        self,
        bucket_key: str,
        requests: BatchcompleteuploadObject | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[BatchcompleteuploadResponse]:
        return await self._send_for(
            BatchcompleteuploadResponse,
            "batch_complete_upload",
            "POST",
            f"{BUCKET_PATH}/objects/batchcompleteupload",
            route={"bucket_key": bucket_key},
            body=requests,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def batch_signed_s3_download(
        self,
        bucket_key: str,
        requests: Batchsigneds3downloadObject,
        public_resource_fallback: bool | None = None,
        minutes_expiration: int | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Batchsigneds3downloadResponse]:
        query: dict[str, str] = {}
        set_query_parameter("public-resource-fallback", public_resource_fallback, query)
        set_query_parameter("minutesExpiration", minutes_expiration, query)
        return await self._send_for(
            Batchsigneds3downloadResponse,
            "batch_signed_s3_download",
            "POST",
            f"{BUCKET_PATH}/objects/batchsigneds3download",
            route={"bucket_key": bucket_key},
            query=query,
            body=requests,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def batch_signed_s3_upload(
        self,
        bucket_key: str,
        use_acceleration: bool | None = None,
        minutes_expiration: int | None = None,
        requests: Batchsigneds3uploadObject | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Batchsigneds3uploadResponse]:
        query: dict[str, str] = {}
        set_query_parameter("useAcceleration", use_acceleration, query)
        set_query_parameter("minutesExpiration", minutes_expiration, query)
        return await self._send_for(
            Batchsigneds3uploadResponse,
            "batch_signed_s3_upload",
            "POST",
            f"{BUCKET_PATH}/objects/batchsigneds3upload",
            route={"bucket_key": bucket_key},
            query=query,
            body=requests,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def complete_signed_s3_upload(
        self,
        bucket_key: str,
        object_key: str,
        body: Completes3uploadBody,
        content_type: str = "application/json",
        x_ads_meta_content_type: str | None = None,
        x_ads_meta_content_disposition: str | None = None,
        x_ads_meta_content_encoding: str | None = None,
        x_ads_meta_cache_control: str | None = None,
        x_ads_user_defined_metadata: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> httpx.Response:
        """Stitch the uploaded S3 parts of ``body.upload_key`` into the final object.

        The ``x-ads-meta-*`` values are stored with the object and replayed as
        response headers when it is downloaded.
        """
        headers: dict[str, str] = {}
        set_header("Content-Type", content_type, headers)
        set_header("x-ads-meta-Content-Type", x_ads_meta_content_type, headers)
        set_header("x-ads-meta-Content-Disposition", x_ads_meta_content_disposition, headers)
        set_header("x-ads-meta-Content-Encoding", x_ads_meta_content_encoding, headers)
        set_header("x-ads-meta-Cache-Control", x_ads_meta_cache_control, headers)
        set_header("x-ads-user-defined-metadata", x_ads_user_defined_metadata, headers)
        return await self._send(
            "complete_signed_s3_upload",
            "POST",
            f"{OBJECT_PATH}/signeds3upload",
            route={"bucket_key": bucket_key, "object_key": object_key},
            headers=headers,
            body=body,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def copy_to(
        self,
        bucket_key: str,
        object_key: str,
        new_obj_name: str,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[ObjectDetails]:
        return await self._send_for(
            ObjectDetails,
            "copy_to",
            "PUT",
            f"{OBJECT_PATH}/copyto/{{new_obj_name}}",
            route={"bucket_key": bucket_key, "object_key": object_key, "new_obj_name": new_obj_name},
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def create_signed_resource(
        self,
        bucket_key: str,
        object_key: str,
        access: Access | None = None,
        use_cdn: bool | None = None,
        create_signed_resource: CreateSignedResource | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[CreateObjectSigned]:
        """Create a signed URL that grants ``access`` to the object without a token."""
        query: dict[str, str] = {}
        set_query_parameter("access", access, query)
        set_query_parameter("useCdn", use_cdn, query)
        return await self._send_for(
            CreateObjectSigned,
            "create_signed_resource",
            "POST",
            f"{OBJECT_PATH}/signed",
            route={"bucket_key": bucket_key, "object_key": object_key},
            query=query,
            body=create_signed_resource,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def delete_object(
        self,
        bucket_key: str,
        object_key: str,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> httpx.Response:
        return await self._send(
            "delete_object",
            "DELETE",
            OBJECT_PATH,
            route={"bucket_key": bucket_key, "object_key": object_key},
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def delete_signed_resource(
        self,
        hash: str,
        x_ads_region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> httpx.Response:
        headers: dict[str, str] = {}
        set_header("x-ads-region", x_ads_region, headers)
        return await self._send(
            "delete_signed_resource",
            "DELETE",
            SIGNED_RESOURCE_PATH,
            route={"hash": hash},
            headers=headers,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_object_details(
        self,
        bucket_key: str,
        object_key: str,
        if_modified_since: datetime | None = None,
        with_: With | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[ObjectFullDetails]:
        query: dict[str, str] = {}
        set_query_parameter("with", with_, query)
        headers: dict[str, str] = {}
        set_header("If-Modified-Since", if_modified_since, headers)
        return await self._send_for(
            ObjectFullDetails,
            "get_object_details",
            "GET",
            f"{OBJECT_PATH}/details",
            route={"bucket_key": bucket_key, "object_key": object_key},
            query=query,
            headers=headers,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_objects(
        self,
        bucket_key: str,
        limit: int | None = None,
        begins_with: str | None = None,
        start_at: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[BucketObjects]:
        query: dict[str, str] = {}
        set_query_parameter("limit", limit, query)
        set_query_parameter("beginsWith", begins_with, query)
        set_query_parameter("startAt", start_at, query)
        return await self._send_for(
            BucketObjects,
            "get_objects",
            "GET",
            f"{BUCKET_PATH}/objects",
            route={"bucket_key": bucket_key},
            query=query,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_signed_resource(
        self,
        hash: str,
        range: str | None = None,
        if_none_match: str | None = None,
        if_modified_since: datetime | None = None,
        accept_encoding: str | None = None,
        region: Region | None = None,
        response_content_disposition: str | None = None,
        response_content_type: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[bytes]:
        """Download the object behind a signed resource; ``range`` fetches part of it."""
        query: dict[str, str] = {}
        set_query_parameter("region", region, query)
        set_query_parameter("response-content-disposition", response_content_disposition, query)
        set_query_parameter("response-content-type", response_content_type, query)
        headers: dict[str, str] = {}
        set_header("Range", range, headers)
        set_header("If-None-Match", if_none_match, headers)
        set_header("If-Modified-Since", if_modified_since, headers)
        set_header("Accept-Encoding", accept_encoding, headers)
        return await self._send_for(
            bytes,
            "get_signed_resource",
            "GET",
            SIGNED_RESOURCE_PATH,
            route={"hash": hash},
            query=query,
            headers=headers,
            accept="application/octet-stream",
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def signed_s3_download(
        self,
        bucket_key: str,
        object_key: str,
        if_none_match: str | None = None,
        if_modified_since: datetime | None = None,
        response_content_type: str | None = None,
        response_content_disposition: str | None = None,
        response_cache_control: str | None = None,
        public_resource_fallback: bool | None = None,
        minutes_expiration: int | None = None,
        use_cdn: bool | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Signeds3downloadResponse]:
        query: dict[str, str] = {}
        set_query_parameter("response-content-type", response_content_type, query)
        set_query_parameter("response-content-disposition", response_content_disposition, query)
        set_query_parameter("response-cache-control", response_cache_control, query)
        set_query_parameter("public-resource-fallback", public_resource_fallback, query)
        set_query_parameter("minutesExpiration", minutes_expiration, query)
        set_query_parameter("useCdn", use_cdn, query)
        headers: dict[str, str] = {}
        set_header("If-None-Match", if_none_match, headers)
        set_header("If-Modified-Since", if_modified_since, headers)
        return await self._send_for(
            Signeds3downloadResponse,
            "signed_s3_download",
            "GET",
            f"{OBJECT_PATH}/signeds3download",
            route={"bucket_key": bucket_key, "object_key": object_key},
            query=query,
            headers=headers,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def signed_s3_upload(
        self,
        bucket_key: str,
        object_key: str,
        parts: int | None = None,
        first_part: int | None = None,
        upload_key: str | None = None,
        minutes_expiration: int | None = None,
        use_acceleration: bool | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Signeds3uploadResponse]:
        """Request pre-signed S3 URLs for ``parts`` parts starting at ``first_part``.

        Pass the ``upload_key`` of an earlier response to extend the same upload.
        """
        query: dict[str, str] = {}
        set_query_parameter("parts", parts, query)
        set_query_parameter("firstPart", first_part, query)
        set_query_parameter("uploadKey", upload_key, query)
        set_query_parameter("minutesExpiration", minutes_expiration, query)
        set_query_parameter("useAcceleration", use_acceleration, query)
        return await self._send_for(
            Signeds3uploadResponse,
            "signed_s3_upload",
            "GET",
            f"{OBJECT_PATH}/signeds3upload",
            route={"bucket_key": bucket_key, "object_key": object_key},
            query=query,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def upload_signed_resource(
        self,
        hash: str,
        content_length: int | None,
        body: bytes,
        content_type: str | None = None,
        content_disposition: str | None = None,
        x_ads_region: Region | None = None,
        if_match: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[ObjectDetails]:
        headers: dict[str, str] = {}
        set_header("Content-Type", content_type, headers)
        set_header("Content-Length", content_length, headers)
        set_header("Content-Disposition", content_disposition, headers)
        set_header("x-ads-region", x_ads_region, headers)
        set_header("If-Match", if_match, headers)
        return await self._send_for(
            ObjectDetails,
            "upload_signed_resource",
            "PUT",
            SIGNED_RESOURCE_PATH,
            route={"hash": hash},
            headers=headers,
            content=body,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def upload_signed_resources_chunk(
        self,
        hash: str,
        content_range: str,
        session_id: str,
        body: bytes,
        content_type: str | None = None,
        content_disposition: str | None = None,
        x_ads_region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[ObjectDetails]:
        """Upload one ``bytes start-end/total`` chunk of a resumable signed upload.

        Intermediate chunks are acknowledged without a typed body, in which case
        ``content`` is ``None``.
        """
        headers: dict[str, str] = {}
        set_header("Content-Type", content_type, headers)
        set_header("Content-Range", content_range, headers)
        set_header("Content-Disposition", content_disposition, headers)
        set_header("x-ads-region", x_ads_region, headers)
        set_header("Session-Id", session_id, headers)
        response = await self._send(
            "upload_signed_resources_chunk",
            "PUT",
            f"{SIGNED_RESOURCE_PATH}/resumable",
            route={"hash": hash},
            headers=headers,
            content=body,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )
        if not response.is_success or not response.headers.get("content-type"):
            return ApiResponse(response, None)
        return ApiResponse(response, deserialize(response, ObjectDetails))
