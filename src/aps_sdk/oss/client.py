"""OSS facade: buckets, objects and signed-URL transfers."""

from __future__ import annotations

import math
import os
from collections.abc import AsyncGenerator
from datetime import datetime
from typing import BinaryIO

import aiofiles
import httpx
from loguru import logger

from ..auth_provider import AuthenticationProvider
from ..exceptions import OssApiException
from ..facade import ServiceClient
from ..marshalling import deserialize
from ..sdk_manager import SdkManager
from .api import BucketsApi, ObjectsApi
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

DEFAULT_CHUNK_SIZE = 5 * 1024 * 1024
# S3 hands out at most this many part URLs per signeds3upload call.
MAX_PARTS_PER_REQUEST = 25

UploadSource = bytes | bytearray | str | os.PathLike | BinaryIO


def _source_size(source: UploadSource) -> int:
    if isinstance(source, (bytes, bytearray)):
        return len(source)
    if isinstance(source, (str, os.PathLike)):
        return os.path.getsize(source)
    position = source.tell()
    source.seek(0, os.SEEK_END)
    size = source.tell() - position
    source.seek(position)
    return size


async def _iter_chunks(source: UploadSource, chunk_size: int) -> AsyncGenerator[bytes, None]:
    if isinstance(source, (bytes, bytearray)):
        for offset in range(0, len(source), chunk_size):
            yield bytes(source[offset : offset + chunk_size])
        return
    if isinstance(source, (str, os.PathLike)):
        async with aiofiles.open(source, "rb") as handle:
            while chunk := await handle.read(chunk_size):
                yield chunk
        return
    while chunk := source.read(chunk_size):
        yield chunk


def _s3_failure(message: str, response: httpx.Response, throw_on_error: bool) -> None:
    if throw_on_error:
        raise OssApiException(message, response)
    logger.error(f"response unsuccess with status code: {response.status_code} ({message})")


class OssClient(ServiceClient):
    def __init__(
        self,
        sdk_manager: SdkManager | None = None,
        authentication_provider: AuthenticationProvider | None = None,
    ) -> None:
        super().__init__(sdk_manager, authentication_provider)
        self.buckets_api = BucketsApi(self.sdk_manager)
        self.objects_api = ObjectsApi(self.sdk_manager)

    # Signed-URL transfers

    async def upload_object(
        self,
        bucket_key: str,
        object_key: str,
        source: UploadSource,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ObjectDetails | None:
        """Upload ``source`` through pre-signed S3 part URLs and finalize the object.

        ``source`` may be raw bytes, a file path or a binary file object. The
        content is split into ``chunk_size`` parts; each part is ``PUT`` to its
        signed URL without the bearer token, then the upload is completed with
        the ``uploadKey`` the service returned. With ``throw_on_error=False`` any
        failed step ends the upload and ``None`` is returned.
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        token = await self._token(access_token)
        total_parts = max(1, math.ceil(_source_size(source) / chunk_size))
        logger.info(f"Uploading {object_key} to {bucket_key} in {total_parts} part(s)")

        upload_key: str | None = None
        chunks = _iter_chunks(source, chunk_size)
        try:
            part = 1
            while part <= total_parts:
                batch = min(MAX_PARTS_PER_REQUEST, total_parts - part + 1)
                signed = await self.objects_api.signed_s3_upload(
                    bucket_key,
                    object_key,
                    parts=batch,
                    first_part=part,
                    upload_key=upload_key,
                    access_token=token,
                    throw_on_error=throw_on_error,
                )
                if not signed.is_success:
                    return None
                urls = signed.content.urls if signed.content else []
                if len(urls) < batch:
                    raise OssApiException(
                        f"Expected {batch} signed upload URLs, got {len(urls)}", signed.response
                    )
                upload_key = signed.content.upload_key
                for url in urls[:batch]:
                    chunk = await anext(chunks, b"")
                    if not await self._put_part(url, chunk, part, throw_on_error):
                        return None
                    part += 1
        finally:
            await chunks.aclose()

        response = await self.objects_api.complete_signed_s3_upload(
            bucket_key,
            object_key,
            Completes3uploadBody(upload_key=upload_key),
            access_token=token,
            throw_on_error=throw_on_error,
        )
        if not response.is_success:
            return None
        return deserialize(response, ObjectDetails)

    async def _put_part(self, url: str, chunk: bytes, part: int, throw_on_error: bool) -> bool:
        response = await self.sdk_manager.client.put(url, content=chunk)
        if not response.is_success:
            _s3_failure(
                f"Upload of part {part} failed with status code: {response.status_code}",
                response,
                throw_on_error,
            )
            return False
        logger.debug(f"Uploaded part {part} ({len(chunk)} bytes)")
        return True

    async def download_object(
        self,
        bucket_key: str,
        object_key: str,
        destination: str | os.PathLike[str] | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> bytes | None:
        """Fetch an object through its pre-signed S3 URL.

        The bytes are returned and also written to ``destination`` when given.
        A failed request returns ``None`` when ``throw_on_error`` is false; an
        object that is not ``complete`` always raises.
        """
        token = await self._token(access_token)
        signed = await self.objects_api.signed_s3_download(
            bucket_key, object_key, access_token=token, throw_on_error=throw_on_error
        )
        if not signed.is_success:
            return None
        download = signed.content
        if download is None or download.status != "complete" or not download.url:
            status = download.status if download else None
            raise OssApiException(
                f"Object {object_key} is not available for download (status: {status})",
                signed.response,
            )

        response = await self.sdk_manager.client.get(download.url)
        if not response.is_success:
            _s3_failure(
                f"Download of {object_key} failed with status code: {response.status_code}",
                response,
                throw_on_error,
            )
            return None
        if destination is not None:
            async with aiofiles.open(destination, "wb") as handle:
                await handle.write(response.content)
            logger.info(f"Saved {object_key} to {destination}")
        return response.content

    # Buckets

    async def create_bucket(
        self,
        x_ads_region: Region,
        create_buckets_payload: CreateBucketsPayload,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Bucket | None:
        return await self._call(
            self.buckets_api.create_bucket,
            x_ads_region,
            create_buckets_payload,
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
    ) -> Buckets | None:
        return await self._call(
            self.buckets_api.get_buckets,
            region,
            limit,
            start_at,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_bucket_details(
        self,
        bucket_key: str,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Bucket | None:
        return await self._call(
            self.buckets_api.get_bucket_details,
            bucket_key,
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
        return await self._call(
            self.buckets_api.delete_bucket,
            bucket_key,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    # Objects

    async def batch_complete_upload(
        self,
        bucket_key: str,
        requests: BatchcompleteuploadObject,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> BatchcompleteuploadResponse | None:
        return await self._call(
            self.objects_api.batch_complete_upload,
            bucket_key,
            requests,
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
    ) -> Batchsigneds3downloadResponse | None:
        return await self._call(
            self.objects_api.batch_signed_s3_download,
            bucket_key,
            requests,
            public_resource_fallback,
            minutes_expiration,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def batch_signed_s3_upload(
        self,
        bucket_key: str,
        requests: Batchsigneds3uploadObject,
        use_acceleration: bool | None = None,
        minutes_expiration: int | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Batchsigneds3uploadResponse | None:
        return await self._call(
            self.objects_api.batch_signed_s3_upload,
            bucket_key,
            use_acceleration,
            minutes_expiration,
            requests,
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
        return await self._call(
            self.objects_api.complete_signed_s3_upload,
            bucket_key,
            object_key,
            body,
            content_type,
            x_ads_meta_content_type,
            x_ads_meta_content_disposition,
            x_ads_meta_content_encoding,
            x_ads_meta_cache_control,
            x_ads_user_defined_metadata,
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
    ) -> ObjectDetails | None:
        return await self._call(
            self.objects_api.copy_to,
            bucket_key,
            object_key,
            new_obj_name,
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
    ) -> CreateObjectSigned | None:
        return await self._call(
            self.objects_api.create_signed_resource,
            bucket_key,
            object_key,
            access,
            use_cdn,
            create_signed_resource,
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
        return await self._call(
            self.objects_api.delete_object,
            bucket_key,
            object_key,
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
        return await self._call(
            self.objects_api.delete_signed_resource,
            hash,
            x_ads_region,
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
    ) -> ObjectFullDetails | None:
        return await self._call(
            self.objects_api.get_object_details,
            bucket_key,
            object_key,
            if_modified_since,
            with_,
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
    ) -> BucketObjects | None:
        return await self._call(
            self.objects_api.get_objects,
            bucket_key,
            limit,
            begins_with,
            start_at,
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
    ) -> bytes | None:
        return await self._call(
            self.objects_api.get_signed_resource,
            hash,
            range,
            if_none_match,
            if_modified_since,
            accept_encoding,
            region,
            response_content_disposition,
            response_content_type,
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
    ) -> Signeds3downloadResponse | None:
        return await self._call(
            self.objects_api.signed_s3_download,
            bucket_key,
            object_key,
            if_none_match,
            if_modified_since,
            response_content_type,
            response_content_disposition,
            response_cache_control,
            public_resource_fallback,
            minutes_expiration,
            use_cdn,
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
    ) -> Signeds3uploadResponse | None:
        return await self._call(
            self.objects_api.signed_s3_upload,
            bucket_key,
            object_key,
            parts,
            first_part,
            upload_key,
            minutes_expiration,
            use_acceleration,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def upload_signed_resource(
        self,
        hash: str,
        body: bytes,
        content_type: str | None = None,
        content_disposition: str | None = None,
        x_ads_region: Region | None = None,
        if_match: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ObjectDetails | None:
        return await self._call(
            self.objects_api.upload_signed_resource,
            hash,
            len(body),
            body,
            content_type,
            content_disposition,
            x_ads_region,
            if_match,
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
    ) -> ObjectDetails | None:
        return await self._call(
            self.objects_api.upload_signed_resources_chunk,
            hash,
            content_range,
            session_id,
            body,
            content_type,
            content_disposition,
            x_ads_region,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )
