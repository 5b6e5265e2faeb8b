"""Tests for OSS buckets, objects and the signed-URL transfer helpers."""

from __future__ import annotations

import asyncio
import io
from pathlib import Path

import httpx
import pytest
from conftest import json_response, request_json

from aps_sdk.auth_provider import StaticAuthenticationProvider
from aps_sdk.exceptions import OssApiException
from aps_sdk.oss import (
    Access,
    BucketsApi,
    CreateBucketsPayload,
    CreateBucketsPayloadAllow,
    ObjectsApi,
    OssClient,
    PolicyKey,
    Region,
)

OBJECT = "/oss/v2/buckets/models/objects/house.rvt"


class FakeS3:
    """Answers signeds3upload/signeds3download and the pre-signed S3 URLs they hand out."""

    def __init__(self, payload: bytes = b"") -> None:
        self.parts: dict[int, bytes] = {}
        self.url_requests: list[httpx.Request] = []
        self.payload = payload
        self.download_status = "complete"

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == "s3.example.com":
            if request.method == "PUT":
                part = int(request.url.params["part"])
                self.parts[part] = request.content
                return httpx.Response(200)
            return httpx.Response(200, content=self.payload)

        if request.url.path == f"{OBJECT}/signeds3upload" and request.method == "GET":
            self.url_requests.append(request)
            first = int(request.url.params["firstPart"])
            count = int(request.url.params["parts"])
            return json_response(
                200,
                {
                    "uploadKey": "upload-key-1",
                    "urls": [
                        f"https://s3.example.com/upload?part={n}" for n in range(first, first + count)
                    ],
                },
            )
        if request.url.path == f"{OBJECT}/signeds3upload" and request.method == "POST":
            return json_response(
                200,
                {
                    "bucketKey": "models",
                    "objectKey": "house.rvt",
                    "objectId": "urn:adsk.objects:os.object:models/house.rvt",
                    "size": sum(len(part) for part in self.parts.values()),
                },
            )
        if request.url.path == f"{OBJECT}/signeds3download":
            return json_response(
                200,
                {"status": self.download_status, "url": "https://s3.example.com/download", "size": 5},
            )
        return httpx.Response(404)


def test_upload_object_splits_into_signed_parts(make_sdk) -> None:
    """Given 12 bytes and 5-byte chunks, when uploaded, then three parts go to S3 without
    the bearer token and the upload is completed with the upload key."""
    fake = FakeS3()
    sdk, transport = make_sdk(fake)
    client = OssClient(sdk, StaticAuthenticationProvider("tok"))

    details = asyncio.run(client.upload_object("models", "house.rvt", b"abcdefghijkl", chunk_size=5))

    assert fake.parts == {1: b"abcde", 2: b"fghij", 3: b"kl"}
    (url_request,) = fake.url_requests
    assert url_request.url.params["parts"] == "3"
    assert url_request.url.params["firstPart"] == "1"
    assert "uploadKey" not in url_request.url.params

    s3_puts = [r for r in transport.requests if r.url.host == "s3.example.com"]
    assert len(s3_puts) == 3
    assert all("Authorization" not in r.headers for r in s3_puts)

    complete = transport.last
    assert complete.method == "POST"
    assert complete.headers["Authorization"] == "Bearer tok"
    assert request_json(complete) == {"uploadKey": "upload-key-1"}
    assert details.object_key == "house.rvt"
    assert details.size == 12


def test_upload_object_requests_urls_in_batches(make_sdk) -> None:
    """Given more parts than one URL request can return, when uploaded, then later batches
    continue the same upload key from the next part number."""
    fake = FakeS3()
    sdk, _ = make_sdk(fake)
    client = OssClient(sdk)

    asyncio.run(
        client.upload_object(
            "models", "house.rvt", io.BytesIO(bytes(range(30))), chunk_size=1, access_token="tok"
        )
    )

    first, second = fake.url_requests
    assert (first.url.params["parts"], first.url.params["firstPart"]) == ("25", "1")
    assert (second.url.params["parts"], second.url.params["firstPart"]) == ("5", "26")
    assert second.url.params["uploadKey"] == "upload-key-1"
    assert sorted(fake.parts) == list(range(1, 31))
    assert fake.parts[30] == bytes([29])


def test_upload_object_reads_files(make_sdk, tmp_path: Path) -> None:
    source = tmp_path / "house.rvt"
    source.write_bytes(b"0123456789")
    fake = FakeS3()
    sdk, _ = make_sdk(fake)

    asyncio.run(OssClient(sdk).upload_object("models", "house.rvt", source, 4, access_token="tok"))

    assert fake.parts == {1: b"0123", 2: b"4567", 3: b"89"}


def test_upload_object_rejects_non_positive_chunk(make_sdk) -> None:
    sdk, transport = make_sdk(FakeS3())

    with pytest.raises(ValueError):
        asyncio.run(OssClient(sdk).upload_object("models", "house.rvt", b"x", 0, access_token="tok"))
    assert not transport.requests


def test_upload_object_fails_when_part_put_fails(make_sdk) -> None:
    """Given S3 rejects a part, when uploading, then `OssApiException` is raised and the
    upload is never completed."""
    fake = FakeS3()

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "s3.example.com":
            return httpx.Response(403)
        return fake(request)

    sdk, transport = make_sdk(handler)

    with pytest.raises(OssApiException, match="part 1"):
        asyncio.run(OssClient(sdk).upload_object("models", "house.rvt", b"abc", access_token="tok"))
    assert not any(r.method == "POST" for r in transport.requests)


def test_download_object_writes_destination(make_sdk, tmp_path: Path) -> None:
    """Given a complete object, when downloaded, then the bytes are returned and saved."""
    fake = FakeS3(payload=b"hello")
    sdk, transport = make_sdk(fake)
    destination = tmp_path / "out.bin"

    data = asyncio.run(
        OssClient(sdk).download_object("models", "house.rvt", destination, access_token="tok")
    )

    assert data == b"hello"
    assert destination.read_bytes() == b"hello"
    assert transport.last.url.host == "s3.example.com"
    assert "Authorization" not in transport.last.headers


def test_download_object_requires_complete_status(make_sdk) -> None:
    fake = FakeS3(payload=b"hello")
    fake.download_status = "pending"
    sdk, transport = make_sdk(fake)

    with pytest.raises(OssApiException, match="pending"):
        asyncio.run(OssClient(sdk).download_object("models", "house.rvt", access_token="tok"))
    assert all(r.url.host != "s3.example.com" for r in transport.requests)


def test_transfers_without_throw_return_none(make_sdk) -> None:
    """Given every request is refused, when uploading or downloading with
    `throw_on_error=False`, then `None` is returned and nothing is sent to S3."""
    sdk, transport = make_sdk(lambda request: httpx.Response(403))
    client = OssClient(sdk)

    uploaded = asyncio.run(
        client.upload_object("models", "house.rvt", b"abc", access_token="tok", throw_on_error=False)
    )
    downloaded = asyncio.run(
        client.download_object("models", "house.rvt", access_token="tok", throw_on_error=False)
    )

    assert uploaded is None
    assert downloaded is None
    assert [r.url.path for r in transport.requests] == [
        f"{OBJECT}/signeds3upload",
        f"{OBJECT}/signeds3download",
    ]


def test_failed_part_without_throw_skips_completion(make_sdk) -> None:
    fake = FakeS3()

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "s3.example.com":
            return httpx.Response(503)
        return fake(request)

    sdk, transport = make_sdk(handler)

    result = asyncio.run(
        OssClient(sdk).upload_object(
            "models", "house.rvt", b"abcdef", 2, access_token="tok", throw_on_error=False
        )
    )

    assert result is None
    assert len([r for r in transport.requests if r.url.host == "s3.example.com"]) == 1
    assert not any(r.method == "POST" for r in transport.requests)


def test_failed_s3_download(make_sdk, tmp_path: Path) -> None:
    """Given S3 refuses the signed GET, when downloading, then it raises by default and
    returns `None` without writing the destination otherwise."""
    fake = FakeS3()

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "s3.example.com":
            return httpx.Response(403)
        return fake(request)

    sdk, _ = make_sdk(handler)
    client = OssClient(sdk)
    destination = tmp_path / "out.bin"

    with pytest.raises(OssApiException, match="403"):
        asyncio.run(client.download_object("models", "house.rvt", access_token="tok"))

    result = asyncio.run(
        client.download_object(
            "models", "house.rvt", destination, access_token="tok", throw_on_error=False
        )
    )
    assert result is None
    assert not destination.exists()


def test_create_bucket_sends_region_and_payload(make_sdk) -> None:
    sdk, transport = make_sdk(
        lambda request: json_response(200, {"bucketKey": "models", "policyKey": "transient"})
    )
    payload = CreateBucketsPayload(
        bucket_key="models",
        policy_key=PolicyKey.TRANSIENT,
        allow=[CreateBucketsPayloadAllow(auth_id="other-app", access=Access.READ)],
    )

    bucket = asyncio.run(BucketsApi(sdk).create_bucket(Region.EMEA, payload, access_token="tok"))

    assert transport.last.url.path == "/oss/v2/buckets"
    assert transport.last.headers["x-ads-region"] == "EMEA"
    assert request_json(transport.last) == {
        "bucketKey": "models",
        "policyKey": "transient",
        "allow": [{"authId": "other-app", "access": "read"}],
    }
    assert bucket.content.policy_key == "transient"


def test_get_objects_paging_query(make_sdk) -> None:
    sdk, transport = make_sdk(
        lambda request: json_response(
            200, {"items": [{"objectKey": "a.rvt", "size": 3}], "next": "https://next"}
        )
    )

    page = asyncio.run(
        ObjectsApi(sdk).get_objects("models", limit=10, begins_with="a", access_token="tok")
    )

    assert transport.last.url.path == "/oss/v2/buckets/models/objects"
    assert dict(transport.last.url.params) == {"limit": "10", "beginsWith": "a"}
    assert page.content.items[0].object_key == "a.rvt"
    assert page.content.next == "https://next"


def test_resumable_chunk_without_body_has_no_content(make_sdk) -> None:
    """Given an intermediate chunk acknowledged with 202 and no body, then content is None."""
    sdk, transport = make_sdk(lambda request: httpx.Response(202))

    result = asyncio.run(
        ObjectsApi(sdk).upload_signed_resources_chunk(
            "hash-1", "bytes 0-4/10", "session-1", b"01234", access_token="tok"
        )
    )

    request = transport.last
    assert request.method == "PUT"
    assert request.url.path == "/oss/v2/signedresources/hash-1/resumable"
    assert request.headers["Content-Range"] == "bytes 0-4/10"
    assert request.headers["Session-Id"] == "session-1"
    assert request.content == b"01234"
    assert result.status_code == 202
    assert result.content is None
