"""Tests for the Model Derivative API classes, job payloads and facade."""

from __future__ import annotations

import asyncio

import httpx
import pytest
from conftest import BASE, RecordingTransport, json_response, request_json

from aps_sdk.auth_provider import StaticAuthenticationProvider
from aps_sdk.exceptions import ModelDerivativeApiException
from aps_sdk.modelderivative import (
    DerivativesApi,
    JobPayload,
    JobPayloadFormatSVF2,
    JobPayloadFormatThumbnail,
    JobPayloadInput,
    JobPayloadOutput,
    JobPayloadOutputDestination,
    JobSvf2OutputFormatAdvancedNWD,
    JobThumbnailOutputFormatAdvanced,
    JobsApi,
    ManifestApi,
    MetadataApi,
    ModelDerivativeClient,
    Region,
    SpecificPropertiesPayload,
    ThumbnailsApi,
    View,
    XAdsDerivativeFormat,
)
from aps_sdk.sdk_manager import ApsSettings, SdkManager

URN = "dXJuOmFkc2sub2JqZWN0czpvcy5vYmplY3Q6bW9kZWxzL2hvdXNlLm53ZA"
MD = "/modelderivative/v2/designdata"


def _job_payload() -> JobPayload:
    return JobPayload(
        input=JobPayloadInput(urn=URN, compressed_urn=False, root_filename="house.nwd"),
        output=JobPayloadOutput(
            destination=JobPayloadOutputDestination(region=Region.EMEA),
            formats=[
                JobPayloadFormatSVF2(
                    advanced=JobSvf2OutputFormatAdvancedNWD(
                        hidden_objects=True, timeliner_properties=False
                    )
                ),
                JobPayloadFormatThumbnail(
                    advanced=JobThumbnailOutputFormatAdvanced(width=200, height=200)
                ),
            ],
        ),
    )


def test_start_job_sends_headers_and_polymorphic_formats(make_sdk) -> None:
    """Given an SVF2 job with NWD options, when started, then the advanced options of the
    concrete subclass are serialized and the job headers are set."""
    sdk, transport = make_sdk(
        lambda request: json_response(
            200, {"result": "created", "urn": URN, "acceptedJobs": {"output": {"formats": []}}}
        )
    )

    result = asyncio.run(
        JobsApi(sdk).start_job(
            x_ads_force=True,
            x_ads_derivative_format=XAdsDerivativeFormat.LATEST,
            region=Region.EMEA,
            job_payload=_job_payload(),
            access_token="tok",
        )
    )

    request = transport.last
    assert request.method == "POST"
    assert request.url.path == f"{MD}/job"
    assert request.headers["x-ads-force"] == "true"
    assert request.headers["x-ads-derivative-format"] == "latest"
    assert request.headers["region"] == "EMEA"

    body = request_json(request)
    assert body["input"] == {"urn": URN, "compressedUrn": False, "rootFilename": "house.nwd"}
    assert body["output"]["destination"] == {"region": "EMEA"}
    svf2, thumbnail = body["output"]["formats"]
    assert svf2 == {
        "type": "svf2",
        "views": ["2d", "3d"],
        "advanced": {"hiddenObjects": True, "timelinerProperties": False},
    }
    assert thumbnail == {"type": "thumbnail", "advanced": {"width": 200, "height": 200}}

    assert result.content.result == "created"
    assert result.content.accepted_jobs.output == {"formats": []}


def test_job_payload_formats_parse_by_type() -> None:
    """Given wire JSON for formats, when validated, then each entry gets its format class."""
    payload = JobPayload.model_validate(
        {
            "input": {"urn": URN},
            "output": {
                "formats": [
                    {"type": "svf", "views": ["3d"]},
                    {"type": "obj", "advanced": {"exportFileStructure": "single"}},
                ]
            },
        }
    )

    svf, obj = payload.output.formats
    assert svf.type == "svf"
    assert svf.views == [View.THREE_D]
    assert obj.advanced.export_file_structure == "single"


def test_get_manifest_parses_nested_derivatives(make_sdk) -> None:
    """Given a manifest with nested resources, when fetched, then children are typed models."""
    manifest = {
        "type": "manifest",
        "hasThumbnail": "true",
        "status": "success",
        "progress": "complete",
        "region": "US",
        "urn": URN,
        "derivatives": [
            {
                "name": "house.nwd",
                "outputType": "svf2",
                "status": "success",
                "children": [
                    {
                        "guid": "view-1",
                        "type": "geometry",
                        "role": "3d",
                        "viewableID": "vid-1",
                        "children": [{"guid": "res-1", "type": "resource", "urn": "urn:res"}],
                    }
                ],
            }
        ],
    }
    sdk, transport = make_sdk(lambda request: json_response(200, manifest))

    result = asyncio.run(
        ManifestApi(sdk).get_manifest(URN, accept_encoding="gzip", access_token="tok")
    )

    assert transport.last.url.path == f"{MD}/{URN}/manifest"
    assert transport.last.headers["Accept-Encoding"] == "gzip"
    assert "region" not in transport.last.headers
    derivative = result.content.derivatives[0]
    assert derivative.output_type == "svf2"
    view = derivative.children[0]
    assert view.viewable_id == "vid-1"
    assert view.children[0].urn == "urn:res"


def test_get_derivative_url_collects_signed_cookies(make_sdk) -> None:
    """Given a signed-cookie response, when fetched, then the cookies are kept on the model
    but never serialized back."""
    headers = httpx.Headers(
        [
            ("content-type", "application/json"),
            ("set-cookie", "CloudFront-Policy=abc; Path=/"),
            ("set-cookie", "CloudFront-Signature=def; Path=/"),
        ]
    )
    sdk, transport = make_sdk(
        lambda request: httpx.Response(
            200,
            headers=headers,
            content=b'{"etag": "e1", "size": 42, "url": "https://cdn/derivative", "content-type": "application/octet-stream", "expiration": 1700000000}',
        )
    )

    result = asyncio.run(
        DerivativesApi(sdk).get_derivative_url(
            "urn:adsk.viewing:fs.file:abc/output/0.svf",
            URN,
            minutes_expiration=30,
            response_content_disposition="attachment",
            access_token="tok",
        )
    )

    request = transport.last
    assert request.url.raw_path.startswith(
        f"{MD}/{URN}/manifest/urn%3Aadsk.viewing%3Afs.file%3Aabc%2Foutput%2F0.svf/signedcookies".encode()
    )
    assert request.url.params["minutes-expiration"] == "30"
    assert request.url.params["response-content-disposition"] == "attachment"

    download = result.content
    assert download.url == "https://cdn/derivative"
    assert download.size == 42
    assert download.content_type == "application/octet-stream"
    assert download.signed_cookies == [
        "CloudFront-Policy=abc; Path=/",
        "CloudFront-Signature=def; Path=/",
    ]
    assert "signedCookies" not in download.to_dict()
    assert "signed_cookies" not in download.to_dict()


def test_fetch_specific_properties_posts_query(make_sdk) -> None:
    sdk, transport = make_sdk(
        lambda request: json_response(
            200,
            {
                "pagination": {"limit": 20, "offset": 0, "totalResults": 1},
                "data": {"type": "properties", "collection": [{"objectid": 1, "name": "Wall"}]},
            },
        )
    )
    payload = SpecificPropertiesPayload(
        query={"$in": ["objectid", [1]]}, fields=["objectid", "name"]
    )

    result = asyncio.run(
        MetadataApi(sdk).fetch_specific_properties(
            URN, "guid-1", payload, region=Region.US, access_token="tok"
        )
    )

    assert transport.last.url.path == f"{MD}/{URN}/metadata/guid-1/properties:query"
    assert transport.last.headers["region"] == "US"
    assert request_json(transport.last) == {
        "query": {"$in": ["objectid", [1]]},
        "fields": ["objectid", "name"],
    }
    assert result.content.pagination.total_results == 1
    assert result.content.data.collection[0].name == "Wall"


def test_object_tree_in_progress_keeps_result(make_sdk) -> None:
    """Given a 202 while the tree is extracted, when fetched, then only `result` is set."""
    sdk, transport = make_sdk(lambda request: json_response(202, {"result": "success"}))

    result = asyncio.run(
        MetadataApi(sdk).get_object_tree(URN, "guid-1", forceget=True, objectid=7, access_token="tok")
    )

    assert transport.last.url.params["forceget"] == "true"
    assert transport.last.url.params["objectid"] == "7"
    assert result.status_code == 202
    assert result.content.result == "success"
    assert result.content.data is None


def test_get_thumbnail_returns_bytes(make_sdk) -> None:
    sdk, transport = make_sdk(
        lambda request: httpx.Response(200, content=b"\x89PNG\r\n", headers={"content-type": "image/png"})
    )

    result = asyncio.run(ThumbnailsApi(sdk).get_thumbnail(URN, width=400, access_token="tok"))

    assert result.content == b"\x89PNG\r\n"
    assert transport.last.headers["Accept"] == "application/octet-stream"
    assert transport.last.url.params["width"] == "400"
    assert "height" not in transport.last.url.params


def test_facade_start_job_and_error(make_sdk) -> None:
    """Given a facade, when a job starts and a manifest is missing, then content or the
    service exception is returned."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/job"):
            return json_response(201, {"result": "success", "urn": URN})
        return json_response(404, {"diagnostic": "not found"})

    sdk, transport = make_sdk(handler)
    client = ModelDerivativeClient(sdk, StaticAuthenticationProvider("provided"))

    job = asyncio.run(client.start_job(_job_payload(), region=Region.EMEA))
    assert job.result == "success"
    assert transport.last.headers["Authorization"] == "Bearer provided"
    assert "x-ads-force" not in transport.last.headers

    with pytest.raises(ModelDerivativeApiException) as excinfo:
        asyncio.run(client.get_manifest(URN))
    assert excinfo.value.status_code == 404


def test_facade_falls_back_to_configured_region() -> None:
    """Given settings with a default region, when a facade call omits it, then the
    configured region is sent."""
    transport = RecordingTransport(lambda request: json_response(200, {"result": "success"}))
    sdk = SdkManager(
        ApsSettings(base_address=BASE, region="EMEA"), client=httpx.AsyncClient(transport=transport)
    )
    client = ModelDerivativeClient(sdk)

    asyncio.run(client.delete_manifest(URN, access_token="tok"))
    assert transport.last.headers["region"] == "EMEA"

    asyncio.run(client.delete_manifest(URN, Region.AUS, access_token="tok"))
    assert transport.last.headers["region"] == "AUS"
