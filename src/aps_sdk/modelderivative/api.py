"""Per-endpoint wrappers for the Model Derivative service."""

from __future__ import annotations

import httpx

from ..exceptions import ModelDerivativeApiException
from ..http import ApiResponse, BaseApi
from ..marshalling import set_header, set_query_parameter
from .models import (
    DeleteManifest,
    DerivativeDownload,
    Job,
    JobPayload,
    Manifest,
    ModelViews,
    ObjectTree,
    Properties,
    Region,
    SpecificProperties,
    SpecificPropertiesPayload,
    SpecifyReferences,
    SpecifyReferencesPayload,
    SupportedFormats,
    XAdsDerivativeFormat,
)

BASE_PATH = "/modelderivative/v2/designdata"


def _region_headers(region: Region | None, accept_encoding: str | None = None) -> dict[str, str]:
    headers: dict[str, str] = {}
    set_header("Accept-Encoding", accept_encoding, headers)
    set_header("region", region, headers)
    return headers


class _ModelDerivativeApi(BaseApi):
    service_name = "MODEL DERIVATIVE"
    exception_type = ModelDerivativeApiException


class JobsApi(_ModelDerivativeApi):
    async def start_job(
        self,
        x_ads_force: bool | None = None,
        x_ads_derivative_format: XAdsDerivativeFormat | None = None,
        region: Region | None = None,
        job_payload: JobPayload | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Job]:
        """Queue a translation job for the design named in ``job_payload.input.urn``."""
        headers: dict[str, str] = {}
        set_header("x-ads-force", x_ads_force, headers)
        set_header("x-ads-derivative-format", x_ads_derivative_format, headers)
        set_header("region", region, headers)
        return await self._send_for(
            Job,
            "start_job",
            "POST",
            f"{BASE_PATH}/job",
            headers=headers,
            body=job_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def specify_references(
        self,
        urn: str,
        region: Region | None = None,
        specify_references_payload: SpecifyReferencesPayload | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[SpecifyReferences]:
        """Declare the files a composite design references before translating it."""
        return await self._send_for(
            SpecifyReferences,
            "specify_references",
            "POST",
            f"{BASE_PATH}/{{urn}}/references",
            route={"urn": urn},
            headers=_region_headers(region),
            body=specify_references_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )


class ManifestApi(_ModelDerivativeApi):
    async def get_manifest(
        self,
        urn: str,
        accept_encoding: str | None = None,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Manifest]:
        return await self._send_for(
            Manifest,
            "get_manifest",
            "GET",
            f"{BASE_PATH}/{{urn}}/manifest",
            route={"urn": urn},
            headers=_region_headers(region, accept_encoding),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def delete_manifest(
        self,
        urn: str,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[DeleteManifest]:
        """Delete the manifest and every derivative generated for ``urn``."""
        return await self._send_for(
            DeleteManifest,
            "delete_manifest",
            "DELETE",
            f"{BASE_PATH}/{{urn}}/manifest",
            route={"urn": urn},
            headers=_region_headers(region),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )


class DerivativesApi(_ModelDerivativeApi):
    async def get_derivative_url(
        self,
        derivative_urn: str,
        urn: str,
        minutes_expiration: int | None = None,
        response_content_disposition: str | None = None,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[DerivativeDownload]:
        """Return a signed URL for a derivative, with the cookies that authorize it."""
        query: dict[str, str] = {}
        set_query_parameter("minutes-expiration", minutes_expiration, query)
        set_query_parameter("response-content-disposition", response_content_disposition, query)
        result = await self._send_for(
            DerivativeDownload,
            "get_derivative_url",
            "GET",
            f"{BASE_PATH}/{{urn}}/manifest/{{derivative_urn}}/signedcookies",
            route={"urn": urn, "derivative_urn": derivative_urn},
            query=query,
            headers=_region_headers(region),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )
        if result.content is not None:
            result.content.signed_cookies = result.headers.get_list("set-cookie")
        return result

    async def head_cdn_redirection(
        self,
        urn: str,
        derivative_urn: str,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> httpx.Response:
        """Check that a derivative exists and report its size and type in the headers."""
        return await self._send(
            "head_cdn_redirection",
            "HEAD",
            f"{BASE_PATH}/{{urn}}/manifest/{{derivative_urn}}",
            route={"urn": urn, "derivative_urn": derivative_urn},
            headers=_region_headers(region),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )


class MetadataApi(_ModelDerivativeApi):
    async def get_model_views(
        self,
        urn: str,
        accept_encoding: str | None = None,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[ModelViews]:
        return await self._send_for(
            ModelViews,
            "get_model_views",
            "GET",
            f"{BASE_PATH}/{{urn}}/metadata",
            route={"urn": urn},
            headers=_region_headers(region, accept_encoding),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_object_tree(
        self,
        urn: str,
        model_guid: str,
        accept_encoding: str | None = None,
        region: Region | None = None,
        forceget: bool | None = None,
        objectid: int | None = None,
        level: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[ObjectTree]:
        query: dict[str, str] = {}
        set_query_parameter("forceget", forceget, query)
        set_query_parameter("objectid", objectid, query)
        set_query_parameter("level", level, query)
        return await self._send_for(
            ObjectTree,
            "get_object_tree",
            "GET",
            f"{BASE_PATH}/{{urn}}/metadata/{{model_guid}}",
            route={"urn": urn, "model_guid": model_guid},
            query=query,
            headers=_region_headers(region, accept_encoding),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_all_properties(
        self,
        urn: str,
        model_guid: str,
        accept_encoding: str | None = None,
        region: Region | None = None,
        objectid: int | None = None,
        forceget: bool | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Properties]:
        query: dict[str, str] = {}
        set_query_parameter("objectid", objectid, query)
        set_query_parameter("forceget", forceget, query)
        return await self._send_for(
            Properties,
            "get_all_properties",
            "GET",
            f"{BASE_PATH}/{{urn}}/metadata/{{model_guid}}/properties",
            route={"urn": urn, "model_guid": model_guid},
            query=query,
            headers=_region_headers(region, accept_encoding),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def fetch_specific_properties(
        self,
        urn: str,
        model_guid: str,
        specific_properties_payload: SpecificPropertiesPayload,
        accept_encoding: str | None = None,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[SpecificProperties]:
        return await self._send_for(
            SpecificProperties,
            "fetch_specific_properties",
            "POST",
            f"{BASE_PATH}/{{urn}}/metadata/{{model_guid}}/properties:query",
            route={"urn": urn, "model_guid": model_guid},
            headers=_region_headers(region, accept_encoding),
            body=specific_properties_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )


class InformationalApi(_ModelDerivativeApi):
    async def get_formats(
        self,
        if_modified_since: str | None = None,
        accept_encoding: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[SupportedFormats]:
        headers: dict[str, str] = {}
        set_header("If-Modified-Since", if_modified_since, headers)
        set_header("Accept-Encoding", accept_encoding, headers)
        return await self._send_for(
            SupportedFormats,
            "get_formats",
            "GET",
            f"{BASE_PATH}/formats",
            headers=headers,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )


class ThumbnailsApi(_ModelDerivativeApi):
    async def get_thumbnail(
        self,
        urn: str,
        width: int | None = None,
        height: int | None = None,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[bytes]:
        """Fetch the PNG thumbnail of a translated design."""
        query: dict[str, str] = {}
        set_query_parameter("width", width, query)
        set_query_parameter("height", height, query)
        return await self._send_for(
            bytes,
            "get_thumbnail",
            "GET",
            f"{BASE_PATH}/{{urn}}/thumbnail",
            route={"urn": urn},
            query=query,
            headers=_region_headers(region),
            accept="application/octet-stream",
            access_token=access_token,
            throw_on_error=throw_on_error,
        )
