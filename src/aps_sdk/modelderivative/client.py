"""Model Derivative facade: translation jobs, manifests, derivatives and metadata."""

from __future__ import annotations

import httpx

from ..auth_provider import AuthenticationProvider
from ..facade import ServiceClient
from ..sdk_manager import SdkManager
from .api import (
    DerivativesApi,
    InformationalApi,
    JobsApi,
    ManifestApi,
    MetadataApi,
    ThumbnailsApi,
)
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


class ModelDerivativeClient(ServiceClient):
    """Facade over the Model Derivative APIs.

    Calls that leave ``region`` unset use ``ApsSettings.region`` when configured.
    """

    def __init__(
        self,
        sdk_manager: SdkManager | None = None,
        authentication_provider: AuthenticationProvider | None = None,
    ) -> None:
        super().__init__(sdk_manager, authentication_provider)
        self.jobs_api = JobsApi(self.sdk_manager)
        self.manifest_api = ManifestApi(self.sdk_manager)
        self.derivatives_api = DerivativesApi(self.sdk_manager)
        self.metadata_api = MetadataApi(self.sdk_manager)
        self.informational_api = InformationalApi(self.sdk_manager)
        self.thumbnails_api = ThumbnailsApi(self.sdk_manager)

    def _region(self, region: Region | None) -> Region | str | None:
        return region if region is not None else self.sdk_manager.settings.region

    async def start_job(
        self,
        job_payload: JobPayload,
        x_ads_force: bool | None = None,
        x_ads_derivative_format: XAdsDerivativeFormat | None = None,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Job | None:
        return await self._call(
            self.jobs_api.start_job,
            x_ads_force,
            x_ads_derivative_format,
            self._region(region),
            job_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def specify_references(
        self,
        urn: str,
        specify_references_payload: SpecifyReferencesPayload,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> SpecifyReferences | None:
        return await self._call(
            self.jobs_api.specify_references,
            urn,
            self._region(region),
            specify_references_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_manifest(
        self,
        urn: str,
        accept_encoding: str | None = None,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Manifest | None:
        return await self._call(
            self.manifest_api.get_manifest,
            urn,
            accept_encoding,
            self._region(region),
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
    ) -> DeleteManifest | None:
        return await self._call(
            self.manifest_api.delete_manifest,
            urn,
            self._region(region),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

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
    ) -> DerivativeDownload | None:
        return await self._call(
            self.derivatives_api.get_derivative_url,
            derivative_urn,
            urn,
            minutes_expiration,
            response_content_disposition,
            self._region(region),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def head_cdn_redirection(
        self,
        urn: str,
        derivative_urn: str,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> httpx.Response:
        return await self._call(
            self.derivatives_api.head_cdn_redirection,
            urn,
            derivative_urn,
            self._region(region),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_model_views(
        self,
        urn: str,
        accept_encoding: str | None = None,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ModelViews | None:
        return await self._call(
            self.metadata_api.get_model_views,
            urn,
            accept_encoding,
            self._region(region),
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
    ) -> ObjectTree | None:
        return await self._call(
            self.metadata_api.get_object_tree,
            urn,
            model_guid,
            accept_encoding,
            self._region(region),
            forceget,
            objectid,
            level,
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
    ) -> Properties | None:
        return await self._call(
            self.metadata_api.get_all_properties,
            urn,
            model_guid,
            accept_encoding,
            self._region(region),
            objectid,
            forceget,
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
    ) -> SpecificProperties | None:
        return await self._call(
            self.metadata_api.fetch_specific_properties,
            urn,
            model_guid,
            specific_properties_payload,
            accept_encoding,
            self._region(region),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_formats(
        self,
        if_modified_since: str | None = None,
        accept_encoding: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> SupportedFormats | None:
        return await self._call(
            self.informational_api.get_formats,
            if_modified_since,
            accept_encoding,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_thumbnail(
        self,
        urn: str,
        width: int | None = None,
        height: int | None = None,
        region: Region | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> bytes | None:
        return await self._call(
            self.thumbnails_api.get_thumbnail,
            urn,
            width,
            height,
            self._region(region),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )
