"""Per-endpoint wrappers for the Data Management service."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx

from ..exceptions import DataManagementApiException
from ..http import JSON_API_CONTENT_TYPE, ApiResponse, BaseApi
from ..marshalling import set_header, set_query_parameter
from .models import (
    Command,
    CommandPayload,
    CreatedDownload,
    CreatedItem,
    CreatedVersion,
    Download,
    DownloadFormats,
    DownloadPayload,
    Downloads,
    Folder,
    FolderContents,
    FolderPayload,
    FolderRefs,
    Hub,
    Hubs,
    Item,
    ItemPayload,
    ItemTip,
    Job,
    ModelVersion,
    ModifyFolderPayload,
    ModifyItemPayload,
    ModifyVersionPayload,
    Project,
    Projects,
    Refs,
    RelationshipLinks,
    RelationshipRefs,
    RelationshipRefsPayload,
    Search,
    Storage,
    StoragePayload,
    TopFolders,
    VersionPayload,
    Versions,
)

PROJECT_PATH = "/project/v1"
DATA_PATH = "/data/v1/projects/{project_id}"


def _user_headers(x_user_id: str | None) -> dict[str, str]:
    headers: dict[str, str] = {}
    set_header("x-user-id", x_user_id, headers)
    return headers


def _json_api_headers(x_user_id: str | None) -> dict[str, str]:
    headers = _user_headers(x_user_id)
    headers["Content-Type"] = JSON_API_CONTENT_TYPE
    return headers


def _entity_filters(
    filter_type: Sequence[str] | None = None,
    filter_id: Sequence[str] | None = None,
    filter_extension_type: Sequence[str] | None = None,
) -> dict[str, str]:
    query: dict[str, str] = {}
    set_query_parameter("filter[type]", filter_type, query)
    set_query_parameter("filter[id]", filter_id, query)
    set_query_parameter("filter[extension.type]", filter_extension_type, query)
    return query


class _DataManagementApi(BaseApi):
    service_name = "DATA MANAGEMENT"
    exception_type = DataManagementApiException


class HubsApi(_DataManagementApi):
    """Hubs (BIM 360 / ACC accounts, Fusion teams, personal hubs)."""

    async def get_hubs(
        self,
        filter_id: Sequence[str] | None = None,
        filter_name: Sequence[str] | None = None,
        filter_extension_type: Sequence[str] | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Hubs]:
        query = _entity_filters(filter_id=filter_id, filter_extension_type=filter_extension_type)
        set_query_parameter("filter[name]", filter_name, query)
        return await self._send_for(
            Hubs,
            "get_hubs",
            "GET",
            f"{PROJECT_PATH}/hubs",
            query=query,
            headers=_user_headers(x_user_id),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_hub(
        self,
        hub_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Hub]:
        return await self._send_for(
            Hub,
            "get_hub",
            "GET",
            f"{PROJECT_PATH}/hubs/{{hub_id}}",
            route={"hub_id": hub_id},
            headers=_user_headers(x_user_id),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )


class ProjectsApi(_DataManagementApi):
    """Projects of a hub, their top folders, and project-level downloads and storage."""

    async def get_hub_projects(
        self,
        hub_id: str,
        filter_id: Sequence[str] | None = None,
        filter_extension_type: Sequence[str] | None = None,
        page_number: int | None = None,
        page_limit: int | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Projects]:
        query = _entity_filters(filter_id=filter_id, filter_extension_type=filter_extension_type)
        set_query_parameter("page[number]", page_number, query)
        set_query_parameter("page[limit]", page_limit, query)
        return await self._send_for(
            Projects,
            "get_hub_projects",
            "GET",
            f"{PROJECT_PATH}/hubs/{{hub_id}}/projects",
            route={"hub_id": hub_id},
            query=query,
            headers=_user_headers(x_user_id),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_project(
        self,
        hub_id: str,
        project_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Project]:
        return await self._send_for(
            Project,
            "get_project",
            "GET",
            f"{PROJECT_PATH}/hubs/{{hub_id}}/projects/{{project_id}}",
            route={"hub_id": hub_id, "project_id": project_id},
            headers=_user_headers(x_user_id),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_project_hub(
        self,
        hub_id: str,
        project_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Hub]:
        return await self._send_for(
            Hub,
            "get_project_hub",
            "GET",
            f"{PROJECT_PATH}/hubs/{{hub_id}}/projects/{{project_id}}/hub",
            route={"hub_id": hub_id, "project_id": project_id},
            headers=_user_headers(x_user_id),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_project_top_folders(
        self,
        hub_id: str,
        project_id: str,
        exclude_deleted: bool | None = None,
        project_files_only: bool | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[TopFolders]:
        query: dict[str, str] = {}
        set_query_parameter("excludeDeleted", exclude_deleted, query)
        set_query_parameter("projectFilesOnly", project_files_only, query)
        return await self._send_for(
            TopFolders,
            "get_project_top_folders",
            "GET",
            f"{PROJECT_PATH}/hubs/{{hub_id}}/projects/{{project_id}}/topFolders",
            route={"hub_id": hub_id, "project_id": project_id},
            query=query,
            headers=_user_headers(x_user_id),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_download(
        self,
        project_id: str,
        download_id: str,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Download]:
        return await self._send_for(
            Download,
            "get_download",
            "GET",
            f"{DATA_PATH}/downloads/{{download_id}}",
            route={"project_id": project_id, "download_id": download_id},
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_download_job(
        self,
        project_id: str,
        job_id: str,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Job]:
        return await self._send_for(
            Job,
            "get_download_job",
            "GET",
            f"{DATA_PATH}/jobs/{{job_id}}",
            route={"project_id": project_id, "job_id": job_id},
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def create_download(
        self,
        project_id: str,
        download_payload: DownloadPayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[CreatedDownload]:
        return await self._send_for(
            CreatedDownload,
            "create_download",
            "POST",
            f"{DATA_PATH}/downloads",
            route={"project_id": project_id},
            headers=_json_api_headers(x_user_id),
            body=download_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def create_storage(
        self,
        project_id: str,
        storage_payload: StoragePayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Storage]:
        return await self._send_for(
            Storage,
            "create_storage",
            "POST",
            f"{DATA_PATH}/storage",
            route={"project_id": project_id},
            headers=_json_api_headers(x_user_id),
            body=storage_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )


class _EntityApi(_DataManagementApi):
    """Operations shared by folders, items and versions, keyed by ``collection``."""

    collection = ""
    id_name = ""

    def _path(self, suffix: str = "") -> str:
        return f"{DATA_PATH}/{self.collection}/{{{self.id_name}}}{suffix}"

    def _route(self, project_id: str, entity_id: str) -> dict[str, Any]:
        return {"project_id": project_id, self.id_name: entity_id}

    async def _get(
        self,
        response_type: Any,
        operation: str,
        project_id: str,
        entity_id: str,
        suffix: str = "",
        query: dict[str, str] | None = None,
        x_user_id: str | None = None,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Any]:
        return await self._send_for(
            response_type,
            operation,
            "GET",
            self._path(suffix),
            route=self._route(project_id, entity_id),
            query=query,
            headers=_user_headers(x_user_id),
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def _relationships_refs(
        self,
        operation: str,
        project_id: str,
        entity_id: str,
        filter_type: Sequence[str] | None,
        filter_id: Sequence[str] | None,
        filter_ref_type: Sequence[str] | None,
        filter_direction: str | None,
        filter_extension_type: Sequence[str] | None,
        x_user_id: str | None,
        access_token: str | None,
        throw_on_error: bool,
    ) -> ApiResponse[RelationshipRefs]:
        query = _entity_filters(filter_type, filter_id, filter_extension_type)
        set_query_parameter("filter[refType]", filter_ref_type, query)
        set_query_parameter("filter[direction]", filter_direction, query)
        return await self._get(
            RelationshipRefs,
            operation,
            project_id,
            entity_id,
            "/relationships/refs",
            query,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def _create_relationships_ref(
        self,
        operation: str,
        project_id: str,
        entity_id: str,
        relationship_refs_payload: RelationshipRefsPayload,
        x_user_id: str | None,
        access_token: str | None,
        throw_on_error: bool,
    ) -> httpx.Response:
        return await self._send(
            operation,
            "POST",
            self._path("/relationships/refs"),
            route=self._route(project_id, entity_id),
            headers=_json_api_headers(x_user_id),
            body=relationship_refs_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def _patch(
        self,
        response_type: Any,
        operation: str,
        project_id: str,
        entity_id: str,
        payload: Any,
        x_user_id: str | None,
        access_token: str | None,
        throw_on_error: bool,
    ) -> ApiResponse[Any]:
        return await self._send_for(
            response_type,
            operation,
            "PATCH",
            self._path(),
            route=self._route(project_id, entity_id),
            headers=_json_api_headers(x_user_id),
            body=payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )


class FoldersApi(_EntityApi):
    collection = "folders"
    id_name = "folder_id"

    async def get_folder(
        self,
        project_id: str,
        folder_id: str,
        if_modified_since: str | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Folder]:
        headers = _user_headers(x_user_id)
        set_header("If-Modified-Since", if_modified_since, headers)
        return await self._send_for(
            Folder,
            "get_folder",
            "GET",
            self._path(),
            route=self._route(project_id, folder_id),
            headers=headers,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_folder_contents(
        self,
        project_id: str,
        folder_id: str,
        filter_type: Sequence[str] | None = None,
        filter_id: Sequence[str] | None = None,
        filter_extension_type: Sequence[str] | None = None,
        filter_last_modified_time_rollup: Sequence[str] | None = None,
        page_number: int | None = None,
        page_limit: int | None = None,
        include_hidden: bool | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[FolderContents]:
        query = _entity_filters(filter_type, filter_id, filter_extension_type)
        set_query_parameter(
            "filter[lastModifiedTimeRollup]", filter_last_modified_time_rollup, query
        )
        set_query_parameter("page[number]", page_number, query)
        set_query_parameter("page[limit]", page_limit, query)
        set_query_parameter("includeHidden", include_hidden, query)
        return await self._get(
            FolderContents,
            "get_folder_contents",
            project_id,
            folder_id,
            "/contents",
            query,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_folder_parent(
        self,
        project_id: str,
        folder_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Folder]:
        return await self._get(
            Folder,
            "get_folder_parent",
            project_id,
            folder_id,
            "/parent",
            None,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_folder_refs(
        self,
        project_id: str,
        folder_id: str,
        filter_type: Sequence[str] | None = None,
        filter_id: Sequence[str] | None = None,
        filter_extension_type: Sequence[str] | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[FolderRefs]:
        return await self._get(
            FolderRefs,
            "get_folder_refs",
            project_id,
            folder_id,
            "/refs",
            _entity_filters(filter_type, filter_id, filter_extension_type),
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_folder_relationships_links(
        self,
        project_id: str,
        folder_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[RelationshipLinks]:
        return await self._get(
            RelationshipLinks,
            "get_folder_relationships_links",
            project_id,
            folder_id,
            "/relationships/links",
            None,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_folder_relationships_refs(
        self,
        project_id: str,
        folder_id: str,
        filter_type: Sequence[str] | None = None,
        filter_id: Sequence[str] | None = None,
        filter_ref_type: Sequence[str] | None = None,
        filter_direction: str | None = None,
        filter_extension_type: Sequence[str] | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[RelationshipRefs]:
        return await self._relationships_refs(
            "get_folder_relationships_refs",
            project_id,
            folder_id,
            filter_type,
            filter_id,
            filter_ref_type,
            filter_direction,
            filter_extension_type,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_folder_search(
        self,
        project_id: str,
        folder_id: str,
        filter: dict[str, str] | None = None,
        page_number: int | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Search]:
        """Search versions below a folder.

        ``filter`` maps a field path to its value, e.g. ``{"fileType": "rvt"}``
        becomes ``filter[fileType]=rvt``.
        """
        query: dict[str, str] = {}
        for field, value in (filter or {}).items():
            set_query_parameter(f"filter[{field}]", value, query)
        set_query_parameter("page[number]", page_number, query)
        return await self._get(
            Search,
            "get_folder_search",
            project_id,
            folder_id,
            "/search",
            query,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def create_folder(
        self,
        project_id: str,
        folder_payload: FolderPayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Folder]:
        return await self._send_for(
            Folder,
            "create_folder",
            "POST",
            f"{DATA_PATH}/folders",
            route={"project_id": project_id},
            headers=_json_api_headers(x_user_id),
            body=folder_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def create_folder_relationships_ref(
        self,
        project_id: str,
        folder_id: str,
        relationship_refs_payload: RelationshipRefsPayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> httpx.Response:
        return await self._create_relationships_ref(
            "create_folder_relationships_ref",
            project_id,
            folder_id,
            relationship_refs_payload,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def patch_folder(
        self,
        project_id: str,
        folder_id: str,
        modify_folder_payload: ModifyFolderPayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Folder]:
        return await self._patch(
            Folder,
            "patch_folder",
            project_id,
            folder_id,
            modify_folder_payload,
            x_user_id,
            access_token,
            throw_on_error,
        )


class ItemsApi(_EntityApi):
    collection = "items"
    id_name = "item_id"

    async def get_item(
        self,
        project_id: str,
        item_id: str,
        include_path_in_project: bool | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Item]:
        query: dict[str, str] = {}
        set_query_parameter("includePathInProject", include_path_in_project, query)
        return await self._get(
            Item, "get_item", project_id, item_id, "", query, x_user_id, access_token, throw_on_error
        )

    async def get_item_parent_folder(
        self,
        project_id: str,
        item_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Folder]:
        return await self._get(
            Folder,
            "get_item_parent_folder",
            project_id,
            item_id,
            "/parent",
            None,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_item_refs(
        self,
        project_id: str,
        item_id: str,
        filter_type: Sequence[str] | None = None,
        filter_id: Sequence[str] | None = None,
        filter_extension_type: Sequence[str] | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Refs]:
        return await self._get(
            Refs,
            "get_item_refs",
            project_id,
            item_id,
            "/refs",
            _entity_filters(filter_type, filter_id, filter_extension_type),
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_item_relationships_links(
        self,
        project_id: str,
        item_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[RelationshipLinks]:
        return await self._get(
            RelationshipLinks,
            "get_item_relationships_links",
            project_id,
            item_id,
            "/relationships/links",
            None,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_item_relationships_refs(
        self,
        project_id: str,
        item_id: str,
        filter_type: Sequence[str] | None = None,
        filter_id: Sequence[str] | None = None,
        filter_ref_type: Sequence[str] | None = None,
        filter_direction: str | None = None,
        filter_extension_type: Sequence[str] | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[RelationshipRefs]:
        return await self._relationships_refs(
            "get_item_relationships_refs",
            project_id,
            item_id,
            filter_type,
            filter_id,
            filter_ref_type,
            filter_direction,
            filter_extension_type,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_item_tip(
        self,
        project_id: str,
        item_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[ItemTip]:
        return await self._get(
            ItemTip,
            "get_item_tip",
            project_id,
            item_id,
            "/tip",
            None,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_item_versions(
        self,
        project_id: str,
        item_id: str,
        filter_type: Sequence[str] | None = None,
        filter_id: Sequence[str] | None = None,
        filter_extension_type: Sequence[str] | None = None,
        filter_version_number: Sequence[int] | None = None,
        page_number: int | None = None,
        page_limit: int | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Versions]:
        query = _entity_filters(filter_type, filter_id, filter_extension_type)
        set_query_parameter("filter[versionNumber]", filter_version_number, query)
        set_query_parameter("page[number]", page_number, query)
        set_query_parameter("page[limit]", page_limit, query)
        return await self._get(
            Versions,
            "get_item_versions",
            project_id,
            item_id,
            "/versions",
            query,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def create_item(
        self,
        project_id: str,
        item_payload: ItemPayload,
        copy_from: str | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[CreatedItem]:
        query: dict[str, str] = {}
        set_query_parameter("copyFrom", copy_from, query)
        return await self._send_for(
            CreatedItem,
            "create_item",
            "POST",
            f"{DATA_PATH}/items",
            route={"project_id": project_id},
            query=query,
            headers=_json_api_headers(x_user_id),
            body=item_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def create_item_relationships_ref(
        self,
        project_id: str,
        item_id: str,
        relationship_refs_payload: RelationshipRefsPayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> httpx.Response:
        return await self._create_relationships_ref(
            "create_item_relationships_ref",
            project_id,
            item_id,
            relationship_refs_payload,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def patch_item(
        self,
        project_id: str,
        item_id: str,
        modify_item_payload: ModifyItemPayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Item]:
        return await self._patch(
            Item,
            "patch_item",
            project_id,
            item_id,
            modify_item_payload,
            x_user_id,
            access_token,
            throw_on_error,
        )


class VersionsApi(_EntityApi):
    collection = "versions"
    id_name = "version_id"

    async def get_version(
        self,
        project_id: str,
        version_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[ModelVersion]:
        return await self._get(
            ModelVersion,
            "get_version",
            project_id,
            version_id,
            "",
            None,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_version_download_formats(
        self,
        project_id: str,
        version_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[DownloadFormats]:
        return await self._get(
            DownloadFormats,
            "get_version_download_formats",
            project_id,
            version_id,
            "/downloadFormats",
            None,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_version_downloads(
        self,
        project_id: str,
        version_id: str,
        filter_format_file_type: Sequence[str] | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Downloads]:
        query: dict[str, str] = {}
        set_query_parameter("filter[format.fileType]", filter_format_file_type, query)
        return await self._get(
            Downloads,
            "get_version_downloads",
            project_id,
            version_id,
            "/downloads",
            query,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_version_item(
        self,
        project_id: str,
        version_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Item]:
        return await self._get(
            Item,
            "get_version_item",
            project_id,
            version_id,
            "/item",
            None,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_version_refs(
        self,
        project_id: str,
        version_id: str,
        filter_type: Sequence[str] | None = None,
        filter_id: Sequence[str] | None = None,
        filter_extension_type: Sequence[str] | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Refs]:
        return await self._get(
            Refs,
            "get_version_refs",
            project_id,
            version_id,
            "/refs",
            _entity_filters(filter_type, filter_id, filter_extension_type),
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_version_relationships_links(
        self,
        project_id: str,
        version_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[RelationshipLinks]:
        return await self._get(
            RelationshipLinks,
            "get_version_relationships_links",
            project_id,
            version_id,
            "/relationships/links",
            None,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def get_version_relationships_refs(
        self,
        project_id: str,
        version_id: str,
        filter_type: Sequence[str] | None = None,
        filter_id: Sequence[str] | None = None,
        filter_ref_type: Sequence[str] | None = None,
        filter_direction: str | None = None,
        filter_extension_type: Sequence[str] | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[RelationshipRefs]:
        return await self._relationships_refs(
            "get_version_relationships_refs",
            project_id,
            version_id,
            filter_type,
            filter_id,
            filter_ref_type,
            filter_direction,
            filter_extension_type,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def create_version(
        self,
        project_id: str,
        version_payload: VersionPayload,
        copy_from: str | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[CreatedVersion]:
        query: dict[str, str] = {}
        set_query_parameter("copyFrom", copy_from, query)
        return await self._send_for(
            CreatedVersion,
            "create_version",
            "POST",
            f"{DATA_PATH}/versions",
            route={"project_id": project_id},
            query=query,
            headers=_json_api_headers(x_user_id),
            body=version_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def create_version_relationships_ref(
        self,
        project_id: str,
        version_id: str,
        relationship_refs_payload: RelationshipRefsPayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> httpx.Response:
        return await self._create_relationships_ref(
            "create_version_relationships_ref",
            project_id,
            version_id,
            relationship_refs_payload,
            x_user_id,
            access_token,
            throw_on_error,
        )

    async def patch_version(
        self,
        project_id: str,
        version_id: str,
        modify_version_payload: ModifyVersionPayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[ModelVersion]:
        return await self._patch(
            ModelVersion,
            "patch_version",
            project_id,
            version_id,
            modify_version_payload,
            x_user_id,
            access_token,
            throw_on_error,
        )


class CommandsApi(_DataManagementApi):
    async def execute_command(
        self,
        project_id: str,
        command_payload: CommandPayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ApiResponse[Command]:
        return await self._send_for(
            Command,
            "execute_command",
            "POST",
            f"{DATA_PATH}/commands",
            route={"project_id": project_id},
            headers=_json_api_headers(x_user_id),
            body=command_payload,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )
