"""Data Management facade: hubs, projects, folders, items, versions and commands."""

from __future__ import annotations

from collections.abc import Sequence

import httpx

from ..auth_provider import AuthenticationProvider
from ..facade import ServiceClient
from ..sdk_manager import SdkManager
from .api import CommandsApi, FoldersApi, HubsApi, ItemsApi, ProjectsApi, VersionsApi
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


class DataManagementClient(ServiceClient):
    def __init__(
        self,
        sdk_manager: SdkManager | None = None,
        authentication_provider: AuthenticationProvider | None = None,
    ) -> None:
        super().__init__(sdk_manager, authentication_provider)
        self.hubs_api = HubsApi(self.sdk_manager)
        self.projects_api = ProjectsApi(self.sdk_manager)
        self.folders_api = FoldersApi(self.sdk_manager)
        self.items_api = ItemsApi(self.sdk_manager)
        self.versions_api = VersionsApi(self.sdk_manager)
        self.commands_api = CommandsApi(self.sdk_manager)

    # Hubs

    async def get_hubs(
        self,
        filter_id: Sequence[str] | None = None,
        filter_name: Sequence[str] | None = None,
        filter_extension_type: Sequence[str] | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Hubs | None:
        return await self._call(
            self.hubs_api.get_hubs,
            filter_id,
            filter_name,
            filter_extension_type,
            x_user_id,
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
    ) -> Hub | None:
        return await self._call(
            self.hubs_api.get_hub,
            hub_id,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    # Projects

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
    ) -> Projects | None:
        return await self._call(
            self.projects_api.get_hub_projects,
            hub_id,
            filter_id,
            filter_extension_type,
            page_number,
            page_limit,
            x_user_id,
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
    ) -> Project | None:
        return await self._call(
            self.projects_api.get_project,
            hub_id,
            project_id,
            x_user_id,
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
    ) -> Hub | None:
        return await self._call(
            self.projects_api.get_project_hub,
            hub_id,
            project_id,
            x_user_id,
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
    ) -> TopFolders | None:
        return await self._call(
            self.projects_api.get_project_top_folders,
            hub_id,
            project_id,
            exclude_deleted,
            project_files_only,
            x_user_id,
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
    ) -> Download | None:
        return await self._call(
            self.projects_api.get_download,
            project_id,
            download_id,
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
    ) -> Job | None:
        return await self._call(
            self.projects_api.get_download_job,
            project_id,
            job_id,
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
    ) -> CreatedDownload | None:
        return await self._call(
            self.projects_api.create_download,
            project_id,
            download_payload,
            x_user_id,
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
    ) -> Storage | None:
        return await self._call(
            self.projects_api.create_storage,
            project_id,
            storage_payload,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    # Folders

    async def get_folder(
        self,
        project_id: str,
        folder_id: str,
        if_modified_since: str | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Folder | None:
        return await self._call(
            self.folders_api.get_folder,
            project_id,
            folder_id,
            if_modified_since,
            x_user_id,
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
    ) -> FolderContents | None:
        return await self._call(
            self.folders_api.get_folder_contents,
            project_id,
            folder_id,
            filter_type,
            filter_id,
            filter_extension_type,
            filter_last_modified_time_rollup,
            page_number,
            page_limit,
            include_hidden,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_folder_parent(
        self,
        project_id: str,
        folder_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Folder | None:
        return await self._call(
            self.folders_api.get_folder_parent,
            project_id,
            folder_id,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> FolderRefs | None:
        return await self._call(
            self.folders_api.get_folder_refs,
            project_id,
            folder_id,
            filter_type,
            filter_id,
            filter_extension_type,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_folder_relationships_links(
        self,
        project_id: str,
        folder_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> RelationshipLinks | None:
        return await self._call(
            self.folders_api.get_folder_relationships_links,
            project_id,
            folder_id,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> RelationshipRefs | None:
        return await self._call(
            self.folders_api.get_folder_relationships_refs,
            project_id,
            folder_id,
            filter_type,
            filter_id,
            filter_ref_type,
            filter_direction,
            filter_extension_type,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> Search | None:
        return await self._call(
            self.folders_api.get_folder_search,
            project_id,
            folder_id,
            filter,
            page_number,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def create_folder(
        self,
        project_id: str,
        folder_payload: FolderPayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Folder | None:
        return await self._call(
            self.folders_api.create_folder,
            project_id,
            folder_payload,
            x_user_id,
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
        return await self._call(
            self.folders_api.create_folder_relationships_ref,
            project_id,
            folder_id,
            relationship_refs_payload,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> Folder | None:
        return await self._call(
            self.folders_api.patch_folder,
            project_id,
            folder_id,
            modify_folder_payload,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    # Items

    async def get_item(
        self,
        project_id: str,
        item_id: str,
        include_path_in_project: bool | None = None,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Item | None:
        return await self._call(
            self.items_api.get_item,
            project_id,
            item_id,
            include_path_in_project,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_item_parent_folder(
        self,
        project_id: str,
        item_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Folder | None:
        return await self._call(
            self.items_api.get_item_parent_folder,
            project_id,
            item_id,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> Refs | None:
        return await self._call(
            self.items_api.get_item_refs,
            project_id,
            item_id,
            filter_type,
            filter_id,
            filter_extension_type,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_item_relationships_links(
        self,
        project_id: str,
        item_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> RelationshipLinks | None:
        return await self._call(
            self.items_api.get_item_relationships_links,
            project_id,
            item_id,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> RelationshipRefs | None:
        return await self._call(
            self.items_api.get_item_relationships_refs,
            project_id,
            item_id,
            filter_type,
            filter_id,
            filter_ref_type,
            filter_direction,
            filter_extension_type,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_item_tip(
        self,
        project_id: str,
        item_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ItemTip | None:
        return await self._call(
            self.items_api.get_item_tip,
            project_id,
            item_id,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> Versions | None:
        return await self._call(
            self.items_api.get_item_versions,
            project_id,
            item_id,
            filter_type,
            filter_id,
            filter_extension_type,
            filter_version_number,
            page_number,
            page_limit,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> CreatedItem | None:
        return await self._call(
            self.items_api.create_item,
            project_id,
            item_payload,
            copy_from,
            x_user_id,
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
        return await self._call(
            self.items_api.create_item_relationships_ref,
            project_id,
            item_id,
            relationship_refs_payload,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> Item | None:
        return await self._call(
            self.items_api.patch_item,
            project_id,
            item_id,
            modify_item_payload,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    # Versions

    async def get_version(
        self,
        project_id: str,
        version_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> ModelVersion | None:
        return await self._call(
            self.versions_api.get_version,
            project_id,
            version_id,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_version_download_formats(
        self,
        project_id: str,
        version_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> DownloadFormats | None:
        return await self._call(
            self.versions_api.get_version_download_formats,
            project_id,
            version_id,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> Downloads | None:
        return await self._call(
            self.versions_api.get_version_downloads,
            project_id,
            version_id,
            filter_format_file_type,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_version_item(
        self,
        project_id: str,
        version_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Item | None:
        return await self._call(
            self.versions_api.get_version_item,
            project_id,
            version_id,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> Refs | None:
        return await self._call(
            self.versions_api.get_version_refs,
            project_id,
            version_id,
            filter_type,
            filter_id,
            filter_extension_type,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    async def get_version_relationships_links(
        self,
        project_id: str,
        version_id: str,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> RelationshipLinks | None:
        return await self._call(
            self.versions_api.get_version_relationships_links,
            project_id,
            version_id,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> RelationshipRefs | None:
        return await self._call(
            self.versions_api.get_version_relationships_refs,
            project_id,
            version_id,
            filter_type,
            filter_id,
            filter_ref_type,
            filter_direction,
            filter_extension_type,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> CreatedVersion | None:
        return await self._call(
            self.versions_api.create_version,
            project_id,
            version_payload,
            copy_from,
            x_user_id,
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
        return await self._call(
            self.versions_api.create_version_relationships_ref,
            project_id,
            version_id,
            relationship_refs_payload,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
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
    ) -> ModelVersion | None:
        return await self._call(
            self.versions_api.patch_version,
            project_id,
            version_id,
            modify_version_payload,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )

    # Commands

    async def execute_command(
        self,
        project_id: str,
        command_payload: CommandPayload,
        x_user_id: str | None = None,
        *,
        access_token: str | None = None,
        throw_on_error: bool = True,
    ) -> Command | None:
        return await self._call(
            self.commands_api.execute_command,
            project_id,
            command_payload,
            x_user_id,
            access_token=access_token,
            throw_on_error=throw_on_error,
        )
