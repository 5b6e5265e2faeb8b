"""Data Management service: hubs, projects, folders, items and versions."""

from .api import CommandsApi, FoldersApi, HubsApi, ItemsApi, ProjectsApi, VersionsApi
from .client import DataManagementClient
from .models import *  # noqa: F401,F403
from .models import __all__ as _models_all

__all__ = [
    "CommandsApi",
    "DataManagementClient",
    "FoldersApi",
    "HubsApi",
    "ItemsApi",
    "ProjectsApi",
    "VersionsApi",
    *_models_all,
]
