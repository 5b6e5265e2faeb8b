"""Shared configuration and HTTP client for the APS service packages."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from types import TracebackType
from typing import Any, TextIO

import httpx
from loguru import logger
from omegaconf import OmegaConf
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_ADDRESS = "https://developer.api.autodesk.com"
DEFAULT_CONFIG_PATH = "conf/aps.yml"
CONFIG_PATH_ENV = "APS_CONFIG_PATH"


# Keys accepted in the YAML file (case-insensitive) and the settings field each sets.
_SETTINGS_KEYS = {
    "APS_CLIENT_ID": "client_id",
    "APS_CLIENT_SECRET": "client_secret",
    "APS_BASE_ADDRESS": "base_address",
    "APS_TIMEOUT": "timeout",
    "APS_REGION": "region",
    "APS_LOG_LEVEL": "log_level",
}


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _locate_config(location: Path | str, *, source: str) -> Path:
    """Find ``location`` as given, or relative to the working directory and the checkout."""
    raw = Path(location).expanduser()
    roots = (Path(),) if raw.is_absolute() else (Path.cwd(), _repo_root())
    candidates = [root / raw for root in roots]
    found = list(dict.fromkeys(path.resolve() for path in candidates if path.exists()))
    if not found:
        checked = "\n".join(str(path) for path in candidates)
        raise FileNotFoundError(
            f"APS config file not found for {source}: {raw}\nChecked:\n{checked}"
        )
    if len(found) > 1:
        joined = ", ".join(str(path) for path in found)
        raise RuntimeError(
            f"Multiple APS config files found for {source}: {raw}. Candidates: {joined}"
        )
    return found[0]


def _read_settings(location: Path) -> dict[str, Any]:
    config = OmegaConf.to_container(OmegaConf.load(location), resolve=True)
    if not isinstance(config, dict):
        raise ValueError("APS config file must contain a mapping of settings.")
    values: dict[str, Any] = {}
    for key, value in config.items():
        field = _SETTINGS_KEYS.get(str(key).upper())
        if field is None:
            logger.debug(f"Ignoring unknown APS config key {key}")
        elif value is not None and value != "":
            values[field] = value
    return values


def configure_logging(level: str = "INFO", sink: TextIO | None = None) -> None:
    """Replace loguru's default sink with one filtered at ``level``."""
    logger.remove()
    logger.add(sink or sys.stderr, level=level.upper())


class ApsSettings(BaseModel):
    """Validated settings shared by every service client.

    Read from ``conf/aps.yml`` (or ``APS_CONFIG_PATH``) by :meth:`from_file`.
    """

    # YAML reads bare ids such as 12345 as numbers.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    client_id: str | None = Field(
        default=None,
        description="Client ID of the calling application, as registered with APS",
    )
    client_secret: str | None = Field(
        default=None,
        description="Client secret of the calling application (private clients only)",
    )
    base_address: str = Field(
        default=DEFAULT_BASE_ADDRESS,
        description="Root URL of the APS REST APIs",
        examples=[DEFAULT_BASE_ADDRESS],
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    region: str | None = Field(default=None, description="Default data region, e.g. US or EMEA")
    log_level: str | None = Field(default=None, description="loguru level applied on load")

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> ApsSettings:
        """Create settings from a YAML file located under ``conf/`` by default.

        Every value present in the file goes through field validation, so an
        out-of-range entry such as ``APS_TIMEOUT: 0`` raises ``ValidationError``.
        """
        env_path = os.environ.get(CONFIG_PATH_ENV)
        if env_path:
            location = _locate_config(env_path, source=CONFIG_PATH_ENV)
        elif path is not None:
            location = _locate_config(path, source="path")
        else:
            location = _locate_config(DEFAULT_CONFIG_PATH, source="default")
        logger.debug(f"Loading APS settings from {location}")
        return cls.model_validate(_read_settings(location))


class SdkManager:
    """Own the settings and the ``httpx.AsyncClient`` used by every API object.

    A client passed in by the caller is shared but never closed here.
    """

    def __init__(
        self,
        settings: ApsSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or ApsSettings()
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=self.settings.timeout)
        if self.settings.log_level:
            configure_logging(self.settings.log_level)

    @classmethod
    def from_file(
        cls, path: Path | str | None = None, client: httpx.AsyncClient | None = None
    ) -> SdkManager:
        return cls(ApsSettings.from_file(path), client=client)

    @property
    def base_address(self) -> str:
        return self.settings.base_address.rstrip("/")

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> SdkManager:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
