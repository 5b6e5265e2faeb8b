"""Sanity tests for the APS SDK package skeleton and its configuration loader."""

from __future__ import annotations

import asyncio
from pathlib import Path

import httpx
import pytest
from pydantic import ValidationError

import aps_sdk
from aps_sdk import sdk_manager
from aps_sdk.sdk_manager import CONFIG_PATH_ENV, ApsSettings, SdkManager


def test_package_exports_service_clients() -> None:
    """Given the top-level package, when importing it, then every service facade is exposed."""
    for name in (
        "AuthenticationClient",
        "DataManagementClient",
        "ModelDerivativeClient",
        "OssClient",
        "SdkManager",
    ):
        assert name in aps_sdk.__all__
        assert hasattr(aps_sdk, name)
    assert aps_sdk.__version__


def test_settings_from_file_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Given no config file, when `ApsSettings.from_file()` runs,
    then a `FileNotFoundError` lists the checked paths."""
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    missing_path = tmp_path / "conf" / "aps.yml"
    with pytest.raises(FileNotFoundError, match="Checked"):
        ApsSettings.from_file(missing_path)


def test_settings_from_file_rejects_non_mapping(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given a YAML list instead of a mapping, when loading, then a `ValueError` is raised."""
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    config_file = tmp_path / "aps.yml"
    config_file.write_text("- one\n- two\n")

    with pytest.raises(ValueError, match="mapping"):
        ApsSettings.from_file(config_file)


def test_settings_from_file_success(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a populated config file with lower-case keys, when `ApsSettings.from_file()` runs,
    then it returns normalized, validated settings."""
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    conf_dir = tmp_path / "conf"
    conf_dir.mkdir(parents=True, exist_ok=True)
    config_file = conf_dir / "aps.yml"
    config_file.write_text(
        """
aps_client_id: example-id
APS_CLIENT_SECRET: example-secret
APS_BASE_ADDRESS: https://developer-stg.api.autodesk.com/
APS_TIMEOUT: 12
""".strip()
    )

    settings = ApsSettings.from_file(config_file)

    assert settings.client_id == "example-id"
    assert settings.client_secret == "example-secret"
    assert settings.timeout == 12.0
    assert settings.region is None
    assert SdkManager(settings).base_address == "https://developer-stg.api.autodesk.com"


def test_settings_env_path_takes_precedence(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given `APS_CONFIG_PATH` set, when loading with another path, then the env file wins."""
    env_file = tmp_path / "env.yml"
    env_file.write_text("APS_CLIENT_ID: from-env\n")
    other_file = tmp_path / "other.yml"
    other_file.write_text("APS_CLIENT_ID: from-argument\n")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(env_file))

    assert ApsSettings.from_file(other_file).client_id == "from-env"


def test_settings_from_file_rejects_ambiguous_location(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given `conf/aps.yml` under both the working directory and the checkout,
    when loading the default location, then a `RuntimeError` names both."""
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    for root in (tmp_path / "cwd", tmp_path / "repo"):
        (root / "conf").mkdir(parents=True)
        (root / "conf" / "aps.yml").write_text("APS_CLIENT_ID: example-id\n")
    monkeypatch.chdir(tmp_path / "cwd")
    monkeypatch.setattr(sdk_manager, "_repo_root", lambda: tmp_path / "repo")

    with pytest.raises(RuntimeError, match="Multiple") as excinfo:
        ApsSettings.from_file()
    assert str((tmp_path / "repo").resolve()) in str(excinfo.value)


def test_settings_from_file_validates_zero_timeout(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Given `APS_TIMEOUT: 0`, when loading, then validation fails instead of using the default."""
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    config_file = tmp_path / "aps.yml"
    config_file.write_text("APS_TIMEOUT: 0\n")

    with pytest.raises(ValidationError, match="timeout"):
        ApsSettings.from_file(config_file)


def test_settings_from_file_reads_numeric_ids_and_skips_blanks(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    config_file = tmp_path / "aps.yml"
    config_file.write_text("APS_CLIENT_ID: 12345\nAPS_REGION: ''\nAPS_BASE_ADDRESS:\nOTHER: 1\n")

    settings = ApsSettings.from_file(config_file)

    assert settings.client_id == "12345"
    assert settings.region is None
    assert settings.base_address == "https://developer.api.autodesk.com"


def test_sdk_manager_leaves_injected_client_open() -> None:
    """Given a caller-owned client, when the manager context exits, then the client stays open."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(204)))

    async def scenario() -> None:
        async with SdkManager(client=client) as sdk:
            assert sdk.client is client
        assert not client.is_closed
        await client.aclose()

    asyncio.run(scenario())


def test_sdk_manager_closes_its_own_client() -> None:
    """Given a manager that built its client, when it is closed, then the client is closed."""

    async def scenario() -> httpx.AsyncClient:
        async with SdkManager() as sdk:
            return sdk.client

    client = asyncio.run(scenario())
    assert client.is_closed
