from __future__ import annotations

import pytest

from src.application.use_cases import CallToolUseCase, GetHealthReportUseCase
from src.domain.entities.probe import ProbeKind
from src.infrastructure.repositories import EnvFileRepository
from src.main.config import AppSettings
from src.main.container import (
    app_lifespan,
    get_container,
    init_container,
    load_devilbox_config,
)


def _settings(tmp_path, monkeypatch) -> AppSettings:
    monkeypatch.setenv("DEVILBOX_PATH", str(tmp_path))
    monkeypatch.setenv("HEALTH_PROBE_TIMEOUT", "0.5")
    return AppSettings()


def test_init_and_get_container(tmp_path, monkeypatch) -> None:
    container = init_container(_settings(tmp_path, monkeypatch))

    assert get_container() is container
    assert container.env_file_repository().path == tmp_path / ".env"
    assert set(container.probe_registry()) == set(ProbeKind)
    assert isinstance(container.get_health_report_use_case(), GetHealthReportUseCase)
    assert isinstance(container.call_tool_use_case(), CallToolUseCase)


def test_devilbox_config_overlays_process_environment(tmp_path, monkeypatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "MYSQL_SERVER=mariadb-10.6\nPGSQL_SERVER=14\n", encoding="utf-8"
    )
    monkeypatch.setenv("PGSQL_SERVER", "")

    config = load_devilbox_config(
        EnvFileRepository(str(env_file)), probe_timeout=0.5, auxiliary_host="127.0.0.1"
    )

    assert config.get("MYSQL_SERVER") == "mariadb-10.6"
    assert config.get("PGSQL_SERVER") == ""
    assert config.probe_timeout == 0.5


@pytest.mark.asyncio
async def test_app_lifespan_yields_container(tmp_path, monkeypatch) -> None:
    container = init_container(_settings(tmp_path, monkeypatch))

    async with app_lifespan() as active:
        assert active is container


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("src.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
