from __future__ import annotations

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.domain.entities.errors import CommandExecutionError
from src.main.app import create_app
from src.main.container import get_container


class _FailingRunner:
    async def run(self, args, *, cwd=None, check=True):
        raise CommandExecutionError(
            list(args), 1, "Cannot connect to the Docker daemon"
        )


@pytest.fixture()
def app_and_container(tmp_path, monkeypatch):
    monkeypatch.setenv("DEVILBOX_PATH", str(tmp_path))
    (tmp_path / ".env").write_text("PHP_SERVER=8.1\n", encoding="utf-8")
    (tmp_path / "data" / "www" / "blog").mkdir(parents=True)
    app = create_app()
    return app, get_container()


@pytest.fixture()
def client(app_and_container, fake_command_runner):
    app, container = app_and_container
    container.command_runner.override(providers.Object(fake_command_runner))
    with TestClient(app) as test_client:
        yield test_client


def test_list_tools(client):
    response = client.get("/tools")

    assert response.status_code == 200
    assert "devilbox_status" in [tool["name"] for tool in response.json()]


def test_call_status(client, fake_command_runner):
    response = client.post("/tools/devilbox_status", json={"arguments": {}})

    assert response.status_code == 200
    assert response.json() == {
        "content": [{"type": "text", "text": "ok\n"}],
        "is_error": False,
    }
    assert fake_command_runner.calls[0][0] == ("docker-compose", "ps")


def test_call_without_body(client):
    response = client.post("/tools/devilbox_vhosts")

    assert response.status_code == 200
    assert "- blog (no vhost config)" in response.json()["content"][0]["text"]


def test_config_roundtrip(client, tmp_path):
    set_response = client.post(
        "/tools/devilbox_config",
        json={"arguments": {"action": "set", "key": "PHP_SERVER", "value": "8.2"}},
    )
    get_response = client.post(
        "/tools/devilbox_config",
        json={"arguments": {"action": "get", "key": "PHP_SERVER"}},
    )

    assert set_response.json()["content"][0]["text"] == "Updated PHP_SERVER=8.2"
    assert get_response.json()["content"][0]["text"] == "PHP_SERVER=8.2"
    assert "PHP_SERVER=8.2" in (tmp_path / ".env").read_text(encoding="utf-8")


def test_unknown_tool_is_404(client):
    response = client.post("/tools/devilbox_destroy", json={"arguments": {}})

    assert response.status_code == 404


def test_bad_arguments_are_422(client):
    response = client.post(
        "/tools/devilbox_logs", json={"arguments": {"service": "php; reboot"}}
    )

    assert response.status_code == 422
    assert response.json()["detail"]["errors"]


def test_command_failure_is_an_error_result(app_and_container):
    app, container = app_and_container
    container.command_runner.override(providers.Object(_FailingRunner()))

    with TestClient(app) as client:
        response = client.post("/tools/devilbox_status", json={"arguments": {}})

    assert response.status_code == 200
    body = response.json()
    assert body["is_error"] is True
    assert "Cannot connect to the Docker daemon" in body["content"][0]["text"]
