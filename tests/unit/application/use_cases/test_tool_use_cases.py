from __future__ import annotations

from dataclasses import dataclass
from typing import List
from unittest.mock import AsyncMock

import pytest

from src.application.use_cases.tool_use_cases import (
    CallToolUseCase,
    ListToolsUseCase,
    render_health_report,
)
from src.domain.entities.errors import (
    CommandExecutionError,
    ToolArgumentError,
    ToolNotFoundError,
)
from src.domain.entities.health import HealthReport
from src.domain.entities.probe import ProbeResult
from src.domain.entities.project import Project
from src.infrastructure.services import DockerComposeOrchestrator


@dataclass
class _StubProjects:
    projects: List[Project]

    def list_projects(self) -> List[Project]:
        return list(self.projects)


def _health_use_case(report: HealthReport) -> AsyncMock:
    use_case = AsyncMock()
    use_case.evaluate.return_value = report
    return use_case


@pytest.fixture()
def use_case(fake_command_runner, fake_env_file) -> CallToolUseCase:
    orchestrator = DockerComposeOrchestrator(
        command_runner=fake_command_runner, project_path="/opt/devilbox"
    )
    report = HealthReport.from_results({"httpd": [ProbeResult.success("httpd", 80)]})
    return CallToolUseCase(
        orchestrator=orchestrator,
        env_file_repository=fake_env_file,
        project_repository=_StubProjects(
            [Project("blog", configured=True), Project("shop", configured=False)]
        ),
        health_report_use_case=_health_use_case(report),
    )


def test_list_tools_describes_every_tool() -> None:
    tools = ListToolsUseCase().execute()
    names = [tool.name for tool in tools]

    assert names == [
        "devilbox_status",
        "devilbox_start",
        "devilbox_stop",
        "devilbox_restart",
        "devilbox_logs",
        "devilbox_exec",
        "devilbox_vhosts",
        "devilbox_config",
        "devilbox_databases",
        "devilbox_health",
    ]
    logs = tools[names.index("devilbox_logs")]
    assert "service" in logs.input_schema["properties"]
    assert logs.input_schema["required"] == ["service"]


@pytest.mark.asyncio
async def test_unknown_tool_raises(use_case) -> None:
    with pytest.raises(ToolNotFoundError):
        await use_case.execute("devilbox_destroy", {})


@pytest.mark.asyncio
async def test_invalid_arguments_raise_with_details(use_case) -> None:
    with pytest.raises(ToolArgumentError) as exc_info:
        await use_case.execute("devilbox_logs", {"lines": 5})

    assert any("service" in error for error in exc_info.value.details["errors"])


@pytest.mark.asyncio
async def test_start_passes_services_to_compose(use_case, fake_command_runner) -> None:
    response = await use_case.execute("devilbox_start", {"services": ["php", "httpd"]})

    assert response.is_error is False
    assert fake_command_runner.calls == [
        (("docker-compose", "up", "-d", "php", "httpd"), "/opt/devilbox")
    ]


@pytest.mark.asyncio
async def test_logs_uses_tail(use_case, fake_command_runner) -> None:
    await use_case.execute("devilbox_logs", {"service": "php", "lines": 20})

    args, _ = fake_command_runner.calls[0]
    assert args == ("docker-compose", "logs", "--tail=20", "php")


@pytest.mark.asyncio
async def test_exec_runs_command_through_container_shell(
    use_case, fake_command_runner
) -> None:
    await use_case.execute(
        "devilbox_exec", {"service": "php", "command": "php -v && composer -V"}
    )

    args, _ = fake_command_runner.calls[0]
    assert args == (
        "docker",
        "exec",
        "devilbox-php-1",
        "sh",
        "-c",
        "php -v && composer -V",
    )


@pytest.mark.asyncio
async def test_vhosts_lists_projects(use_case) -> None:
    response = await use_case.execute("devilbox_vhosts", {})

    text = response.content[0].text
    assert text.startswith("Found 2 projects:")
    assert "- blog (configured)" in text
    assert "- shop (no vhost config)" in text


@pytest.mark.asyncio
async def test_config_get_and_set(use_case, fake_env_file) -> None:
    single = await use_case.execute(
        "devilbox_config", {"action": "get", "key": "MYSQL_SERVER"}
    )
    missing = await use_case.execute(
        "devilbox_config", {"action": "get", "key": "PHP_SERVER"}
    )
    updated = await use_case.execute(
        "devilbox_config", {"action": "set", "key": "PHP_SERVER", "value": "8.2"}
    )

    assert single.content[0].text == "MYSQL_SERVER=mariadb-10.6"
    assert missing.content[0].text == 'Key "PHP_SERVER" not found'
    assert updated.content[0].text == "Updated PHP_SERVER=8.2"
    assert fake_env_file.values["PHP_SERVER"] == "8.2"


@pytest.mark.asyncio
async def test_config_set_without_value_is_an_error_result(use_case) -> None:
    response = await use_case.execute(
        "devilbox_config", {"action": "set", "key": "PHP_SERVER"}
    )

    assert response.is_error is True
    assert response.content[0].text.startswith("Error: ")


@pytest.mark.asyncio
async def test_databases_mysql_uses_root_password(
    use_case, fake_command_runner
) -> None:
    await use_case.execute("devilbox_databases", {"type": "mysql"})

    args, _ = fake_command_runner.calls[0]
    assert args[:3] == ("docker", "exec", "devilbox-php-1")
    assert "-psecret" in args
    assert args[-1] == "SHOW DATABASES;"


@pytest.mark.asyncio
async def test_databases_pgsql_uses_configured_user(
    use_case, fake_command_runner
) -> None:
    await use_case.execute("devilbox_databases", {"type": "pgsql"})

    args, _ = fake_command_runner.calls[0]
    assert args[3:] == ("psql", "-h", "127.0.0.1", "-U", "admin", "-l")


@pytest.mark.asyncio
async def test_health_combines_sections(use_case) -> None:
    response = await use_case.execute("devilbox_health", {})

    text = response.content[0].text
    for title in ("Service Status", "Disk Space", "Docker Info", "Connectivity"):
        assert f"=== {title} ===" in text
    assert "Health: 100%" in text


@pytest.mark.asyncio
async def test_command_failure_becomes_error_result(fake_env_file) -> None:
    orchestrator = AsyncMock()
    orchestrator.status.side_effect = CommandExecutionError(
        ["docker-compose", "ps"], 1, "Cannot connect to the Docker daemon"
    )
    use_case = CallToolUseCase(
        orchestrator=orchestrator,
        env_file_repository=fake_env_file,
        project_repository=_StubProjects([]),
        health_report_use_case=AsyncMock(),
    )

    response = await use_case.execute("devilbox_status")

    assert response.is_error is True
    assert "Cannot connect to the Docker daemon" in response.content[0].text


def test_render_health_report_marks_failures() -> None:
    report = HealthReport.from_results(
        {
            "mysql": [
                ProbeResult.success("mysql", 3306),
                ProbeResult.unreachable("", 3306, "no address"),
            ]
        }
    )

    text = render_health_report(report)

    assert text.splitlines()[0] == "Health: 50% (1/2 checks passed)"
    assert "MySQL connect:" in text
    assert "FAIL <unresolved>:3306 - no address" in text
