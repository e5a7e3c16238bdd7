from __future__ import annotations

from src.domain.entities.errors import (
    CommandExecutionError,
    CommandTimeoutError,
    ToolNotFoundError,
)
from src.domain.entities.tool import CommandResult, ToolResult


def test_tool_result_error_prefixes_message() -> None:
    result = ToolResult.error("docker not found")

    assert result.is_error is True
    assert result.content[0].text == "Error: docker not found"
    assert result.content[0].type == "text"


def test_command_result_output_falls_back_to_stderr() -> None:
    result = CommandResult(
        args=("docker-compose", "up"), returncode=0, stderr="Started"
    )
    assert result.output == "Started"


def test_command_errors_describe_the_command() -> None:
    failed = CommandExecutionError(["docker", "ps"], 1, "daemon down\n")
    timed_out = CommandTimeoutError(["docker", "logs"], 2.5)

    assert "docker ps" in failed.message
    assert "exit 1" in failed.message
    assert failed.message.endswith("daemon down")
    assert "2.5s" in timed_out.message


def test_tool_not_found_message() -> None:
    assert ToolNotFoundError("nope").message == "Unknown tool: nope"
