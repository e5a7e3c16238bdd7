"""DTOs for the assistant tool dispatch."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from src.domain.entities.tool import ToolDefinition, ToolResult

SERVICE_NAME_PATTERN = r"^[A-Za-z0-9][A-Za-z0-9_.-]*$"

ServiceName = Annotated[
    str,
    Field(
        pattern=SERVICE_NAME_PATTERN,
        max_length=64,
        description="Compose service name (php, httpd, mysql, pgsql, ...)",
    ),
]


class NoArguments(BaseModel):
    """Tools that take no input."""


class ServicesArguments(BaseModel):
    services: List[ServiceName] = Field(
        default_factory=list,
        description="Specific services to act on. If omitted, acts on all.",
    )


class LogsArguments(BaseModel):
    service: ServiceName
    lines: int = Field(
        default=100, ge=1, le=10000, description="Number of recent log lines"
    )


class ExecArguments(BaseModel):
    service: ServiceName
    command: str = Field(min_length=1, description="Command to execute")


class ConfigArguments(BaseModel):
    action: Literal["get", "set"] = Field(
        description="get (read config) or set (update config)"
    )
    key: Optional[str] = Field(
        default=None,
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Configuration key (e.g. PHP_SERVER, MYSQL_SERVER)",
    )
    value: Optional[str] = Field(
        default=None, description="Value to set (only for action=set)"
    )

    @field_validator("value")
    @classmethod
    def value_is_single_line(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and ("\n" in value or "\r" in value):
            raise ValueError("value must be a single line")
        return value


class DatabasesArguments(BaseModel):
    type: Literal["mysql", "pgsql"] = Field(
        default="mysql", description="Database type"
    )


class ToolDescriptorDTO(BaseModel):
    name: str = Field(description="Tool identifier")
    description: str = Field(description="What the tool does")
    input_schema: Dict[str, Any] = Field(
        default_factory=dict, description="JSON schema of the tool arguments"
    )

    @classmethod
    def from_domain(cls, definition: ToolDefinition) -> "ToolDescriptorDTO":
        return cls(
            name=definition.name,
            description=definition.description,
            input_schema=dict(definition.input_schema),
        )


class ToolCallRequestDTO(BaseModel):
    arguments: Dict[str, Any] = Field(
        default_factory=dict, description="Tool arguments"
    )

    model_config = {
        "json_schema_extra": {
            "example": {"arguments": {"service": "php", "lines": 50}},
        }
    }


class ToolContentDTO(BaseModel):
    type: str = Field(default="text")
    text: str


class ToolCallResponseDTO(BaseModel):
    content: List[ToolContentDTO] = Field(default_factory=list)
    is_error: bool = Field(default=False, description="Whether the tool failed")

    @classmethod
    def from_domain(cls, result: ToolResult) -> "ToolCallResponseDTO":
        return cls(
            content=[
                ToolContentDTO(type=item.type, text=item.text)
                for item in result.content
            ],
            is_error=result.is_error,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "content": [{"type": "text", "text": "NAME  STATUS\nphp   Up"}],
                "is_error": False,
            }
        }
    }
