"""
Tools Router - Presentation Layer

This module exposes the Devilbox control tools as a JSON API: one
endpoint to describe them and one to call a tool by name.
"""

from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Path, status

from src.application.dtos.tool_dto import (
    ToolCallRequestDTO,
    ToolCallResponseDTO,
    ToolDescriptorDTO,
)
from src.application.use_cases.tool_use_cases import CallToolUseCase, ListToolsUseCase
from src.domain.entities.errors import ToolArgumentError, ToolNotFoundError
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/tools", tags=["Tools"])


@router.get("", response_model=List[ToolDescriptorDTO])
@inject
async def list_tools(
    list_tools_use_case: ListToolsUseCase = Depends(Provide["list_tools_use_case"]),
) -> List[ToolDescriptorDTO]:
    """List every tool with its description and argument schema."""
    return list_tools_use_case.execute()


@router.post("/{name}", response_model=ToolCallResponseDTO)
@inject
async def call_tool(
    name: str = Path(..., description="Tool name, e.g. devilbox_status"),
    payload: Optional[ToolCallRequestDTO] = None,
    call_tool_use_case: CallToolUseCase = Depends(Provide["call_tool_use_case"]),
) -> ToolCallResponseDTO:
    """
    Call a tool.

    Command failures come back as a 200 response with ``is_error`` set and
    the error text as content. Unknown tools answer 404 and arguments
    that do not match the tool schema answer 422.
    """
    try:
        arguments = payload.arguments if payload is not None else {}
        return await call_tool_use_case.execute(name, arguments)
    except ToolNotFoundError as exc:
        logger.warning("tools.call.unknown", tool=name)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=exc.message
        ) from exc
    except ToolArgumentError as exc:
        logger.warning("tools.call.invalid_arguments", tool=name, **exc.details)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": exc.message, **exc.details},
        ) from exc
