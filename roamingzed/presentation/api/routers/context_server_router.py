"""
Context Server Router - Endpoints describing the MCP context server.
"""

from fastapi import APIRouter, HTTPException, status

from roamingzed.application.dtos.server_dtos import (
    ContextServerToolDTO,
    ContextServerToolListResponse,
    ServerCommandDTO,
)
from roamingzed.application.catalog import CONTEXT_SERVER_ID
from roamingzed.domain.exceptions.domain_exceptions import (
    ContextServerUnavailableError,
)
from roamingzed.presentation.api.dependencies import (
    ContextServerClientDep,
    ExtensionDep,
)

router = APIRouter(prefix="/context-server", tags=["context-server"])


@router.get(
    "/command",
    response_model=ServerCommandDTO,
    summary="Get the context server command",
    description="The process the host should spawn as the MCP context server.",
)
async def get_server_command(extension: ExtensionDep):
    """Describe how to launch the context server."""
    command = extension.resolve_server_command(CONTEXT_SERVER_ID)
    return ServerCommandDTO(
        command=command.command,
        args=list(command.args),
        env=list(command.env),
    )


@router.get(
    "/tools",
    response_model=ContextServerToolListResponse,
    summary="List context server tools",
    description="Spawn the context server and list the tools it offers.",
)
async def list_server_tools(client: ContextServerClientDep):
    """List tools offered by the context server."""
    try:
        tools = await client.list_tools()
    except ContextServerUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )

    return ContextServerToolListResponse(
        tools=[
            ContextServerToolDTO(
                name=t.name,
                description=t.description,
                parameters=t.parameters,
            )
            for t in tools
        ],
        total=len(tools),
    )
