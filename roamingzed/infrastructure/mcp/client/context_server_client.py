"""
MCP Context Server Client.

Spawns the process described by a ServerCommand and talks to it over
stdio. Each call opens a fresh session and closes it before returning, so
the client holds no process between calls.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any

from mcp import ClientSession
from mcp.client.stdio import stdio_client, StdioServerParameters

from roamingzed.application.interfaces.i_context_server_client import (
    IContextServerClient,
    ContextServerTool,
)
from roamingzed.domain.exceptions.domain_exceptions import (
    ContextServerUnavailableError,
)
from roamingzed.domain.value_objects.server_command import ServerCommand

logger = logging.getLogger(__name__)


def to_server_parameters(server_command: ServerCommand) -> StdioServerParameters:
    """Convert a spawn descriptor into MCP stdio parameters."""
    return StdioServerParameters(
        command=server_command.command,
        args=list(server_command.args),
        env=server_command.env_dict or None,
    )


class ContextServerClient(IContextServerClient):
    """Client for the RoamingZed MCP context server."""

    def __init__(self, server_command: ServerCommand):
        self.server_command = server_command

    @asynccontextmanager
    async def _session(self):
        """Context manager for a server session."""
        params = to_server_parameters(self.server_command)
        logger.debug(f"Spawning context server: {self.server_command}")

        async with stdio_client(params) as (read, write):
            async with ClientSession(read, write) as session:
                await session.initialize()
                yield session

    async def list_tools(self) -> list[ContextServerTool]:
        """List tools from the context server."""
        try:
            async with self._session() as session:
                result = await session.list_tools()
        except Exception as e:
            logger.warning(f"Context server unavailable: {e}")
            raise ContextServerUnavailableError(
                f"Could not list tools from '{self.server_command}': {e}"
            ) from e

        return [
            ContextServerTool(
                name=tool.name,
                description=tool.description or "",
                parameters=tool.inputSchema,
            )
            for tool in result.tools
        ]

    async def call_tool(self, tool_name: str, arguments: dict) -> Any:
        """Call a tool on the context server and join its text content."""
        try:
            async with self._session() as session:
                result = await session.call_tool(tool_name, arguments)
        except Exception as e:
            logger.warning(f"Context server call to {tool_name} failed: {e}")
            raise ContextServerUnavailableError(
                f"Could not call '{tool_name}' on '{self.server_command}': {e}"
            ) from e

        if result.content:
            return "\n".join(c.text for c in result.content if hasattr(c, "text"))
        return None
