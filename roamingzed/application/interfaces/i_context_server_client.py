from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List


@dataclass
class ContextServerTool:
    """A tool exposed by the MCP context server."""

    name: str
    description: str
    parameters: dict


class IContextServerClient(ABC):
    """Interface for talking to the spawned MCP context server.

    Used by hosts that want to inspect the server the extension launches.
    The extension itself never opens a session.
    """

    @abstractmethod
    async def list_tools(self) -> List[ContextServerTool]:
        """List the tools the context server offers."""
        pass

    @abstractmethod
    async def call_tool(self, tool_name: str, arguments: dict) -> Any:
        """Call a tool on the context server."""
        pass
