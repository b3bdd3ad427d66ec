from dataclasses import dataclass

from roamingzed.domain.value_objects.server_command import ServerCommand

SERVER_EXECUTABLE = "npx"
SERVER_PACKAGE = "roamingzed-mcp"


@dataclass
class ResolveServerCommandUseCase:
    """Use case for describing how the host launches the MCP context server.

    The server detects the workspace from its working directory, so no
    arguments or environment are passed.
    """

    def execute(self, context_server_id: str | None = None) -> ServerCommand:
        return ServerCommand(command=SERVER_EXECUTABLE, args=(SERVER_PACKAGE,), env=())
