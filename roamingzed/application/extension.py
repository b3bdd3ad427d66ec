from dataclasses import dataclass, field
from typing import List, Sequence

from roamingzed.domain.entities.command_output import CommandOutput
from roamingzed.domain.entities.slash_command import ArgumentCompletion, SlashCommand
from roamingzed.domain.value_objects.server_command import ServerCommand
from roamingzed.application import catalog
from roamingzed.application.interfaces.i_extension_host import (
    IExtensionHost,
    WorktreeRoot,
)
from roamingzed.application.use_cases.dispatch_command import DispatchCommandUseCase
from roamingzed.application.use_cases.complete_argument import (
    CompleteArgumentUseCase,
)
from roamingzed.application.use_cases.resolve_server_command import (
    ResolveServerCommandUseCase,
)


@dataclass
class RoamingZedExtension(IExtensionHost):
    """RoamingZed extension: wikilink slash commands plus the MCP context server."""

    dispatcher: DispatchCommandUseCase = field(default_factory=DispatchCommandUseCase)
    completer: CompleteArgumentUseCase = field(default_factory=CompleteArgumentUseCase)
    server_resolver: ResolveServerCommandUseCase = field(
        default_factory=ResolveServerCommandUseCase
    )

    def list_commands(self) -> List[SlashCommand]:
        return catalog.list_commands()

    def dispatch_command(
        self,
        command_name: str,
        arguments: Sequence[str],
        worktree: WorktreeRoot | None = None,
    ) -> CommandOutput:
        return self.dispatcher.execute(command_name, arguments, worktree)

    def complete_argument(
        self, command_name: str, arguments: Sequence[str]
    ) -> List[ArgumentCompletion]:
        return self.completer.execute(command_name, arguments)

    def resolve_server_command(
        self, context_server_id: str | None = None
    ) -> ServerCommand:
        return self.server_resolver.execute(context_server_id)
