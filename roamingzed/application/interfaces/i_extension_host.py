from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence

from roamingzed.domain.entities.command_output import CommandOutput
from roamingzed.domain.entities.slash_command import ArgumentCompletion, SlashCommand
from roamingzed.domain.value_objects.server_command import ServerCommand

# Read-only capability returning the workspace root, if the host has one.
WorktreeRoot = Callable[[], Optional[str]]


class IExtensionHost(ABC):
    """Capability set an editor runtime needs from the extension.

    The concrete registration glue (how a given editor discovers and loads
    the extension) lives in an adapter outside this interface, so the
    extension can be exercised without a running editor.
    """

    @abstractmethod
    def list_commands(self) -> List[SlashCommand]:
        """List the slash commands the extension declares."""
        pass

    @abstractmethod
    def dispatch_command(
        self,
        command_name: str,
        arguments: Sequence[str],
        worktree: WorktreeRoot | None = None,
    ) -> CommandOutput:
        """Run a slash command and return its output."""
        pass

    @abstractmethod
    def complete_argument(
        self, command_name: str, arguments: Sequence[str]
    ) -> List[ArgumentCompletion]:
        """Suggest completions for a partially typed command argument."""
        pass

    @abstractmethod
    def resolve_server_command(
        self, context_server_id: str | None = None
    ) -> ServerCommand:
        """Return the process the host should spawn as the context server."""
        pass
