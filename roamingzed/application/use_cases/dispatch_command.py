import logging
from dataclasses import dataclass
from typing import Sequence

from roamingzed.domain.entities.command_output import CommandOutput
from roamingzed.domain.entities.slash_command import CommandInvocation
from roamingzed.domain.exceptions.domain_exceptions import (
    EmptyQueryError,
    UnknownCommandError,
)
from roamingzed.application.catalog import BACKLINKS, GRAPH, RELATED
from roamingzed.application.interfaces.i_extension_host import WorktreeRoot
from roamingzed.application.templates import (
    WORKSPACE_PLACEHOLDER,
    render_backlinks,
    render_graph,
    render_related,
)

logger = logging.getLogger(__name__)


@dataclass
class DispatchCommandUseCase:
    """Use case for running a slash command."""

    placeholder: str = WORKSPACE_PLACEHOLDER

    def execute(
        self,
        command_name: str,
        arguments: Sequence[str],
        worktree: WorktreeRoot | None = None,
    ) -> CommandOutput:
        """Run a slash command.

        Args:
            command_name: Name of the command without the leading slash
            arguments: Raw argument strings typed after the command
            worktree: Capability returning the workspace root, if any

        Returns:
            CommandOutput with one section spanning the whole text

        Raises:
            UnknownCommandError: If the command is not declared
            EmptyQueryError: If /related is given no query
        """
        invocation = CommandInvocation(
            name=command_name,
            arguments=tuple(arguments),
            workspace_root=worktree() if worktree is not None else None,
        )
        logger.debug(
            f"Dispatching /{invocation.name} with {len(invocation.arguments)} "
            f"argument(s) in {invocation.workspace_root or self.placeholder}"
        )

        if invocation.name == BACKLINKS:
            return self._backlinks(invocation)
        if invocation.name == GRAPH:
            return self._graph(invocation)
        if invocation.name == RELATED:
            return self._related(invocation)

        logger.warning(f"Rejected unknown slash command: {invocation.name}")
        raise UnknownCommandError(invocation.name)

    def _workspace(self, invocation: CommandInvocation) -> str:
        if invocation.workspace_root is None:
            return self.placeholder
        return invocation.workspace_root

    def _backlinks(self, invocation: CommandInvocation) -> CommandOutput:
        text = render_backlinks(self._workspace(invocation))
        return CommandOutput.single_section(text, "Backlinks")

    def _graph(self, invocation: CommandInvocation) -> CommandOutput:
        text = render_graph(self._workspace(invocation))
        return CommandOutput.single_section(text, "Link Graph")

    def _related(self, invocation: CommandInvocation) -> CommandOutput:
        query = invocation.joined_arguments
        if query == "":
            raise EmptyQueryError()

        text = render_related(query, self._workspace(invocation))
        return CommandOutput.single_section(text, f"Related: {query}")
