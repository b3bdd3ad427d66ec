from typing import List

from roamingzed.domain.entities.slash_command import SlashCommand
from roamingzed.domain.exceptions.domain_exceptions import UnknownCommandError

BACKLINKS = "backlinks"
GRAPH = "graph"
RELATED = "related"

CONTEXT_SERVER_ID = "roamingzed"

_COMMANDS = (
    SlashCommand(
        name=BACKLINKS,
        description="Show notes linking to the current file",
        tooltip_text="Query backlinks via the RoamingZed context server",
    ),
    SlashCommand(
        name=GRAPH,
        description="Show the wikilink graph around the current file",
        tooltip_text="Explore the link graph via the RoamingZed context server",
    ),
    SlashCommand(
        name=RELATED,
        description="Find notes related to a query",
        tooltip_text="Search related notes via the RoamingZed context server",
        requires_argument=True,
    ),
)


def list_commands() -> List[SlashCommand]:
    """Slash commands in declaration order."""
    return list(_COMMANDS)


def get_command(name: str) -> SlashCommand:
    for command in _COMMANDS:
        if command.name == name:
            return command
    raise UnknownCommandError(name)
