from dataclasses import dataclass


@dataclass(frozen=True)
class SlashCommand:
    """A slash command the extension declares to the editor."""

    name: str
    description: str
    tooltip_text: str
    requires_argument: bool = False

    def __post_init__(self) -> None:
        if not self.name or self.name.strip() == "":
            raise ValueError("Slash command name cannot be empty")

    @property
    def usage(self) -> str:
        """Usage line shown to the user."""
        if self.requires_argument:
            return f"/{self.name} <query>"
        return f"/{self.name}"


@dataclass(frozen=True)
class CommandInvocation:
    """A single request to run a slash command."""

    name: str
    arguments: tuple[str, ...] = ()
    workspace_root: str | None = None

    @property
    def joined_arguments(self) -> str:
        return " ".join(self.arguments)


@dataclass(frozen=True)
class ArgumentCompletion:
    """A suggestion offered while the user types a slash command argument."""

    label: str
    new_text: str
    run_command: bool = False
