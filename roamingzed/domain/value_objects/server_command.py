from dataclasses import dataclass, field


@dataclass(frozen=True)
class ServerCommand:
    """Process-spawn descriptor handed to the host for the MCP context server."""

    command: str
    args: tuple[str, ...] = field(default_factory=tuple)
    env: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def argv(self) -> list[str]:
        """Full argument vector, executable first."""
        return [self.command, *self.args]

    @property
    def env_dict(self) -> dict[str, str]:
        return dict(self.env)

    def __str__(self) -> str:
        return " ".join(self.argv)
