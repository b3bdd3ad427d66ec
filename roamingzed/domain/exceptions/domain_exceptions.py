class DomainError(Exception):
    """Base exception for all domain-level errors."""

    pass


class UnknownCommandError(DomainError):
    """Raised when a slash command name is not one the extension declares."""

    def __init__(self, command_name: str):
        self.command_name = command_name
        super().__init__(f"Unknown command: {command_name}")


class EmptyQueryError(DomainError):
    """Raised when /related is invoked without a query."""

    USAGE = "Usage: /related <query>"

    def __init__(self, message: str = USAGE):
        super().__init__(message)


class InvalidTextRangeError(DomainError):
    """Raised when an output section does not describe a valid range of its body."""

    pass


class ContextServerUnavailableError(DomainError):
    """Raised when the MCP context server cannot be spawned or queried."""

    pass
