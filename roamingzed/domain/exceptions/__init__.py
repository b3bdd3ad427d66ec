from .domain_exceptions import (
    DomainError,
    UnknownCommandError,
    EmptyQueryError,
    InvalidTextRangeError,
    ContextServerUnavailableError,
)

__all__ = [
    "DomainError",
    "UnknownCommandError",
    "EmptyQueryError",
    "InvalidTextRangeError",
    "ContextServerUnavailableError",
]
