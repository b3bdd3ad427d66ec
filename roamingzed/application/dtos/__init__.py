from .command_dtos import (
    SlashCommandDTO,
    SlashCommandListResponse,
    RunCommandRequest,
    OutputSectionDTO,
    CommandOutputDTO,
    CompletionRequest,
    ArgumentCompletionDTO,
    CompletionListResponse,
)
from .server_dtos import (
    ServerCommandDTO,
    ContextServerToolDTO,
    ContextServerToolListResponse,
)

__all__ = [
    "SlashCommandDTO",
    "SlashCommandListResponse",
    "RunCommandRequest",
    "OutputSectionDTO",
    "CommandOutputDTO",
    "CompletionRequest",
    "ArgumentCompletionDTO",
    "CompletionListResponse",
    "ServerCommandDTO",
    "ContextServerToolDTO",
    "ContextServerToolListResponse",
]
