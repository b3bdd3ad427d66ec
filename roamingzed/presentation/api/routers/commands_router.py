"""
Commands Router - Endpoints for running RoamingZed slash commands.
"""

from fastapi import APIRouter, HTTPException, status

from roamingzed.application.dtos.command_dtos import (
    ArgumentCompletionDTO,
    CommandOutputDTO,
    CompletionListResponse,
    CompletionRequest,
    OutputSectionDTO,
    RunCommandRequest,
    SlashCommandDTO,
    SlashCommandListResponse,
)
from roamingzed.domain.exceptions.domain_exceptions import (
    EmptyQueryError,
    UnknownCommandError,
)
from roamingzed.infrastructure.worktree.providers import static_worktree
from roamingzed.presentation.api.dependencies import ExtensionDep

router = APIRouter(prefix="/commands", tags=["commands"])


@router.get(
    "",
    response_model=SlashCommandListResponse,
    summary="List slash commands",
    description="List the slash commands the extension declares.",
)
async def list_commands(extension: ExtensionDep):
    """List declared slash commands."""
    commands = extension.list_commands()
    return SlashCommandListResponse(
        commands=[
            SlashCommandDTO(
                name=c.name,
                description=c.description,
                tooltip_text=c.tooltip_text,
                requires_argument=c.requires_argument,
            )
            for c in commands
        ],
        total=len(commands),
    )


@router.post(
    "/{command_name}/run",
    response_model=CommandOutputDTO,
    summary="Run a slash command",
    description="Run a slash command and return its Markdown output and sections.",
)
async def run_command(
    command_name: str,
    request: RunCommandRequest,
    extension: ExtensionDep,
):
    """Run a slash command against the given workspace."""
    try:
        output = extension.dispatch_command(
            command_name,
            request.arguments,
            static_worktree(request.workspace_root),
        )
    except UnknownCommandError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except EmptyQueryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return CommandOutputDTO(
        text=output.text,
        sections=[
            OutputSectionDTO(
                start=s.range.start,
                end=s.range.end,
                label=s.label,
            )
            for s in output.sections
        ],
    )


@router.post(
    "/{command_name}/completions",
    response_model=CompletionListResponse,
    summary="Complete a command argument",
    description="Suggest completions for a partially typed slash command argument.",
)
async def complete_argument(
    command_name: str,
    request: CompletionRequest,
    extension: ExtensionDep,
):
    """Get argument completions for a slash command."""
    completions = extension.complete_argument(command_name, request.arguments)
    return CompletionListResponse(
        completions=[
            ArgumentCompletionDTO(
                label=c.label,
                new_text=c.new_text,
                run_command=c.run_command,
            )
            for c in completions
        ],
        total=len(completions),
    )
