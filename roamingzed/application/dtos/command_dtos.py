from pydantic import BaseModel, Field
from typing import List, Optional


class SlashCommandDTO(BaseModel):
    """DTO describing a declared slash command."""

    name: str
    description: str
    tooltip_text: str
    requires_argument: bool


class SlashCommandListResponse(BaseModel):
    """Response DTO for listing slash commands."""

    commands: List[SlashCommandDTO]
    total: int


class RunCommandRequest(BaseModel):
    """Request DTO for running a slash command."""

    arguments: List[str] = Field(default_factory=list)
    workspace_root: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "arguments": ["zettelkasten", "method"],
                "workspace_root": "/home/user/notes",
            }
        }


class OutputSectionDTO(BaseModel):
    """DTO for a labeled byte range of the output text."""

    start: int
    end: int
    label: str


class CommandOutputDTO(BaseModel):
    """Response DTO for a slash command run."""

    text: str
    sections: List[OutputSectionDTO]

    class Config:
        json_schema_extra = {
            "example": {
                "text": "# Backlinks\n\n*Querying backlinks for current file in: /home/user/notes*",
                "sections": [{"start": 0, "end": 72, "label": "Backlinks"}],
            }
        }


class CompletionRequest(BaseModel):
    """Request DTO for argument completions."""

    arguments: List[str] = Field(default_factory=list)


class ArgumentCompletionDTO(BaseModel):
    """DTO for a single argument completion."""

    label: str
    new_text: str
    run_command: bool = False


class CompletionListResponse(BaseModel):
    """Response DTO for argument completions."""

    completions: List[ArgumentCompletionDTO]
    total: int
