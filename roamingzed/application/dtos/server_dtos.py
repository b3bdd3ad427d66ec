from pydantic import BaseModel
from typing import List, Tuple


class ServerCommandDTO(BaseModel):
    """DTO describing the process the host spawns as the context server."""

    command: str
    args: List[str]
    env: List[Tuple[str, str]]

    class Config:
        json_schema_extra = {
            "example": {"command": "npx", "args": ["roamingzed-mcp"], "env": []}
        }


class ContextServerToolDTO(BaseModel):
    """DTO for a tool offered by the context server."""

    name: str
    description: str
    parameters: dict


class ContextServerToolListResponse(BaseModel):
    """Response DTO for listing context server tools."""

    tools: List[ContextServerToolDTO]
    total: int
