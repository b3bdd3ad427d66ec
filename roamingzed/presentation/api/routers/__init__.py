from .commands_router import router as commands_router
from .context_server_router import router as context_server_router

__all__ = ["commands_router", "context_server_router"]
