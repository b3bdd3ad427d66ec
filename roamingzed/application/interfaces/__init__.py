from .i_extension_host import IExtensionHost, WorktreeRoot
from .i_context_server_client import IContextServerClient, ContextServerTool

__all__ = [
    "IExtensionHost",
    "WorktreeRoot",
    "IContextServerClient",
    "ContextServerTool",
]
