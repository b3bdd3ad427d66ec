"""
Dependency Injection Configuration.

Wires the extension and the context server client into the HTTP host.
"""

from typing import Annotated

from fastapi import Depends

from roamingzed.infrastructure.config.settings import Settings, get_settings
from roamingzed.infrastructure.mcp.client.context_server_client import (
    ContextServerClient,
)
from roamingzed.application.interfaces.i_context_server_client import (
    IContextServerClient,
)
from roamingzed.application.interfaces.i_extension_host import IExtensionHost
from roamingzed.application.extension import RoamingZedExtension


# Settings
def get_app_settings() -> Settings:
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


# Extension
def get_extension() -> IExtensionHost:
    return RoamingZedExtension()


ExtensionDep = Annotated[IExtensionHost, Depends(get_extension)]


# Context Server Client
def get_context_server_client(extension: ExtensionDep) -> IContextServerClient:
    return ContextServerClient(extension.resolve_server_command())


ContextServerClientDep = Annotated[
    IContextServerClient, Depends(get_context_server_client)
]
