from .dispatch_command import DispatchCommandUseCase
from .complete_argument import CompleteArgumentUseCase
from .resolve_server_command import ResolveServerCommandUseCase

__all__ = [
    "DispatchCommandUseCase",
    "CompleteArgumentUseCase",
    "ResolveServerCommandUseCase",
]
