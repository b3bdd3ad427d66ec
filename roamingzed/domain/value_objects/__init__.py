from .text_range import TextRange
from .server_command import ServerCommand

__all__ = ["TextRange", "ServerCommand"]
