"""
Worktree capabilities.

Hosts hand the extension a callable returning the workspace root instead
of a worktree object.
"""

import os
from typing import Optional

from roamingzed.application.interfaces.i_extension_host import WorktreeRoot


def static_worktree(root: Optional[str]) -> WorktreeRoot:
    """Capability that always reports ``root``."""

    def _root() -> Optional[str]:
        return root

    return _root


def cwd_worktree() -> WorktreeRoot:
    """Capability reporting the process working directory at call time."""
    return os.getcwd
