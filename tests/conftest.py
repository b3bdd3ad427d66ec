"""
Shared pytest fixtures for all tests.
"""

import pytest
from typing import Optional

from roamingzed.application.extension import RoamingZedExtension
from roamingzed.application.use_cases.dispatch_command import DispatchCommandUseCase
from roamingzed.application.use_cases.complete_argument import (
    CompleteArgumentUseCase,
)
from roamingzed.application.use_cases.resolve_server_command import (
    ResolveServerCommandUseCase,
)
from roamingzed.domain.value_objects.server_command import ServerCommand
from roamingzed.infrastructure.worktree.providers import static_worktree


# ============================================================================
# Workspace Fixtures
# ============================================================================


@pytest.fixture
def notes_root() -> str:
    return "/home/user/notes"


@pytest.fixture
def notes_worktree(notes_root: str):
    return static_worktree(notes_root)


@pytest.fixture
def empty_worktree():
    def _root() -> Optional[str]:
        return None

    return _root


# ============================================================================
# Use Case Fixtures
# ============================================================================


@pytest.fixture
def dispatcher() -> DispatchCommandUseCase:
    return DispatchCommandUseCase()


@pytest.fixture
def completer() -> CompleteArgumentUseCase:
    return CompleteArgumentUseCase()


@pytest.fixture
def server_resolver() -> ResolveServerCommandUseCase:
    return ResolveServerCommandUseCase()


@pytest.fixture
def extension() -> RoamingZedExtension:
    return RoamingZedExtension()


@pytest.fixture
def server_command() -> ServerCommand:
    return ServerCommand(command="npx", args=("roamingzed-mcp",), env=())
