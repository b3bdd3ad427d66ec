import logging
from dataclasses import dataclass
from typing import List, Sequence

from roamingzed.domain.entities.slash_command import ArgumentCompletion
from roamingzed.application.catalog import RELATED

logger = logging.getLogger(__name__)


@dataclass
class CompleteArgumentUseCase:
    """Use case for suggesting slash command argument completions."""

    def execute(
        self, command_name: str, arguments: Sequence[str]
    ) -> List[ArgumentCompletion]:
        """Return completions for the argument being typed.

        No command offers completions yet, so the list is always empty.
        """
        if command_name == RELATED:
            # TODO: offer note titles from the context server's search_notes tool
            logger.debug(f"No completions for /related {' '.join(arguments)!r}")
            return []
        return []
