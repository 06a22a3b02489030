"""
Set, swap and query the active project of the current context.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .client import ClusterClient
from .models import NoPreviousProjectError, UnknownProjectError
from .store import ProjectStore

__all__ = ["ProjectSwitcher"]

logger = logging.getLogger(__name__)


class ProjectSwitcher:
    def __init__(
        self,
        client: ClusterClient,
        store: ProjectStore,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ):
        self.client = client
        self.store = store
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def set_project(self, name: str) -> None:
        """Switch the current context to *name* and remember the project left behind.

        Raises:
            ExternalToolError: If the client cannot resolve state or switch.
            UnknownProjectError: If *name* is not an existing project.
        """
        context = self.client.current_context()
        previous = self.client.current_project(context)

        if name not in self.client.list_projects():
            raise UnknownProjectError(f'no project exists with name "{name}".')

        self.client.switch_project(context, name)
        print(f'Active project is "{name}".', file=self.err)

        # Re-selecting the active project keeps the older record for swaps.
        if previous != name:
            self.store.save_project(context, previous)
        else:
            logger.debug("Project '%s' was already active in '%s'", name, context)

    def swap_project(self) -> None:
        """Switch back to the project recorded for the current context."""
        context = self.client.current_context()
        previous = self.store.read_project(context)
        if not previous:
            raise NoPreviousProjectError("No previous project found for current context.")
        logger.debug("Swapping back to '%s' in '%s'", previous, context)
        self.set_project(previous)

    def show_current(self) -> None:
        context = self.client.current_context()
        print(self.client.current_project(context), file=self.out)
