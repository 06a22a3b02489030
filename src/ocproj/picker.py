"""
Interactive project selection through fzf.

fzf calls this program again (with colors forced on) to produce its
candidate list, so the picker shows the same highlighted listing as a
plain invocation.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import sys

from .client import ClusterClient, run_command
from .config import ENV_FORCE_COLOR
from .models import PickerAbortedError, PickerUnavailableError
from .switcher import ProjectSwitcher

__all__ = ["FZF", "fzf_available", "pick_project", "self_command"]

logger = logging.getLogger(__name__)

FZF = "fzf"


def fzf_available() -> bool:
    return shutil.which(FZF) is not None


def self_command() -> str:
    """Return a shell command line that runs this program with no arguments."""
    prog = sys.argv[0] if sys.argv else ""
    if prog and os.path.isfile(prog) and os.access(prog, os.X_OK) and not prog.endswith(".py"):
        return shlex.quote(os.path.abspath(prog))
    return shlex.join([sys.executable, "-m", "ocproj"])


def pick_project(client: ClusterClient, switcher: ProjectSwitcher) -> None:
    """Let the user choose a project with fzf and switch to it.

    Raises:
        PickerUnavailableError: If no projects can be listed.
        PickerAbortedError: If fzf returns without a selection.
    """
    if next(iter(client.list_projects()), None) is None:
        raise PickerUnavailableError("could not list projects (is the cluster accessible?)")

    env = dict(os.environ)
    env[ENV_FORCE_COLOR] = "1"
    env["FZF_DEFAULT_COMMAND"] = self_command()

    # fzf draws on the terminal through stderr; only the choice is captured.
    result = run_command([FZF, "--ansi", "--no-preview"], capture_stderr=False, env=env)
    if result.empty:
        logger.debug("fzf exited %d without a selection", result.returncode)
        raise PickerAbortedError("you did not choose any of the options")

    switcher.set_project(result.stdout.strip())
