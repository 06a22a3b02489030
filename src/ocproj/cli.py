"""
CLI entry point for ocproj.

Switch the active project (namespace) of the current cluster context,
go back to the previous one, or pick one interactively with fzf.
"""

from __future__ import annotations

import logging
import sys

from . import picker, presenter
from .client import ClusterClient, find_client_binary
from .config import Settings, load_settings
from .logging_setup import setup_logging
from .models import (
    Action,
    ListProjects,
    OcprojError,
    PickProject,
    SetProject,
    ShowCurrent,
    ShowHelp,
    SwapProject,
    UsageError,
)
from .store import ProjectStore
from .switcher import ProjectSwitcher

__all__ = ["USAGE", "dispatch", "is_interactive", "main", "parse_argv"]

logger = logging.getLogger(__name__)


USAGE = """\
USAGE:
  ocproj                    : list the projects in the current context
  ocproj <NAME>             : change the active project of current context
  ocproj -                  : switch to the previous project in this context
  ocproj -c, --current      : show the current project
  ocproj -h,--help          : show this message
"""


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def parse_argv(argv: list[str], interactive: bool = False) -> Action:
    """Turn the command-line arguments (without program name) into an action."""
    if not argv:
        return PickProject() if interactive else ListProjects()
    if len(argv) > 1:
        return UsageError("too many flags")

    arg = argv[0]
    if arg in ("-h", "--help"):
        return ShowHelp()
    if arg == "-":
        return SwapProject()
    if arg in ("-c", "--current"):
        return ShowCurrent()
    if arg.startswith("-"):
        return UsageError(f'unrecognized flag "{arg}"')
    return SetProject(arg)


def is_interactive(settings: Settings) -> bool:
    """The picker runs only on a terminal, with fzf installed and not disabled."""
    return sys.stdout.isatty() and not settings.ignore_fzf and picker.fzf_available()


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def dispatch(action: Action, settings: Settings) -> int:
    """Run *action* and return the process exit code."""
    if isinstance(action, ShowHelp):
        print(USAGE, end="")
        return 0
    if isinstance(action, UsageError):
        print(f"error: {action.message}", file=sys.stderr)
        print(USAGE, end="", file=sys.stderr)
        return 1

    client = ClusterClient(find_client_binary(settings.client_bin))
    switcher = ProjectSwitcher(client, ProjectStore(settings.cache_base))

    if isinstance(action, ListProjects):
        presenter.list_projects(client, settings)
    elif isinstance(action, PickProject):
        picker.pick_project(client, switcher)
    elif isinstance(action, SetProject):
        switcher.set_project(action.name)
    elif isinstance(action, SwapProject):
        switcher.swap_project()
    elif isinstance(action, ShowCurrent):
        switcher.show_current()
    else:
        raise TypeError(f"Unhandled action: {action!r}")
    return 0


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    if argv is None:
        argv = sys.argv[1:]

    try:
        settings = load_settings()
    except OcprojError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)

    setup_logging(verbose=settings.debug, log_file=settings.log_file)

    try:
        action = parse_argv(argv, interactive=not argv and is_interactive(settings))
        logger.debug("Dispatching %r", action)
        code = dispatch(action, settings)
    except OcprojError as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        sys.exit(130)

    sys.exit(code)
