"""
Render the project list, highlighting the active project.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from .client import ClusterClient
from .config import Settings

__all__ = ["RESET", "color_enabled", "list_projects", "render_projects"]

RESET = "\033[0m"


def color_enabled(settings: Settings, stream: TextIO) -> bool:
    """Colors are on when forced, or when *stream* is a terminal and NO_COLOR is unset."""
    if settings.force_color:
        return True
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty()) and not settings.no_color


def render_projects(
    projects: Iterable[str],
    current: str,
    colorize: bool,
    fg: str = "",
    bg: str = "",
) -> Iterator[str]:
    for name in projects:
        if colorize and name == current:
            yield f"{bg}{fg}{name}{RESET}"
        else:
            yield name


def list_projects(client: ClusterClient, settings: Settings, out: TextIO | None = None) -> None:
    """Print every project of the current context, one per line."""
    out = out or sys.stdout
    current = client.current_project(client.current_context())
    lines = render_projects(
        client.list_projects(),
        current,
        color_enabled(settings, out),
        fg=settings.current_fg,
        bg=settings.current_bg,
    )
    for line in lines:
        print(line, file=out)
