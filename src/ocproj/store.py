"""
Per-context record of the last active project.

Each context gets one plain-text file under ``<cache-base>/ocproj``
holding exactly one project name.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .models import StoreError

__all__ = ["STORE_DIRNAME", "ProjectStore", "escape_context"]

logger = logging.getLogger(__name__)

STORE_DIRNAME = "ocproj"

_SEPARATORS = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())


def escape_context(context: str) -> str:
    """Map a context name to a file name that cannot leave the store directory."""
    name = "".join("-" if ch in _SEPARATORS else ch for ch in context)
    if name in ("", ".", ".."):
        # Would resolve to the directory itself or its parent.
        name = "-" * max(len(name), 1)
    return name


class ProjectStore:
    def __init__(self, cache_base: Path):
        self.directory = Path(cache_base) / STORE_DIRNAME

    def project_file_path(self, context: str) -> Path:
        return self.directory / escape_context(context)

    def read_project(self, context: str) -> str:
        """Return the recorded project for *context*, or ``""`` if there is none."""
        path = self.project_file_path(context)
        try:
            return path.read_text(encoding="utf-8").rstrip("\r\n")
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreError(f"Could not read project record {path}: {exc}") from exc

    def save_project(self, context: str, project: str) -> None:
        """Record *project* for *context* unless it is already stored."""
        self.directory.mkdir(parents=True, exist_ok=True)
        try:
            unchanged = self.read_project(context) == project
        except StoreError as exc:
            # An unreadable record is replaced.
            logger.debug("%s", exc)
            unchanged = False
        if unchanged:
            logger.debug("Record for '%s' already '%s'", context, project)
            return
        path = self.project_file_path(context)
        try:
            self._write(path, project)
        except OSError as exc:
            raise StoreError(f"Could not write project record {path}: {exc}") from exc
        logger.debug("Recorded '%s' as previous project of '%s'", project, context)

    def _write(self, path: Path, content: str) -> None:
        # Write to a sibling temp file then rename over the target.
        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=".tmp-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp, path)
        except BaseException:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise
