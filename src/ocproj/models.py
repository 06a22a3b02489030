"""
Shared data models, actions and errors used across the ocproj package.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DEFAULT_PROJECT",
    "Action",
    "CommandResult",
    "ConfigError",
    "ExternalToolError",
    "ListProjects",
    "NoPreviousProjectError",
    "OcprojError",
    "PickProject",
    "PickerAbortedError",
    "PickerUnavailableError",
    "SetProject",
    "ShowCurrent",
    "ShowHelp",
    "StoreError",
    "SwapProject",
    "UnknownProjectError",
    "UsageError",
]

# Namespace reported when a context has none configured.
DEFAULT_PROJECT = "default"


# ------------------------------------------------------------------
# Errors
# ------------------------------------------------------------------

class OcprojError(Exception):
    """Base class for every error reported to the user."""


class ConfigError(OcprojError):
    """Raised when the configuration file is unreadable or invalid."""


class ExternalToolError(OcprojError):
    """Raised when the cluster client is missing or one of its commands fails."""


class StoreError(OcprojError):
    """Raised when a project record cannot be read or written."""


class UnknownProjectError(OcprojError):
    """Raised when the requested project is not in the project listing."""


class NoPreviousProjectError(OcprojError):
    """Raised on swap when no previous project was recorded for the context."""


class PickerUnavailableError(OcprojError):
    """Raised when there is nothing to offer to the interactive picker."""


class PickerAbortedError(OcprojError):
    """Raised when the user leaves the interactive picker without a choice."""


# ------------------------------------------------------------------
# Subprocess outcome
# ------------------------------------------------------------------

@dataclass(frozen=True)
class CommandResult:
    """Outcome of one external command."""
    argv: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def empty(self) -> bool:
        return not self.stdout.strip()

    def describe(self) -> str:
        """One-line summary used in error messages."""
        detail = self.stderr.strip() or self.stdout.strip()
        msg = f"'{' '.join(self.argv)}' failed (exit {self.returncode})"
        return f"{msg}: {detail}" if detail else msg


# ------------------------------------------------------------------
# Parsed command-line actions
# ------------------------------------------------------------------

@dataclass(frozen=True)
class ShowHelp:
    pass


@dataclass(frozen=True)
class SwapProject:
    pass


@dataclass(frozen=True)
class ShowCurrent:
    pass


@dataclass(frozen=True)
class ListProjects:
    pass


@dataclass(frozen=True)
class PickProject:
    pass


@dataclass(frozen=True)
class SetProject:
    name: str


@dataclass(frozen=True)
class UsageError:
    """Bad command line; reported together with the usage text."""
    message: str


Action = ShowHelp | SwapProject | ShowCurrent | ListProjects | PickProject | SetProject | UsageError
