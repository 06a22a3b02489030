"""
Thin wrapper around the external cluster client (``oc`` or ``kubectl``).

Every call is a blocking subprocess invocation without a timeout.
Command outcomes are returned as ``CommandResult`` objects; the query
helpers turn failures into ``ExternalToolError``.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Iterator

from .models import DEFAULT_PROJECT, CommandResult, ExternalToolError

__all__ = ["CLIENT_NAMES", "ClusterClient", "find_client_binary", "run_command"]

logger = logging.getLogger(__name__)

# Binaries searched on PATH when no override is configured, in order.
CLIENT_NAMES = ("oc", "kubectl")

_NAMESPACE_LIST_JSONPATH = '{range .items[*].metadata.name}{@}{"\\n"}{end}'


def run_command(argv: list[str], capture_stderr: bool = True, env: dict | None = None) -> CommandResult:
    """Run *argv* to completion and return its outcome.

    Non-zero exit status is reported through the result, never raised.
    When *capture_stderr* is False the child writes to our stderr.

    Raises:
        ExternalToolError: If the executable cannot be started.
    """
    logger.debug("Running: %s", " ".join(argv))
    try:
        proc = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE if capture_stderr else None,
            text=True,
            env=env,
        )
    except OSError as exc:
        raise ExternalToolError(f"Could not run {argv[0]}: {exc}") from exc

    result = CommandResult(
        argv=tuple(argv),
        returncode=proc.returncode,
        stdout=proc.stdout or "",
        stderr=proc.stderr or "",
    )
    logger.debug("Exit %d from %s", result.returncode, argv[0])
    return result


def find_client_binary(override: str | None = None) -> str:
    """Return the cluster client executable to use.

    Raises:
        ExternalToolError: If no override is given and neither ``oc`` nor
            ``kubectl`` is on PATH.
    """
    if override:
        return override
    for name in CLIENT_NAMES:
        path = shutil.which(name)
        if path:
            return path
    raise ExternalToolError(f"{' or '.join(CLIENT_NAMES)} is not installed")


class ClusterClient:
    """Reads and changes context/namespace state through the client binary."""

    def __init__(self, binary: str):
        self.binary = binary

    def run(self, *args: str) -> CommandResult:
        return run_command([self.binary, *args])

    def current_context(self) -> str:
        result = self.run("config", "current-context")
        if not result.ok:
            raise ExternalToolError(f"Could not read current context: {result.describe()}")
        context = result.stdout.strip()
        if not context:
            raise ExternalToolError("current-context is not set")
        return context

    def current_project(self, context: str) -> str:
        """Return the namespace configured for *context*, or ``"default"``."""
        jsonpath = f'{{.contexts[?(@.name=="{context}")].context.namespace}}'
        result = self.run("config", "view", f"-o=jsonpath={jsonpath}")
        if not result.ok:
            raise ExternalToolError(
                f"Could not read namespace of context \"{context}\": {result.describe()}"
            )
        return result.stdout.strip() or DEFAULT_PROJECT

    def list_projects(self) -> Iterator[str]:
        """Yield namespace names in the order the client reports them.

        Each call re-queries the cluster.  A failed query yields nothing.
        """
        result = self.run("get", "namespaces", f"-o=jsonpath={_NAMESPACE_LIST_JSONPATH}")
        if not result.ok:
            logger.warning("Could not list projects: %s", result.describe())
            return
        for line in result.stdout.splitlines():
            name = line.strip()
            if name:
                yield name

    def switch_project(self, context: str, name: str) -> None:
        result = self.run("config", "set-context", context, f"--namespace={name}")
        if not result.ok:
            raise ExternalToolError(f"Could not switch to project \"{name}\": {result.describe()}")
        logger.debug("Context '%s' now uses namespace '%s'", context, name)
