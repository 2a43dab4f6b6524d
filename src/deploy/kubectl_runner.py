"""External kubectl process execution.

This module isolates subprocess handling so the apply sequence can be
exercised with a fake runner. The child process inherits stdio, which
keeps kubectl output and error text untouched.
"""

from __future__ import annotations

import errno
import shutil
import subprocess
from typing import Protocol, Sequence

from core.constants import EXIT_CANNOT_EXECUTE, EXIT_COMMAND_NOT_FOUND, KUBECTL_ENV_VAR
from core.errors import RolloutDependencyError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)
_SIGNAL_EXIT_BASE = 128


class CommandRunner(Protocol):
    """Runner contract required by the apply sequence."""

    def run(self, argv: Sequence[str]) -> int: ...


class SubprocessRunner:
    """Run commands as blocking child processes."""

    def run(self, argv: Sequence[str]) -> int:
        """Run one command and return its exit status.

        Args:
            argv: Full argument vector, executable first.

        Returns:
            Process exit status. Signal terminations map to ``128 + signal``;
            exec failures map to 127 when a file is missing, otherwise 126.

        Raises:
            RolloutDependencyError: If the executable is not on PATH.
        """
        executable = require_binary(argv[0])
        try:
            completed = subprocess.run([executable, *argv[1:]], check=False)
        except OSError as error:
            exit_code = (
                EXIT_COMMAND_NOT_FOUND if error.errno == errno.ENOENT else EXIT_CANNOT_EXECUTE
            )
            _LOGGER.error(
                "command_exec_failed",
                executable=executable,
                error=str(error),
                exit_code=exit_code,
            )
            return exit_code
        if completed.returncode < 0:
            return _SIGNAL_EXIT_BASE - completed.returncode
        return completed.returncode


def require_binary(binary: str) -> str:
    """Resolve an executable on PATH.

    Args:
        binary: Executable name or path.

    Returns:
        Resolved executable path.

    Raises:
        RolloutDependencyError: If the executable is not available.
    """
    resolved = shutil.which(binary)
    if resolved is None:
        raise RolloutDependencyError(
            f"'{binary}' is not available on PATH. "
            f"Install kubectl and configure KUBECONFIG, or set {KUBECTL_ENV_VAR}."
        )
    return resolved
