"""Shared typed models.

This module defines immutable data models used by the command builder,
apply sequence, SDK, and CLI layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import shlex

from core.constants import (
    EXIT_SUCCESS,
    KUBECTL_APPLY_SUBCOMMAND,
    KUBECTL_FILE_FLAG,
    KUBECTL_NAMESPACE_FLAG,
    KUBECTL_RECORD_FLAG,
    KUBECTL_VALIDATE_FLAG,
)


@dataclass(frozen=True)
class ApplyCommand:
    """One kubectl apply invocation for a single manifest.

    Attributes:
        manifest_name: Manifest stem, e.g. ``configmap``.
        manifest_path: Manifest file path passed to kubectl.
        namespace: Target namespace.
        kubectl_binary: Cluster CLI executable.
    """

    manifest_name: str
    manifest_path: Path
    namespace: str
    kubectl_binary: str

    @property
    def argv(self) -> tuple[str, ...]:
        """Argument vector for the external invocation."""
        return (
            self.kubectl_binary,
            KUBECTL_APPLY_SUBCOMMAND,
            KUBECTL_FILE_FLAG,
            str(self.manifest_path),
            KUBECTL_NAMESPACE_FLAG,
            self.namespace,
            KUBECTL_RECORD_FLAG,
            KUBECTL_VALIDATE_FLAG,
        )

    def render(self) -> str:
        """Render the invocation as one shell-quoted line."""
        return shlex.join(self.argv)


@dataclass(frozen=True)
class StepOutcome:
    """Exit status of one applied manifest."""

    manifest_name: str
    exit_code: int

    @property
    def succeeded(self) -> bool:
        return self.exit_code == EXIT_SUCCESS


@dataclass(frozen=True)
class RolloutResult:
    """Summary of one apply sequence.

    Attributes:
        environment: Environment the sequence targeted.
        outcomes: Outcomes of invoked steps, in invocation order.
        skipped: Manifest names never invoked because an earlier step failed.
    """

    environment: str
    outcomes: tuple[StepOutcome, ...]
    skipped: tuple[str, ...] = ()

    @property
    def failed_step(self) -> str | None:
        for outcome in self.outcomes:
            if not outcome.succeeded:
                return outcome.manifest_name
        return None

    @property
    def exit_code(self) -> int:
        """Failing step exit status, or zero when every step succeeded."""
        for outcome in self.outcomes:
            if not outcome.succeeded:
                return outcome.exit_code
        return EXIT_SUCCESS
