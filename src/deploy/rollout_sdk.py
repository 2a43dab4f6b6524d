"""Python SDK for environment rollouts.

This module exposes high-level APIs for listing and applying the manifest
sequence of one environment, optionally driven by a YAML plan file.
"""

from __future__ import annotations

from typing import Sequence

from core.config import RolloutConfig
from core.constants import DEFAULT_MANIFEST_SEQUENCE
from core.logging_config import configure_logging
from core.rollout_plan import RolloutPlan, load_rollout_plan
from core.types import ApplyCommand, RolloutResult
from deploy.apply_sequence import run_apply_sequence
from deploy.command_builder import build_apply_commands
from deploy.kubectl_runner import CommandRunner, SubprocessRunner


class RolloutClient:
    """Primary SDK entry point for rollout workflows."""

    def __init__(
        self,
        config: RolloutConfig | None = None,
        runner: CommandRunner | None = None,
        pinned_fields: frozenset[str] = frozenset(),
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            runner: Optional process runner, defaults to real subprocesses.
            pinned_fields: Config fields set explicitly, which plan file
                defaults must not replace.
        """
        self._config = config or RolloutConfig.from_env()
        self._runner = runner or SubprocessRunner()
        self._pinned_fields = pinned_fields
        configure_logging(self._config.log_level)

    @property
    def config(self) -> RolloutConfig:
        return self._config

    def with_environment(self, environment: str) -> "RolloutClient":
        """Return a client targeting another environment."""
        return RolloutClient(
            self._config.with_overrides(environment=environment),
            self._runner,
            self._pinned_fields | {"environment"},
        )

    def with_manifest_root(self, manifest_root: str) -> "RolloutClient":
        """Return a client reading manifests from another root."""
        return RolloutClient(
            self._config.with_overrides(manifest_root=manifest_root),
            self._runner,
            self._pinned_fields | {"manifest_root"},
        )

    def plan(self, manifests: Sequence[str] | None = None) -> tuple[ApplyCommand, ...]:
        """List apply commands without invoking anything.

        Args:
            manifests: Optional manifest names, defaults to the standard sequence.

        Returns:
            Ordered apply commands.
        """
        return build_apply_commands(self._config, manifests or DEFAULT_MANIFEST_SEQUENCE)

    def apply(self, manifests: Sequence[str] | None = None) -> RolloutResult:
        """Apply manifests in order, stopping at the first failure.

        Args:
            manifests: Optional manifest names, defaults to the standard sequence.

        Returns:
            Rollout result carrying the process exit status.

        Raises:
            RolloutDependencyError: If the kubectl binary is missing.
        """
        return run_apply_sequence(self._config.environment, self.plan(manifests), self._runner)

    def plan_from_file(self, plan_path: str) -> tuple[ApplyCommand, ...]:
        """List apply commands described by a YAML plan file."""
        plan = load_rollout_plan(plan_path)
        return self._for_plan(plan).plan(plan.manifests)

    def apply_plan_file(self, plan_path: str) -> RolloutResult:
        """Apply the manifest sequence described by a YAML plan file.

        Plan defaults replace the client configuration except for fields set
        through ``with_environment`` or ``with_manifest_root``.

        Raises:
            RolloutPlanError: If the plan file is invalid.
            RolloutDependencyError: If the kubectl binary is missing.
        """
        plan = load_rollout_plan(plan_path)
        return self._for_plan(plan).apply(plan.manifests)

    def _for_plan(self, plan: RolloutPlan) -> "RolloutClient":
        config = self._config.with_overrides(
            environment=self._plan_default(plan.defaults.environment, "environment"),
            manifest_root=self._plan_default(plan.defaults.manifest_root, "manifest_root"),
        )
        if config == self._config:
            return self
        return RolloutClient(config, self._runner, self._pinned_fields)

    def _plan_default(self, value: str | None, field_name: str) -> str | None:
        return None if field_name in self._pinned_fields else value
