"""Fail-fast sequential manifest application.

This module runs apply commands strictly in order, blocking on each one,
and stops at the first non-zero exit status. Remaining manifests are
reported as skipped and never invoked.
"""

from __future__ import annotations

from typing import Sequence

from core.logging_config import get_logger
from core.types import ApplyCommand, RolloutResult, StepOutcome
from deploy.kubectl_runner import CommandRunner

_LOGGER = get_logger(__name__)


def run_apply_sequence(
    environment: str,
    commands: Sequence[ApplyCommand],
    runner: CommandRunner,
) -> RolloutResult:
    """Apply manifests one by one until the first failure.

    Args:
        environment: Target environment name for logging and results.
        commands: Ordered apply commands.
        runner: Process runner used for each invocation.

    Returns:
        Result whose ``exit_code`` equals the failing step's status, or zero.
    """
    outcomes: list[StepOutcome] = []
    for index, command in enumerate(commands):
        _LOGGER.info(
            "apply_step_started",
            environment=environment,
            manifest=command.manifest_name,
            path=str(command.manifest_path),
            step=index + 1,
            total_steps=len(commands),
        )
        exit_code = runner.run(command.argv)
        outcome = StepOutcome(manifest_name=command.manifest_name, exit_code=exit_code)
        outcomes.append(outcome)
        _LOGGER.info(
            "apply_step_finished",
            environment=environment,
            manifest=command.manifest_name,
            exit_code=exit_code,
        )
        if not outcome.succeeded:
            skipped = tuple(pending.manifest_name for pending in commands[index + 1 :])
            _LOGGER.error(
                "apply_sequence_aborted",
                environment=environment,
                failed_manifest=command.manifest_name,
                exit_code=exit_code,
                skipped=list(skipped),
            )
            return RolloutResult(
                environment=environment,
                outcomes=tuple(outcomes),
                skipped=skipped,
            )
    _LOGGER.info("apply_sequence_completed", environment=environment, steps=len(outcomes))
    return RolloutResult(environment=environment, outcomes=tuple(outcomes))
