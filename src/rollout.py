"""Public SDK surface for rollout.

This module provides a stable import path for SDK users.
It re-exports the primary client and typed models.
"""

from __future__ import annotations

from core.config import RolloutConfig
from core.constants import DEFAULT_MANIFEST_SEQUENCE
from core.errors import (
    RolloutConfigError,
    RolloutDependencyError,
    RolloutError,
    RolloutPlanError,
)
from core.rollout_plan import RolloutPlan, load_rollout_plan
from core.types import ApplyCommand, RolloutResult, StepOutcome
from deploy.kubectl_runner import CommandRunner, SubprocessRunner
from deploy.rollout_sdk import RolloutClient

__all__ = [
    "ApplyCommand",
    "CommandRunner",
    "DEFAULT_MANIFEST_SEQUENCE",
    "RolloutClient",
    "RolloutConfig",
    "RolloutConfigError",
    "RolloutDependencyError",
    "RolloutError",
    "RolloutPlan",
    "RolloutPlanError",
    "RolloutResult",
    "StepOutcome",
    "SubprocessRunner",
    "load_rollout_plan",
]
