"""Apply command wiring for rollout CLI."""

from __future__ import annotations

from typing import Any

from core.rollout_plan import RolloutPlan
from deploy.rollout_sdk import RolloutClient


def add_apply_command(subparsers: Any) -> None:
    """Register apply subcommand."""
    parser = subparsers.add_parser(
        "apply",
        help="Apply environment manifests in order, stopping on first failure",
    )
    parser.add_argument("--plan-file", help="Optional YAML rollout plan")


def run_apply_command(client: RolloutClient, plan: RolloutPlan) -> int:
    """Apply the plan and print one status row per manifest.

    Returns:
        Zero on success, otherwise the failing kubectl exit status.
    """
    result = client.apply(plan.manifests)
    for outcome in result.outcomes:
        if outcome.succeeded:
            print(f"applied={outcome.manifest_name}")
        else:
            print(f"failed={outcome.manifest_name} exit_code={outcome.exit_code}")
    for manifest_name in result.skipped:
        print(f"skipped={manifest_name}")
    return result.exit_code
