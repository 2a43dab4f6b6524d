"""CLI command listing apply invocations without running them."""

from __future__ import annotations

from typing import Any

from core.rollout_plan import RolloutPlan
from deploy.rollout_sdk import RolloutClient


def add_plan_command(subparsers: Any) -> None:
    """Register plan subcommand."""
    parser = subparsers.add_parser(
        "plan",
        help="Print the kubectl commands apply would run, in order",
    )
    parser.add_argument("--plan-file", help="Optional YAML rollout plan")


def run_plan_command(client: RolloutClient, plan: RolloutPlan) -> int:
    """Print one shell-quoted command row per manifest."""
    for command in client.plan(plan.manifests):
        print(command.render())
    return 0
