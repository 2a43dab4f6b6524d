"""Rollout CLI entry points.

This module exposes the apply and plan commands for one environment.
It maps argparse commands onto SDK calls and domain errors onto exit codes.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from cli.apply_command import add_apply_command, run_apply_command
from cli.plan_command import add_plan_command, run_plan_command
from core.config import RolloutConfig
from core.constants import (
    ENVIRONMENT_ENV_VAR,
    EXIT_COMMAND_NOT_FOUND,
    EXIT_USAGE_ERROR,
    KUBECTL_ENV_VAR,
    MANIFEST_ROOT_ENV_VAR,
)
from core.errors import RolloutConfigError, RolloutDependencyError, RolloutPlanError
from core.rollout_plan import RolloutPlan, default_rollout_plan, load_rollout_plan
from deploy.rollout_sdk import RolloutClient


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="rollout",
        description="Apply environment Kubernetes manifests in a fixed order",
    )
    parser.add_argument("--env", help=f"Override {ENVIRONMENT_ENV_VAR} for this command")
    parser.add_argument(
        "--manifest-root",
        help=f"Override {MANIFEST_ROOT_ENV_VAR} for this command",
    )
    parser.add_argument("--kubectl", help=f"Override {KUBECTL_ENV_VAR} for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_apply_command(subparsers)
    add_plan_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the rollout CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        plan = _load_plan(args.plan_file)
        client = _build_client(args, plan)
        if args.command == "apply":
            return run_apply_command(client, plan)
        if args.command == "plan":
            return run_plan_command(client, plan)
    except (RolloutConfigError, RolloutPlanError) as error:
        print(f"error={error}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    except RolloutDependencyError as error:
        print(f"error={error}", file=sys.stderr)
        return EXIT_COMMAND_NOT_FOUND
    parser.error(f"Unsupported command: {args.command}")
    return EXIT_USAGE_ERROR


def _build_client(args: argparse.Namespace, plan: RolloutPlan) -> RolloutClient:
    """Build SDK client with CLI overrides, then plan defaults, then env vars.

    Args:
        args: Parsed CLI args.
        plan: Plan supplying default environment and manifest root.

    Returns:
        Configured SDK client.
    """
    config = RolloutConfig.from_env(environment=args.env or plan.defaults.environment)
    config = config.with_overrides(
        manifest_root=args.manifest_root or plan.defaults.manifest_root,
        kubectl_binary=args.kubectl,
    )
    return RolloutClient(config)


def _load_plan(plan_file: str | None) -> RolloutPlan:
    if plan_file:
        return load_rollout_plan(plan_file)
    return default_rollout_plan()
