"""Typed rollout plan parsing.

This module loads and validates optional YAML plan files that override the
default manifest sequence and environment settings. CLI and SDK entry
points consume the same plan object so both apply manifests identically.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence, cast

import yaml

from core.constants import DEFAULT_MANIFEST_SEQUENCE, SUPPORTED_PLAN_VERSION
from core.errors import RolloutPlanError


@dataclass(frozen=True)
class RolloutPlanDefaults:
    """Default values applied before building apply commands."""

    environment: str | None = None
    manifest_root: str | None = None


@dataclass(frozen=True)
class RolloutPlan:
    """Validated rollout plan root object."""

    version: int
    defaults: RolloutPlanDefaults
    manifests: tuple[str, ...]


def default_rollout_plan() -> RolloutPlan:
    """Return the plan used when no plan file is given."""
    return RolloutPlan(
        version=SUPPORTED_PLAN_VERSION,
        defaults=RolloutPlanDefaults(),
        manifests=DEFAULT_MANIFEST_SEQUENCE,
    )


def load_rollout_plan(plan_path: str) -> RolloutPlan:
    """Load and validate a YAML rollout plan from disk.

    Args:
        plan_path: File path to YAML plan.

    Returns:
        Fully validated plan object.

    Raises:
        RolloutPlanError: If file is invalid or schema checks fail.
    """
    payload = _load_yaml_payload(plan_path)
    root_mapping = _expect_mapping(payload, "rollout plan root")
    _validate_keys(root_mapping, {"version", "defaults", "manifests"}, "root fields")
    version = _parse_version(root_mapping)
    defaults = _parse_defaults(root_mapping)
    manifests = _parse_manifests(root_mapping)
    return RolloutPlan(version=version, defaults=defaults, manifests=manifests)


def _load_yaml_payload(plan_path: str) -> object:
    plan_file = Path(plan_path).expanduser().resolve()
    if not plan_file.exists():
        raise RolloutPlanError(
            f"Rollout plan file does not exist at {plan_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(object, yaml.safe_load(plan_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise RolloutPlanError(
            f"Failed to read rollout plan at {plan_file}: {error}. Check file permissions."
        ) from error
    except yaml.YAMLError as error:
        raise RolloutPlanError(
            f"Failed to parse YAML rollout plan at {plan_file}: {error}. Fix YAML syntax."
        ) from error
    if payload is None:
        raise RolloutPlanError(
            f"Rollout plan at {plan_file} is empty. Define 'version' and 'manifests'."
        )
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise RolloutPlanError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise RolloutPlanError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise RolloutPlanError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _parse_version(root_mapping: Mapping[str, object]) -> int:
    raw_version = root_mapping.get("version")
    if isinstance(raw_version, bool) or not isinstance(raw_version, int):
        raise RolloutPlanError("Rollout plan field 'version' must be an integer. Set version: 1.")
    if raw_version != SUPPORTED_PLAN_VERSION:
        raise RolloutPlanError(f"Unsupported rollout plan version {raw_version}. Use version: 1.")
    return raw_version


def _parse_defaults(root_mapping: Mapping[str, object]) -> RolloutPlanDefaults:
    raw_defaults = root_mapping.get("defaults")
    if raw_defaults is None:
        return RolloutPlanDefaults()
    defaults_mapping = _expect_mapping(raw_defaults, "rollout plan defaults")
    _validate_keys(defaults_mapping, {"environment", "manifest_root"}, "defaults fields")
    return RolloutPlanDefaults(
        environment=_optional_string(defaults_mapping, "environment"),
        manifest_root=_optional_string(defaults_mapping, "manifest_root"),
    )


def _parse_manifests(root_mapping: Mapping[str, object]) -> tuple[str, ...]:
    raw_manifests = root_mapping.get("manifests")
    if raw_manifests is None:
        return DEFAULT_MANIFEST_SEQUENCE
    manifest_rows = _expect_sequence(raw_manifests, "rollout plan manifests")
    if len(manifest_rows) == 0:
        raise RolloutPlanError("Rollout plan field 'manifests' must include at least one name.")
    parsed_names: list[str] = []
    for index, raw_name in enumerate(manifest_rows):
        name = _parse_manifest_name(raw_name, index)
        if name in parsed_names:
            raise RolloutPlanError(f"Manifest '{name}' is listed more than once.")
        parsed_names.append(name)
    return tuple(parsed_names)


def _parse_manifest_name(raw_name: object, index: int) -> str:
    context = f"rollout plan manifest #{index + 1}"
    if not isinstance(raw_name, str) or not raw_name.strip():
        raise RolloutPlanError(f"Invalid {context}: expected a non-empty string.")
    name = raw_name.strip()
    if "/" in name or "\\" in name or name in {".", ".."}:
        raise RolloutPlanError(
            f"Invalid {context}: '{name}' must be a manifest name, not a path."
        )
    return name


def _optional_string(mapping: Mapping[str, object], field_name: str) -> str | None:
    raw_value = mapping.get(field_name)
    if raw_value is None:
        return None
    if isinstance(raw_value, str):
        normalized_value = raw_value.strip()
        return normalized_value if normalized_value else None
    raise RolloutPlanError(f"Rollout plan field '{field_name}' must be a string when provided.")


def _validate_keys(mapping: Mapping[str, object], allowed_keys: set[str], context: str) -> None:
    unknown_keys = sorted(set(mapping) - allowed_keys)
    if unknown_keys:
        raise RolloutPlanError(
            f"Rollout plan contains unknown {context}: {', '.join(unknown_keys)}."
        )
