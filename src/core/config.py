"""Runtime configuration model for rollout.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
import re
from pathlib import Path

from core.constants import (
    DEFAULT_KUBECTL_BINARY,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MANIFEST_ROOT,
    ENVIRONMENT_ENV_VAR,
    KUBECTL_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    MANIFEST_ROOT_ENV_VAR,
    MAX_NAMESPACE_LENGTH,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import RolloutConfigError

_NAMESPACE_PATTERN = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")


@dataclass(frozen=True)
class RolloutConfig:
    """Validated runtime configuration.

    Attributes:
        environment: Deployment environment, also used as target namespace.
        manifest_root: Directory holding one manifest folder per environment.
        kubectl_binary: Cluster CLI executable name or path.
        log_level: Minimum structured log level.
    """

    environment: str
    manifest_root: Path
    kubectl_binary: str
    log_level: str

    @classmethod
    def from_env(cls, environment: str | None = None) -> "RolloutConfig":
        """Build config from process environment variables.

        Args:
            environment: Optional environment name taking precedence over
                ROLLOUT_ENV.

        Returns:
            A validated config object.

        Raises:
            RolloutConfigError: If environment values are missing or invalid.
        """
        raw_environment = environment or os.getenv(ENVIRONMENT_ENV_VAR)
        if raw_environment is None or not raw_environment.strip():
            raise RolloutConfigError(
                f"{ENVIRONMENT_ENV_VAR} is not set. "
                f"Set {ENVIRONMENT_ENV_VAR} to the target environment, e.g. 'staging'."
            )
        manifest_root_value = os.getenv(MANIFEST_ROOT_ENV_VAR, str(DEFAULT_MANIFEST_ROOT))
        kubectl_binary = os.getenv(KUBECTL_ENV_VAR, DEFAULT_KUBECTL_BINARY).strip()
        log_level = _parse_log_level(os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL))
        return cls(
            environment=validate_environment_name(raw_environment.strip()),
            manifest_root=Path(manifest_root_value).expanduser(),
            kubectl_binary=kubectl_binary or DEFAULT_KUBECTL_BINARY,
            log_level=log_level,
        )

    def with_overrides(
        self,
        environment: str | None = None,
        manifest_root: str | None = None,
        kubectl_binary: str | None = None,
    ) -> "RolloutConfig":
        """Return a copy with non-empty override values applied."""
        config = self
        if environment:
            config = replace(config, environment=validate_environment_name(environment.strip()))
        if manifest_root:
            config = replace(config, manifest_root=Path(manifest_root).expanduser())
        if kubectl_binary:
            config = replace(config, kubectl_binary=kubectl_binary)
        return config


def validate_environment_name(raw_value: str) -> str:
    """Validate an environment name usable as both a directory and a namespace.

    Args:
        raw_value: Candidate environment name.

    Returns:
        The unchanged environment name.

    Raises:
        RolloutConfigError: If the name is not a valid namespace.
    """
    if len(raw_value) > MAX_NAMESPACE_LENGTH or not _NAMESPACE_PATTERN.match(raw_value):
        raise RolloutConfigError(
            f"Invalid environment '{raw_value}': expected a Kubernetes namespace name "
            f"(lowercase alphanumerics or '-', at most {MAX_NAMESPACE_LENGTH} characters)."
        )
    return raw_value


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized lowercase level name.

    Raises:
        RolloutConfigError: If the level is not supported.
    """
    normalized_value = raw_value.strip().lower()
    if normalized_value in SUPPORTED_LOG_LEVELS:
        return normalized_value
    supported_rows = ", ".join(SUPPORTED_LOG_LEVELS)
    raise RolloutConfigError(
        f"Invalid {LOG_LEVEL_ENV_VAR} value '{raw_value}'. Use one of: {supported_rows}."
    )
