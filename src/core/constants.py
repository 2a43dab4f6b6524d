"""Core constants used across rollout modules.

This module centralizes manifest names, environment variable names, and
kubectl flags. Keeping values here avoids magic literals in command logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_MANIFEST_SEQUENCE = ("configmap", "server", "prover", "nginx", "ingress")
MANIFEST_FILE_SUFFIX = ".yaml"
DEFAULT_MANIFEST_ROOT = Path("etc/kube/gen")
DEFAULT_KUBECTL_BINARY = "kubectl"
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
KUBECTL_APPLY_SUBCOMMAND = "apply"
KUBECTL_FILE_FLAG = "-f"
KUBECTL_NAMESPACE_FLAG = "--namespace"
KUBECTL_RECORD_FLAG = "--record=true"
KUBECTL_VALIDATE_FLAG = "--validate=true"
ENVIRONMENT_ENV_VAR = "ROLLOUT_ENV"
MANIFEST_ROOT_ENV_VAR = "ROLLOUT_MANIFEST_ROOT"
KUBECTL_ENV_VAR = "ROLLOUT_KUBECTL"
LOG_LEVEL_ENV_VAR = "ROLLOUT_LOG_LEVEL"
MAX_NAMESPACE_LENGTH = 63
SUPPORTED_PLAN_VERSION = 1
EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 2
EXIT_CANNOT_EXECUTE = 126
EXIT_COMMAND_NOT_FOUND = 127
