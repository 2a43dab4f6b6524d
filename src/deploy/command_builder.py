"""Apply command construction for environment manifests."""

from __future__ import annotations

from typing import Sequence

from core.config import RolloutConfig
from core.constants import DEFAULT_MANIFEST_SEQUENCE, MANIFEST_FILE_SUFFIX
from core.types import ApplyCommand


def build_apply_commands(
    config: RolloutConfig,
    manifests: Sequence[str] = DEFAULT_MANIFEST_SEQUENCE,
) -> tuple[ApplyCommand, ...]:
    """Build one apply command per manifest, preserving sequence order.

    Args:
        config: Validated runtime config.
        manifests: Manifest names without file suffix.

    Returns:
        Ordered apply commands targeting ``config.environment``.
    """
    environment_dir = config.manifest_root / config.environment
    return tuple(
        ApplyCommand(
            manifest_name=name,
            manifest_path=environment_dir / f"{name}{MANIFEST_FILE_SUFFIX}",
            namespace=config.environment,
            kubectl_binary=config.kubectl_binary,
        )
        for name in manifests
    )
