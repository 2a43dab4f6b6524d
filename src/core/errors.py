"""Rollout exception hierarchy.

This module defines domain errors raised before any manifest is applied.
A failing kubectl invocation is reported through its exit status instead.
"""

from __future__ import annotations


class RolloutError(Exception):
    """Base exception for all rollout failures."""


class RolloutConfigError(RolloutError):
    """Raised for invalid runtime configuration."""


class RolloutPlanError(RolloutError):
    """Raised for invalid or unsupported plan files."""


class RolloutDependencyError(RolloutError):
    """Raised when a required external binary is missing."""
