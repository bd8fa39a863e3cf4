"""Typed configuration contracts for environment-specific settings."""

from __future__ import annotations

from typing import Dict, NotRequired, Required, TypedDict


class EnvironmentConfig(TypedDict, total=False):
    """Strongly-typed environment configuration contract."""

    region: Required[str]
    account_id: NotRequired[str | None]

    macro_name: NotRequired[str]
    macro_description: NotRequired[str]

    lambda_memory: NotRequired[int]
    lambda_timeout: NotRequired[int]
    log_retention_days: NotRequired[int]
    log_level: NotRequired[str]
    removal_policy: NotRequired[str]

    tags: NotRequired[Dict[str, str]]
