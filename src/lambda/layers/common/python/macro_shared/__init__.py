"""Shared code for the Datadog serverless macro, exposed via the common Lambda layer."""

from __future__ import annotations

__all__ = ["layers", "models", "utils"]
