"""User-facing messages returned by the layer applicator."""

from __future__ import annotations

from typing import Dict, Tuple

from .runtimes import RuntimeType

# Family -> (display name, parameter prefix).
RUNTIME_DISPLAY_NAMES: Dict[RuntimeType, Tuple[str, str]] = {
    RuntimeType.NODE: ("Node.js", "node"),
    RuntimeType.PYTHON: ("Python", "python"),
}


def missing_layer_version_error_msg(function_key: str, formal_runtime: str, param_runtime: str) -> str:
    return (
        f"Resource {function_key} has a {formal_runtime} runtime, but no {formal_runtime} "
        f"Lambda Library version was provided. "
        f"Please add the '{param_runtime}LayerVersion' parameter for the Datadog serverless macro."
    )
