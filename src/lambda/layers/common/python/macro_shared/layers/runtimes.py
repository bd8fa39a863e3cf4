"""Runtime classification for Lambda function resources in a template.

Function resources are picked out of a CloudFormation ``Resources`` mapping in
declaration order and tagged with the runtime family whose layer they can use.
The descriptors keep a live reference to the resource ``Properties`` dict so
that layer changes made later land in the caller's template.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple

LAMBDA_FUNCTION_TYPE = "AWS::Lambda::Function"


class RuntimeType(Enum):
    NODE = "node"
    PYTHON = "python"
    UNSUPPORTED = "unsupported"


# Prefix -> family. Checked in order; the first match wins.
RUNTIME_PREFIXES: Tuple[Tuple[str, RuntimeType], ...] = (
    ("nodejs", RuntimeType.NODE),
    ("python", RuntimeType.PYTHON),
)

# Expected shape of the version suffix left after stripping the prefix.
_SUFFIX_PATTERNS: Dict[RuntimeType, re.Pattern[str]] = {
    RuntimeType.NODE: re.compile(r"\d+\.[0-9A-Za-z]+"),
    RuntimeType.PYTHON: re.compile(r"\d+\.\d+"),
}


@dataclass
class LambdaFunction:
    key: str
    runtime: str
    runtime_type: RuntimeType
    properties: Dict[str, Any]


def runtime_prefix(runtime_type: RuntimeType) -> str:
    """Return the runtime string prefix for a supported family."""
    for prefix, family in RUNTIME_PREFIXES:
        if family is runtime_type:
            return prefix
    raise ValueError(f"No runtime prefix for {runtime_type}")


def runtime_suffix(runtime: str, runtime_type: RuntimeType) -> str:
    """Return the version part of ``runtime`` once the family prefix is removed."""
    return runtime[len(runtime_prefix(runtime_type)) :]


def classify_runtime(runtime: Any) -> RuntimeType:
    """Map a raw ``Runtime`` value to its family.

    Strings that carry a known prefix but an unexpected version shape
    (``nodejs``, ``python3.8-preview``) are reported as unsupported.
    """
    if not isinstance(runtime, str):
        return RuntimeType.UNSUPPORTED
    for prefix, family in RUNTIME_PREFIXES:
        if runtime.startswith(prefix):
            if _SUFFIX_PATTERNS[family].fullmatch(runtime[len(prefix) :]):
                return family
            return RuntimeType.UNSUPPORTED
    return RuntimeType.UNSUPPORTED


def find_lambdas(resources: Mapping[str, Any]) -> List[LambdaFunction]:
    """Return a descriptor for every Lambda function resource, in template order."""
    lambdas: List[LambdaFunction] = []
    for key, resource in (resources or {}).items():
        if not isinstance(resource, dict) or resource.get("Type") != LAMBDA_FUNCTION_TYPE:
            continue
        properties = resource.get("Properties")
        if not isinstance(properties, dict):
            # No runtime to read, so the function classifies as unsupported and is never mutated.
            properties = {}
        runtime = properties.get("Runtime")
        lambdas.append(
            LambdaFunction(
                key=key,
                runtime=runtime if isinstance(runtime, str) else "",
                runtime_type=classify_runtime(runtime),
                properties=properties,
            )
        )
    return lambdas
